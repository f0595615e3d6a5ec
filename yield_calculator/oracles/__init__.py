"""Price oracles."""
from .defillama import DefiLlamaOracle

__all__ = ["DefiLlamaOracle"]
