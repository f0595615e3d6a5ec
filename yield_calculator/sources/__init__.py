"""Upstream market and strategy sources."""
from .goat import GoatStrategySource
from .silo import SiloMarketSource

__all__ = ["GoatStrategySource", "SiloMarketSource"]
