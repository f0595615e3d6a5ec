"""Silo Finance lending markets."""
from .client import SiloMarketSource

__all__ = ["SiloMarketSource"]
