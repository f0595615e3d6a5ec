"""Service modules"""
from .loader import MarketDataLoader
from .logos import LogoService

__all__ = ["MarketDataLoader", "LogoService"]
