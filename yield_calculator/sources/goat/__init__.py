"""Goat yield strategies."""
from .client import GoatStrategySource

__all__ = ["GoatStrategySource"]
