"""Leveraged lending yield calculator."""
from .calculator import calculate_health_factor, calculate_yields, is_liquidation_risk
from .models import Asset, MarketData, Strategy, TokenPrice, YieldProjection
from .state import CalculatorState, CalculatorView

__all__ = [
    "Asset",
    "CalculatorState",
    "CalculatorView",
    "MarketData",
    "Strategy",
    "TokenPrice",
    "YieldProjection",
    "calculate_health_factor",
    "calculate_yields",
    "is_liquidation_risk",
]
