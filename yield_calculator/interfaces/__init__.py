"""Protocol interfaces for the yield calculator data sources."""
from .logo_resolver import LogoResolver
from .market_source import MarketSource
from .price_oracle import PriceOracle
from .strategy_source import StrategySource

__all__ = ["LogoResolver", "MarketSource", "PriceOracle", "StrategySource"]
