"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Asset:
    """Single lending market. Percent fields are on a 0-100 scale."""

    symbol: str
    name: str
    address: str
    max_ltv: float
    utilization: float
    borrow_apy: float


@dataclass(frozen=True)
class Strategy:
    """Yield strategy the borrowed funds are deployed into."""

    id: str
    name: str
    apy: float
    token: str
    min_deposit: float = 0.0


@dataclass(frozen=True)
class TokenPrice:
    price: float
    decimals: int
    symbol: str
    timestamp: int


@dataclass(frozen=True)
class YieldProjection:
    """Net yield in the deposit's pricing unit, split into periods."""

    daily: float
    weekly: float
    monthly: float
    annual: float
    apy: float


@dataclass(frozen=True)
class MarketData:
    """Everything the initial load produces."""

    assets: tuple[Asset, ...] = ()
    strategies: tuple[Strategy, ...] = ()
    prices: dict[str, TokenPrice] = field(default_factory=dict)
    logos: dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.assets and not self.strategies

    def price_for(self, asset: Asset) -> TokenPrice | None:
        return self.prices.get(asset.address.lower())
