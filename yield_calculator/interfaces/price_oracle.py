"""Price oracle protocol — token price lookup by address."""
from typing import Protocol

from ..models import TokenPrice


class PriceOracle(Protocol):
    """Abstract interface for fetching token prices keyed by address."""

    async def fetch_prices(self, addresses: list[str]) -> dict[str, TokenPrice]: ...
