"""Market source protocol — lending market listing."""
from typing import Protocol

from ..models import Asset


class MarketSource(Protocol):
    """Abstract interface for fetching lending markets."""

    async def fetch_assets(self) -> list[Asset]: ...
