"""Strategy source protocol — yield strategy listing."""
from typing import Protocol

from ..models import Strategy


class StrategySource(Protocol):
    """Abstract interface for fetching yield strategies."""

    async def fetch_strategies(self) -> list[Strategy]: ...
