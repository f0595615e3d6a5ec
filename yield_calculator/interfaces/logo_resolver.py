"""Logo resolver protocol — token logo lookup."""
from typing import Protocol


class LogoResolver(Protocol):
    """Abstract interface mapping token symbols to logo URLs."""

    async def resolve(self, symbols: list[str]) -> dict[str, str]: ...
