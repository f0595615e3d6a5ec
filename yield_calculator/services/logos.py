"""Token logo lookup with placeholder fallback."""
from __future__ import annotations

import logging

from ..config import LogosConfig
from ..http_client import head_ok

logger = logging.getLogger(__name__)


class LogoService:
    """Probe the logo repository for each token, one request at a time."""

    def __init__(self, config: LogosConfig, timeout: int = 0) -> None:
        self.base_url = config.base_url.rstrip("/")
        self.placeholder = config.placeholder
        self.timeout = timeout

    def logo_url(self, symbol: str) -> str:
        return f"{self.base_url}/{symbol.lower()}.png"

    async def resolve(self, symbols: list[str]) -> dict[str, str]:
        """Map each symbol to its logo URL, or to the placeholder when missing."""
        logos: dict[str, str] = {}
        for symbol in symbols:
            url = self.logo_url(symbol)
            try:
                found = await head_ok(url, timeout=self.timeout)
            except Exception as e:
                logger.error("Error loading logo for %s: %s", symbol, e)
                found = False
            logos[symbol] = url if found else self.placeholder
        return logos
