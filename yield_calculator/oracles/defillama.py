"""DefiLlama price oracle service."""
from __future__ import annotations

import logging
from typing import Any

from ..config import SourcesConfig
from ..http_client import get_json
from ..models import TokenPrice

logger = logging.getLogger(__name__)


def parse_coins(payload: Any) -> dict[str, TokenPrice]:
    """Parse a ``/prices/current`` response into prices keyed by address.

    Keys arrive as ``"{chain}:{address}"``; the chain prefix is dropped and
    the address lower-cased. Entries whose fields do not convert are
    skipped; a null ``decimals`` or ``timestamp`` takes its default.
    """
    coins = payload.get("coins", {}) if isinstance(payload, dict) else {}
    if not isinstance(coins, dict):
        return {}
    prices: dict[str, TokenPrice] = {}
    for key, item in coins.items():
        if not isinstance(item, dict) or "price" not in item:
            continue
        address = str(key).split(":", 1)[-1].lower()
        decimals = item.get("decimals")
        timestamp = item.get("timestamp")
        try:
            prices[address] = TokenPrice(
                price=float(item["price"]),
                decimals=18 if decimals is None else int(decimals),
                symbol=str(item.get("symbol") or ""),
                timestamp=0 if timestamp is None else int(timestamp),
            )
        except (TypeError, ValueError):
            logger.debug("Skipping unparsable price entry %s: %s", key, item)
    return prices


class DefiLlamaOracle:
    """Fetch current token prices from DefiLlama."""

    def __init__(self, config: SourcesConfig) -> None:
        self.prices_url = config.prices_url.rstrip("/")
        self.chain = config.chain
        self.timeout = config.timeout

    def build_url(self, addresses: list[str]) -> str:
        coins = ",".join(f"{self.chain}:{address}" for address in addresses)
        return f"{self.prices_url}/{coins}"

    async def fetch_prices(self, addresses: list[str]) -> dict[str, TokenPrice]:
        """Fetch prices for ``addresses`` on the configured chain in one request."""
        if not addresses:
            return {}

        payload = await get_json(self.build_url(addresses), timeout=self.timeout)
        prices = parse_coins(payload)

        logger.info("Fetched prices from DefiLlama:")
        for address, price in sorted(prices.items()):
            logger.info("  %s (%s): $%.4f", price.symbol, address, price.price)

        return prices
