"""Pure parsing functions for the Silo markets index — no I/O.

The index is a Next.js data payload; markets sit under
``pageProps.markets``. Utilization and borrow APY arrive as fractions;
``maxLtv`` may come as a fraction or as percent:

    {"symbol": "ARB", "name": "Arbitrum", "address": "0x912c...",
     "maxLtv": 0.75, "utilization": 0.4312, "borrowApy": 0.0521}
"""
from __future__ import annotations

import logging
from typing import Any

from ...models import Asset

logger = logging.getLogger(__name__)

_ADDRESS_KEYS = ("address", "assetAddress", "tokenAddress")


def extract_markets(payload: Any) -> list[dict[str, Any]]:
    """Return the raw market list from any of the known payload shapes."""
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        return []
    page_props = payload.get("pageProps", {})
    if isinstance(page_props, dict) and isinstance(page_props.get("markets"), list):
        return page_props["markets"]
    markets = payload.get("markets", [])
    return markets if isinstance(markets, list) else []


def fraction_to_percent(value: Any) -> float:
    """Convert a fractional rate (``0.05``) to percent (``5.0``); bad input → 0."""
    try:
        return float(value) * 100
    except (TypeError, ValueError):
        return 0.0


def ltv_to_percent(value: Any) -> float:
    """Normalize a max LTV to percent.

    Values up to 1 are taken as fractions (``0.75`` → 75.0); larger values
    are already percent (``75`` → 75.0). Bad input → 0.
    """
    try:
        ltv = float(value)
    except (TypeError, ValueError):
        return 0.0
    return ltv * 100 if ltv <= 1 else ltv


def _address(market: dict[str, Any]) -> str:
    for key in _ADDRESS_KEYS:
        value = market.get(key)
        if value:
            return str(value)
    return ""


def parse_market(market: dict[str, Any]) -> Asset | None:
    """Parse one raw market; None when symbol or address is missing."""
    symbol = str(market.get("symbol") or "")
    address = _address(market)
    if not symbol or not address:
        logger.debug("Skipping market without symbol/address: %s", market)
        return None

    return Asset(
        symbol=symbol,
        name=str(market.get("name") or symbol),
        address=address,
        max_ltv=ltv_to_percent(market.get("maxLtv")),
        utilization=fraction_to_percent(market.get("utilization")),
        borrow_apy=fraction_to_percent(market.get("borrowApy")),
    )


def parse_markets(payload: Any) -> list[Asset]:
    """Normalize a markets index payload into ``Asset`` records."""
    assets: list[Asset] = []
    for market in extract_markets(payload):
        if not isinstance(market, dict):
            continue
        asset = parse_market(market)
        if asset is not None:
            assets.append(asset)
    return assets
