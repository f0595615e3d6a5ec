"""Pure parsing functions for the Goat APY breakdown — no I/O.

The breakdown is an object keyed by vault id:

    {"silo-usdc.e-arb": {"totalApy": 0.1234, "vaultApr": 0.11}, ...}
"""
from __future__ import annotations

import logging
import math
from typing import Any

from ...models import Strategy

logger = logging.getLogger(__name__)

UNKNOWN_TOKEN = "UNKNOWN"


def infer_token_label(identifier: str, token_labels: dict[str, str]) -> str:
    """Map a vault id/address to its underlying token label.

    Rules are ``substring → label`` pairs; the longest matching substring
    wins so ``usdc.e`` beats ``usdc``.

    Examples:
        "silo-usdc.e-arb" with {"usdc.e": "USDC.e"} → "USDC.e"
        "mystery-vault" → "UNKNOWN"
    """
    lowered = identifier.lower()
    matches = [key for key in token_labels if key and key.lower() in lowered]
    if not matches:
        return UNKNOWN_TOKEN
    return token_labels[max(matches, key=len)]


def _apy_fraction(entry: dict[str, Any]) -> float | None:
    for key in ("totalApy", "vaultApr"):
        value = entry.get(key)
        if value is None:
            continue
        try:
            apy = float(value)
        except (TypeError, ValueError):
            continue
        if math.isfinite(apy):
            return apy
    return None


def parse_strategy(
    strategy_id: str, entry: dict[str, Any], token_labels: dict[str, str]
) -> Strategy | None:
    """Parse one breakdown entry; None when no usable APY is present."""
    apy = _apy_fraction(entry)
    if apy is None:
        logger.debug("Skipping strategy %s without numeric APY", strategy_id)
        return None

    identifier = f"{strategy_id} {entry.get('address', '')}"
    try:
        min_deposit = float(entry.get("minDeposit", 0) or 0)
    except (TypeError, ValueError):
        min_deposit = 0.0

    return Strategy(
        id=strategy_id,
        name=str(entry.get("name") or strategy_id),
        apy=apy * 100,
        token=infer_token_label(identifier, token_labels),
        min_deposit=min_deposit,
    )


def parse_breakdown(payload: Any, token_labels: dict[str, str]) -> list[Strategy]:
    """Normalize an APY breakdown payload into ``Strategy`` records."""
    if not isinstance(payload, dict):
        return []
    strategies: list[Strategy] = []
    for strategy_id, entry in payload.items():
        if not isinstance(entry, dict):
            continue
        strategy = parse_strategy(str(strategy_id), entry, token_labels)
        if strategy is not None:
            strategies.append(strategy)
    return strategies
