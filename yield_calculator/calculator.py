"""Pure yield arithmetic — no I/O.

Percent inputs (``max_ltv``, ``borrow_apy``, strategy ``apy``) are on a
0-100 scale and treated as simple annual rates, never compounded.
"""
from __future__ import annotations

import math
import re

from .models import Asset, Strategy, YieldProjection

DEFAULT_RISK_THRESHOLD = 110.0

_LEADING_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_amount(value: str | None) -> float | None:
    """Parse a user-typed amount, returning None when not computable.

    Takes the longest leading decimal literal, so ``"12abc"`` parses as
    12.0 while ``"abc"`` and ``""`` do not parse. Non-finite and
    non-positive values are rejected.

    Examples:
        "1000" → 1000.0
        " 2.5e3 " → 2500.0
        "-5" → None
    """
    if not value:
        return None
    match = _LEADING_NUMBER_RE.match(value.strip())
    if match is None:
        return None
    amount = float(match.group(0))
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount


def _parse_amounts(
    deposit_amount: str | None, borrow_amount: str | None
) -> tuple[float, float] | None:
    deposit = parse_amount(deposit_amount)
    borrow = parse_amount(borrow_amount)
    if deposit is None or borrow is None:
        return None
    return deposit, borrow


def calculate_health_factor(
    asset: Asset | None,
    deposit_amount: str | None,
    borrow_amount: str | None,
) -> float:
    """Health factor as a percentage of permitted borrow over actual borrow.

    Returns 0.0 when the asset is not selected or either amount is not
    computable; callers hide the value in that case.
    """
    if asset is None:
        return 0.0
    amounts = _parse_amounts(deposit_amount, borrow_amount)
    if amounts is None:
        return 0.0
    deposit, borrow = amounts
    max_borrow = deposit * (asset.max_ltv / 100)
    return (max_borrow / borrow) * 100


def is_liquidation_risk(
    health_factor: float, threshold: float = DEFAULT_RISK_THRESHOLD
) -> bool:
    """True for a computed health factor below the risk threshold."""
    return 0 < health_factor < threshold


def calculate_yields(
    asset: Asset | None,
    strategy: Strategy | None,
    deposit_amount: str | None,
    borrow_amount: str | None,
) -> YieldProjection | None:
    """Project net yield of farming the borrowed amount.

    ``apy`` of the result is expressed against the deposit, not the borrow,
    so leverage can push it above the strategy APY or below zero.
    """
    if asset is None or strategy is None:
        return None
    amounts = _parse_amounts(deposit_amount, borrow_amount)
    if amounts is None:
        return None
    deposit, borrow = amounts

    borrow_cost = borrow * (asset.borrow_apy / 100)
    strategy_yield = borrow * (strategy.apy / 100)
    net_yield = strategy_yield - borrow_cost

    return YieldProjection(
        daily=net_yield / 365,
        weekly=net_yield / 52,
        monthly=net_yield / 12,
        annual=net_yield,
        apy=(net_yield / deposit) * 100,
    )
