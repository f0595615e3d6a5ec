"""Immutable calculator input snapshot and its derived view."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeVar

from .calculator import (
    DEFAULT_RISK_THRESHOLD,
    calculate_health_factor,
    calculate_yields,
    is_liquidation_risk,
)
from .models import Asset, Strategy, YieldProjection

T = TypeVar("T")


@dataclass(frozen=True)
class CalculatorView:
    """Outputs derived from one snapshot. ``health_factor`` 0 means hidden."""

    health_factor: float
    liquidation_risk: bool
    yields: YieldProjection | None

    @property
    def shows_health_factor(self) -> bool:
        return self.health_factor > 0


@dataclass(frozen=True)
class CalculatorState:
    """What the user has selected and typed so far.

    Every setter returns a new snapshot; ``evaluate`` recomputes from
    scratch each time.
    """

    asset: Asset | None = None
    strategy: Strategy | None = None
    deposit_amount: str = ""
    borrow_amount: str = ""

    def select_asset(self, asset: Asset | None) -> CalculatorState:
        return replace(self, asset=asset)

    def select_strategy(self, strategy: Strategy | None) -> CalculatorState:
        return replace(self, strategy=strategy)

    def set_deposit(self, amount: str) -> CalculatorState:
        return replace(self, deposit_amount=amount)

    def set_borrow(self, amount: str) -> CalculatorState:
        return replace(self, borrow_amount=amount)

    def evaluate(self, risk_threshold: float = DEFAULT_RISK_THRESHOLD) -> CalculatorView:
        health_factor = calculate_health_factor(
            self.asset, self.deposit_amount, self.borrow_amount
        )
        return CalculatorView(
            health_factor=health_factor,
            liquidation_risk=is_liquidation_risk(health_factor, risk_threshold),
            yields=calculate_yields(
                self.asset, self.strategy, self.deposit_amount, self.borrow_amount
            ),
        )


def pick(options: tuple[T, ...], choice: str | int | None) -> T | None:
    """Select an option by index the way an HTML ``<select>`` value does.

    ``""``/None, non-integers and out-of-range indexes clear the selection.
    """
    if choice is None or choice == "":
        return None
    try:
        index = int(choice)
    except (TypeError, ValueError):
        return None
    if 0 <= index < len(options):
        return options[index]
    return None


def find_asset(assets: tuple[Asset, ...], symbol: str) -> Asset | None:
    """Case-insensitive lookup by symbol."""
    wanted = symbol.lower()
    for asset in assets:
        if asset.symbol.lower() == wanted:
            return asset
    return None


def find_strategy(strategies: tuple[Strategy, ...], key: str) -> Strategy | None:
    """Lookup by id, falling back to a case-insensitive name match."""
    for strategy in strategies:
        if strategy.id == key:
            return strategy
    wanted = key.lower()
    for strategy in strategies:
        if strategy.name.lower() == wanted:
            return strategy
    return None
