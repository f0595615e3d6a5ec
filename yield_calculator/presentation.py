"""Plain-text rendering of selectors and calculator results."""
from __future__ import annotations

from .models import Asset, MarketData, Strategy, TokenPrice
from .state import CalculatorState, CalculatorView


def asset_option(asset: Asset, price: TokenPrice | None = None) -> str:
    label = (
        f"{asset.symbol} - Max LTV: {asset.max_ltv:g}% "
        f"- Util: {asset.utilization:.2f}%"
    )
    if price is not None:
        label += f" - ${price.price:,.4f}"
    return label


def strategy_option(strategy: Strategy) -> str:
    return f"{strategy.name} - {strategy.apy:.2f}% APY"


def format_asset_list(data: MarketData) -> str:
    if not data.assets:
        return "No assets available."
    lines = ["Select an asset"]
    for idx, asset in enumerate(data.assets):
        logo = data.logos.get(asset.symbol, "")
        line = f"  [{idx}] {asset_option(asset, data.price_for(asset))}"
        if logo:
            line += f"  ({logo})"
        lines.append(line)
    return "\n".join(lines)


def format_strategy_list(data: MarketData) -> str:
    if not data.strategies:
        return "No strategies available."
    lines = ["Select a strategy"]
    for idx, strategy in enumerate(data.strategies):
        lines.append(
            f"  [{idx}] {strategy_option(strategy)} · {strategy.token}"
            f" · min ${strategy.min_deposit:,.2f}"
        )
    return "\n".join(lines)


def format_health_factor(view: CalculatorView) -> str:
    """Health factor block; empty when there is nothing to show."""
    if not view.shows_health_factor:
        return ""
    lines = ["Health Factor", f"  {view.health_factor:.2f}%"]
    if view.liquidation_risk:
        lines.append("  ⚠️ High liquidation risk")
    return "\n".join(lines)


def format_results(state: CalculatorState, view: CalculatorView) -> str:
    """Results panel; empty unless a projection exists."""
    yields = view.yields
    if yields is None or state.asset is None or state.strategy is None:
        return ""
    return (
        f"Borrow APY\n"
        f"  -{state.asset.borrow_apy:.2f}%\n"
        f"Strategy APY\n"
        f"  +{state.strategy.apy:.2f}%\n"
        f"Net APY\n"
        f"  {yields.apy:.2f}%\n"
        f"Projected Yields\n"
        f"  Daily: ${yields.daily:.2f}\n"
        f"  Weekly: ${yields.weekly:.2f}\n"
        f"  Monthly: ${yields.monthly:.2f}"
    )


def render(state: CalculatorState, view: CalculatorView) -> str:
    """Full calculator output for one snapshot."""
    sections = [
        section
        for section in (format_health_factor(view), format_results(state, view))
        if section
    ]
    if not sections:
        return "Enter a deposit and borrow amount to see results."
    return "\n\n".join(sections)
