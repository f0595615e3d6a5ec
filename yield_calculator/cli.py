"""Command-line interface for the yield calculator."""
from __future__ import annotations

import argparse
import asyncio
import sys

from .config import AppConfig, load_config
from .logging_setup import configure_logging
from .models import Asset, MarketData, Strategy
from .presentation import format_asset_list, format_strategy_list, render
from .services import MarketDataLoader
from .state import CalculatorState, find_asset, find_strategy, pick


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="yield-calculator",
        description="Leveraged lending yield calculator",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("markets", help="List lending markets")
    sub.add_parser("strategies", help="List yield strategies")

    calc_parser = sub.add_parser("calc", help="Health factor and net yield from live data")
    calc_parser.add_argument("asset", help="Asset symbol or list index")
    calc_parser.add_argument("strategy", help="Strategy id, name or list index")
    calc_parser.add_argument("deposit", help="Deposit amount ($)")
    calc_parser.add_argument("borrow", help="Borrow amount ($)")

    estimate_parser = sub.add_parser(
        "estimate", help="Health factor and net yield from hand-entered rates"
    )
    estimate_parser.add_argument("--max-ltv", type=float, required=True, help="Max LTV (%%)")
    estimate_parser.add_argument("--borrow-apy", type=float, required=True, help="Borrow APY (%%)")
    estimate_parser.add_argument(
        "--strategy-apy", type=float, required=True, help="Strategy APY (%%)"
    )
    estimate_parser.add_argument("deposit", help="Deposit amount ($)")
    estimate_parser.add_argument("borrow", help="Borrow amount ($)")

    return parser


def _select_asset(data: MarketData, choice: str) -> Asset | None:
    if choice.isdigit():
        return pick(data.assets, choice)
    return find_asset(data.assets, choice)


def _select_strategy(data: MarketData, choice: str) -> Strategy | None:
    found = find_strategy(data.strategies, choice)
    if found is None and choice.isdigit():
        return pick(data.strategies, choice)
    return found


def _calculate(state: CalculatorState, config: AppConfig) -> str:
    view = state.evaluate(config.calculator.risk_threshold)
    return render(state, view)


def run_estimate(args: argparse.Namespace, config: AppConfig) -> str:
    """Evaluate hand-entered rates without touching the network."""
    asset = Asset(
        symbol="CUSTOM",
        name="Custom market",
        address="",
        max_ltv=args.max_ltv,
        utilization=0.0,
        borrow_apy=args.borrow_apy,
    )
    strategy = Strategy(id="custom", name="Custom strategy", apy=args.strategy_apy, token="")
    state = (
        CalculatorState()
        .select_asset(asset)
        .select_strategy(strategy)
        .set_deposit(args.deposit)
        .set_borrow(args.borrow)
    )
    return _calculate(state, config)


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command; returns the exit status."""
    configure_logging(args.log_level)
    config = load_config(args.config)

    if args.command == "estimate":
        print(run_estimate(args, config))
        return 0

    data = await MarketDataLoader(config).load()
    if data.is_empty:
        print("No market data available.")
        return 1

    if args.command == "markets":
        print(format_asset_list(data))
        return 0
    if args.command == "strategies":
        print(format_strategy_list(data))
        return 0

    asset = _select_asset(data, args.asset)
    if asset is None:
        print(f"Unknown asset: {args.asset}")
        return 1
    strategy = _select_strategy(data, args.strategy)
    if strategy is None:
        print(f"Unknown strategy: {args.strategy}")
        return 1

    state = (
        CalculatorState()
        .select_asset(asset)
        .select_strategy(strategy)
        .set_deposit(args.deposit)
        .set_borrow(args.borrow)
    )
    print(_calculate(state, config))
    return 0


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))
