"""Unit tests for the calculator snapshot and selection helpers."""
from __future__ import annotations

import pytest

from yield_calculator.models import Asset, Strategy
from yield_calculator.state import (
    CalculatorState,
    find_asset,
    find_strategy,
    pick,
)


class TestCalculatorState:
    def test_setters_return_new_snapshots(self, sample_asset: Asset) -> None:
        empty = CalculatorState()
        selected = empty.select_asset(sample_asset)
        assert empty.asset is None
        assert selected.asset == sample_asset

        typed = selected.set_deposit("1000").set_borrow("500")
        assert selected.deposit_amount == ""
        assert typed.deposit_amount == "1000"
        assert typed.borrow_amount == "500"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            CalculatorState().deposit_amount = "1"  # type: ignore[misc]

    def test_empty_view(self) -> None:
        view = CalculatorState().evaluate()
        assert view.health_factor == 0
        assert not view.shows_health_factor
        assert not view.liquidation_risk
        assert view.yields is None

    def test_health_factor_without_strategy(self, sample_asset: Asset) -> None:
        view = CalculatorState(asset=sample_asset, deposit_amount="1000", borrow_amount="500").evaluate()
        assert view.health_factor == pytest.approx(160.0)
        assert view.shows_health_factor
        assert view.yields is None

    def test_full_view(self, sample_asset: Asset, sample_strategy: Strategy) -> None:
        state = (
            CalculatorState()
            .select_asset(sample_asset)
            .select_strategy(sample_strategy)
            .set_deposit("1000")
            .set_borrow("1000")
        )
        view = state.evaluate()
        assert view.health_factor == pytest.approx(80.0)
        assert view.liquidation_risk
        assert view.yields is not None
        assert view.yields.annual == pytest.approx(70.0)

    def test_custom_risk_threshold(self, sample_asset: Asset) -> None:
        state = CalculatorState(asset=sample_asset, deposit_amount="1000", borrow_amount="500")
        assert not state.evaluate(risk_threshold=110).liquidation_risk
        assert state.evaluate(risk_threshold=200).liquidation_risk

    def test_clearing_selection_drops_results(
        self, sample_asset: Asset, sample_strategy: Strategy
    ) -> None:
        state = CalculatorState(sample_asset, sample_strategy, "1000", "500")
        assert state.evaluate().yields is not None
        assert state.select_strategy(None).evaluate().yields is None

    def test_evaluate_is_repeatable(self, sample_asset: Asset, sample_strategy: Strategy) -> None:
        state = CalculatorState(sample_asset, sample_strategy, "1234.5", "678.9")
        assert state.evaluate() == state.evaluate()


class TestPick:
    OPTIONS = ("a", "b", "c")

    def test_index(self) -> None:
        assert pick(self.OPTIONS, "1") == "b"
        assert pick(self.OPTIONS, 2) == "c"

    def test_returns_the_option_itself(self, sample_asset: Asset) -> None:
        picked: Asset | None = pick((sample_asset,), "0")
        assert picked is sample_asset

    @pytest.mark.parametrize("choice", [None, "", "x", "3", "-1"])
    def test_clears(self, choice: str | None) -> None:
        assert pick(self.OPTIONS, choice) is None


class TestFind:
    def test_find_asset_case_insensitive(self, sample_asset: Asset) -> None:
        assert find_asset((sample_asset,), "arb") == sample_asset
        assert find_asset((sample_asset,), "ETH") is None

    def test_find_strategy_by_id_then_name(self, sample_strategy: Strategy) -> None:
        strategies = (sample_strategy,)
        assert find_strategy(strategies, "silo-usdc.e-arb") == sample_strategy
        assert find_strategy(strategies, "silo usdc.e") == sample_strategy
        assert find_strategy(strategies, "other") is None
