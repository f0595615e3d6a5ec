"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from yield_calculator.config import (
    AppConfig,
    CalculatorConfig,
    LogosConfig,
    SourcesConfig,
)
from yield_calculator.models import Asset, MarketData, Strategy, TokenPrice


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_sources_config() -> SourcesConfig:
    return SourcesConfig(
        markets_url="https://markets.example.com/index.json",
        strategies_url="https://strategies.example.com/apy/breakdown",
        prices_url="https://prices.example.com/prices/current",
        chain="arbitrum",
        timeout=5,
    )


@pytest.fixture()
def sample_logos_config() -> LogosConfig:
    return LogosConfig(base_url="https://logos.example.com/logos", placeholder="/placeholder.png")


@pytest.fixture()
def sample_app_config(
    sample_sources_config: SourcesConfig, sample_logos_config: LogosConfig
) -> AppConfig:
    return AppConfig(
        sources=sample_sources_config,
        logos=sample_logos_config,
        calculator=CalculatorConfig(risk_threshold=110.0),
        token_labels={"usdc.e": "USDC.e", "crvusd": "crvUSD"},
    )


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_asset() -> Asset:
    return Asset(
        symbol="ARB",
        name="Arbitrum",
        address="0x912CE59144191C1204E64559FE8253a0e49E6548",
        max_ltv=80.0,
        utilization=43.12,
        borrow_apy=5.0,
    )


@pytest.fixture()
def sample_strategy() -> Strategy:
    return Strategy(
        id="silo-usdc.e-arb",
        name="Silo USDC.e",
        apy=12.0,
        token="USDC.e",
        min_deposit=0.0,
    )


@pytest.fixture()
def sample_market_data(sample_asset: Asset, sample_strategy: Strategy) -> MarketData:
    return MarketData(
        assets=(sample_asset,),
        strategies=(sample_strategy,),
        prices={
            sample_asset.address.lower(): TokenPrice(
                price=0.85, decimals=18, symbol="ARB", timestamp=1700000000
            )
        },
        logos={"ARB": "https://logos.example.com/logos/arb.png"},
    )


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    sources:
      markets_url: "https://markets.example.com/index.json"
      strategies_url: "https://strategies.example.com/apy/breakdown"
      prices_url: "https://prices.example.com/prices/current"
      chain: arbitrum
      timeout: 10
    logos:
      base_url: "https://logos.example.com/logos"
      placeholder: "/missing.png"
    calculator:
      risk_threshold: 120
    token_labels:
      USDC.e: USDC.e
      crvusd: crvUSD
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Sample upstream payloads
# ---------------------------------------------------------------------------


@pytest.fixture()
def silo_payload() -> dict:
    return {
        "pageProps": {
            "markets": [
                {
                    "symbol": "ARB",
                    "name": "Arbitrum",
                    "address": "0x912CE59144191C1204E64559FE8253a0e49E6548",
                    "maxLtv": 0.75,
                    "utilization": 0.4312,
                    "borrowApy": 0.0521,
                },
                {
                    "symbol": "WETH",
                    "name": "Wrapped Ether",
                    "assetAddress": "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1",
                    "maxLtv": 0.85,
                    "utilization": 0.9,
                    "borrowApy": 0.031,
                },
                {"symbol": "", "address": "0xdead"},
            ]
        }
    }


@pytest.fixture()
def goat_payload() -> dict:
    return {
        "silo-usdc.e-arb": {"totalApy": 0.1234, "vaultApr": 0.11},
        "curve-crvusd-lp": {"vaultApr": 0.08, "minDeposit": 50},
        "broken-vault": {"totalApy": "n/a"},
    }


@pytest.fixture()
def llama_payload() -> dict:
    return {
        "coins": {
            "arbitrum:0x912CE59144191C1204E64559FE8253a0e49E6548": {
                "decimals": 18,
                "symbol": "ARB",
                "price": 0.85,
                "timestamp": 1700000000,
                "confidence": 0.99,
            }
        }
    }


# ---------------------------------------------------------------------------
# aiohttp mocking
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_session_factory():
    """Factory for aiohttp.ClientSession stand-ins."""
    return make_mock_session


def make_mock_session(
    status: int = 200, data: object = None, side_effect: Exception | None = None
) -> AsyncMock:
    """Build an aiohttp.ClientSession stand-in for GET and HEAD calls."""
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.json = AsyncMock(return_value=data)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = AsyncMock()
    if side_effect is not None:
        mock_session.get = MagicMock(side_effect=side_effect)
        mock_session.head = MagicMock(side_effect=side_effect)
    else:
        mock_session.get = MagicMock(return_value=mock_response)
        mock_session.head = MagicMock(return_value=mock_response)
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=None)
    return mock_session
