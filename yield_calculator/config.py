"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .calculator import DEFAULT_RISK_THRESHOLD

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SourcesConfig:
    markets_url: str = "https://app.silo.finance/_next/data/latest/index.json"
    strategies_url: str = "https://api.goat.fi/apy/breakdown"
    prices_url: str = "https://coins.llama.fi/prices/current"
    chain: str = "arbitrum"
    # Seconds; 0 disables the timeout.
    timeout: int = 0


@dataclass(frozen=True)
class LogosConfig:
    base_url: str = "https://raw.githubusercontent.com/unhappyben/token-logos/main/logos"
    placeholder: str = "/placeholder.png"


@dataclass(frozen=True)
class CalculatorConfig:
    risk_threshold: float = DEFAULT_RISK_THRESHOLD


def _default_token_labels() -> dict[str, str]:
    return {"usdc.e": "USDC.e", "crvusd": "crvUSD"}


@dataclass(frozen=True)
class AppConfig:
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    logos: LogosConfig = field(default_factory=LogosConfig)
    calculator: CalculatorConfig = field(default_factory=CalculatorConfig)
    token_labels: dict[str, str] = field(default_factory=_default_token_labels)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_sources(raw: dict[str, Any]) -> SourcesConfig:
    return SourcesConfig(
        markets_url=raw.get("markets_url", SourcesConfig.markets_url),
        strategies_url=raw.get("strategies_url", SourcesConfig.strategies_url),
        prices_url=raw.get("prices_url", SourcesConfig.prices_url),
        chain=raw.get("chain", SourcesConfig.chain),
        timeout=int(raw.get("timeout", 0) or 0),
    )


def _build_logos(raw: dict[str, Any]) -> LogosConfig:
    return LogosConfig(
        base_url=raw.get("base_url", LogosConfig.base_url),
        placeholder=raw.get("placeholder", LogosConfig.placeholder),
    )


def _build_calculator(raw: dict[str, Any]) -> CalculatorConfig:
    return CalculatorConfig(
        risk_threshold=float(raw.get("risk_threshold", DEFAULT_RISK_THRESHOLD)),
    )


def _build_token_labels(raw: dict[str, Any] | None) -> dict[str, str]:
    if raw is None:
        return _default_token_labels()
    return {str(k).lower(): str(v) for k, v in raw.items()}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (one level up from this package).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
        if not config_path.exists():
            logger.info("No config.yaml at %s, using defaults", config_path)
            return AppConfig()
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        sources=_build_sources(raw.get("sources") or {}),
        logos=_build_logos(raw.get("logos") or {}),
        calculator=_build_calculator(raw.get("calculator") or {}),
        token_labels=_build_token_labels(raw.get("token_labels")),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    for name in ("markets_url", "strategies_url", "prices_url"):
        if not getattr(cfg.sources, name):
            raise ValueError(f"sources.{name} must not be empty")
    if not cfg.sources.chain:
        raise ValueError("sources.chain must not be empty")
    if cfg.sources.timeout < 0:
        raise ValueError("sources.timeout must not be negative")
    if not cfg.logos.base_url:
        raise ValueError("logos.base_url must not be empty")
    if cfg.calculator.risk_threshold <= 0:
        raise ValueError("calculator.risk_threshold must be positive")
