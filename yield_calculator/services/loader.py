"""One-shot market data load — markets, strategies, prices, logos."""
from __future__ import annotations

import asyncio
import logging

from ..config import AppConfig
from ..interfaces import LogoResolver, MarketSource, PriceOracle, StrategySource
from ..models import MarketData
from ..oracles import DefiLlamaOracle
from ..sources import GoatStrategySource, SiloMarketSource
from .logos import LogoService

logger = logging.getLogger(__name__)


class MarketDataLoader:
    """Loads everything the calculator needs, once.

    Markets and strategies are fetched concurrently, then prices for the
    loaded assets, then logos one token at a time. A missing logo falls
    back to a placeholder; any other failure aborts the load and yields
    empty ``MarketData``. Nothing is retried.
    """

    def __init__(self, config: AppConfig) -> None:
        self._config = config
        self._markets: MarketSource = SiloMarketSource(config.sources)
        self._strategies: StrategySource = GoatStrategySource(
            config.sources, config.token_labels
        )
        self._oracle: PriceOracle = DefiLlamaOracle(config.sources)
        self._logos: LogoResolver = LogoService(config.logos, config.sources.timeout)

    async def load(self) -> MarketData:
        try:
            assets, strategies = await asyncio.gather(
                self._markets.fetch_assets(),
                self._strategies.fetch_strategies(),
            )
            prices = await self._oracle.fetch_prices([a.address for a in assets])
            logos = await self._logos.resolve([a.symbol for a in assets])
        except Exception as e:
            logger.error("Error loading initial data: %s", e)
            return MarketData()

        logger.info(
            "Loaded %d assets, %d strategies, %d prices",
            len(assets), len(strategies), len(prices),
        )
        return MarketData(
            assets=tuple(assets),
            strategies=tuple(strategies),
            prices=prices,
            logos=logos,
        )
