"""Silo Finance market source."""
import logging

from ...config import SourcesConfig
from ...http_client import get_json
from ...models import Asset
from . import parser

logger = logging.getLogger(__name__)


class SiloMarketSource:
    """Fetch lending markets from the Silo markets index."""

    def __init__(self, config: SourcesConfig) -> None:
        self.url = config.markets_url
        self.timeout = config.timeout

    async def fetch_assets(self) -> list[Asset]:
        payload = await get_json(self.url, timeout=self.timeout)
        assets = parser.parse_markets(payload)
        logger.info("Loaded %d lending markets from Silo", len(assets))
        return assets
