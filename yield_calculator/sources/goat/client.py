"""Goat yield strategy source."""
import logging

from ...config import SourcesConfig
from ...http_client import get_json
from ...models import Strategy
from . import parser

logger = logging.getLogger(__name__)


class GoatStrategySource:
    """Fetch yield strategies from the Goat APY breakdown."""

    def __init__(self, config: SourcesConfig, token_labels: dict[str, str]) -> None:
        self.url = config.strategies_url
        self.timeout = config.timeout
        self.token_labels = dict(token_labels)

    async def fetch_strategies(self) -> list[Strategy]:
        payload = await get_json(self.url, timeout=self.timeout)
        strategies = parser.parse_breakdown(payload, self.token_labels)
        logger.info("Loaded %d yield strategies from Goat", len(strategies))
        return strategies
