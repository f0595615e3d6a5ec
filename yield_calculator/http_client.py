"""Thin aiohttp helpers shared by the data sources."""
from __future__ import annotations

import logging
import ssl
from typing import Any

import aiohttp
import certifi

logger = logging.getLogger(__name__)


def _timeout(seconds: int) -> aiohttp.ClientTimeout:
    return aiohttp.ClientTimeout(total=seconds or None)


def _connector() -> aiohttp.TCPConnector:
    ssl_context = ssl.create_default_context(cafile=certifi.where())
    return aiohttp.TCPConnector(ssl=ssl_context)


async def get_json(url: str, timeout: int = 0) -> Any:
    """GET ``url`` and decode the JSON body.

    Raises:
        RuntimeError: on a non-200 response.
    """
    logger.debug("GET %s", url)
    async with aiohttp.ClientSession(connector=_connector()) as session:
        async with session.get(url, timeout=_timeout(timeout)) as response:
            if response.status != 200:
                raise RuntimeError(f"HTTP {response.status} from {url}")
            return await response.json(content_type=None)


async def head_ok(url: str, timeout: int = 0) -> bool:
    """True when a HEAD request to ``url`` answers with a 2xx status."""
    async with aiohttp.ClientSession(connector=_connector()) as session:
        async with session.head(url, timeout=_timeout(timeout)) as response:
            return 200 <= response.status < 300
