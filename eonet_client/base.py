"""Base HTTP client for the EONET API."""

import asyncio
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from eonet_client.errors import InvalidJSON, InvalidParameter, InvalidURL, NetworkError
from settings import API_BASE_URL, API_RETRIES, API_TIMEOUT, MAX_CONCURRENT


def set_api_config(base_url: str, timeout: int, retries: int | None = None) -> None:
    """Set API configuration."""
    global API_BASE_URL, API_TIMEOUT, API_RETRIES
    API_BASE_URL = base_url
    API_TIMEOUT = timeout
    if retries is not None:
        API_RETRIES = retries


def _query_value(key: str, value: object) -> str:
    """String form of a query value, or InvalidParameter if it has none."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise InvalidParameter(key, value)
    return str(value)


def build_url(endpoint: str, query: Mapping[str, object] | None = None) -> httpx.URL:
    """Join the base URL with ``endpoint`` and append ``query`` in iteration order."""
    if not endpoint or not endpoint.strip("/"):
        raise InvalidURL(endpoint)

    try:
        url = httpx.URL(f"{API_BASE_URL.rstrip('/')}/{endpoint.lstrip('/')}")
    except httpx.InvalidURL as e:
        raise InvalidURL(endpoint) from e
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURL(endpoint)

    params = [(key, _query_value(key, value)) for key, value in (query or {}).items()]
    return url.copy_with(params=params) if params else url


class BaseClient:
    """Base async HTTP client returning decoded JSON objects."""

    def __init__(
        self,
        max_concurrent: int = MAX_CONCURRENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client: httpx.AsyncClient | None = None
        self._transport = transport
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.debug("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            timeout=API_TIMEOUT,
            limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.debug("{}: {} API requests", self.__class__.__name__, self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def request_count(self) -> int:
        return self._request_count

    async def request(self, endpoint: str, query: Mapping[str, object] | None = None) -> dict:
        """GET ``endpoint`` with ``query`` and return the top-level JSON object.

        Raises InvalidURL, InvalidParameter, NetworkError or InvalidJSON. Only
        NetworkError is retried, and only when API_RETRIES allows more than one
        attempt.
        """
        url = build_url(endpoint, query)

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max(API_RETRIES, 1)),
            wait=wait_exponential(multiplier=1, min=1, max=30),
            retry=retry_if_exception_type(NetworkError),
            reraise=True,
        ):
            with attempt:
                resp = await self._get(url)

        try:
            data = resp.json()
        except ValueError as e:
            raise InvalidJSON(str(url)) from e
        if not isinstance(data, dict):
            raise InvalidJSON(str(url))
        return data

    async def _get(self, url: httpx.URL) -> httpx.Response:
        """Single GET, transport and HTTP status failures raised as NetworkError."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} must be used as an async context manager")

        async with self._sem:
            self._request_count += 1
            logger.debug("GET {}", url)
            try:
                resp = await self._client.get(url)
                resp.raise_for_status()
            except httpx.HTTPError as e:
                raise NetworkError(str(url), e) from e
            return resp


async def safe_request(coro, default=None):
    """Execute coroutine, return default on failure."""
    try:
        return await coro
    except Exception as e:
        logger.warning("Request failed: {}", e)
        return default if default is not None else []
