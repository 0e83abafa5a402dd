"""Shared fixtures - a fake EONET API behind httpx.MockTransport."""

import httpx
import pytest

from eonet_client import base, set_api_config

TEST_BASE_URL = "https://eonet.test/api/v2.1"


class FakeAPI:
    """Canned responses keyed by endpoint name and optional ``status`` query value."""

    def __init__(self):
        self.routes: dict[tuple[str, str | None], object] = {}
        self.requests: list[httpx.Request] = []

    def add(self, endpoint: str, response: object, status: str | None = None) -> None:
        """Register a JSON payload, an httpx.Response or an exception to raise."""
        self.routes[(endpoint, status)] = response

    def calls(self, endpoint: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith(f"/{endpoint}")]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        route = self.routes.get((endpoint, request.url.params.get("status")))
        if route is None:
            route = self.routes.get((endpoint, None))
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)


@pytest.fixture(autouse=True)
def api_config():
    saved = (base.API_BASE_URL, base.API_TIMEOUT, base.API_RETRIES)
    set_api_config(TEST_BASE_URL, 5, retries=1)
    yield
    set_api_config(*saved)


@pytest.fixture
def api():
    return FakeAPI()


@pytest.fixture
def transport(api):
    return httpx.MockTransport(api.handler)
