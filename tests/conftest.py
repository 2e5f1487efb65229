from collections.abc import Callable

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from linkboard.api.deps import get_metadata_service
from linkboard.main import create_app
from linkboard.services.metadata import MetadataService
from linkboard.storage import MemoryStore

PageHandler = Callable[[httpx.Request], httpx.Response]


class FakeResolver:
    """Title resolver answering from a fixed table, falling back to the URL."""

    def __init__(self, titles: dict[str, str] | None = None) -> None:
        self.titles = titles or {}
        self.calls: list[str] = []

    async def resolve(self, url: str) -> str:
        self.calls.append(url)
        return self.titles.get(url, url)


@pytest.fixture
def pages() -> dict[str, str]:
    """Upstream page bodies keyed by URL; unknown URLs fail to connect."""
    return {}


@pytest.fixture
def upstream(pages: dict[str, str]) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        body = pages.get(str(request.url).rstrip("/"))
        if body is None:
            raise httpx.ConnectError("unreachable host", request=request)
        return httpx.Response(200, text=body)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def app(upstream: httpx.AsyncClient) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_metadata_service] = lambda: MetadataService(upstream)
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def resolver() -> FakeResolver:
    return FakeResolver(
        {
            "https://example.com": "Example Domain",
            "https://python.org": "Welcome to Python.org",
        }
    )
