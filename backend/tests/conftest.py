import httpx
import pytest
from fastapi.testclient import TestClient

from quickverify.http import get_http_client
from quickverify.main import app

SMALL_PAGE = "<html><body>nothing here</body></html>"


class FakeUpstream:
    """Stands in for the search engine and the DoH resolver."""

    def __init__(self):
        self.search_body = SMALL_PAGE
        self.dns_json = {"Status": 0, "Answer": [{"name": "example.com.", "type": 15, "data": "10 mx.example.com."}]}
        self.search_error = None
        self.dns_error = None
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "duckduckgo.com":
            if self.search_error:
                raise self.search_error
            return httpx.Response(200, text=self.search_body)
        if request.url.host == "dns.google":
            if self.dns_error:
                raise self.dns_error
            if isinstance(self.dns_json, str):
                return httpx.Response(200, text=self.dns_json)
            return httpx.Response(200, json=self.dns_json)
        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def client(upstream):
    async def _override():
        async with upstream.client() as c:
            yield c

    app.dependency_overrides[get_http_client] = _override
    with TestClient(app) as cli:
        yield cli
    app.dependency_overrides.clear()
