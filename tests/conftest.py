from collections.abc import Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from heyflow_trello.config import Settings
from heyflow_trello.trello import TrelloClient

TRELLO_KEY = "test-key"
TRELLO_TOKEN = "test-token"


class FakeTrello:
    """In-memory stand-in for api.trello.com, served through httpx.MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def on(self, method: str, path: str, status_code: int = 200, json=None, text: str | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json)

        self.routes[(method, f"/1/{path}")] = handler

    def fail(self, method: str, path: str, message: str = "connection refused"):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(message, request=request)

        self.routes[(method, f"/1/{path}")] = handler

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == f"/1/{path}"]

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, text="The requested resource was not found.")
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, trello_key=TRELLO_KEY, trello_token=TRELLO_TOKEN)


@pytest.fixture
def trello() -> FakeTrello:
    return FakeTrello()


@pytest.fixture
def trello_client(test_settings, trello) -> TrelloClient:
    return TrelloClient(test_settings, transport=trello.transport)


@pytest.fixture
async def client(trello_client):
    from heyflow_trello.dependencies import get_trello_client
    from heyflow_trello.main import app
    from heyflow_trello.routers.webhooks import limiter

    app.dependency_overrides[get_trello_client] = lambda: trello_client
    limiter.enabled = False

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    limiter.enabled = True
    app.dependency_overrides.clear()
