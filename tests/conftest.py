import json

import httpx
import pytest

from core.config import EndpointConfig
from core.registry import ToolRegistry
from core.transport import ApiClient

BASE_URL = "https://joeapi.test"
DEFAULT_LIMIT = 7


class FakeApi:
    """Records every outbound request and answers from a per-path route table.

    Unrouted paths answer 200 with a small JSON document naming the path.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, object] = {}

    def route(self, path, status=200, body=None, raw=None, error=None):
        self.routes[path] = (status, body, raw, error)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body, raw, error = self.routes.get(request.url.path, (200, None, None, None))
        if error is not None:
            raise error(f"{error.__name__} for {request.url.path}", request=request)
        if raw is not None:
            return httpx.Response(status, content=raw)
        if body is None:
            body = {"path": request.url.path}
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, index=-1):
        return json.loads(self.requests[index].content)


@pytest.fixture
def config():
    return EndpointConfig(base_url=BASE_URL, default_page_limit=DEFAULT_LIMIT, timeout_ms=2500)


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def client(config, fake_api):
    return ApiClient(config, transport=httpx.MockTransport(fake_api))


@pytest.fixture
def registry(client):
    return ToolRegistry(client)
