from __future__ import annotations

import json
import re
from typing import Any, Callable, Dict, List, Tuple, Union

import httpx
import pytest

from dashboard.app.auth.models import DashboardSession, Role
from dashboard.app.core.config import Settings
from dashboard.app.core.http import ApiClient

_FORM_PART = re.compile(
    rb'Content-Disposition: form-data; name="(?P<name>[^"]+)"(?P<file>; filename="[^"]*")?\r\n'
    rb"(?:[^\r\n]+\r\n)*\r\n(?P<value>.*?)\r\n--",
    re.DOTALL,
)

Handler = Callable[[httpx.Request], httpx.Response]
Route = Union[Handler, Tuple[int, Any]]


class FakeBackend:
    """In-memory stand-in for the REST backend, routed by method and path."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def on(self, method: str, path: str, body: Any = None, *, status_code: int = 200) -> None:
        self.routes[(method, path)] = (status_code, body)

    def handle_with(self, method: str, path: str, handler: Handler) -> None:
        self.routes[(method, path)] = handler

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [req for req in self.requests if req.method == method and req.url.path == path]

    def json_body(self, request: httpx.Request) -> Any:
        return json.loads(request.content.decode("utf-8"))

    def form_fields(self, request: httpx.Request) -> Dict[str, str]:
        """Plain (non-file) fields of a multipart request."""

        assert request.headers["content-type"].startswith("multipart/form-data")
        return {
            match.group("name").decode("utf-8"): match.group("value").decode("utf-8")
            for match in _FORM_PART.finditer(request.content)
            if match.group("file") is None
        }

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        if callable(route):
            return route(request)
        status_code, body = route
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(backend: FakeBackend) -> ApiClient:
    api = ApiClient("http://testserver", transport=httpx.MockTransport(backend))
    yield api
    api.close()


@pytest.fixture
def config() -> Settings:
    return Settings(environment="local", share_min=0.0, share_max=200.0)


@pytest.fixture
def admin_session() -> DashboardSession:
    return DashboardSession(role=Role.ADMIN)


@pytest.fixture
def viewer_session() -> DashboardSession:
    return DashboardSession(role=Role.VIEWER)
