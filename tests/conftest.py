"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from adapters.http_client import Client
from core.config import AppSettings

TEST_API_URL = "https://api.test.local"
TEST_API_KEY = "test-key"


class FakeAPI:
    """Mock transport handler: replays queued responses and records requests."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def reply(
        self,
        status_code: int = 200,
        body: Any = None,
        *,
        content_type: str = "application/json",
        headers: dict[str, str] | None = None,
        text: str | None = None,
    ) -> "FakeAPI":
        all_headers = {"Content-Type": content_type, **(headers or {})}
        if text is not None:
            content = text.encode("utf-8")
        elif body is None:
            content = b""
        else:
            content = json.dumps(body).encode("utf-8")
        self._responses.append(httpx.Response(status_code, headers=all_headers, content=content))
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        return self._responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, api_key=TEST_API_KEY, api_url=TEST_API_URL)


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def client(settings: AppSettings, api: FakeAPI) -> Client:
    c = Client(settings, transport=httpx.MockTransport(api))
    yield c
    c.close()


@pytest.fixture
def make_client(api: FakeAPI) -> Callable[..., Client]:
    """Builds clients with custom settings on the shared fake API."""

    created: list[Client] = []

    def _make(**overrides: Any) -> Client:
        values = {"api_key": TEST_API_KEY, "api_url": TEST_API_URL, **overrides}
        c = Client(AppSettings(_env_file=None, **values), transport=httpx.MockTransport(api))
        created.append(c)
        return c

    yield _make
    for c in created:
        c.close()
