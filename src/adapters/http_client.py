"""httpx wrapper for the management API.

Responsibilities:
- Build an `httpx.Client` with base URL, auth header, user agent and timeout.
- Turn non-success statuses into `core.errors.HTTPError`.
- Track the rate-limit headers returned on mutating calls.
- Decode JSON bodies into typed models, closing the response on every path.

No retries, no backoff: one call is one round trip.
"""

from __future__ import annotations

import logging
import platform
from datetime import datetime, timezone
from typing import Any, Mapping, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict

from core.codec import decode_body
from core.config import AppSettings
from core.errors import HTTPError, StatusNotOKError

__version__ = "0.1.0"

API_KEY_HEADER = "Fastly-Key"
JSON_MIME_TYPE = "application/json"

RATE_LIMIT_REMAINING_HEADER = "Fastly-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "Fastly-RateLimit-Reset"
# First guess until the API reports otherwise.
DEFAULT_RATE_LIMIT = 1000

SUCCESS_STATUSES = frozenset({200, 201, 202, 204, 205, 206})

logger = logging.getLogger(__name__)

T = TypeVar("T")


def default_user_agent() -> str:
    return f"FastlySDKPy/{__version__} (python {platform.python_version()})"


def build_user_agent(settings: AppSettings) -> str:
    if settings.user_agent:
        return f"{settings.user_agent}, {default_user_agent()}"
    return default_user_agent()


def build_http_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Creates the underlying `httpx.Client`.

    The API key header is only set when a key is configured; some endpoints
    accept anonymous calls.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": build_user_agent(settings),
        "Accept": JSON_MIME_TYPE,
    }
    if settings.api_key:
        headers[API_KEY_HEADER] = settings.api_key
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.api_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


def raise_for_status(response: httpx.Response) -> httpx.Response:
    if response.status_code in SUCCESS_STATUSES:
        return response
    response.close()
    raise HTTPError.from_payload(
        response.status_code,
        response.headers.get("Content-Type"),
        response.text,
    )


def decode_response(response: httpx.Response, target: type[T] | Any) -> T:
    """Decodes the body into `target`; the response is closed even on failure."""

    try:
        return decode_body(response.content, target)
    finally:
        response.close()


def expect_no_content(response: httpx.Response) -> None:
    """Delete contract: only `204 No Content` is success."""

    try:
        if response.status_code != 204:
            raise HTTPError.from_payload(
                response.status_code,
                response.headers.get("Content-Type"),
                response.text,
            )
    finally:
        response.close()


class StatusResponse(BaseModel):
    """Acknowledgement body of the legacy API (`{"status": "ok"}`)."""

    model_config = ConfigDict(extra="ignore")

    status: str = ""
    msg: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def expect_status_ok(response: httpx.Response) -> None:
    """Legacy delete contract: `204`, or a body whose `status` is "ok"."""

    if response.status_code == 204:
        response.close()
        return
    if not decode_response(response, StatusResponse).ok:
        raise StatusNotOKError()


class Client:
    """Entry point to the management API.

    Safe to share between threads: the only mutable state is the last observed
    rate-limit pair, written as whole values.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._http = http_client or build_http_client(self._settings, transport=transport)
        self._remaining = DEFAULT_RATE_LIMIT
        self._reset = 0

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def rate_limit_remaining(self) -> int:
        """Non-read requests left before the API answers 429."""

        return self._remaining

    @property
    def rate_limit_reset(self) -> datetime:
        return datetime.fromtimestamp(self._reset, tz=timezone.utc)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        request = self._http.build_request(
            method,
            path,
            params=dict(params) if params else None,
            json=json,
            headers=headers,
        )
        if self._settings.debug_mode:
            self._dump_request(request)

        response = self._http.send(request)
        logger.debug("%s %s -> %s", method, request.url.path, response.status_code)
        if self._settings.debug_mode:
            logger.debug(
                "http response (dump): %s %s\n%s",
                response.status_code,
                response.reason_phrase,
                response.text,
            )

        raise_for_status(response)

        if method not in ("GET", "HEAD"):
            self._track_rate_limit(response)
        return response

    def get(self, path: str, *, params: Mapping[str, Any] | None = None) -> httpx.Response:
        return self.request("GET", path, params=params)

    def head(self, path: str, *, params: Mapping[str, Any] | None = None) -> httpx.Response:
        return self.request("HEAD", path, params=params)

    def post_json(self, path: str, body: Any = None, *, params: Mapping[str, Any] | None = None) -> httpx.Response:
        return self.request("POST", path, params=params, json=body, headers={"Content-Type": JSON_MIME_TYPE})

    def put_json(self, path: str, body: Any = None, *, params: Mapping[str, Any] | None = None) -> httpx.Response:
        return self.request("PUT", path, params=params, json=body, headers={"Content-Type": JSON_MIME_TYPE})

    def patch_json(self, path: str, body: Any = None, *, params: Mapping[str, Any] | None = None) -> httpx.Response:
        return self.request("PATCH", path, params=params, json=body, headers={"Content-Type": JSON_MIME_TYPE})

    def put(self, path: str, *, params: Mapping[str, Any] | None = None) -> httpx.Response:
        return self.request("PUT", path, params=params)

    def delete(self, path: str, *, params: Mapping[str, Any] | None = None) -> httpx.Response:
        return self.request("DELETE", path, params=params)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _track_rate_limit(self, response: httpx.Response) -> None:
        remaining = response.headers.get(RATE_LIMIT_REMAINING_HEADER)
        if remaining:
            try:
                self._remaining = int(remaining)
            except ValueError:
                logger.debug("ignoring malformed %s header: %r", RATE_LIMIT_REMAINING_HEADER, remaining)
        reset = response.headers.get(RATE_LIMIT_RESET_HEADER)
        if reset:
            try:
                self._reset = int(reset)
            except ValueError:
                logger.debug("ignoring malformed %s header: %r", RATE_LIMIT_RESET_HEADER, reset)

    def _dump_request(self, request: httpx.Request) -> None:
        headers = {k: v for k, v in request.headers.items() if k.lower() != API_KEY_HEADER.lower()}
        body = request.content.decode("utf-8", errors="replace") if request.content else ""
        logger.debug("http request (dump): %s %s\nheaders=%s\n%s", request.method, request.url, headers, body)
