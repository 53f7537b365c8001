"""Contract of the HTTP client used by API functions.

Structural (Protocol) so any object with these verbs can stand in for
`adapters.http_client.Client`.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

import httpx

QueryParams = Mapping[str, "str | list[str]"]


@runtime_checkable
class APIClient(Protocol):
    """Minimal client contract.

    Rules:
    - Each verb performs exactly one HTTP round trip.
    - Non-success statuses raise `core.errors.HTTPError`.
    """

    def get(self, path: str, *, params: QueryParams | None = None) -> httpx.Response:
        ...

    def post_json(self, path: str, body: Any = None, *, params: QueryParams | None = None) -> httpx.Response:
        ...

    def put_json(self, path: str, body: Any = None, *, params: QueryParams | None = None) -> httpx.Response:
        ...

    def patch_json(self, path: str, body: Any = None, *, params: QueryParams | None = None) -> httpx.Response:
        ...

    def put(self, path: str, *, params: QueryParams | None = None) -> httpx.Response:
        ...

    def delete(self, path: str, *, params: QueryParams | None = None) -> httpx.Response:
        ...
