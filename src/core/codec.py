"""Request/response codec.

- `encode_json`: request bodies for mutating operations.
- `encode_query`: query strings for list/filter operations.
- `decode_body`: JSON response bodies into typed models.

Wire names come from the models' field aliases; `None` fields are omitted and
fields declared with `exclude=True` (path identifiers) never reach the wire.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from core.errors import ResponseDecodeError

T = TypeVar("T")


def encode_json(model: BaseModel | None) -> dict[str, Any] | None:
    if model is None:
        return None
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def _query_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(prefix: str, value: Any, out: dict[str, str | list[str]]) -> None:
    if value is None:
        return
    if isinstance(value, dict):
        for key, nested in value.items():
            _flatten(f"{prefix}.{key}" if prefix else str(key), nested, out)
        return
    if isinstance(value, (list, tuple)):
        out[prefix] = [_query_scalar(v) for v in value if v is not None]
        return
    out[prefix] = _query_scalar(value)


def encode_query(model: BaseModel | None) -> dict[str, str | list[str]]:
    """Encodes a model as query parameters.

    Booleans become "true"/"false", lists become repeated keys and nested
    objects flatten into dotted keys (`filter.name=...`).
    """

    out: dict[str, str | list[str]] = {}
    if model is None:
        return out
    _flatten("", model.model_dump(mode="json", by_alias=True, exclude_none=True), out)
    return out


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode_body(content: bytes | str, target: type[T] | Any) -> T:
    """Decodes a JSON body into `target` (a model class or a type like `list[Model]`)."""

    try:
        return _adapter(target).validate_json(content)
    except ValidationError as exc:
        raise ResponseDecodeError(str(exc)) from exc
