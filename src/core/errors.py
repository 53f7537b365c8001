"""Error taxonomy of the SDK.

Layers:
- `FieldError` and its named subclasses: input validation, raised before any
  network call. Each required identifier has its own class so callers can
  match on it (`except MissingServiceIDError`).
- `HTTPError`: the API answered with a non-success status.
- `ResponseDecodeError`: the body could not be parsed into the expected shape.
- `PathBuildError` / `ConditionDecodeError`: pure-logic failures of the path
  builder and the condition decoder.

Transport failures (`httpx.TransportError` and friends) are not wrapped.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"
PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"


class FieldError(ValueError):
    """A required input field is missing or has an invalid value."""

    field: str = ""
    message: str = ""

    def __init__(self, field: str | None = None, message: str | None = None) -> None:
        if field is not None:
            self.field = field
        if message is not None:
            self.message = message
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.message:
            return f"problem with field '{self.field}': {self.message}"
        return f"missing required field '{self.field}'"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldError):
            return NotImplemented
        return (type(self), self.field, self.message) == (type(other), other.field, other.message)

    def __hash__(self) -> int:
        return hash((type(self), self.field, self.message))


class MissingACLIDError(FieldError):
    field = "acl_id"


class MissingActionError(FieldError):
    field = "action"


class MissingAddressError(FieldError):
    field = "address"


class MissingConditionsError(FieldError):
    field = "conditions"


class MissingDescriptionError(FieldError):
    field = "description"


class MissingDictionaryIDError(FieldError):
    field = "dictionary_id"


class MissingEntriesError(FieldError):
    field = "entries"


class MissingEntryIDError(FieldError):
    field = "entry_id"


class MissingFieldNameError(FieldError):
    field = "field"


class MissingIntervalError(FieldError):
    field = "interval"


class MissingIPError(FieldError):
    field = "ip"


class MissingItemKeyError(FieldError):
    field = "item_key"


class MissingLimitError(FieldError):
    field = "limit"


class MissingListIDError(FieldError):
    field = "list_id"


class MissingModeError(FieldError):
    field = "mode"


class MissingNameError(FieldError):
    field = "name"


class MissingNewNameError(FieldError):
    field = "new_name"


class MissingProductIDError(FieldError):
    field = "product_id"


class MissingRedactionIDError(FieldError):
    field = "redaction_id"


class MissingRuleIDError(FieldError):
    field = "rule_id"


class MissingScopeError(FieldError):
    field = "scope"


class MissingServiceIDError(FieldError):
    field = "service_id"


class MissingServiceVersionError(FieldError):
    field = "service_version"


class MissingSignalError(FieldError):
    field = "signal"


class MissingSignalIDError(FieldError):
    field = "signal_id"


class MissingThresholdIDError(FieldError):
    field = "threshold_id"


class MissingTypeError(FieldError):
    field = "type"


class MissingWorkspaceIDError(FieldError):
    field = "workspace_id"


class MissingOptionalNameCommentError(FieldError):
    field = "name, comment"
    message = "at least one of the available 'optional' fields is required"


class MaxExceededEntriesError(FieldError):
    field = "entries"
    message = "too many entries given, maximum allowed is 1000"


class MaxExceededItemsError(FieldError):
    field = "items"
    message = "too many items given, maximum allowed is 1000"


class PathBuildError(ValueError):
    """An API path could not be built from the given scope."""


class ConditionDecodeError(ValueError):
    """A rule condition element does not match any known shape."""


class ResponseDecodeError(Exception):
    """The response body could not be decoded into the expected type."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"failed to decode json response: {reason}")


class StatusNotOKError(Exception):
    """A delete call answered without the `{"status": "ok"}` acknowledgement."""

    def __init__(self) -> None:
        super().__init__("unexpected 'status' field in API response body")


class ErrorObject(BaseModel):
    """A single error entry of an API error response."""

    model_config = ConfigDict(extra="ignore")

    code: str = ""
    detail: str = ""
    id: str = ""
    meta: dict[str, Any] | None = None
    status: str = ""
    title: str = ""


class HTTPError(Exception):
    """Non-success response from the API."""

    def __init__(self, status_code: int, errors: list[ErrorObject] | None = None) -> None:
        self.status_code = status_code
        self.errors: list[ErrorObject] = list(errors or [])
        super().__init__(self.__str__())

    @classmethod
    def from_payload(cls, status_code: int, content_type: str | None, body: str) -> "HTTPError":
        """Builds the error from a raw response, parsing the body by content type."""

        err = cls(status_code)
        if not body:
            return err

        media_type = (content_type or "").split(";", 1)[0].strip().lower()
        try:
            payload = json.loads(body)
            if media_type == JSONAPI_MEDIA_TYPE:
                err.errors.extend(_JSONAPIErrors.model_validate(payload).errors)
            elif media_type == PROBLEM_JSON_MEDIA_TYPE:
                problem = _ProblemDetail.model_validate(payload)
                err.errors.append(
                    ErrorObject(title=problem.title, detail=problem.detail, status=str(problem.status))
                )
            elif payload is not None:
                legacy = _LegacyError.model_validate(payload)
                err.errors.append(ErrorObject(title=legacy.message, detail=legacy.detail))
        except ValueError:
            # Covers json.JSONDecodeError and pydantic.ValidationError.
            err.errors.append(ErrorObject(title="Undefined error", detail=body))

        err.args = (err.__str__(),)
        return err

    def __str__(self) -> str:
        try:
            reason = HTTPStatus(self.status_code).phrase
        except ValueError:
            reason = ""
        lines = [f"{self.status_code} - {reason}:"]
        for e in self.errors:
            lines.append("")
            if e.id:
                lines.append(f"    ID:     {e.id}")
            if e.title:
                lines.append(f"    Title:  {e.title}")
            if e.detail:
                lines.append(f"    Detail: {e.detail}")
            if e.code:
                lines.append(f"    Code:   {e.code}")
            if e.meta is not None:
                lines.append(f"    Meta:   {e.meta}")
        return "\n".join(lines)

    def is_not_found(self) -> bool:
        return self.status_code == 404

    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    def is_rate_limited(self) -> bool:
        return self.status_code == 429


class _JSONAPIErrors(BaseModel):
    model_config = ConfigDict(extra="ignore")

    errors: list[ErrorObject] = Field(default_factory=list)


class _ProblemDetail(BaseModel):
    model_config = ConfigDict(extra="ignore")

    detail: str = ""
    status: int = 0
    title: str = ""
    type: str = ""


class _LegacyError(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    detail: str = ""
    message: str = Field(default="", alias="msg")
