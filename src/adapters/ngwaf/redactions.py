"""NGWAF redactions: request or response fields masked before storage."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from adapters.http_client import decode_response, expect_no_content
from core.codec import encode_json
from core.errors import (
    MissingFieldNameError,
    MissingRedactionIDError,
    MissingTypeError,
    MissingWorkspaceIDError,
)
from core.interfaces import APIClient
from core.paths import to_safe_url


def _path(workspace_id: str, redaction_id: str = "") -> str:
    segments = ["ngwaf", "v1", "workspaces", workspace_id, "redactions"]
    if redaction_id:
        segments.append(redaction_id)
    return to_safe_url(*segments)


class Redaction(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    redaction_id: str = Field(default="", alias="id")
    field: str = ""
    type: str = ""
    created_at: datetime | None = None


class RedactionsMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    limit: int = 0
    total: int = 0


class Redactions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[Redaction] = Field(default_factory=list)
    meta: RedactionsMeta = Field(default_factory=RedactionsMeta)


class CreateRedactionInput(BaseModel):
    workspace_id: str | None = Field(default=None, exclude=True)
    field: str | None = None
    type: str | None = Field(default=None, description="'request_parameter', 'request_header' or 'response_header'.")


class GetRedactionInput(BaseModel):
    workspace_id: str | None = None
    redaction_id: str | None = None


class ListRedactionsInput(BaseModel):
    workspace_id: str | None = None


class UpdateRedactionInput(BaseModel):
    workspace_id: str | None = Field(default=None, exclude=True)
    redaction_id: str | None = Field(default=None, exclude=True)
    field: str | None = None
    type: str | None = None


class DeleteRedactionInput(BaseModel):
    workspace_id: str | None = None
    redaction_id: str | None = None


def create_redaction(client: APIClient, i: CreateRedactionInput) -> Redaction:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()
    if not i.field:
        raise MissingFieldNameError()
    if not i.type:
        raise MissingTypeError()

    resp = client.post_json(_path(i.workspace_id), encode_json(i))
    return decode_response(resp, Redaction)


def get_redaction(client: APIClient, i: GetRedactionInput) -> Redaction:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()
    if not i.redaction_id:
        raise MissingRedactionIDError()

    resp = client.get(_path(i.workspace_id, i.redaction_id))
    return decode_response(resp, Redaction)


def list_redactions(client: APIClient, i: ListRedactionsInput) -> Redactions:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()

    resp = client.get(_path(i.workspace_id))
    return decode_response(resp, Redactions)


def update_redaction(client: APIClient, i: UpdateRedactionInput) -> Redaction:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()
    if not i.redaction_id:
        raise MissingRedactionIDError()
    if not i.field:
        raise MissingFieldNameError()
    if not i.type:
        raise MissingTypeError()

    resp = client.patch_json(_path(i.workspace_id, i.redaction_id), encode_json(i))
    return decode_response(resp, Redaction)


def delete_redaction(client: APIClient, i: DeleteRedactionInput) -> None:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()
    if not i.redaction_id:
        raise MissingRedactionIDError()

    resp = client.delete(_path(i.workspace_id, i.redaction_id))
    expect_no_content(resp)
