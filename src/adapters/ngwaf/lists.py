"""NGWAF lists: named sets of IPs, countries, strings or wildcards."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from adapters.http_client import decode_response, expect_no_content
from core.codec import encode_json
from core.domain.scope import Scope
from core.errors import (
    MissingEntriesError,
    MissingListIDError,
    MissingNameError,
    MissingScopeError,
    MissingTypeError,
)
from core.interfaces import APIClient
from core.paths import build_path

COLLECTION = "lists"


class List(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    list_id: str = Field(default="", alias="id")
    name: str = ""
    description: str = ""
    type: str = ""
    entries: list[str] = Field(default_factory=list)
    reference_id: str = ""
    scope: Scope | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ListsMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    limit: int = 0
    total: int = 0


class Lists(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[List] = Field(default_factory=list)
    meta: ListsMeta = Field(default_factory=ListsMeta)


class CreateListInput(BaseModel):
    entries: list[str] | None = None
    name: str | None = None
    type: str | None = Field(default=None, description="'ip', 'country', 'string' or 'wildcard'.")
    description: str | None = None
    scope: Scope | None = Field(default=None, exclude=True)


class GetListInput(BaseModel):
    list_id: str | None = None
    scope: Scope | None = None


class ListListsInput(BaseModel):
    scope: Scope | None = None


class UpdateListInput(BaseModel):
    list_id: str | None = Field(default=None, exclude=True)
    scope: Scope | None = Field(default=None, exclude=True)
    description: str | None = None
    entries: list[str] | None = None


class DeleteListInput(BaseModel):
    list_id: str | None = None
    scope: Scope | None = None


def create_list(client: APIClient, i: CreateListInput) -> List:
    if i.entries is None:
        raise MissingEntriesError()
    if not i.name:
        raise MissingNameError()
    if not i.type:
        raise MissingTypeError()
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION)
    resp = client.post_json(path, encode_json(i))
    return decode_response(resp, List)


def get_list(client: APIClient, i: GetListInput) -> List:
    if not i.list_id:
        raise MissingListIDError()
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION, i.list_id)
    resp = client.get(path)
    return decode_response(resp, List)


def list_lists(client: APIClient, i: ListListsInput) -> Lists:
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION)
    resp = client.get(path)
    return decode_response(resp, Lists)


def update_list(client: APIClient, i: UpdateListInput) -> List:
    if not i.list_id:
        raise MissingListIDError()
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION, i.list_id)
    resp = client.patch_json(path, encode_json(i))
    return decode_response(resp, List)


def delete_list(client: APIClient, i: DeleteListInput) -> None:
    if not i.list_id:
        raise MissingListIDError()
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION, i.list_id)
    resp = client.delete(path)
    expect_no_content(resp)
