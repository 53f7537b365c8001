"""ACL entries.

Entries are not versioned: they live under `/service/{id}/acl/{acl_id}` and
changes take effect without activating a new service version.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from adapters.delivery.common import service_path
from adapters.http_client import decode_response, expect_status_ok
from core.codec import encode_json, encode_query
from core.errors import (
    MaxExceededEntriesError,
    MissingACLIDError,
    MissingEntryIDError,
    MissingIPError,
    MissingServiceIDError,
)
from core.interfaces import APIClient

BATCH_MODIFY_MAXIMUM_OPERATIONS = 1000


class BatchOperation(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    UPSERT = "upsert"
    DELETE = "delete"


class ACLEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    entry_id: str = Field(default="", alias="id")
    acl_id: str = ""
    service_id: str = ""
    ip: str = ""
    subnet: int | None = None
    negated: bool = False
    comment: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class _EntryInput(BaseModel):
    service_id: str = Field(default="", exclude=True)
    acl_id: str = Field(default="", exclude=True)


class CreateACLEntryInput(_EntryInput):
    ip: str | None = None
    subnet: int | None = None
    negated: bool | None = None
    comment: str | None = None


class GetACLEntryInput(_EntryInput):
    entry_id: str = ""


class ListACLEntriesInput(_EntryInput):
    page: int | None = None
    per_page: int | None = None
    sort: str | None = None
    direction: str | None = Field(default=None, description="'ascend' or 'descend'.")


class UpdateACLEntryInput(_EntryInput):
    entry_id: str = Field(default="", exclude=True)
    ip: str | None = None
    subnet: int | None = None
    negated: bool | None = None
    comment: str | None = None


class DeleteACLEntryInput(_EntryInput):
    entry_id: str = ""


class BatchACLEntry(BaseModel):
    op: BatchOperation
    entry_id: str | None = Field(default=None, serialization_alias="id")
    ip: str | None = None
    subnet: int | None = None
    negated: bool | None = None
    comment: str | None = None


class BatchModifyACLEntriesInput(_EntryInput):
    entries: list[BatchACLEntry] = Field(default_factory=list)


def _require_acl(i: _EntryInput) -> None:
    if not i.service_id:
        raise MissingServiceIDError()
    if not i.acl_id:
        raise MissingACLIDError()


def create_acl_entry(client: APIClient, i: CreateACLEntryInput) -> ACLEntry:
    _require_acl(i)
    if not i.ip:
        raise MissingIPError()

    resp = client.post_json(service_path(i.service_id, "acl", i.acl_id, "entry"), encode_json(i))
    return decode_response(resp, ACLEntry)


def get_acl_entry(client: APIClient, i: GetACLEntryInput) -> ACLEntry:
    _require_acl(i)
    if not i.entry_id:
        raise MissingEntryIDError()

    resp = client.get(service_path(i.service_id, "acl", i.acl_id, "entry", i.entry_id))
    return decode_response(resp, ACLEntry)


def list_acl_entries(client: APIClient, i: ListACLEntriesInput) -> list[ACLEntry]:
    """Lists one page of entries; pagination parameters are passed through as is."""

    _require_acl(i)

    resp = client.get(service_path(i.service_id, "acl", i.acl_id, "entries"), params=encode_query(i))
    return decode_response(resp, list[ACLEntry])


def update_acl_entry(client: APIClient, i: UpdateACLEntryInput) -> ACLEntry:
    _require_acl(i)
    if not i.entry_id:
        raise MissingEntryIDError()

    resp = client.patch_json(service_path(i.service_id, "acl", i.acl_id, "entry", i.entry_id), encode_json(i))
    return decode_response(resp, ACLEntry)


def delete_acl_entry(client: APIClient, i: DeleteACLEntryInput) -> None:
    _require_acl(i)
    if not i.entry_id:
        raise MissingEntryIDError()

    resp = client.delete(service_path(i.service_id, "acl", i.acl_id, "entry", i.entry_id))
    expect_status_ok(resp)


def batch_modify_acl_entries(client: APIClient, i: BatchModifyACLEntriesInput) -> None:
    _require_acl(i)
    if len(i.entries) > BATCH_MODIFY_MAXIMUM_OPERATIONS:
        raise MaxExceededEntriesError()

    resp = client.patch_json(service_path(i.service_id, "acl", i.acl_id, "entries"), encode_json(i))
    expect_status_ok(resp)
