"""Dictionary items.

Like ACL entries, items are unversioned and addressed by dictionary ID:
`/service/{id}/dictionary/{dictionary_id}/item/{item_key}`.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from adapters.delivery.acl_entry import BATCH_MODIFY_MAXIMUM_OPERATIONS, BatchOperation
from adapters.delivery.common import service_path
from adapters.http_client import decode_response, expect_status_ok
from core.codec import encode_json, encode_query
from core.errors import (
    MaxExceededItemsError,
    MissingDictionaryIDError,
    MissingItemKeyError,
    MissingServiceIDError,
)
from core.interfaces import APIClient


class DictionaryItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dictionary_id: str = ""
    service_id: str = ""
    item_key: str = ""
    item_value: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class _ItemInput(BaseModel):
    service_id: str = Field(default="", exclude=True)
    dictionary_id: str = Field(default="", exclude=True)


class CreateDictionaryItemInput(_ItemInput):
    item_key: str | None = None
    item_value: str | None = None


class GetDictionaryItemInput(_ItemInput):
    item_key: str = ""


class ListDictionaryItemsInput(_ItemInput):
    page: int | None = None
    per_page: int | None = None
    sort: str | None = None
    direction: str | None = None


class UpdateDictionaryItemInput(_ItemInput):
    item_key: str = Field(default="", exclude=True)
    item_value: str | None = None


class DeleteDictionaryItemInput(_ItemInput):
    item_key: str = ""


class BatchDictionaryItem(BaseModel):
    op: BatchOperation
    item_key: str
    item_value: str = ""


class BatchModifyDictionaryItemsInput(_ItemInput):
    items: list[BatchDictionaryItem] = Field(default_factory=list)


def _require_dictionary(i: _ItemInput) -> None:
    if not i.service_id:
        raise MissingServiceIDError()
    if not i.dictionary_id:
        raise MissingDictionaryIDError()


def _item_path(i: _ItemInput, item_key: str = "") -> str:
    return service_path(i.service_id, "dictionary", i.dictionary_id, "item", item_key)


def create_dictionary_item(client: APIClient, i: CreateDictionaryItemInput) -> DictionaryItem:
    _require_dictionary(i)
    if not i.item_key:
        raise MissingItemKeyError()

    resp = client.post_json(_item_path(i), encode_json(i))
    return decode_response(resp, DictionaryItem)


def get_dictionary_item(client: APIClient, i: GetDictionaryItemInput) -> DictionaryItem:
    _require_dictionary(i)
    if not i.item_key:
        raise MissingItemKeyError()

    resp = client.get(_item_path(i, i.item_key))
    return decode_response(resp, DictionaryItem)


def list_dictionary_items(client: APIClient, i: ListDictionaryItemsInput) -> list[DictionaryItem]:
    _require_dictionary(i)

    path = service_path(i.service_id, "dictionary", i.dictionary_id, "items")
    resp = client.get(path, params=encode_query(i))
    return decode_response(resp, list[DictionaryItem])


def update_dictionary_item(client: APIClient, i: UpdateDictionaryItemInput) -> DictionaryItem:
    _require_dictionary(i)
    if not i.item_key:
        raise MissingItemKeyError()

    resp = client.put_json(_item_path(i, i.item_key), encode_json(i))
    return decode_response(resp, DictionaryItem)


def delete_dictionary_item(client: APIClient, i: DeleteDictionaryItemInput) -> None:
    _require_dictionary(i)
    if not i.item_key:
        raise MissingItemKeyError()

    resp = client.delete(_item_path(i, i.item_key))
    expect_status_ok(resp)


def batch_modify_dictionary_items(client: APIClient, i: BatchModifyDictionaryItemsInput) -> None:
    _require_dictionary(i)
    if len(i.items) > BATCH_MODIFY_MAXIMUM_OPERATIONS:
        raise MaxExceededItemsError()

    path = service_path(i.service_id, "dictionary", i.dictionary_id, "items")
    resp = client.patch_json(path, encode_json(i))
    expect_status_ok(resp)
