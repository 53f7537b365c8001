"""Edge dictionaries of a service version."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from adapters.delivery.common import VersionedInput, VersionedResource, require_service_version, versioned_path
from adapters.http_client import decode_response, expect_status_ok
from core.codec import encode_json
from core.errors import MissingNameError
from core.interfaces import APIClient

COLLECTION = "dictionary"


class Dictionary(VersionedResource):
    dictionary_id: str = Field(default="", alias="id")
    name: str = ""
    write_only: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class CreateDictionaryInput(VersionedInput):
    name: str | None = None
    write_only: bool | None = None


class GetDictionaryInput(VersionedInput):
    name: str = ""


class ListDictionariesInput(VersionedInput):
    pass


class UpdateDictionaryInput(VersionedInput):
    name: str = Field(default="", exclude=True)
    new_name: str | None = Field(default=None, serialization_alias="name")
    write_only: bool | None = None


class DeleteDictionaryInput(VersionedInput):
    name: str = ""


def create_dictionary(client: APIClient, i: CreateDictionaryInput) -> Dictionary:
    require_service_version(i)

    resp = client.post_json(versioned_path(i.service_id, i.service_version, COLLECTION), encode_json(i))
    return decode_response(resp, Dictionary)


def get_dictionary(client: APIClient, i: GetDictionaryInput) -> Dictionary:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()

    resp = client.get(versioned_path(i.service_id, i.service_version, COLLECTION, i.name))
    return decode_response(resp, Dictionary)


def list_dictionaries(client: APIClient, i: ListDictionariesInput) -> list[Dictionary]:
    require_service_version(i)

    resp = client.get(versioned_path(i.service_id, i.service_version, COLLECTION))
    return decode_response(resp, list[Dictionary])


def update_dictionary(client: APIClient, i: UpdateDictionaryInput) -> Dictionary:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()

    path = versioned_path(i.service_id, i.service_version, COLLECTION, i.name)
    resp = client.put_json(path, encode_json(i))
    return decode_response(resp, Dictionary)


def delete_dictionary(client: APIClient, i: DeleteDictionaryInput) -> None:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()

    resp = client.delete(versioned_path(i.service_id, i.service_version, COLLECTION, i.name))
    expect_status_ok(resp)
