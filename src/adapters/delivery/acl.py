"""Access control lists of a service version."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from adapters.delivery.common import VersionedInput, VersionedResource, require_service_version, versioned_path
from adapters.http_client import decode_response, expect_status_ok
from core.codec import encode_json
from core.errors import MissingNameError, MissingNewNameError
from core.interfaces import APIClient

COLLECTION = "acl"


class ACL(VersionedResource):
    acl_id: str = Field(default="", alias="id")
    name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class CreateACLInput(VersionedInput):
    name: str | None = None


class GetACLInput(VersionedInput):
    name: str = ""


class ListACLsInput(VersionedInput):
    pass


class UpdateACLInput(VersionedInput):
    name: str = Field(default="", exclude=True)
    new_name: str | None = Field(default=None, serialization_alias="name")


class DeleteACLInput(VersionedInput):
    name: str = ""


def create_acl(client: APIClient, i: CreateACLInput) -> ACL:
    require_service_version(i)

    path = versioned_path(i.service_id, i.service_version, COLLECTION)
    resp = client.post_json(path, encode_json(i))
    return decode_response(resp, ACL)


def get_acl(client: APIClient, i: GetACLInput) -> ACL:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()

    resp = client.get(versioned_path(i.service_id, i.service_version, COLLECTION, i.name))
    return decode_response(resp, ACL)


def list_acls(client: APIClient, i: ListACLsInput) -> list[ACL]:
    require_service_version(i)

    resp = client.get(versioned_path(i.service_id, i.service_version, COLLECTION))
    return decode_response(resp, list[ACL])


def update_acl(client: APIClient, i: UpdateACLInput) -> ACL:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()
    if not i.new_name:
        raise MissingNewNameError()

    path = versioned_path(i.service_id, i.service_version, COLLECTION, i.name)
    resp = client.put_json(path, encode_json(i))
    return decode_response(resp, ACL)


def delete_acl(client: APIClient, i: DeleteACLInput) -> None:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()

    resp = client.delete(versioned_path(i.service_id, i.service_version, COLLECTION, i.name))
    expect_status_ok(resp)
