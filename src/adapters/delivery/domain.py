"""Domains attached to a service version."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from adapters.delivery.common import VersionedInput, VersionedResource, require_service_version, versioned_path
from adapters.http_client import decode_response, expect_status_ok
from core.codec import encode_json
from core.errors import MissingNameError
from core.interfaces import APIClient

COLLECTION = "domain"


class Domain(VersionedResource):
    name: str = ""
    comment: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class CreateDomainInput(VersionedInput):
    name: str | None = None
    comment: str | None = None


class GetDomainInput(VersionedInput):
    name: str = ""


class ListDomainsInput(VersionedInput):
    pass


class UpdateDomainInput(VersionedInput):
    name: str = Field(default="", exclude=True)
    new_name: str | None = Field(default=None, serialization_alias="name")
    comment: str | None = None


class DeleteDomainInput(VersionedInput):
    name: str = ""


def create_domain(client: APIClient, i: CreateDomainInput) -> Domain:
    require_service_version(i)

    resp = client.post_json(versioned_path(i.service_id, i.service_version, COLLECTION), encode_json(i))
    return decode_response(resp, Domain)


def get_domain(client: APIClient, i: GetDomainInput) -> Domain:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()

    resp = client.get(versioned_path(i.service_id, i.service_version, COLLECTION, i.name))
    return decode_response(resp, Domain)


def list_domains(client: APIClient, i: ListDomainsInput) -> list[Domain]:
    require_service_version(i)

    resp = client.get(versioned_path(i.service_id, i.service_version, COLLECTION))
    return decode_response(resp, list[Domain])


def update_domain(client: APIClient, i: UpdateDomainInput) -> Domain:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()

    path = versioned_path(i.service_id, i.service_version, COLLECTION, i.name)
    resp = client.put_json(path, encode_json(i))
    return decode_response(resp, Domain)


def delete_domain(client: APIClient, i: DeleteDomainInput) -> None:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()

    resp = client.delete(versioned_path(i.service_id, i.service_version, COLLECTION, i.name))
    expect_status_ok(resp)
