"""Services: the top-level delivery configuration objects."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from adapters.delivery.common import service_path
from adapters.delivery.version import Version
from adapters.http_client import decode_response, expect_status_ok
from core.codec import encode_json, encode_query
from core.errors import MissingNameError, MissingOptionalNameCommentError, MissingServiceIDError
from core.interfaces import APIClient
from core.paths import to_safe_url


class Service(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    service_id: str = Field(default="", alias="id")
    name: str = ""
    comment: str = ""
    type: str = Field(default="", description="'vcl' or 'wasm'.")
    customer_id: str = ""
    active_version: int = Field(default=0, alias="version")
    versions: list[Version] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class CreateServiceInput(BaseModel):
    name: str | None = None
    comment: str | None = None
    type: str | None = None


class GetServiceInput(BaseModel):
    service_id: str = ""


class ListServicesInput(BaseModel):
    page: int | None = None
    per_page: int | None = None
    sort: str | None = None
    direction: str | None = None


class SearchServiceInput(BaseModel):
    name: str = ""


class UpdateServiceInput(BaseModel):
    service_id: str = Field(default="", exclude=True)
    name: str | None = None
    comment: str | None = None


class DeleteServiceInput(BaseModel):
    service_id: str = ""


def _with_active_version(service: Service) -> Service:
    for version in service.versions:
        if version.active:
            service.active_version = version.number
            break
    return service


def create_service(client: APIClient, i: CreateServiceInput) -> Service:
    resp = client.post_json(to_safe_url("service"), encode_json(i))
    return decode_response(resp, Service)


def get_service(client: APIClient, i: GetServiceInput) -> Service:
    """Fetches a service; `active_version` is derived from its version list."""

    if not i.service_id:
        raise MissingServiceIDError()

    resp = client.get(service_path(i.service_id))
    return _with_active_version(decode_response(resp, Service))


def list_services(client: APIClient, i: ListServicesInput | None = None) -> list[Service]:
    resp = client.get(to_safe_url("service"), params=encode_query(i))
    return decode_response(resp, list[Service])


def search_service(client: APIClient, i: SearchServiceInput) -> Service:
    if not i.name:
        raise MissingNameError()

    resp = client.get(to_safe_url("service", "search"), params={"name": i.name})
    return decode_response(resp, Service)


def update_service(client: APIClient, i: UpdateServiceInput) -> Service:
    if not i.service_id:
        raise MissingServiceIDError()
    if i.name is None and i.comment is None:
        raise MissingOptionalNameCommentError()

    resp = client.put_json(service_path(i.service_id), encode_json(i))
    return decode_response(resp, Service)


def delete_service(client: APIClient, i: DeleteServiceInput) -> None:
    if not i.service_id:
        raise MissingServiceIDError()

    resp = client.delete(service_path(i.service_id))
    expect_status_ok(resp)
