"""Origin backends of a service version."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from adapters.delivery.common import VersionedInput, VersionedResource, require_service_version, versioned_path
from adapters.http_client import decode_response, expect_status_ok
from core.codec import encode_json
from core.errors import MissingAddressError, MissingNameError
from core.interfaces import APIClient

COLLECTION = "backend"


class Backend(VersionedResource):
    name: str = ""
    address: str = ""
    hostname: str = ""
    port: int = 0
    comment: str = ""
    auto_loadbalance: bool = False
    weight: int = 0
    shield: str = ""
    request_condition: str = ""
    healthcheck: str = ""
    override_host: str = ""
    connect_timeout: int = 0
    first_byte_timeout: int = 0
    between_bytes_timeout: int = 0
    error_threshold: int = 0
    max_conn: int = 0
    use_ssl: bool = False
    ssl_check_cert: bool = False
    ssl_ca_cert: str = ""
    ssl_cert_hostname: str = ""
    ssl_ciphers: str = ""
    ssl_client_cert: str = ""
    ssl_client_key: str = ""
    ssl_hostname: str = ""
    ssl_sni_hostname: str = ""
    min_tls_version: str = ""
    max_tls_version: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class _BackendFields(VersionedInput):
    address: str | None = None
    port: int | None = None
    comment: str | None = None
    auto_loadbalance: bool | None = None
    weight: int | None = None
    shield: str | None = None
    request_condition: str | None = None
    healthcheck: str | None = None
    override_host: str | None = None
    connect_timeout: int | None = None
    first_byte_timeout: int | None = None
    between_bytes_timeout: int | None = None
    error_threshold: int | None = None
    max_conn: int | None = None
    use_ssl: bool | None = None
    ssl_check_cert: bool | None = None
    ssl_ca_cert: str | None = None
    ssl_cert_hostname: str | None = None
    ssl_ciphers: str | None = None
    ssl_client_cert: str | None = None
    ssl_client_key: str | None = None
    ssl_sni_hostname: str | None = None
    min_tls_version: str | None = None
    max_tls_version: str | None = None


class CreateBackendInput(_BackendFields):
    name: str | None = None


class GetBackendInput(VersionedInput):
    name: str = ""


class ListBackendsInput(VersionedInput):
    pass


class UpdateBackendInput(_BackendFields):
    name: str = Field(default="", exclude=True)
    new_name: str | None = Field(default=None, serialization_alias="name")


class DeleteBackendInput(VersionedInput):
    name: str = ""


def create_backend(client: APIClient, i: CreateBackendInput) -> Backend:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()
    if not i.address:
        raise MissingAddressError()

    resp = client.post_json(versioned_path(i.service_id, i.service_version, COLLECTION), encode_json(i))
    return decode_response(resp, Backend)


def get_backend(client: APIClient, i: GetBackendInput) -> Backend:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()

    resp = client.get(versioned_path(i.service_id, i.service_version, COLLECTION, i.name))
    return decode_response(resp, Backend)


def list_backends(client: APIClient, i: ListBackendsInput) -> list[Backend]:
    require_service_version(i)

    resp = client.get(versioned_path(i.service_id, i.service_version, COLLECTION))
    return decode_response(resp, list[Backend])


def update_backend(client: APIClient, i: UpdateBackendInput) -> Backend:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()

    path = versioned_path(i.service_id, i.service_version, COLLECTION, i.name)
    resp = client.put_json(path, encode_json(i))
    return decode_response(resp, Backend)


def delete_backend(client: APIClient, i: DeleteBackendInput) -> None:
    require_service_version(i)
    if not i.name:
        raise MissingNameError()

    resp = client.delete(versioned_path(i.service_id, i.service_version, COLLECTION, i.name))
    expect_status_ok(resp)
