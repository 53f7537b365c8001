"""Service configuration versions and their lifecycle.

A version is edited while unlocked, then activated; `clone` copies a version
into a new editable one.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from adapters.delivery.common import VersionedInput, require_service_version, service_path, versioned_path
from adapters.http_client import StatusResponse, decode_response
from core.codec import encode_json
from core.errors import MissingServiceIDError
from core.interfaces import APIClient


class Version(BaseModel):
    model_config = ConfigDict(extra="ignore")

    number: int = 0
    service_id: str = ""
    comment: str = ""
    active: bool = False
    deployed: bool = False
    locked: bool = False
    staging: bool = False
    testing: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class ListVersionsInput(BaseModel):
    service_id: str = ""


class CreateVersionInput(BaseModel):
    service_id: str = Field(default="", exclude=True)
    comment: str | None = None


class GetVersionInput(VersionedInput):
    pass


class UpdateVersionInput(VersionedInput):
    comment: str | None = None


class ActivateVersionInput(VersionedInput):
    pass


class DeactivateVersionInput(VersionedInput):
    pass


class CloneVersionInput(VersionedInput):
    pass


class LockVersionInput(VersionedInput):
    pass


class ValidateVersionInput(VersionedInput):
    pass


def list_versions(client: APIClient, i: ListVersionsInput) -> list[Version]:
    if not i.service_id:
        raise MissingServiceIDError()

    resp = client.get(service_path(i.service_id, "version"))
    return decode_response(resp, list[Version])


def latest_version(client: APIClient, i: ListVersionsInput) -> Version | None:
    """Returns the highest-numbered version, or None when the service has none."""

    versions = list_versions(client, i)
    if not versions:
        return None
    return max(versions, key=lambda v: v.number)


def create_version(client: APIClient, i: CreateVersionInput) -> Version:
    if not i.service_id:
        raise MissingServiceIDError()

    resp = client.post_json(service_path(i.service_id, "version"), encode_json(i))
    return decode_response(resp, Version)


def get_version(client: APIClient, i: GetVersionInput) -> Version:
    require_service_version(i)

    resp = client.get(versioned_path(i.service_id, i.service_version))
    return decode_response(resp, Version)


def update_version(client: APIClient, i: UpdateVersionInput) -> Version:
    require_service_version(i)

    resp = client.put_json(versioned_path(i.service_id, i.service_version), encode_json(i))
    return decode_response(resp, Version)


def _lifecycle(client: APIClient, i: VersionedInput, action: str) -> Version:
    require_service_version(i)

    resp = client.put(versioned_path(i.service_id, i.service_version, action))
    return decode_response(resp, Version)


def activate_version(client: APIClient, i: ActivateVersionInput) -> Version:
    return _lifecycle(client, i, "activate")


def deactivate_version(client: APIClient, i: DeactivateVersionInput) -> Version:
    return _lifecycle(client, i, "deactivate")


def clone_version(client: APIClient, i: CloneVersionInput) -> Version:
    return _lifecycle(client, i, "clone")


def lock_version(client: APIClient, i: LockVersionInput) -> Version:
    return _lifecycle(client, i, "lock")


def validate_version(client: APIClient, i: ValidateVersionInput) -> tuple[bool, str]:
    """Checks a version's configuration; returns (valid, message)."""

    require_service_version(i)

    resp = client.get(versioned_path(i.service_id, i.service_version, "validate"))
    status = decode_response(resp, StatusResponse)
    return status.ok, status.msg
