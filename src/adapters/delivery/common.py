"""Path and validation helpers shared by the delivery resources."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.errors import MissingServiceIDError, MissingServiceVersionError
from core.paths import to_safe_url


class VersionedInput(BaseModel):
    """Input addressed by service ID and configuration version.

    Both identifiers only shape the path; they are never serialized.
    """

    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)


class VersionedResource(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    service_id: str = ""
    service_version: int = Field(default=0, alias="version")


def require_service_version(i: VersionedInput) -> None:
    if not i.service_id:
        raise MissingServiceIDError()
    if not i.service_version:
        raise MissingServiceVersionError()


def versioned_path(service_id: str, service_version: int, *segments: str) -> str:
    """`/service/{id}/version/{n}/...`; empty trailing segments are dropped."""

    return to_safe_url(
        "service",
        service_id,
        "version",
        str(service_version),
        *(s for s in segments if s),
    )


def service_path(service_id: str, *segments: str) -> str:
    return to_safe_url("service", service_id, *(s for s in segments if s))
