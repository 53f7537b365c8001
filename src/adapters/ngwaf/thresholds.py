"""NGWAF signal thresholds. Thresholds exist only inside a workspace."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from adapters.http_client import decode_response, expect_no_content
from core.codec import encode_json
from core.errors import (
    MissingActionError,
    MissingIntervalError,
    MissingLimitError,
    MissingNameError,
    MissingSignalError,
    MissingThresholdIDError,
    MissingWorkspaceIDError,
)
from core.interfaces import APIClient
from core.paths import to_safe_url


def _path(workspace_id: str, threshold_id: str = "") -> str:
    segments = ["ngwaf", "v1", "workspaces", workspace_id, "thresholds"]
    if threshold_id:
        segments.append(threshold_id)
    return to_safe_url(*segments)


class Threshold(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    threshold_id: str = Field(default="", alias="id")
    name: str = ""
    action: str = ""
    signal: str = ""
    limit: int = 0
    interval: int = 0
    duration: int = 0
    enabled: bool = False
    dont_notify: bool = False
    created_at: datetime | None = None


class ThresholdsMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    limit: int = 0
    total: int = 0


class Thresholds(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[Threshold] = Field(default_factory=list)
    meta: ThresholdsMeta = Field(default_factory=ThresholdsMeta)


class CreateThresholdInput(BaseModel):
    workspace_id: str | None = Field(default=None, exclude=True)
    name: str | None = None
    action: str | None = Field(default=None, description="'block' or 'log'.")
    limit: int | None = None
    interval: int | None = Field(default=None, description="Seconds: 60, 600 or 3600.")
    signal: str | None = None
    duration: int | None = None
    enabled: bool | None = None
    dont_notify: bool | None = None


class GetThresholdInput(BaseModel):
    workspace_id: str | None = None
    threshold_id: str | None = None


class ListThresholdsInput(BaseModel):
    workspace_id: str | None = None


class UpdateThresholdInput(BaseModel):
    workspace_id: str | None = Field(default=None, exclude=True)
    threshold_id: str | None = Field(default=None, exclude=True)
    name: str | None = None
    action: str | None = None
    limit: int | None = None
    interval: int | None = None
    signal: str | None = None
    duration: int | None = None
    enabled: bool | None = None
    dont_notify: bool | None = None


class DeleteThresholdInput(BaseModel):
    workspace_id: str | None = None
    threshold_id: str | None = None


def create_threshold(client: APIClient, i: CreateThresholdInput) -> Threshold:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()
    if not i.name:
        raise MissingNameError()
    if not i.action:
        raise MissingActionError()
    if i.limit is None:
        raise MissingLimitError()
    if i.interval is None:
        raise MissingIntervalError()
    if not i.signal:
        raise MissingSignalError()

    resp = client.post_json(_path(i.workspace_id), encode_json(i))
    return decode_response(resp, Threshold)


def get_threshold(client: APIClient, i: GetThresholdInput) -> Threshold:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()
    if not i.threshold_id:
        raise MissingThresholdIDError()

    resp = client.get(_path(i.workspace_id, i.threshold_id))
    return decode_response(resp, Threshold)


def list_thresholds(client: APIClient, i: ListThresholdsInput) -> Thresholds:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()

    resp = client.get(_path(i.workspace_id))
    return decode_response(resp, Thresholds)


def update_threshold(client: APIClient, i: UpdateThresholdInput) -> Threshold:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()
    if not i.threshold_id:
        raise MissingThresholdIDError()
    if not i.action:
        raise MissingActionError()

    resp = client.patch_json(_path(i.workspace_id, i.threshold_id), encode_json(i))
    return decode_response(resp, Threshold)


def delete_threshold(client: APIClient, i: DeleteThresholdInput) -> None:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()
    if not i.threshold_id:
        raise MissingThresholdIDError()

    resp = client.delete(_path(i.workspace_id, i.threshold_id))
    expect_no_content(resp)
