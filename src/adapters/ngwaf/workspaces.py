"""NGWAF workspaces (account level, `/ngwaf/v1/workspaces`)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from adapters.http_client import decode_response, expect_no_content
from core.codec import encode_json, encode_query
from core.errors import MissingModeError, MissingNameError, MissingWorkspaceIDError
from core.interfaces import APIClient
from core.paths import to_safe_url


def _path(workspace_id: str = "") -> str:
    if workspace_id:
        return to_safe_url("ngwaf", "v1", "workspaces", workspace_id)
    return to_safe_url("ngwaf", "v1", "workspaces")


class AttackSignalThresholds(BaseModel):
    model_config = ConfigDict(extra="ignore")

    one_minute: int | None = None
    ten_minutes: int | None = None
    one_hour: int | None = None
    immediate: bool | None = None


class Workspace(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    workspace_id: str = Field(default="", alias="id")
    name: str = ""
    description: str = ""
    mode: str = ""
    attack_signal_thresholds: AttackSignalThresholds = Field(default_factory=AttackSignalThresholds)
    client_ip_headers: list[str] = Field(default_factory=list)
    default_blocking_response_code: int = 0
    ip_anonymization: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


class WorkspacesMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    limit: int = 0
    total: int = 0


class Workspaces(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[Workspace] = Field(default_factory=list)
    meta: WorkspacesMeta = Field(default_factory=WorkspacesMeta)


class CreateWorkspaceInput(BaseModel):
    name: str | None = None
    mode: str | None = Field(default=None, description="'block', 'log' or 'off'.")
    description: str | None = None
    attack_signal_thresholds: AttackSignalThresholds | None = None
    client_ip_headers: list[str] | None = None
    default_blocking_response_code: int | None = None
    ip_anonymization: str | None = None


class GetWorkspaceInput(BaseModel):
    workspace_id: str | None = None


class ListWorkspacesInput(BaseModel):
    limit: int | None = None
    page: int | None = None
    mode: str | None = None


class UpdateWorkspaceInput(BaseModel):
    workspace_id: str | None = Field(default=None, exclude=True)
    name: str | None = None
    mode: str | None = None
    description: str | None = None
    attack_signal_thresholds: AttackSignalThresholds | None = None
    client_ip_headers: list[str] | None = None
    default_blocking_response_code: int | None = None
    ip_anonymization: str | None = None


class DeleteWorkspaceInput(BaseModel):
    workspace_id: str | None = None


def create_workspace(client: APIClient, i: CreateWorkspaceInput) -> Workspace:
    if not i.name:
        raise MissingNameError()
    if not i.mode:
        raise MissingModeError()

    resp = client.post_json(_path(), encode_json(i))
    return decode_response(resp, Workspace)


def get_workspace(client: APIClient, i: GetWorkspaceInput) -> Workspace:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()

    resp = client.get(_path(i.workspace_id))
    return decode_response(resp, Workspace)


def list_workspaces(client: APIClient, i: ListWorkspacesInput | None = None) -> Workspaces:
    resp = client.get(_path(), params=encode_query(i))
    return decode_response(resp, Workspaces)


def update_workspace(client: APIClient, i: UpdateWorkspaceInput) -> Workspace:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()

    resp = client.patch_json(_path(i.workspace_id), encode_json(i))
    return decode_response(resp, Workspace)


def delete_workspace(client: APIClient, i: DeleteWorkspaceInput) -> None:
    if not i.workspace_id:
        raise MissingWorkspaceIDError()

    resp = client.delete(_path(i.workspace_id))
    expect_no_content(resp)
