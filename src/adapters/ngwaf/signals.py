"""NGWAF custom signals."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from adapters.http_client import decode_response, expect_no_content
from core.codec import encode_json
from core.domain.scope import Scope
from core.errors import (
    MissingDescriptionError,
    MissingNameError,
    MissingScopeError,
    MissingSignalIDError,
)
from core.interfaces import APIClient
from core.paths import build_path

COLLECTION = "signals"


class Signal(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    signal_id: str = Field(default="", alias="id")
    name: str = ""
    description: str = ""
    reference_id: str = ""
    scope: Scope | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SignalsMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    limit: int = 0
    total: int = 0


class Signals(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[Signal] = Field(default_factory=list)
    meta: SignalsMeta = Field(default_factory=SignalsMeta)


class CreateSignalInput(BaseModel):
    name: str | None = None
    description: str | None = None
    scope: Scope | None = Field(default=None, exclude=True)


class GetSignalInput(BaseModel):
    signal_id: str | None = None
    scope: Scope | None = None


class ListSignalsInput(BaseModel):
    scope: Scope | None = None


class UpdateSignalInput(BaseModel):
    signal_id: str | None = Field(default=None, exclude=True)
    scope: Scope | None = Field(default=None, exclude=True)
    description: str | None = None


class DeleteSignalInput(BaseModel):
    signal_id: str | None = None
    scope: Scope | None = None


def create_signal(client: APIClient, i: CreateSignalInput) -> Signal:
    if not i.name:
        raise MissingNameError()
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION)
    resp = client.post_json(path, encode_json(i))
    return decode_response(resp, Signal)


def get_signal(client: APIClient, i: GetSignalInput) -> Signal:
    if i.scope is None:
        raise MissingScopeError()
    if not i.signal_id:
        raise MissingSignalIDError()

    path = build_path(i.scope, COLLECTION, i.signal_id)
    resp = client.get(path)
    return decode_response(resp, Signal)


def list_signals(client: APIClient, i: ListSignalsInput) -> Signals:
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION)
    resp = client.get(path)
    return decode_response(resp, Signals)


def update_signal(client: APIClient, i: UpdateSignalInput) -> Signal:
    """Only the description of a signal can change."""

    if not i.signal_id:
        raise MissingSignalIDError()
    if i.scope is None:
        raise MissingScopeError()
    if i.description is None:
        raise MissingDescriptionError()

    path = build_path(i.scope, COLLECTION, i.signal_id)
    resp = client.patch_json(path, encode_json(i))
    return decode_response(resp, Signal)


def delete_signal(client: APIClient, i: DeleteSignalInput) -> None:
    if not i.signal_id:
        raise MissingSignalIDError()
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION, i.signal_id)
    resp = client.delete(path)
    expect_no_content(resp)
