"""NGWAF rules (workspace or account scope).

Rule conditions are the tagged union of `core.domain.conditions`; a fetched
rule's `conditions` can be passed back unchanged to `update_rule`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from adapters.http_client import decode_response, expect_no_content
from core.codec import encode_json, encode_query
from core.domain.conditions import ConditionItem, decode_conditions
from core.domain.scope import Scope
from core.errors import (
    MissingConditionsError,
    MissingDescriptionError,
    MissingRuleIDError,
    MissingScopeError,
    MissingTypeError,
)
from core.interfaces import APIClient
from core.paths import build_path

COLLECTION = "rules"


def _conditions_before(value: Any) -> Any:
    if isinstance(value, list):
        return decode_conditions(value)
    return value


class Action(BaseModel):
    """Action executed when the rule matches."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(..., description="Action type (e.g. 'block', 'redirect', 'exclude_signal').")
    allow_interactive: bool | None = Field(
        default=None,
        description="Only for 'browser_challenge'.",
    )
    deception_type: str | None = None
    redirect_url: str | None = None
    response_code: int | None = None
    signal: str | None = Field(default=None, description="Only for 'exclude_signal'.")


class ClientIdentifier(BaseModel):
    model_config = ConfigDict(extra="ignore")

    key: str = ""
    name: str = ""
    type: str = ""


class RateLimit(BaseModel):
    model_config = ConfigDict(extra="ignore")

    client_identifiers: list[ClientIdentifier] = Field(default_factory=list)
    duration: int = 0
    interval: int = 0
    signal: str = ""
    threshold: int = 0


class Rule(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    rule_id: str = Field(default="", alias="id")
    type: str = ""
    scope: Scope | None = None
    enabled: bool = False
    description: str = ""
    group_operator: str = ""
    request_logging: str = ""
    conditions: list[ConditionItem] = Field(default_factory=list)
    actions: list[Action] = Field(default_factory=list)
    rate_limit: RateLimit | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("conditions", mode="before")
    @classmethod
    def _decode_conditions(cls, value: Any) -> Any:
        return _conditions_before(value)


class RulesMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    limit: int = 0
    total: int = 0


class Rules(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[Rule] = Field(default_factory=list)
    meta: RulesMeta = Field(default_factory=RulesMeta)


class CreateRuleInput(BaseModel):
    type: str | None = Field(default=None, description="Rule category (e.g. 'request', 'rate_limit').")
    description: str | None = None
    scope: Scope | None = None
    conditions: list[ConditionItem] = Field(default_factory=list)
    actions: list[Action] = Field(default_factory=list)
    enabled: bool | None = None
    expires_at: datetime | None = None
    group_operator: str | None = Field(default=None, description="'any' or 'all'.")
    request_logging: str | None = Field(default=None, description="'sampled' or 'none'.")
    rate_limit: RateLimit | None = None

    @field_validator("conditions", mode="before")
    @classmethod
    def _decode_conditions(cls, value: Any) -> Any:
        return _conditions_before(value)


class UpdateRuleInput(BaseModel):
    rule_id: str | None = Field(default=None, exclude=True)
    type: str | None = None
    description: str | None = None
    scope: Scope | None = None
    conditions: list[ConditionItem] | None = None
    actions: list[Action] | None = None
    enabled: bool | None = None
    expires_at: datetime | None = None
    group_operator: str | None = None
    request_logging: str | None = None
    rate_limit: RateLimit | None = None

    @field_validator("conditions", mode="before")
    @classmethod
    def _decode_conditions(cls, value: Any) -> Any:
        return _conditions_before(value)


class GetRuleInput(BaseModel):
    rule_id: str | None = None
    scope: Scope | None = None


class DeleteRuleInput(BaseModel):
    rule_id: str | None = None
    scope: Scope | None = None


class ListRulesInput(BaseModel):
    scope: Scope | None = Field(default=None, exclude=True)
    action: str | None = None
    enabled: bool | None = None
    limit: int | None = None
    page: int | None = None
    types: str | None = Field(default=None, description="Comma separated rule types (union).")


def create_rule(client: APIClient, i: CreateRuleInput) -> Rule:
    if not i.type:
        raise MissingTypeError()
    if not i.description:
        raise MissingDescriptionError()
    if i.scope is None:
        raise MissingScopeError()
    if not i.conditions:
        raise MissingConditionsError()

    path = build_path(i.scope, COLLECTION)
    resp = client.post_json(path, encode_json(i))
    return decode_response(resp, Rule)


def get_rule(client: APIClient, i: GetRuleInput) -> Rule:
    if not i.rule_id:
        raise MissingRuleIDError()
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION, i.rule_id)
    resp = client.get(path)
    return decode_response(resp, Rule)


def list_rules(client: APIClient, i: ListRulesInput) -> Rules:
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION)
    resp = client.get(path, params=encode_query(i))
    return decode_response(resp, Rules)


def update_rule(client: APIClient, i: UpdateRuleInput) -> Rule:
    if not i.rule_id:
        raise MissingRuleIDError()
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION, i.rule_id)
    resp = client.patch_json(path, encode_json(i))
    return decode_response(resp, Rule)


def delete_rule(client: APIClient, i: DeleteRuleInput) -> None:
    if not i.rule_id:
        raise MissingRuleIDError()
    if i.scope is None:
        raise MissingScopeError()

    path = build_path(i.scope, COLLECTION, i.rule_id)
    resp = client.delete(path)
    expect_no_content(resp)
