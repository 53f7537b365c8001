"""Tests for NGWAF rules."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from adapters.ngwaf import rules
from core.domain.conditions import GroupCondition, single
from core.domain.scope import Scope
from core.errors import (
    HTTPError,
    MissingConditionsError,
    MissingDescriptionError,
    MissingRuleIDError,
    MissingScopeError,
    MissingTypeError,
    PathBuildError,
    ResponseDecodeError,
)

WS = Scope.workspace("ws1")

RULE_BODY = {
    "id": "r1",
    "type": "request",
    "description": "block bad bots",
    "enabled": True,
    "group_operator": "all",
    "scope": {"type": "workspace", "applies_to": ["ws1"]},
    "conditions": [
        {"type": "single", "field": "ip", "operator": "equals", "value": "1.2.3.4"},
        {
            "type": "group",
            "group_operator": "any",
            "conditions": [
                {"type": "single", "field": "method", "operator": "equals", "value": "POST"},
                {
                    "type": "multival",
                    "field": "request_header",
                    "operator": "exists",
                    "group_operator": "all",
                    "conditions": [{"type": "single", "field": "name", "operator": "equals", "value": "x-bot"}],
                },
            ],
        },
    ],
    "actions": [{"type": "block"}],
    "created_at": "2025-01-01T00:00:00Z",
}


@pytest.mark.parametrize(
    ("kwargs", "error"),
    [
        ({}, MissingTypeError),
        ({"type": "request"}, MissingDescriptionError),
        ({"type": "request", "description": "d"}, MissingScopeError),
        ({"type": "request", "description": "d", "scope": WS}, MissingConditionsError),
    ],
)
def test_create_validation_order(client, api, kwargs, error):
    with pytest.raises(error):
        rules.create_rule(client, rules.CreateRuleInput(**kwargs))
    assert api.requests == []


def test_create(client, api):
    api.reply(200, RULE_BODY)

    out = rules.create_rule(
        client,
        rules.CreateRuleInput(
            type="request",
            description="block bad bots",
            scope=WS,
            conditions=[single("ip", "equals", "1.2.3.4")],
            actions=[rules.Action(type="block")],
            enabled=True,
        ),
    )

    assert api.last.method == "POST"
    assert api.last.url.path == "/ngwaf/v1/workspaces/ws1/rules"
    assert api.last_json() == {
        "type": "request",
        "description": "block bad bots",
        "scope": {"type": "workspace", "applies_to": ["ws1"]},
        "conditions": [{"type": "single", "field": "ip", "operator": "equals", "value": "1.2.3.4"}],
        "actions": [{"type": "block"}],
        "enabled": True,
    }
    assert out.rule_id == "r1"
    assert [c.type for c in out.conditions] == ["single", "group"]
    assert isinstance(out.conditions[1].fields, GroupCondition)


def test_create_accepts_raw_condition_dicts():
    i = rules.CreateRuleInput(
        type="request",
        description="d",
        scope=WS,
        conditions=[{"type": "single", "field": "path", "operator": "contains", "value": "/admin"}],
    )

    assert i.conditions[0].type == "single"


def test_create_rejects_unknown_condition():
    with pytest.raises(ValidationError, match="unknown condition type"):
        rules.CreateRuleInput(conditions=[{"type": "regex"}])


def test_get_account_scope(client, api):
    api.reply(200, {**RULE_BODY, "scope": {"type": "account", "applies_to": ["*"]}})

    out = rules.get_rule(client, rules.GetRuleInput(scope=Scope.account(), rule_id="r1"))

    assert api.last.url.path == "/ngwaf/v1/rules/r1"
    assert out.scope == Scope.account()


def test_get_unknown_condition_is_a_decode_error(client, api):
    api.reply(200, {**RULE_BODY, "conditions": [{"type": "mystery"}]})

    with pytest.raises(ResponseDecodeError):
        rules.get_rule(client, rules.GetRuleInput(scope=WS, rule_id="r1"))


def test_list_filters_as_query(client, api):
    api.reply(200, {"data": [RULE_BODY], "meta": {"limit": 10, "total": 1}})

    out = rules.list_rules(
        client,
        rules.ListRulesInput(scope=WS, action="block", enabled=True, limit=10, page=1, types="request,signal"),
    )

    assert api.last.url.path == "/ngwaf/v1/workspaces/ws1/rules"
    assert dict(api.last.url.params) == {
        "action": "block",
        "enabled": "true",
        "limit": "10",
        "page": "1",
        "types": "request,signal",
    }
    assert out.meta.total == 1
    assert out.data[0].rule_id == "r1"


def test_update_resubmits_fetched_conditions(client, api):
    api.reply(200, RULE_BODY).reply(200, RULE_BODY)
    fetched = rules.get_rule(client, rules.GetRuleInput(scope=WS, rule_id="r1"))

    rules.update_rule(
        client,
        rules.UpdateRuleInput(rule_id="r1", scope=WS, conditions=fetched.conditions, description="changed"),
    )

    assert api.last.method == "PATCH"
    assert api.last.url.path == "/ngwaf/v1/workspaces/ws1/rules/r1"
    sent = api.last_json()
    assert sent["conditions"] == RULE_BODY["conditions"]
    assert sent["description"] == "changed"
    assert "rule_id" not in sent


@pytest.mark.parametrize(
    ("kwargs", "error"),
    [
        ({}, MissingRuleIDError),
        ({"rule_id": "r1"}, MissingScopeError),
    ],
)
def test_update_validation_order(client, kwargs, error):
    with pytest.raises(error):
        rules.update_rule(client, rules.UpdateRuleInput(**kwargs))


@pytest.mark.parametrize(
    ("call", "input_cls"),
    [
        (rules.get_rule, rules.GetRuleInput),
        (rules.delete_rule, rules.DeleteRuleInput),
    ],
)
@pytest.mark.parametrize(
    ("kwargs", "error"),
    [
        ({}, MissingRuleIDError),
        ({"scope": WS}, MissingRuleIDError),
        ({"rule_id": "r1"}, MissingScopeError),
    ],
)
def test_get_and_delete_check_id_before_scope(client, api, call, input_cls, kwargs, error):
    with pytest.raises(error):
        call(client, input_cls(**kwargs))
    assert api.requests == []


def test_bad_workspace_scope_fails_before_call(client, api):
    with pytest.raises(PathBuildError):
        rules.get_rule(client, rules.GetRuleInput(scope=Scope(type="workspace"), rule_id="r1"))
    assert api.requests == []


def test_delete_requires_no_content(client, api):
    api.reply(204)
    rules.delete_rule(client, rules.DeleteRuleInput(scope=WS, rule_id="r1"))
    assert api.last.method == "DELETE"

    api.reply(200, {"status": "ok"})
    with pytest.raises(HTTPError):
        rules.delete_rule(client, rules.DeleteRuleInput(scope=WS, rule_id="r1"))
