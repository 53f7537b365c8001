"""Tests for the rule condition decoder."""

from __future__ import annotations

import pytest

from core.domain.conditions import (
    Condition,
    ConditionItem,
    GroupCondition,
    MultivalCondition,
    SingleCondition,
    decode_condition,
    decode_conditions,
    group,
    multival,
    single,
)
from core.errors import ConditionDecodeError

SINGLE = {"type": "single", "field": "ip", "operator": "equals", "value": "127.0.0.1"}
MULTIVAL = {
    "type": "multival",
    "field": "request_header",
    "operator": "exists",
    "group_operator": "all",
    "conditions": [
        {"type": "single", "field": "name", "operator": "equals", "value": "x-api-key"},
    ],
}
GROUP = {
    "type": "group",
    "group_operator": "any",
    "conditions": [
        {"type": "single", "field": "method", "operator": "equals", "value": "POST"},
        MULTIVAL,
    ],
}


def test_single_decodes():
    item = decode_condition(SINGLE)

    assert item.type == "single"
    assert isinstance(item.fields, SingleCondition)
    assert item.fields.value == "127.0.0.1"


def test_multival_decodes():
    item = decode_condition(MULTIVAL)

    assert item.type == "multival"
    assert isinstance(item.fields, MultivalCondition)
    assert item.fields.conditions == [
        Condition(type="single", field="name", operator="equals", value="x-api-key")
    ]


def test_group_decodes_nested_children():
    item = decode_condition(GROUP)

    assert item.type == "group"
    assert isinstance(item.fields, GroupCondition)
    children = item.fields.conditions
    assert [c.type for c in children] == ["single", "multival"]
    assert isinstance(children[1].fields, MultivalCondition)


@pytest.mark.parametrize("data", [SINGLE, MULTIVAL, GROUP])
def test_round_trip(data):
    item = decode_condition(data)
    again = decode_condition(item.model_dump())

    assert again.type == item.type
    assert again.fields == item.fields


def test_wire_shape_keeps_tag_inline():
    assert single("ip", "equals", "1.2.3.4").model_dump() == {
        "type": "single",
        "field": "ip",
        "operator": "equals",
        "value": "1.2.3.4",
    }


def test_unknown_tag_fails():
    with pytest.raises(ConditionDecodeError, match="unknown condition type: regex"):
        decode_condition({"type": "regex", "field": "path"})


def test_missing_tag_fails():
    with pytest.raises(ConditionDecodeError, match="unknown condition type"):
        decode_condition({"field": "path", "operator": "equals"})


def test_unknown_tag_fails_whole_list():
    with pytest.raises(ConditionDecodeError):
        decode_conditions([SINGLE, {"type": "bogus"}])


def test_group_inside_group_is_rejected():
    nested = {"type": "group", "group_operator": "all", "conditions": [GROUP]}

    with pytest.raises(ConditionDecodeError, match="cannot be nested"):
        decode_condition(nested)


def test_group_builder_rejects_nested_group():
    with pytest.raises(ConditionDecodeError, match="cannot be nested"):
        group("all", group("any", single("ip", "equals", "1.2.3.4")))


def test_invalid_payload_is_a_decode_error():
    with pytest.raises(ConditionDecodeError):
        decode_condition({"type": "single", "field": "ip"})


def test_builders():
    item = group(
        "all",
        single("path", "contains", "/admin"),
        multival("query_parameter", "exists", "any", Condition(field="name", operator="equals", value="debug")),
    )

    assert isinstance(item, ConditionItem)
    assert decode_condition(item.model_dump()) == item
