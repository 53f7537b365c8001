"""Rule conditions: a tagged union discriminated by `type`.

Wire shapes:
- single:   {"type": "single", "field", "operator", "value"}
- group:    {"type": "group", "group_operator", "conditions": [single | multival, ...]}
- multival: {"type": "multival", "field", "operator", "group_operator",
             "conditions": [single-shaped, ...]}

Decoding peeks at `type` only, then validates the element into exactly one
shape and keeps the tag next to the payload (`ConditionItem`). An unknown tag
fails the whole decode. Grouping is one level deep: a group may hold single
and multival children but not another group.
"""

from __future__ import annotations

from typing import Any, Iterable, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_serializer

from core.errors import ConditionDecodeError

SINGLE = "single"
GROUP = "group"
MULTIVAL = "multival"


class SingleCondition(BaseModel):
    """Basic match of one request attribute against a value."""

    model_config = ConfigDict(extra="ignore")

    field: str = Field(..., description="Request attribute to evaluate (e.g. 'ip', 'path').")
    operator: str = Field(..., description="Comparison operator (e.g. 'equals', 'contains').")
    value: str = Field(default="", description="Value the field is compared with.")


class Condition(BaseModel):
    """Single-shaped child of a multival condition (keeps its own `type`)."""

    model_config = ConfigDict(extra="ignore")

    type: str = SINGLE
    field: str
    operator: str
    value: str = ""


class MultivalCondition(BaseModel):
    """Several values evaluated against one multi-valued field."""

    model_config = ConfigDict(extra="ignore")

    field: str
    operator: str
    group_operator: str
    conditions: list[Condition] = Field(default_factory=list)


class GroupCondition(BaseModel):
    """Nested conditions combined with `group_operator` ('any' or 'all')."""

    model_config = ConfigDict(extra="ignore")

    group_operator: str
    conditions: list[ConditionItem] = Field(default_factory=list)

    @field_validator("conditions", mode="before")
    @classmethod
    def _decode_children(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [_decode(item, nested=True) for item in value]


ConditionFields = Union[SingleCondition, GroupCondition, MultivalCondition]


class ConditionItem(BaseModel):
    """Tagged wrapper: the original tag plus the decoded payload."""

    type: str
    fields: ConditionFields

    @model_serializer
    def _to_wire(self) -> dict[str, Any]:
        return {"type": self.type, **self.fields.model_dump()}


GroupCondition.model_rebuild()
ConditionItem.model_rebuild()

_SHAPES: dict[str, type[BaseModel]] = {
    SINGLE: SingleCondition,
    GROUP: GroupCondition,
    MULTIVAL: MultivalCondition,
}
_NESTED_SHAPES = {tag: shape for tag, shape in _SHAPES.items() if tag != GROUP}


def _decode(data: Any, *, nested: bool) -> ConditionItem:
    if isinstance(data, ConditionItem):
        if nested and data.type == GROUP:
            raise ConditionDecodeError("condition type 'group' cannot be nested inside a group")
        return data
    if not isinstance(data, dict):
        raise ConditionDecodeError(f"condition must be an object, got {type(data).__name__}")

    tag = data.get("type")
    shapes = _NESTED_SHAPES if nested else _SHAPES
    shape = shapes.get(tag) if isinstance(tag, str) else None
    if shape is None:
        if nested and tag == GROUP:
            raise ConditionDecodeError("condition type 'group' cannot be nested inside a group")
        raise ConditionDecodeError(f"unknown condition type: {tag}")

    return ConditionItem(type=tag, fields=shape.model_validate(data))


def decode_condition(data: Any) -> ConditionItem:
    """Decodes one top-level condition element."""

    try:
        return _decode(data, nested=False)
    except ValidationError as exc:
        raise ConditionDecodeError(str(exc)) from exc


def decode_conditions(items: Iterable[Any]) -> list[ConditionItem]:
    """Decodes a list of condition elements; any bad element fails the whole list."""

    return [decode_condition(item) for item in items]


def single(field: str, operator: str, value: str) -> ConditionItem:
    return ConditionItem(type=SINGLE, fields=SingleCondition(field=field, operator=operator, value=value))


def group(group_operator: str, *conditions: ConditionItem) -> ConditionItem:
    children = [_decode(c, nested=True) for c in conditions]
    return ConditionItem(
        type=GROUP,
        fields=GroupCondition(group_operator=group_operator, conditions=children),
    )


def multival(field: str, operator: str, group_operator: str, *conditions: Condition) -> ConditionItem:
    return ConditionItem(
        type=MULTIVAL,
        fields=MultivalCondition(
            field=field,
            operator=operator,
            group_operator=group_operator,
            conditions=list(conditions),
        ),
    )
