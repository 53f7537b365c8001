"""Scope of an NGWAF resource (workspace vs. account).

A scope is built per call by the caller and never mutated afterwards.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ScopeType(str, Enum):
    """Granularity at which an NGWAF resource is addressed."""

    WORKSPACE = "workspace"
    ACCOUNT = "account"


class Scope(BaseModel):
    """Where an NGWAF resource lives and which workspaces it applies to.

    Rules:
    - `workspace` requires exactly one workspace ID in `applies_to`.
    - `account` accepts several IDs or the `"*"` wildcard.
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(
        ...,
        description="Scope type: 'workspace' or 'account'.",
    )
    applies_to: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Workspace IDs (or '*') the resource applies to.",
    )

    @classmethod
    def workspace(cls, workspace_id: str) -> "Scope":
        return cls(type=ScopeType.WORKSPACE.value, applies_to=(workspace_id,))

    @classmethod
    def account(cls, *workspace_ids: str) -> "Scope":
        return cls(type=ScopeType.ACCOUNT.value, applies_to=workspace_ids or ("*",))
