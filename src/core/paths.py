"""Construction of REST paths.

Every segment is percent-escaped on its own before joining, so an identifier
containing `/` can never be read as an extra path level.
"""

from __future__ import annotations

from urllib.parse import quote

from core.domain.scope import Scope, ScopeType
from core.errors import PathBuildError

NGWAF_PREFIX = ("ngwaf", "v1")


def to_safe_url(*segments: str) -> str:
    """Joins escaped path segments into an absolute path (`/a/b/c`)."""

    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)


def build_path(scope: Scope | None, collection: str, resource_id: str = "") -> str:
    """Builds an NGWAF path for `collection` (and optionally one resource) in `scope`.

    - workspace: /ngwaf/v1/workspaces/{workspace_id}/{collection}[/{resource_id}]
    - account:   /ngwaf/v1/{collection}[/{resource_id}]
    """

    if scope is None:
        raise PathBuildError("scope is required")

    if scope.type == ScopeType.WORKSPACE.value:
        if len(scope.applies_to) != 1 or not scope.applies_to[0]:
            raise PathBuildError("workspace scope requires exactly one workspace ID in applies_to")
        segments = [*NGWAF_PREFIX, "workspaces", scope.applies_to[0], collection]
    elif scope.type == ScopeType.ACCOUNT.value:
        segments = [*NGWAF_PREFIX, collection]
    else:
        raise PathBuildError(f"unsupported scope type: {scope.type}")

    if resource_id:
        segments.append(resource_id)
    return to_safe_url(*segments)
