"""Tests for core.paths."""

from __future__ import annotations

import pytest

from core.domain.scope import Scope
from core.errors import PathBuildError
from core.paths import build_path, to_safe_url


class TestToSafeURL:
    def test_joins_segments(self):
        assert to_safe_url("service", "SVC123", "version", "3", "acl") == "/service/SVC123/version/3/acl"

    def test_escapes_each_segment(self):
        assert to_safe_url("service", "a/b", "acl", "my acl") == "/service/a%2Fb/acl/my%20acl"

    def test_non_string_segments(self):
        assert to_safe_url("service", "x", "version", 7) == "/service/x/version/7"


class TestBuildPath:
    def test_workspace_collection(self):
        path = build_path(Scope.workspace("ws1"), "lists")
        assert path == "/ngwaf/v1/workspaces/ws1/lists"

    def test_workspace_resource(self):
        path = build_path(Scope.workspace("ws1"), "rules", "r42")
        assert path == "/ngwaf/v1/workspaces/ws1/rules/r42"

    def test_account_ignores_applies_to(self):
        scope = Scope(type="account", applies_to=("a", "b", "c"))
        assert build_path(scope, "signals") == "/ngwaf/v1/signals"
        assert build_path(Scope.account(), "signals", "s1") == "/ngwaf/v1/signals/s1"

    def test_missing_scope(self):
        with pytest.raises(PathBuildError, match="scope is required"):
            build_path(None, "lists")

    @pytest.mark.parametrize("applies_to", [(), ("ws1", "ws2"), ("",)])
    def test_workspace_requires_exactly_one_id(self, applies_to):
        with pytest.raises(PathBuildError, match="exactly one workspace ID"):
            build_path(Scope(type="workspace", applies_to=applies_to), "lists")

    def test_unsupported_scope_type(self):
        with pytest.raises(PathBuildError, match="unsupported scope type: org"):
            build_path(Scope(type="org", applies_to=("x",)), "lists")

    def test_ids_are_escaped(self):
        path = build_path(Scope.workspace("ws/1"), "lists", "id with space")
        assert path == "/ngwaf/v1/workspaces/ws%2F1/lists/id%20with%20space"
