"""Tests for core.config."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import DEFAULT_ENDPOINT, AppSettings, _parse_env_lines, get_user_env_file, write_user_env_vars


def test_defaults():
    settings = AppSettings(_env_file=None)

    assert settings.api_url == DEFAULT_ENDPOINT
    assert settings.debug_mode is False
    assert settings.http_timeout_seconds is None


def test_reads_prefixed_env(monkeypatch):
    monkeypatch.setenv("FASTLY_API_KEY", "from-env")
    monkeypatch.setenv("FASTLY_DEBUG_MODE", "true")
    monkeypatch.setenv("FASTLY_HTTP_TIMEOUT_SECONDS", "2.5")

    settings = AppSettings(_env_file=None)

    assert settings.api_key == "from-env"
    assert settings.debug_mode is True
    assert settings.http_timeout_seconds == 2.5


def test_reads_env_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text("FASTLY_API_URL=https://api.example.test\nFASTLY_USER_AGENT=tool/2\n", encoding="utf-8")

    settings = AppSettings(_env_file=env)

    assert settings.api_url == "https://api.example.test"
    assert settings.user_agent == "tool/2"


def test_user_env_file_overrides_project_env(tmp_path):
    project = tmp_path / "project.env"
    user = tmp_path / "user.env"
    project.write_text("FASTLY_API_URL=https://project.test\nFASTLY_USER_AGENT=proj/1\n", encoding="utf-8")
    user.write_text("FASTLY_API_URL=https://user.test\n", encoding="utf-8")

    assert AppSettings.model_config["env_file"] == (".env", str(get_user_env_file()))
    settings = AppSettings(_env_file=(project, user))

    assert settings.api_url == "https://user.test"
    assert settings.user_agent == "proj/1"


def test_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, http_timeout_seconds=0)


def test_write_user_env_vars_merges(tmp_path):
    path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"FASTLY_API_KEY": "one", "FASTLY_API_URL": "https://a.test"}, env_path=path)

    write_user_env_vars({"FASTLY_API_KEY": "two", "FASTLY_USER_AGENT": ""}, env_path=path)

    assert _parse_env_lines(path.read_text(encoding="utf-8")) == {
        "FASTLY_API_KEY": "two",
        "FASTLY_API_URL": "https://a.test",
    }


def test_parse_env_lines_ignores_noise():
    text = "# comment\n\nNOEQUALS\nA='1'\n B = \"two\" \n"

    assert _parse_env_lines(text) == {"A": "1", "B": "two"}
