"""SDK configuration.

Reads environment variables (pydantic-settings) with the `FASTLY_` prefix, from
the process environment, a project `.env` and the per-user `.env`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://api.fastly.com"
APP_DIR_NAME = "fastly-sdk"


def _platform_config_base() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA") or Path.home())
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")


def get_user_config_dir() -> Path:
    """Per-user directory holding the SDK's `.env` (APPDATA, Application Support or XDG)."""

    return _platform_config_base() / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    """`KEY=value` pairs; comments, blank lines and lines without `=` are skipped."""

    pairs: dict[str, str] = {}
    for line in map(str.strip, text.splitlines()):
        if line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if sep and key:
            pairs[key] = value.strip().strip("\"'")
    return pairs


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Merges non-empty `values` into the per-user `.env` and returns its path."""

    path = env_path or get_user_env_file()
    merged = _parse_env_lines(path.read_text(encoding="utf-8")) if path.is_file() else {}
    merged.update((key, value) for key, value in values.items() if value)

    path.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    path.write_text(f"# {APP_DIR_NAME} credentials\n{body}", encoding="utf-8")
    return path


class AppSettings(BaseSettings):
    """Central configuration of the API client."""

    model_config = SettingsConfigDict(
        env_prefix="FASTLY_",
        extra="ignore",
        case_sensitive=False,
        # Later files win: the per-user .env overrides the project one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="API token sent in the Fastly-Key header.",
    )
    api_url: str = Field(
        default=DEFAULT_ENDPOINT,
        min_length=8,
        description="Base URL of the management API.",
    )
    debug_mode: bool = Field(
        default=False,
        description="Dump requests/responses at DEBUG level (API key redacted).",
    )
    user_agent: str | None = Field(
        default=None,
        description="Custom User-Agent prepended to the library one.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout (seconds). Unset means no client-side timeout.",
    )
