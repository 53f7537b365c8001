"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import Client, build_user_agent
from core.config import DEFAULT_ENDPOINT, AppSettings, write_user_env_vars
from core.errors import HTTPError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# Anonymous endpoint: proves reachability without depending on the key.
CONNECTIVITY_PATH = "/public-ip-list"


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    try:
        with Client(settings) as client:
            response = client.get(CONNECTIVITY_PATH)
            response.close()
        return True, f"HTTP {response.status_code}"
    except HTTPError as exc:
        return False, f"HTTP {exc.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Fastly SDK Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.api_key:
        table.add_row("API key", "OK", "Sent in the Fastly-Key header")
    else:
        table.add_row("API key", "MISSING", "Set FASTLY_API_KEY or run `doctor setup`")
    table.add_row("Endpoint", "OK", settings.api_url)
    table.add_row("User agent", "OK", build_user_agent(settings))
    table.add_row(
        "Timeout",
        "OK",
        f"{settings.http_timeout_seconds}s" if settings.http_timeout_seconds else "none",
    )

    ok_http, detail_http = _check_api(settings)
    table.add_row("API connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not settings.api_key:
        _console.print("\n[yellow]Note:[/yellow] Most endpoints answer 401 without an API key.")


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    api_url = typer.prompt("API endpoint", default=DEFAULT_ENDPOINT, show_default=True).strip()
    api_key = typer.prompt("API key", hide_input=True, confirmation_prompt=False).strip()

    if not api_url.startswith(("http://", "https://")):
        raise typer.BadParameter("endpoint must be an http(s) URL")

    env_path = write_user_env_vars(
        {
            "FASTLY_API_URL": api_url,
            "FASTLY_API_KEY": api_key,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
