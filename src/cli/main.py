"""Typer application: `fastly-sdk`."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli import doctor, products
from cli.ui_components import print_banner

app = typer.Typer(
    no_args_is_help=True,
    help="Command line companion of the Fastly management API SDK.",
)
app.add_typer(doctor.app, name="doctor")
app.add_typer(products.app, name="products")

_console = Console()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # httpx logs each request at INFO.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP traffic at DEBUG level."),
) -> None:
    configure_logging(verbose)
    if _console.is_terminal:
        print_banner(_console)


def run() -> None:
    app()
