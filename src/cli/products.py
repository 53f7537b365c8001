"""Product enablement commands."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from adapters.http_client import Client
from adapters.products import PRODUCTS, ngwaf
from cli.ui_components import build_products_table, build_status_table
from core.config import AppSettings
from core.errors import FieldError, HTTPError

app = typer.Typer(no_args_is_help=True, help="Enable, disable and inspect products on a service.")

_console = Console()
logger = logging.getLogger(__name__)


def _module(product: str):
    module = PRODUCTS.get(product)
    if module is None:
        raise typer.BadParameter(f"unknown product '{product}' (see `products list`)")
    return module


def _build_client() -> Client:
    return Client(AppSettings())


def _fail(exc: Exception) -> None:
    _console.print(f"[red]Error:[/red] {exc}")
    raise typer.Exit(code=1) from exc


@app.command(name="list")
def list_products() -> None:
    """List the products known to the SDK."""

    _console.print(build_products_table(PRODUCTS.values()))


@app.command()
def status(
    service_id: str = typer.Argument(..., help="Service ID."),
    product: Optional[str] = typer.Option(None, "--product", "-p", help="Only check this product."),
) -> None:
    """Show which products are enabled on a service."""

    modules = [_module(product)] if product else list(PRODUCTS.values())
    table = build_status_table(service_id)

    with _build_client() as client:
        for module in modules:
            try:
                output = module.get(client, service_id)
            except HTTPError as exc:
                if not exc.is_not_found():
                    _fail(exc)
                table.add_row(module.PRODUCT_ID, "disabled", "")
                continue
            logger.debug("product %s enabled on %s", output.product_id, output.service_id)
            table.add_row(module.PRODUCT_ID, "[green]enabled[/green]", output.service_id)

    _console.print(table)


@app.command()
def enable(
    product: str = typer.Argument(..., help="Product ID (see `products list`)."),
    service_id: str = typer.Argument(..., help="Service ID."),
    workspace_id: str = typer.Option("", "--workspace-id", help="NGWAF workspace to link (ngwaf only)."),
) -> None:
    """Enable a product on a service."""

    module = _module(product)
    with _build_client() as client:
        try:
            if module is ngwaf:
                output = ngwaf.enable(client, service_id, ngwaf.EnableInput(workspace_id=workspace_id))
            else:
                output = module.enable(client, service_id)
        except (FieldError, HTTPError) as exc:
            _fail(exc)

    _console.print(f"[green]Enabled[/green] {output.product_id} on {output.service_id}")


@app.command()
def disable(
    product: str = typer.Argument(..., help="Product ID (see `products list`)."),
    service_id: str = typer.Argument(..., help="Service ID."),
) -> None:
    """Disable a product on a service."""

    module = _module(product)
    with _build_client() as client:
        try:
            module.disable(client, service_id)
        except (FieldError, HTTPError) as exc:
            _fail(exc)

    _console.print(f"[green]Disabled[/green] {module.PRODUCT_ID} on {service_id}")
