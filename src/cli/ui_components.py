"""Rich UI components shared by the CLI commands."""

from __future__ import annotations

from types import ModuleType
from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Prints the welcome banner (skipped in non-interactive runs)."""

    title = Text("fastly-sdk", style="bold red")
    subtitle = Text("Services • Product enablement • Next-Gen WAF", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="red", padding=(1, 4)))


def build_products_table(products: Iterable[ModuleType]) -> Table:
    table = Table(title="Products")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    for module in products:
        table.add_row(module.PRODUCT_ID, module.PRODUCT_NAME)
    return table


def build_status_table(service_id: str) -> Table:
    """Empty enablement table; rows are (product, status, details)."""

    table = Table(title=f"Products on {service_id}")
    table.add_column("Product", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
