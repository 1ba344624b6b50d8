"""service-bindings list — tabulate discovered bindings.

Usage:
  service-bindings list
  service-bindings list --root ./bindings --type postgresql
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from service_bindings.bindings import filter as filter_bindings
from service_bindings.bindings import from_path
from service_bindings.cli.errors import describe_error, warn_no_bindings
from service_bindings.config import load_config
from service_bindings.errors import BindingError

console = Console()


def list_cmd(
    root: Annotated[
        Path | None,
        typer.Option("--root", "-r", help="Binding root (default: $SERVICE_BINDING_ROOT or /bindings)."),
    ] = None,
    binding_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Only show bindings of this type (case-sensitive)."),
    ] = None,
    provider: Annotated[
        str | None,
        typer.Option("--provider", "-p", help="Only show bindings from this provider (case-sensitive)."),
    ] = None,
) -> None:
    """List the bindings projected under the binding root."""
    try:
        cfg = load_config(root)
        found = from_path(cfg.root)
    except BindingError as exc:
        console.print(describe_error(exc))
        raise typer.Exit(1)

    if binding_type is not None or provider is not None:
        found = filter_bindings(found, binding_type, provider)

    if not found:
        console.print(warn_no_bindings(cfg.root))
        raise typer.Exit(0)

    table = Table(title=f"Bindings in {escape(str(cfg.root))}", show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Provider")
    table.add_column("Keys", style="dim")

    for b in found:
        table.add_row(
            escape(b.name),
            escape(b.get_type()),
            escape(b.get_provider() or "—"),
            escape(", ".join(k for k in b.keys() if k not in ("type", "provider"))),
        )

    console.print(table)
    console.print(f"[dim]{len(found)} binding(s)[/]")
