"""service-bindings show — print one binding.

Values are hidden by default; bindings usually carry credentials.

Usage:
  service-bindings show my-db
  service-bindings show my-db --values --format yaml
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from service_bindings.binding import Binding
from service_bindings.bindings import find, from_path
from service_bindings.cli.errors import describe_error, err_binding_not_found
from service_bindings.config import load_config
from service_bindings.errors import BindingError

console = Console()


class OutputFormat(str, Enum):
    text = "text"
    yaml = "yaml"
    json = "json"


def show_cmd(
    name: Annotated[str, typer.Argument(help="Binding name (case-insensitive).")],
    root: Annotated[
        Path | None,
        typer.Option("--root", "-r", help="Binding root (default: $SERVICE_BINDING_ROOT or /bindings)."),
    ] = None,
    values: Annotated[
        bool,
        typer.Option("--values", help="Include values in the output."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format."),
    ] = OutputFormat.text,
) -> None:
    """Show the type, provider, and keys of one binding."""
    try:
        cfg = load_config(root)
        found = from_path(cfg.root)
    except BindingError as exc:
        console.print(describe_error(exc))
        raise typer.Exit(1)

    binding = find(found, name)
    if binding is None:
        console.print(err_binding_not_found(name, [b.name for b in found]))
        raise typer.Exit(1)

    data = binding.to_dict(include_values=values)

    if output_format is OutputFormat.json:
        typer.echo(json.dumps(data, indent=2))
    elif output_format is OutputFormat.yaml:
        typer.echo(yaml.safe_dump(data, sort_keys=False), nl=False)
    else:
        _show_panel(binding, data)


def _show_panel(binding: Binding, data: dict) -> None:
    provider = binding.get_provider()
    lines = [
        f"Type:      [bold]{escape(binding.get_type())}[/]",
        f"Provider:  {escape(provider) if provider else '[dim](none)[/]'}",
        f"Path:      {escape(str(data['path']))}",
        "",
        "Keys:",
    ]
    shown_values = data.get("values", {})
    for key in data["keys"]:
        if key in shown_values:
            lines.append(f"  {escape(key)} = {escape(shown_values[key])}")
        else:
            lines.append(f"  {escape(key)}")

    console.print(Panel("\n".join(lines), title=f"[bold]{escape(binding.name)}[/]", expand=False))
