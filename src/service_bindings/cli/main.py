"""service-bindings CLI entry point."""

from __future__ import annotations

import importlib.metadata
from typing import Annotated

import typer

from service_bindings.cli.list import list_cmd
from service_bindings.cli.show import show_cmd


def _installed_version() -> str:
    try:
        return importlib.metadata.version("service-bindings")
    except importlib.metadata.PackageNotFoundError:
        return "dev"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"service-bindings {_installed_version()}")
        raise typer.Exit()


app = typer.Typer(
    name="service-bindings",
    help=(
        "Inspect Service Binding projections.\n\n"
        "  service-bindings list  Tabulate bindings under the binding root.\n"
        "  service-bindings show  Show one binding's type, provider, and keys."
    ),
    add_completion=False,
)


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Inspect Service Binding projections."""


app.command("list")(list_cmd)
app.command("show")(show_cmd)


@app.command("version")
def version_cmd() -> None:
    """Show the installed service-bindings version."""
    typer.echo(f"service-bindings {_installed_version()}")


if __name__ == "__main__":
    app()
