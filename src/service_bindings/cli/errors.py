"""Actionable CLI error messages.

Every error shown to the user states what went wrong and what to do next.

Usage:
    from service_bindings.cli.errors import err_binding_not_found
    console.print(err_binding_not_found("db", ["cache"]))
    raise typer.Exit(1)
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from service_bindings.config import SERVICE_BINDING_ROOT
from service_bindings.errors import (
    BindingEncodingError,
    BindingError,
    BindingIOError,
    ConfigError,
    MissingTypeError,
)

# Names, paths and exception text come from the filesystem and are escaped
# before being embedded in rich markup.


def err_binding_not_found(name: str, available: list[str]) -> str:
    """No binding named *name* under the root."""
    available_list = escape(", ".join(available)) if available else "(none)"
    return (
        f"[red]Error:[/] No binding named '{escape(name)}'.\n"
        f"  Available bindings: {available_list}\n"
        "  Run:  service-bindings list"
    )


def err_missing_type(path: Path | None) -> str:
    """A binding directory has no type file."""
    target = escape(str(path)) if path is not None else "<binding>"
    return (
        "[red]Error:[/] Binding does not declare a type.\n"
        f"  Directory: {target}\n"
        f"  Add a 'type' file, e.g.  echo postgresql > {target}/type"
    )


def err_unreadable(path: Path, detail: str) -> str:
    """The root, a binding directory, or a key file could not be read."""
    return (
        f"[red]Error:[/] Cannot read '{escape(str(path))}'.\n"
        f"  {escape(detail)}\n"
        "  Check that the path exists and is readable by the current user."
    )


def err_not_utf8(key: str) -> str:
    """A reserved value is not valid UTF-8."""
    return (
        f"[red]Error:[/] Value of '{escape(key)}' is not valid UTF-8.\n"
        f"  Rewrite the '{escape(key)}' file as UTF-8 text."
    )


def err_bad_root(detail: str) -> str:
    """Invalid binding root configuration."""
    return (
        f"[red]Error:[/] {escape(detail)}\n"
        f"  Set:  export {SERVICE_BINDING_ROOT}=/path/to/bindings  or pass --root"
    )


def describe_error(exc: BindingError) -> str:
    """Map a library exception to its CLI message."""
    if isinstance(exc, MissingTypeError):
        return err_missing_type(exc.path)
    if isinstance(exc, BindingIOError):
        return err_unreadable(exc.path, str(exc))
    if isinstance(exc, BindingEncodingError):
        return err_not_utf8(exc.key)
    if isinstance(exc, ConfigError):
        return err_bad_root(str(exc))
    return f"[red]Error:[/] {escape(str(exc))}"


def warn_no_bindings(root: Path) -> str:
    """Nothing found under the root (not an error)."""
    return (
        f"[yellow]No bindings found under '{escape(str(root))}'.[/]\n"
        f"  Set:  export {SERVICE_BINDING_ROOT}=/path/to/bindings  or pass --root"
    )
