"""Binding discovery and selection.

``from_path()`` is the pure core: it scans an explicit root. The environment
lookup lives in ``from_service_binding_root()`` via ``config.load_config()``.
"""

from __future__ import annotations

import stat
from collections.abc import Iterable
from pathlib import Path

from service_bindings.binding import Binding
from service_bindings.config import load_config
from service_bindings.errors import BindingIOError


def from_path(root: Path | str) -> list[Binding]:
    """Return one Binding per immediate subdirectory of *root*.

    A missing root yields an empty list. Entries are sorted by name so the
    result does not depend on filesystem enumeration order. Non-directory
    entries (including dangling symlinks) and Kubernetes projection
    internals (names starting with ``..``) are ignored.

    Raises:
        BindingIOError: If *root* exists but is not a readable directory, or
            any binding directory cannot be read.
        BindingEncodingError: If a binding's ``type`` or ``provider`` is not UTF-8.
        MissingTypeError: If any binding lacks a ``type``. Partial results
            are never returned.
    """
    root = Path(root)
    try:
        mode = root.stat().st_mode
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise BindingIOError(
            f"Cannot access binding root '{root}': {exc.strerror or exc}", root
        ) from exc

    if not stat.S_ISDIR(mode):
        raise BindingIOError(f"Binding root '{root}' is not a directory", root)

    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise BindingIOError(
            f"Cannot list binding root '{root}': {exc.strerror or exc}", root
        ) from exc

    bindings: list[Binding] = []
    for entry in entries:
        if entry.name.startswith(".."):
            continue
        try:
            is_dir = stat.S_ISDIR(entry.stat().st_mode)
        except FileNotFoundError:
            # Dangling symlink or entry removed mid-scan: not a directory.
            continue
        except OSError as exc:
            raise BindingIOError(
                f"Cannot access binding '{entry}': {exc.strerror or exc}", entry
            ) from exc
        if is_dir:
            bindings.append(Binding.from_path(entry))
    return bindings


def from_service_binding_root(root_path: Path | str | None = None) -> list[Binding]:
    """Discover bindings under ``$SERVICE_BINDING_ROOT`` (default ``/bindings``).

    Args:
        root_path: Explicit root overriding the environment.
    """
    return from_path(load_config(root_path).root)


def filter(
    bindings: Iterable[Binding],
    binding_type: str | None,
    provider: str | None = None,
) -> list[Binding]:
    """Return the bindings matching *binding_type* and, if given, *provider*.

    Comparisons are exact and case-sensitive. ``None`` disables that check;
    a binding without a provider never matches a non-None *provider*.
    Input order is preserved.
    """
    return [
        b
        for b in bindings
        if (binding_type is None or b.get_type() == binding_type)
        and (provider is None or b.get_provider() == provider)
    ]


def find(bindings: Iterable[Binding], name: str) -> Binding | None:
    """Return the first binding named *name* (case-insensitive), or None."""
    wanted = name.casefold()
    for b in bindings:
        if b.name.casefold() == wanted:
            return b
    return None
