"""Binding root resolution.

Priority (high → low):
  1. Explicit ``root_path`` argument  (CLI --root, or the caller)
  2. Environment variable ``SERVICE_BINDING_ROOT``
  3. Default ``/bindings``

The root must be a local path. Values that look like URLs are rejected.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from service_bindings.errors import ConfigError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SERVICE_BINDING_ROOT: str = "SERVICE_BINDING_ROOT"
DEFAULT_ROOT: Path = Path("/bindings")

_URL_PREFIXES: tuple[str, ...] = ("http://", "https://", "ftp://", "file://", "//")


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass
class BindingsConfig:
    """Resolved discovery settings.

    Attributes:
        root: Directory holding one subdirectory per binding.
        source: Where *root* came from: ``argument``, ``environment`` or ``default``.
    """

    root: Path = field(default_factory=lambda: DEFAULT_ROOT)
    source: str = "default"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def _validate_root(value: str, origin: str) -> None:
    if value.startswith(_URL_PREFIXES):
        raise ConfigError(
            f"Binding root from {origin} must be a local directory, not a URL: '{value}'"
        )


def load_config(
    root_path: Path | str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> BindingsConfig:
    """Resolve the binding root.

    Args:
        root_path: Explicit root; wins over the environment when given.
        environ: Environment to consult (defaults to ``os.environ``).
            An empty ``SERVICE_BINDING_ROOT`` counts as unset.

    Returns:
        A *BindingsConfig* naming the root and where it came from.

    Raises:
        ConfigError: If the chosen root is a URL.
    """
    if root_path is not None:
        _validate_root(str(root_path), "argument")
        return BindingsConfig(root=Path(root_path), source="argument")

    env = os.environ if environ is None else environ
    if value := env.get(SERVICE_BINDING_ROOT):
        _validate_root(value, f"${SERVICE_BINDING_ROOT}")
        return BindingsConfig(root=Path(value), source="environment")

    return BindingsConfig()
