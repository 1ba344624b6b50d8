"""Exceptions raised while reading Service Binding projections."""

from __future__ import annotations

from pathlib import Path


class BindingError(Exception):
    """Base class for every error raised by service_bindings."""


class BindingIOError(BindingError):
    """Raised when the binding root, a binding directory, or a key file cannot be read.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(message)
        self.path = Path(path)


class BindingEncodingError(BindingError, ValueError):
    """Raised when a value requested as text is not valid UTF-8."""

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message)
        self.key = key


class MissingTypeError(BindingError):
    """Raised when a binding does not declare its ``type``."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ConfigError(BindingError, ValueError):
    """Raised when the binding root configuration is invalid."""
