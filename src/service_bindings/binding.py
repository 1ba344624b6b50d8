"""A single Service Binding: one projected directory of key → value entries.

Layout consumed (read-only)::

    <root>/<binding-name>/type        required
    <root>/<binding-name>/provider    optional
    <root>/<binding-name>/<key>       zero or more

Values are held as raw bytes. Text accessors decode UTF-8 on demand and strip
surrounding whitespace; ``get_as_bytes()`` returns the exact file content.
The reserved ``type`` and ``provider`` entries are decoded eagerly, so a
Binding that constructs successfully always has a usable type.
"""

from __future__ import annotations

import stat
import warnings
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from service_bindings.errors import BindingEncodingError, BindingIOError, MissingTypeError
from service_bindings.secret import is_valid_secret_key

PROVIDER: str = "provider"
TYPE: str = "type"


def _decode(key: str, raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BindingEncodingError(
            f"Value of '{key}' is not valid UTF-8: {exc.reason} at byte {exc.start}",
            key,
        ) from exc


class Binding:
    """Immutable view of one binding directory.

    Build instances with :meth:`from_path` (filesystem) or
    :meth:`from_mapping` (in memory).

    Raises:
        MissingTypeError: If *content* has no non-blank ``type`` entry.
        BindingEncodingError: If ``type`` or ``provider`` is not UTF-8.
    """

    def __init__(
        self,
        name: str,
        content: Mapping[str, bytes],
        path: Path | str | None = None,
    ) -> None:
        self._name = name
        self._path = Path(path) if path is not None else None
        self._content: Mapping[str, bytes] = MappingProxyType(dict(content))

        binding_type = self.get(TYPE)
        if not binding_type:
            where = f" at '{self._path}'" if self._path is not None else ""
            problem = "does not contain a type" if binding_type is None else "has a blank type"
            raise MissingTypeError(f"Binding '{name}'{where} {problem}", self._path)
        self._type = binding_type
        self._provider = self.get(PROVIDER)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_path(cls, path: Path | str) -> Binding:
        """Read every regular file directly inside *path* into a Binding.

        Symlinks to regular files are followed. Subdirectories are never
        recursed into. File names that are not valid Kubernetes Secret keys
        are skipped with a ``UserWarning``.

        Args:
            path: The binding directory.

        Returns:
            A Binding named after the directory, holding every regular file
            whose name is a valid Secret key. Files with invalid names are
            not part of the result.

        Raises:
            BindingIOError: If the directory cannot be listed or a file
                cannot be read (including files removed mid-scan).
            BindingEncodingError: If ``type`` or ``provider`` is not UTF-8.
            MissingTypeError: If no ``type`` file is present, or it is blank.
        """
        root = Path(path).absolute()
        try:
            entries = sorted(root.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise BindingIOError(
                f"Cannot list binding directory '{root}': {exc.strerror or exc}", root
            ) from exc

        content: dict[str, bytes] = {}
        for entry in entries:
            try:
                mode = entry.stat().st_mode
                if not stat.S_ISREG(mode):
                    continue
                if not is_valid_secret_key(entry.name):
                    warnings.warn(
                        f"Skipping '{entry}': '{entry.name}' is not a valid Secret key.",
                        UserWarning,
                        stacklevel=2,
                    )
                    continue
                content[entry.name] = entry.read_bytes()
            except OSError as exc:
                raise BindingIOError(
                    f"Cannot read binding entry '{entry}': {exc.strerror or exc}", entry
                ) from exc

        return cls(root.name, content, path=root)

    @classmethod
    def from_mapping(
        cls,
        name: str,
        content: Mapping[str, bytes | str],
        path: Path | str | None = None,
    ) -> Binding:
        """Build a Binding from an in-memory mapping; str values are UTF-8 encoded."""
        encoded = {
            k: v.encode("utf-8") if isinstance(v, str) else bytes(v)
            for k, v in content.items()
        }
        return cls(name, encoded, path=path)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Base name of the binding directory."""
        return self._name

    @property
    def path(self) -> Path | None:
        """Absolute location of the binding directory (None for in-memory bindings)."""
        return self._path

    @property
    def content(self) -> Mapping[str, bytes]:
        """Read-only mapping of every key to its raw value."""
        return self._content

    def get_as_bytes(self, key: str) -> bytes | None:
        """Return the exact raw value of *key*, or None if absent."""
        if not is_valid_secret_key(key):
            return None
        return self._content.get(key)

    def get(self, key: str) -> str | None:
        """Return the UTF-8 value of *key* with whitespace stripped, or None if absent.

        Raises:
            BindingEncodingError: If the stored value is not valid UTF-8.
        """
        raw = self.get_as_bytes(key)
        if raw is None:
            return None
        return _decode(key, raw).strip()

    def get_type(self) -> str:
        """Return the value of the ``type`` entry."""
        return self._type

    def get_provider(self) -> str | None:
        """Return the value of the ``provider`` entry, or None if absent."""
        return self._provider

    def keys(self) -> list[str]:
        """Return every key, sorted."""
        return sorted(self._content)

    def to_dict(self, include_values: bool = False) -> dict[str, Any]:
        """Plain-dict form used for CLI rendering.

        Values are only included when *include_values* is set; non-UTF-8
        bytes are rendered with backslash escapes rather than raising.
        """
        data: dict[str, Any] = {
            "name": self._name,
            "path": str(self._path) if self._path is not None else None,
            "type": self._type,
            "provider": self._provider,
            "keys": self.keys(),
        }
        if include_values:
            data["values"] = {
                k: self._content[k].decode("utf-8", errors="backslashreplace").strip()
                for k in self.keys()
            }
        return data

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return key in self._content

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._content)

    def __repr__(self) -> str:
        return f"Binding(name={self._name!r}, type={self._type!r}, provider={self._provider!r})"
