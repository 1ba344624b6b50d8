"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

MakeBinding = Callable[..., Path]


def _write_binding(root: Path, name: str, entries: dict[str, str | bytes]) -> Path:
    directory = root / name
    directory.mkdir(parents=True, exist_ok=True)
    for key, value in entries.items():
        target = directory / key
        if isinstance(value, bytes):
            target.write_bytes(value)
        else:
            target.write_text(value, encoding="utf-8")
    return directory


@pytest.fixture
def make_binding() -> MakeBinding:
    """Return a helper that writes ``root/name/<key>`` files and returns the directory."""
    return _write_binding


@pytest.fixture
def binding_root(tmp_path: Path) -> Path:
    """Binding root with a postgresql and a mysql binding."""
    root = tmp_path / "bindings"
    root.mkdir()
    _write_binding(
        root,
        "postgresql",
        {"type": "postgresql\n", "provider": "bitnami\n", "url": "postgres://host/db"},
    )
    _write_binding(root, "mysql", {"type": "mysql\n", "username": "app"})
    return root


@pytest.fixture(autouse=True)
def _no_binding_root_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's SERVICE_BINDING_ROOT out of every test."""
    monkeypatch.delenv("SERVICE_BINDING_ROOT", raising=False)
