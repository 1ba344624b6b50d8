"""Tests for binding root resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from service_bindings.config import (
    DEFAULT_ROOT,
    SERVICE_BINDING_ROOT,
    BindingsConfig,
    load_config,
)
from service_bindings.errors import ConfigError


def test_default_when_unset() -> None:
    cfg = load_config(environ={})
    assert cfg.root == DEFAULT_ROOT == Path("/bindings")
    assert cfg.source == "default"


def test_default_dataclass() -> None:
    assert BindingsConfig().root == Path("/bindings")


def test_environment_variable(tmp_path: Path) -> None:
    cfg = load_config(environ={SERVICE_BINDING_ROOT: str(tmp_path)})
    assert cfg.root == tmp_path
    assert cfg.source == "environment"


def test_empty_environment_variable_is_unset() -> None:
    cfg = load_config(environ={SERVICE_BINDING_ROOT: ""})
    assert cfg.source == "default"


def test_explicit_argument_wins(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "explicit", environ={SERVICE_BINDING_ROOT: "/elsewhere"})
    assert cfg.root == tmp_path / "explicit"
    assert cfg.source == "argument"


def test_reads_process_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SERVICE_BINDING_ROOT, str(tmp_path))
    assert load_config().root == tmp_path


@pytest.mark.parametrize("value", ["https://example.com/bindings", "file:///bindings", "//host/share"])
def test_url_root_rejected_from_environment(value: str) -> None:
    with pytest.raises(ConfigError, match="not a URL"):
        load_config(environ={SERVICE_BINDING_ROOT: value})


def test_url_root_rejected_from_argument() -> None:
    with pytest.raises(ConfigError):
        load_config("http://example.com")


def test_config_error_is_value_error() -> None:
    assert issubclass(ConfigError, ValueError)
