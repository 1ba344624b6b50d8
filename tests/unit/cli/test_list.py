"""Tests for service-bindings list."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from service_bindings.cli.main import app

runner = CliRunner()


def test_list_shows_bindings(binding_root: Path) -> None:
    result = runner.invoke(app, ["list", "--root", str(binding_root)])
    assert result.exit_code == 0
    assert "postgresql" in result.output
    assert "mysql" in result.output
    assert "2 binding(s)" in result.output


def test_list_filter_by_type(binding_root: Path) -> None:
    result = runner.invoke(app, ["list", "--root", str(binding_root), "--type", "mysql"])
    assert result.exit_code == 0
    assert "1 binding(s)" in result.output
    assert "postgresql" not in result.output


def test_list_filter_by_provider(binding_root: Path) -> None:
    result = runner.invoke(app, ["list", "--root", str(binding_root), "--provider", "bitnami"])
    assert result.exit_code == 0
    assert "1 binding(s)" in result.output
    assert "mysql" not in result.output


def test_list_no_match(binding_root: Path) -> None:
    result = runner.invoke(app, ["list", "--root", str(binding_root), "--type", "redis"])
    assert result.exit_code == 0
    assert "No bindings found" in result.output


def test_list_missing_root(tmp_path: Path) -> None:
    result = runner.invoke(app, ["list", "--root", str(tmp_path / "missing")])
    assert result.exit_code == 0
    assert "No bindings found" in result.output


def test_list_uses_environment(binding_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_BINDING_ROOT", str(binding_root))
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "2 binding(s)" in result.output


def test_list_missing_type_exits_1(binding_root: Path, make_binding) -> None:
    make_binding(binding_root, "broken", {"url": "redis://host"})
    result = runner.invoke(app, ["list", "--root", str(binding_root)])
    assert result.exit_code == 1
    assert "does not declare a type" in result.output


def test_list_root_is_file_exits_1(tmp_path: Path) -> None:
    f = tmp_path / "file"
    f.write_text("x", encoding="utf-8")
    result = runner.invoke(app, ["list", "--root", str(f)])
    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_list_type_with_brackets(binding_root: Path, make_binding) -> None:
    make_binding(binding_root, "odd", {"type": "[/odd]", "provider": "[red]x"})
    result = runner.invoke(app, ["list", "--root", str(binding_root)])
    assert result.exit_code == 0
    assert "[/odd]" in result.output
    assert "[red]x" in result.output
    assert "3 binding(s)" in result.output
