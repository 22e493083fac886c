"""Tests for the Typer command-line interface."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from eslint_bridge.cli.cli import app
from eslint_bridge.config import ConfigLoader

from conftest import make_eslint_package

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith(ConfigLoader.ENV_PREFIX):
            monkeypatch.delenv(key)


def test_locate_reports_local_package(project: Path) -> None:
    make_eslint_package(project / "node_modules", version="8.3.0")
    target = project / "src" / "app.js"

    result = runner.invoke(app, ["locate", str(target), "--project-root", str(project)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["source_kind"] == "local project"
    assert payload["version"] == "8.3.0"


def test_locate_global_missing_fails(tmp_path: Path, project: Path) -> None:
    result = runner.invoke(
        app,
        [
            "--use-global-eslint",
            "--global-node-path",
            str(tmp_path / "missing"),
            "locate",
            str(project / "src" / "app.js"),
        ],
    )

    assert result.exit_code == 1


def test_find_config(project: Path) -> None:
    config = project / ".eslintrc.yaml"
    config.write_text("root: true\n", encoding="utf-8")

    result = runner.invoke(app, ["find-config", str(project / "src" / "app.js")])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"config_path": str(config)}


def test_context_with_ignore_disabled(project: Path) -> None:
    result = runner.invoke(
        app,
        [
            "--disable-eslint-ignore",
            "context",
            str(project / "src" / "app.js"),
            "--project-root",
            str(project),
        ],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "cwd": str(project),
        "relative_path": os.path.join("src", "app.js"),
    }


def test_options_with_fallback_config(project: Path) -> None:
    result = runner.invoke(
        app,
        ["--eslintrc", "/etc/eslintrc.json", "options", str(project / "src" / "app.js"), "--fix"],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["fix"] is True
    assert payload["config_file"] == os.path.normpath("/etc/eslintrc.json")


def test_bad_config_file_fails(tmp_path: Path, project: Path) -> None:
    result = runner.invoke(
        app, ["--config", str(tmp_path / "nope.yaml"), "find-config", str(project / "src" / "app.js")]
    )

    assert result.exit_code == 1
