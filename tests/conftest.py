"""Shared fixtures: fake ESLint package trees on disk."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from eslint_bridge.application.context import ResolutionContext


def make_eslint_package(modules_dir: Path, version: str = "8.57.0", main: str = "./lib/api.js") -> Path:
    """Create ``<modules_dir>/eslint`` with a manifest and entry point."""
    package_dir = modules_dir / "eslint"
    (package_dir / "lib").mkdir(parents=True, exist_ok=True)
    (package_dir / "lib" / "api.js").write_text("module.exports = {};\n", encoding="utf-8")
    manifest = {"name": "eslint", "version": version, "main": main}
    (package_dir / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    return package_dir


@pytest.fixture
def bundled_tools(tmp_path: Path) -> Path:
    node_tools = tmp_path / "bundled"
    make_eslint_package(node_tools / "node_modules", version="8.0.0")
    return node_tools


@pytest.fixture
def context(bundled_tools: Path) -> ResolutionContext:
    return ResolutionContext(env={"PATH": "/usr/bin"}, node_tools_dir=str(bundled_tools))


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    return root
