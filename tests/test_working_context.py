"""Tests for engine working directory selection."""

from __future__ import annotations

import os
from pathlib import Path

from eslint_bridge.application.context import ResolutionContext
from eslint_bridge.application.working_context import resolve_working_context
from eslint_bridge.core.models import ResolutionPolicy


def test_ignore_disabled_uses_project_root(project: Path, context: ResolutionContext) -> None:
    (project / ".eslintignore").write_text("dist/\n", encoding="utf-8")
    file_path = project / "src" / "app.js"
    policy = ResolutionPolicy(disable_eslint_ignore=True)

    working = resolve_working_context(str(project / "src"), str(file_path), policy, str(project), context)

    assert working.cwd == str(project)
    assert working.relative_path == os.path.join("src", "app.js")


def test_ignore_file_directory_becomes_cwd(project: Path, context: ResolutionContext) -> None:
    (project / "src" / "nested").mkdir()
    (project / "src" / ".eslintignore").write_text("vendor/\n", encoding="utf-8")
    file_path = project / "src" / "nested" / "app.js"

    working = resolve_working_context(
        str(file_path.parent), str(file_path), ResolutionPolicy(), str(project), context
    )

    assert working.cwd == str(project / "src")
    assert working.relative_path == os.path.join("nested", "app.js")
    assert context.cwd == str(project / "src")


def test_without_project_root_uses_file_directory(project: Path, context: ResolutionContext) -> None:
    file_path = project / "src" / "app.js"

    working = resolve_working_context(
        str(project / "src"), str(file_path), ResolutionPolicy(disable_eslint_ignore=True), None, context
    )

    assert working.cwd == str(project / "src")
    assert working.relative_path == "app.js"


def test_process_cwd_is_left_alone(project: Path, context: ResolutionContext) -> None:
    before = os.getcwd()

    resolve_working_context(
        str(project / "src"), str(project / "src" / "app.js"), ResolutionPolicy(), str(project), context
    )

    assert os.getcwd() == before
