"""Tests for engine options assembly."""

from __future__ import annotations

from pathlib import Path

import pytest

from eslint_bridge.application.context import ResolutionContext
from eslint_bridge.application.options import build_engine_options
from eslint_bridge.core.models import ResolutionPolicy


def _build(project: Path, policy: ResolutionPolicy, context, job_type="lint", config_path=None, rules=None):
    src = project / "src"
    return build_engine_options(
        job_type, policy, rules, str(src / "app.js"), str(src), config_path, context
    )


def test_fix_and_ignore_flags(project: Path, context: ResolutionContext) -> None:
    lint = _build(project, ResolutionPolicy(), context)
    fix = _build(project, ResolutionPolicy(disable_eslint_ignore=True), context, job_type="fix")

    assert lint.fix is False and lint.ignore is True
    assert fix.fix is True and fix.ignore is False


def test_rules_are_passed_through(project: Path, context: ResolutionContext) -> None:
    options = _build(project, ResolutionPolicy(), context, rules={"semi": "off"})

    assert options.rules == {"semi": "off"}
    assert options.to_engine_dict()["rules"] == {"semi": "off"}


def test_ignore_path_attached_unless_disabled(project: Path, context: ResolutionContext) -> None:
    ignore = project / ".eslintignore"
    ignore.write_text("build/\n", encoding="utf-8")

    enabled = _build(project, ResolutionPolicy(), context)
    disabled = _build(project, ResolutionPolicy(disable_eslint_ignore=True), ResolutionContext(env={}))

    assert enabled.ignore_path == str(ignore)
    assert enabled.to_engine_dict()["ignorePath"] == str(ignore)
    assert disabled.ignore_path is None
    assert "ignorePath" not in disabled.to_engine_dict()


def test_rule_directories_resolution(tmp_path: Path, project: Path, context: ResolutionContext) -> None:
    absolute = tmp_path / "shared-rules"
    absolute.mkdir()
    (project / "eslint-rules").mkdir()
    policy = ResolutionPolicy(eslint_rules_dirs=(str(absolute), "eslint-rules", "not-there"))

    options = _build(project, policy, context)

    assert options.rule_paths == (str(absolute), str(project / "eslint-rules"))


def test_fallback_config_only_without_discovered_config(
    project: Path, context: ResolutionContext, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", str(project))
    policy = ResolutionPolicy(eslintrc_path="~/.eslintrc.fallback.json")

    without = _build(project, policy, context, config_path=None)
    with_found = _build(project, policy, context, config_path=str(project / ".eslintrc.json"))

    assert without.config_file == str(project / ".eslintrc.fallback.json")
    assert without.to_engine_dict()["configFile"] == str(project / ".eslintrc.fallback.json")
    assert with_found.config_file is None


def test_no_fallback_configured(project: Path, context: ResolutionContext) -> None:
    assert _build(project, ResolutionPolicy(), context).config_file is None
