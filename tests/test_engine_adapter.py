"""Tests for the Node-backed engine adapter (child process mocked)."""

from __future__ import annotations

import json

import pytest

from eslint_bridge.application.context import ResolutionContext
from eslint_bridge.core.exceptions import EngineExecutionError
from eslint_bridge.core.models import (
    CommandResult,
    EngineOptions,
    PackageLocation,
    PackageModule,
    SourceKind,
)
from eslint_bridge.infra.tools.eslint import base as eslint_base
from eslint_bridge.infra.tools.eslint import NodeEngineAdapter

PACKAGE = PackageModule(
    location=PackageLocation(path="/repo/node_modules/eslint", source_kind=SourceKind.LOCAL_PROJECT),
    name="eslint",
    version="8.57.0",
    main="/repo/node_modules/eslint/lib/api.js",
)


def _completed(payload=None, returncode=0, stdout=None, stderr="") -> CommandResult:
    text = stdout if stdout is not None else json.dumps(payload)
    return CommandResult(
        cmd=["node"],
        cwd="/repo",
        returncode=returncode,
        duration_s=0.2,
        stdout=text,
        stderr=stderr,
        parsed_json=payload,
    )


@pytest.fixture
def adapter_context() -> ResolutionContext:
    ctx = ResolutionContext(env={"PATH": "/usr/bin", "NODE_PATH": "/repo/node_modules"}, node_executable="node18")
    ctx.cwd = "/repo"
    ctx.engine_timeout_s = 12
    return ctx


def test_lint_sends_request_and_parses_report(
    adapter_context: ResolutionContext, monkeypatch: pytest.MonkeyPatch
) -> None:
    seen = {}

    def fake_run(cmd, cwd=None, env=None, timeout_s=None, input_text=None):
        seen.update(cmd=cmd, cwd=cwd, env=env, timeout_s=timeout_s, request=json.loads(input_text))
        return _completed({"messages": [{"ruleId": "semi"}], "output": None, "rules": {"semi": {}}})

    monkeypatch.setattr(eslint_base, "run_command", fake_run)
    adapter = NodeEngineAdapter(PACKAGE, adapter_context)
    engine = adapter.construct(EngineOptions(fix=True, rule_paths=("/rules",)))

    report = adapter.lint(engine, "var a = 1", "src/app.js")

    assert report.messages == [{"ruleId": "semi"}]
    assert seen["cmd"][0] == "node18"
    assert seen["cwd"] == "/repo"
    assert seen["env"]["NODE_PATH"] == "/repo/node_modules"
    assert seen["timeout_s"] == 12
    assert seen["request"]["eslintPath"] == "/repo/node_modules/eslint"
    assert seen["request"]["mode"] == "lint"
    assert seen["request"]["filePath"] == "src/app.js"
    assert seen["request"]["options"]["fix"] is True
    assert seen["request"]["options"]["rulePaths"] == ["/rules"]


def test_rules_reported_by_lint_are_reused(
    adapter_context: ResolutionContext, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(json.loads(kwargs["input_text"])["mode"])
        return _completed({"messages": [], "rules": {"semi": {}, "quotes": {}}})

    monkeypatch.setattr(eslint_base, "run_command", fake_run)
    adapter = NodeEngineAdapter(PACKAGE, adapter_context)
    engine = adapter.construct(EngineOptions())

    adapter.lint(engine, "", "a.js")

    assert set(adapter.get_rules(engine)) == {"semi", "quotes"}
    assert calls == ["lint"]


def test_get_rules_without_lint_runs_rules_mode(
    adapter_context: ResolutionContext, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(json.loads(kwargs["input_text"])["mode"])
        return _completed({"rules": {"eqeqeq": {}}})

    monkeypatch.setattr(eslint_base, "run_command", fake_run)
    adapter = NodeEngineAdapter(PACKAGE, adapter_context)

    assert dict(adapter.get_rules(adapter.construct(EngineOptions()))) == {"eqeqeq": {}}
    assert calls == ["rules"]


def test_node_failure_raises(adapter_context: ResolutionContext, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        eslint_base, "run_command", lambda cmd, **kw: _completed(None, returncode=2, stdout="", stderr="Error: x")
    )
    adapter = NodeEngineAdapter(PACKAGE, adapter_context)

    with pytest.raises(EngineExecutionError) as excinfo:
        adapter.lint(adapter.construct(EngineOptions()), "", "a.js")

    assert excinfo.value.details["stderr"] == "Error: x"


def test_garbage_output_raises(adapter_context: ResolutionContext, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(eslint_base, "run_command", lambda cmd, **kw: _completed(None, stdout="oops"))
    adapter = NodeEngineAdapter(PACKAGE, adapter_context)

    with pytest.raises(EngineExecutionError):
        adapter.lint(adapter.construct(EngineOptions()), "", "a.js")


def test_missing_node_raises(adapter_context: ResolutionContext, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(eslint_base, "run_command", fake_run)
    adapter = NodeEngineAdapter(PACKAGE, adapter_context)

    with pytest.raises(EngineExecutionError):
        adapter.lint(adapter.construct(EngineOptions()), "", "a.js")


def test_rules_from_one_engine_are_not_reused_for_another(
    adapter_context: ResolutionContext, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls = []

    def fake_run(cmd, **kwargs):
        mode = json.loads(kwargs["input_text"])["mode"]
        calls.append(mode)
        return _completed({"messages": [], "rules": {mode: {}}})

    monkeypatch.setattr(eslint_base, "run_command", fake_run)
    adapter = NodeEngineAdapter(PACKAGE, adapter_context)
    first = adapter.construct(EngineOptions())
    adapter.lint(first, "", "a.js")
    second = adapter.construct(EngineOptions())

    assert dict(adapter.get_rules(second)) == {"rules": {}}
    assert dict(adapter.get_rules(first)) == {"lint": {}}
    assert calls == ["lint", "rules"]


def test_rule_cache_does_not_outlive_engine(
    adapter_context: ResolutionContext, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(eslint_base, "run_command", lambda cmd, **kw: _completed({"rules": {"semi": {}}}))
    adapter = NodeEngineAdapter(PACKAGE, adapter_context)
    engine = adapter.construct(EngineOptions())
    adapter.lint(engine, "", "a.js")
    assert len(adapter._rules) == 1

    del engine

    assert len(adapter._rules) == 0
