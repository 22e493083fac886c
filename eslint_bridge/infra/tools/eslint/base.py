"""ESLint engine adapter.

ESLint is a Node.js library, so the bridge drives it from a short inline
Node script: the script loads the resolved ESLint package, constructs an
engine with the given options, and prints messages, fixed output and the
rule inventory as JSON.

Classes
-------
EngineCapability : Interface the worker needs from an engine
NodeEngine : Handle for one constructed engine
NodeEngineAdapter : Capability implemented over a Node child process

Examples
--------
>>> adapter = NodeEngineAdapter(package, context)
>>> engine = adapter.construct(options)
>>> report = adapter.lint(engine, "var a = 1", "src/app.js")

See Also
--------
eslint_bridge.application.locator : Produces the PackageModule
eslint_bridge.application.worker : Consumer of the capability
"""
from __future__ import annotations

import json
import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from eslint_bridge.core.exceptions import EngineExecutionError
from eslint_bridge.core.logging_config import get_logger
from eslint_bridge.core.models import EngineOptions, LintReport, PackageModule

from ..base import run_command

logger = get_logger(__name__)

# Reads one JSON request from stdin, writes one JSON response to stdout.
# CLIEngine covers ESLint < 8, the ESLint class everything newer.
NODE_RUNNER = r"""
const fs = require('fs');
const request = JSON.parse(fs.readFileSync(0, 'utf8'));
const eslint = require(request.eslintPath);
const opts = request.options;

function rulesOf(engine) {
  if (typeof engine.getRules === 'function') return engine.getRules();
  if (engine.linter && typeof engine.linter.getRules === 'function') return engine.linter.getRules();
  return new Map();
}

function ruleMap(rules) {
  const out = {};
  for (const [id, rule] of rules) out[id] = (rule && rule.meta) || {};
  return out;
}

function firstResult(results) {
  const file = results[0] || {};
  return { messages: file.messages || [], output: file.output === undefined ? null : file.output };
}

async function main() {
  const result = { messages: [], output: null, rules: {} };
  if (eslint.CLIEngine) {
    const engine = new eslint.CLIEngine(opts);
    if (request.mode === 'lint') {
      Object.assign(result, firstResult(engine.executeOnText(request.text, request.filePath).results));
    }
    result.rules = ruleMap(rulesOf(engine));
  } else {
    const options = { overrideConfig: { rules: opts.rules }, ignore: opts.ignore, fix: opts.fix };
    if (opts.ignorePath) options.ignorePath = opts.ignorePath;
    if (opts.rulePaths && opts.rulePaths.length) options.rulePaths = opts.rulePaths;
    if (opts.configFile) options.overrideConfigFile = opts.configFile;
    const engine = new eslint.ESLint(options);
    let results = [];
    if (request.mode === 'lint') {
      results = await engine.lintText(request.text, { filePath: request.filePath });
      Object.assign(result, firstResult(results));
    }
    if (eslint.Linter && typeof eslint.Linter.prototype.getRules === 'function') {
      result.rules = ruleMap(new eslint.Linter().getRules());
    } else if (typeof engine.getRulesMetaForResults === 'function') {
      result.rules = engine.getRulesMetaForResults(results);
    }
  }
  process.stdout.write(JSON.stringify(result));
}

main().catch((err) => {
  process.stderr.write(String(err && err.stack ? err.stack : err));
  process.exit(2);
});
"""


class EngineCapability(ABC):
    """What the worker needs from an ESLint engine."""

    @abstractmethod
    def construct(self, options: EngineOptions) -> Any:
        raise NotImplementedError

    @abstractmethod
    def get_rules(self, engine: Any) -> Mapping[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def lint(self, engine: Any, text: str, file_path: str) -> LintReport:
        raise NotImplementedError


# Identity semantics: each construct() call is a distinct engine.
@dataclass(frozen=True, eq=False)
class NodeEngine:
    package: PackageModule
    options: EngineOptions
    cwd: Optional[str]
    env: Dict[str, str]


class NodeEngineAdapter(EngineCapability):
    """Runs the resolved ESLint package in a Node child process.

    Parameters
    ----------
    package : PackageModule
        The loaded ESLint package.
    context : ResolutionContext
        Supplies the child environment, cwd, node executable and timeout.
    """

    def __init__(self, package: PackageModule, context) -> None:
        self.package = package
        self.context = context
        self._rules: weakref.WeakKeyDictionary[NodeEngine, Mapping[str, Any]] = (
            weakref.WeakKeyDictionary()
        )

    def construct(self, options: EngineOptions) -> NodeEngine:
        return NodeEngine(
            package=self.package,
            options=options,
            cwd=self.context.cwd,
            env=dict(self.context.env),
        )

    def get_rules(self, engine: NodeEngine) -> Mapping[str, Any]:
        # A lint run already reported the inventory for this engine.
        if engine in self._rules:
            return self._rules[engine]
        return self._call(engine, "rules").rules

    def lint(self, engine: NodeEngine, text: str, file_path: str) -> LintReport:
        return self._call(engine, "lint", text=text, file_path=file_path)

    def _call(
        self,
        engine: NodeEngine,
        mode: str,
        text: str = "",
        file_path: Optional[str] = None,
    ) -> LintReport:
        request = {
            "eslintPath": engine.package.path,
            "mode": mode,
            "options": engine.options.to_engine_dict(),
            "text": text,
            "filePath": file_path,
        }
        cmd = [self.context.node_executable, "-e", NODE_RUNNER]
        try:
            run = run_command(
                cmd,
                cwd=engine.cwd,
                env=engine.env,
                timeout_s=self.context.engine_timeout_s,
                input_text=json.dumps(request),
            )
        except OSError as e:
            raise EngineExecutionError(mode, f"cannot start {cmd[0]}: {e}") from e

        if run.returncode != 0:
            raise EngineExecutionError(
                mode,
                f"node exited with code {run.returncode}",
                {"stderr": run.stderr.strip()},
            )
        if not isinstance(run.parsed_json, dict):
            raise EngineExecutionError(mode, "unexpected output", {"stdout": run.stdout[:2000]})

        logger.debug("ESLint %s finished in %.2fs", mode, run.duration_s)
        report = LintReport(**run.parsed_json)
        self._rules[engine] = report.rules
        return report


__all__ = ["EngineCapability", "NodeEngine", "NodeEngineAdapter", "NODE_RUNNER"]
