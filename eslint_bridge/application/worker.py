"""
Lint job runner.

Handles the three job types an editor sends:

    lint   -> messages for the given text (plus the rule inventory if it changed)
    fix    -> like lint, with autofix enabled and the fixed text returned
    debug  -> a description of how ESLint was resolved for the file

Example::

    context = ResolutionContext.from_config(config)
    job = LintJob(type="lint", file_path="/repo/src/app.js", contents=text,
                  project_path="/repo")
    result = run_job(job, config.policy.to_policy(), context)
"""
from __future__ import annotations

import os
import sys
from typing import Any, Callable, Dict, Optional

from eslint_bridge import __version__
from eslint_bridge.core.logging_config import get_logger
from eslint_bridge.core.models import (
    JobResult,
    LintJob,
    PackageModule,
    ResolutionPolicy,
    WorkingContext,
)
from eslint_bridge.infra.tools.eslint import EngineCapability, NodeEngineAdapter
from eslint_bridge.infra.tools.utils import safe_relative_path

from .config_files import find_config_file
from .context import ResolutionContext
from .locator import get_engine_package
from .options import build_engine_options
from .rules import did_rules_change, rules_snapshot
from .working_context import resolve_working_context

logger = get_logger(__name__)

JOB_TYPES = ("lint", "fix", "debug")

AdapterFactory = Callable[[PackageModule, ResolutionContext], EngineCapability]


def collect_debug_info(
    package: PackageModule,
    policy: ResolutionPolicy,
    config_path: Optional[str],
    working: WorkingContext,
    project_path: Optional[str],
    context: ResolutionContext,
) -> Dict[str, Any]:
    shown_config = config_path
    if config_path and project_path:
        shown_config = safe_relative_path(config_path, project_path)
    return {
        "bridge_version": __version__,
        "python": sys.version.split()[0],
        "platform": sys.platform,
        "eslint_path": package.path,
        "eslint_type": package.location.source_kind.value,
        "eslint_version": package.version,
        "config_path": shown_config,
        "policy": policy.model_dump(),
        "cwd": working.cwd,
        "relative_path": working.relative_path,
        "node_executable": context.node_executable,
        "node_path": context.env.get("NODE_PATH", ""),
    }


def run_job(
    job: LintJob,
    policy: ResolutionPolicy,
    context: ResolutionContext,
    adapter_factory: AdapterFactory = NodeEngineAdapter,
) -> JobResult:
    """Resolve ESLint for ``job.file_path`` and run the job.

    Raises
    ------
    ValueError
        Unknown job type.
    PrefixResolutionError, PackageNotFoundError, EngineExecutionError
        Propagated unchanged from resolution and the engine.
    """
    if job.type not in JOB_TYPES:
        raise ValueError(f"Unknown job type: {job.type!r}")

    file_path = os.path.abspath(job.file_path)
    file_dir = os.path.dirname(file_path)
    project_path = job.project_path

    package = get_engine_package(file_dir, policy, project_path, context)
    config_path = find_config_file(file_dir, context)
    working = resolve_working_context(file_dir, file_path, policy, project_path, context)

    if job.type == "debug":
        info = collect_debug_info(package, policy, config_path, working, project_path, context)
        return JobResult(type=job.type, debug=info)

    options = build_engine_options(
        job.type, policy, job.rules, file_path, file_dir, config_path, context
    )
    adapter = adapter_factory(package, context)
    engine = adapter.construct(options)
    report = adapter.lint(engine, job.contents, working.relative_path)
    rules = adapter.get_rules(engine)

    result = JobResult(type=job.type, messages=report.messages)
    if job.type == "fix":
        result.output = report.output if report.output is not None else job.contents
    if did_rules_change(job.known_rules, rules):
        logger.info("Rule inventory changed: %d rules", len(rules))
        result.updated_rules = rules_snapshot(rules)
    return result
