"""eslint-bridge CLI - Command Line Interface.

Exposes the resolution operations and the job runner so the bridge can be
driven from an editor, a shell script or by hand while debugging a setup.

Synopsis
--------
locate
    Show which ESLint package would lint a file
find-config
    Show the ESLint config file that applies to a file
context
    Show the engine working directory and the file path relative to it
options
    Show the options the engine would receive
lint
    Lint (or fix) a file and print the messages as JSON
rules
    List the active rule ids, optionally comparing against a snapshot
debug
    Print everything known about how ESLint was resolved

Global options (before the command):
    --config, -c
        YAML or TOML configuration file
    --use-global-eslint / --no-use-global-eslint
    --global-node-path
    --local-node-modules
    --disable-eslint-ignore / --enable-eslint-ignore
    --rules-dir (repeatable)
    --eslintrc
    --node
    --log-level

Examples
--------
    $ python -m eslint_bridge locate src/app.js --project-root .
    $ python -m eslint_bridge --use-global-eslint lint src/app.js
    $ python -m eslint_bridge lint src/app.js --fix --write
    $ python -m eslint_bridge rules src/app.js --previous rules.json --save

Author: Anush Krishna
License: MIT
"""
from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

import typer

from eslint_bridge.application import (
    ResolutionContext,
    build_engine_options,
    did_rules_change,
    find_config_file,
    get_engine_package,
    resolve_working_context,
    run_job,
)
from eslint_bridge.application.rules import rules_snapshot
from eslint_bridge.config import Config, load_config
from eslint_bridge.core.exceptions import EslintBridgeError
from eslint_bridge.core.logging_config import setup_logging
from eslint_bridge.core.models import LintJob, ResolutionPolicy
from eslint_bridge.infra.tools.eslint import NodeEngineAdapter
from eslint_bridge.infra.tools.utils import load_json_file

app = typer.Typer(
    help="eslint-bridge - locate and drive an installed ESLint",
    add_completion=False
)


@dataclass
class BridgeState:
    config: Config
    policy: ResolutionPolicy
    context: ResolutionContext


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _fail(error: Exception) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


def _state(ctx: typer.Context) -> BridgeState:
    return ctx.obj


def _file_dir(file: Path) -> str:
    return os.path.dirname(os.path.abspath(file))


@app.callback()
def configure(
    ctx: typer.Context,
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML or TOML configuration file"
    ),
    use_global_eslint: Optional[bool] = typer.Option(
        None, "--use-global-eslint/--no-use-global-eslint", help="Use the globally installed ESLint"
    ),
    global_node_path: Optional[str] = typer.Option(
        None, "--global-node-path", help="npm prefix to use instead of `npm get prefix`"
    ),
    local_node_modules: Optional[str] = typer.Option(
        None, "--local-node-modules", help="node_modules directory, absolute or relative to the project"
    ),
    disable_eslint_ignore: Optional[bool] = typer.Option(
        None, "--disable-eslint-ignore/--enable-eslint-ignore", help="Ignore .eslintignore files"
    ),
    rules_dir: Optional[List[str]] = typer.Option(
        None, "--rules-dir", help="Additional rules directory (repeatable)"
    ),
    eslintrc: Optional[str] = typer.Option(
        None, "--eslintrc", help="Config file used when none is found near the linted file"
    ),
    node: Optional[str] = typer.Option(None, "--node", help="Node.js executable"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Load configuration shared by all commands."""
    args = {
        "use_global_eslint": use_global_eslint,
        "global_node_path": global_node_path,
        "advanced_local_node_modules": local_node_modules,
        "disable_eslint_ignore": disable_eslint_ignore,
        "eslint_rules_dirs": list(rules_dir) if rules_dir else None,
        "eslintrc_path": eslintrc,
        "node_executable": node,
        "log_level": log_level,
    }
    try:
        config = load_config(config_file=str(config_file) if config_file else None, args=args)
    except EslintBridgeError as e:
        _fail(e)

    setup_logging(
        log_level=config.logging.level,
        log_file=config.logging.file,
        console_output=config.logging.console,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
    )
    ctx.obj = BridgeState(
        config=config,
        policy=config.policy.to_policy(),
        context=ResolutionContext.from_config(config),
    )


@app.command("locate")
def locate(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File that would be linted"),
    project_root: Optional[str] = typer.Option(None, "--project-root", "-p"),
) -> None:
    """Show which ESLint package would lint FILE."""
    state = _state(ctx)
    try:
        package = get_engine_package(_file_dir(file), state.policy, project_root, state.context)
    except EslintBridgeError as e:
        _fail(e)
    _echo_json({
        "path": package.path,
        "source_kind": package.location.source_kind.value,
        "version": package.version,
    })


@app.command("find-config")
def find_config(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File that would be linted"),
) -> None:
    """Show the ESLint config file that applies to FILE."""
    config_path = find_config_file(_file_dir(file), _state(ctx).context)
    _echo_json({"config_path": config_path})


@app.command("context")
def working_context(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File that would be linted"),
    project_root: Optional[str] = typer.Option(None, "--project-root", "-p"),
) -> None:
    """Show the engine working directory for FILE."""
    state = _state(ctx)
    working = resolve_working_context(
        _file_dir(file), os.path.abspath(file), state.policy, project_root, state.context
    )
    _echo_json(working.model_dump())


@app.command("options")
def options(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File that would be linted"),
    fix: bool = typer.Option(False, "--fix", help="Build options for a fix job"),
) -> None:
    """Show the options the engine would receive for FILE."""
    state = _state(ctx)
    file_dir = _file_dir(file)
    engine_options = build_engine_options(
        "fix" if fix else "lint",
        state.policy,
        {},
        os.path.abspath(file),
        file_dir,
        find_config_file(file_dir, state.context),
        state.context,
    )
    _echo_json(engine_options.model_dump(mode="json"))


@app.command("lint")
def lint(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File to lint"),
    project_root: Optional[str] = typer.Option(None, "--project-root", "-p"),
    fix: bool = typer.Option(False, "--fix", help="Apply autofixes"),
    write: bool = typer.Option(False, "--write", help="With --fix, write the fixed text back to FILE"),
    stdin: bool = typer.Option(False, "--stdin", help="Read the text to lint from stdin"),
) -> None:
    """Lint FILE and print the job result as JSON."""
    state = _state(ctx)
    if stdin:
        contents = sys.stdin.read()
    else:
        try:
            contents = file.read_text(encoding="utf-8")
        except OSError as e:
            _fail(e)

    job = LintJob(
        type="fix" if fix else "lint",
        contents=contents,
        file_path=str(file),
        project_path=project_root,
    )
    try:
        result = run_job(job, state.policy, state.context)
    except EslintBridgeError as e:
        _fail(e)

    if fix and write and result.output is not None and result.output != contents:
        file.write_text(result.output, encoding="utf-8")
    _echo_json(result.model_dump(exclude_none=True))


@app.command("rules")
def rules(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File whose ESLint setup is inspected"),
    project_root: Optional[str] = typer.Option(None, "--project-root", "-p"),
    previous: Optional[Path] = typer.Option(
        None, "--previous", help="JSON snapshot of a previous rule inventory"
    ),
    save: bool = typer.Option(False, "--save", help="Overwrite --previous with the current inventory"),
) -> None:
    """List the rule ids active for FILE."""
    state = _state(ctx)
    file_dir = _file_dir(file)
    try:
        package = get_engine_package(file_dir, state.policy, project_root, state.context)
        resolve_working_context(
            file_dir, os.path.abspath(file), state.policy, project_root, state.context
        )
        engine_options = build_engine_options(
            "lint", state.policy, {}, os.path.abspath(file), file_dir,
            find_config_file(file_dir, state.context), state.context,
        )
        adapter = NodeEngineAdapter(package, state.context)
        current = adapter.get_rules(adapter.construct(engine_options))
    except EslintBridgeError as e:
        _fail(e)

    payload: dict = {"rules": sorted(current)}
    if previous is not None:
        known = load_json_file(previous, default={})
        payload["changed"] = did_rules_change(known if isinstance(known, dict) else {}, current)
        if save:
            previous.write_text(json.dumps(rules_snapshot(current), indent=2), encoding="utf-8")
    _echo_json(payload)


@app.command("debug")
def debug(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File whose ESLint setup is inspected"),
    project_root: Optional[str] = typer.Option(None, "--project-root", "-p"),
) -> None:
    """Print how ESLint was resolved for FILE."""
    state = _state(ctx)
    job = LintJob(type="debug", file_path=str(file), project_path=project_root)
    try:
        result = run_job(job, state.policy, state.context)
    except EslintBridgeError as e:
        _fail(e)
    _echo_json(result.debug)
