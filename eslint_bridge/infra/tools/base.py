"""Base helpers for running Node.js child processes.

This module wraps subprocess execution for the two kinds of child process
the bridge spawns: the package manager (``npm get prefix``) and the Node
process hosting ESLint. It also knows where the bundled ESLint copy lives.

The module supports:
- Command execution with optional timeout and captured output
- Best-effort JSON decoding of stdout
- Locating the bundled ``node_tools`` directory
- Building the child-process environment (PATH, NODE_PATH)

Notes
-----
``run_command`` lets ``OSError`` escape when the executable cannot be
spawned; callers decide whether that is fatal.
"""
from __future__ import annotations

import os
import subprocess
import time
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence, Union, cast

from eslint_bridge.core.logging_config import get_logger
from eslint_bridge.core.models import CommandResult

from .utils.json import safe_json_loads

logger = get_logger(__name__)

NODE_TOOLS_ENV = "ESLINT_BRIDGE_NODE_TOOLS"


def run_command(
    cmd: Sequence[str],
    cwd: Union[str, Path, None] = None,
    env: Optional[Mapping[str, str]] = None,
    timeout_s: Optional[float] = None,
    input_text: Optional[str] = None,
) -> CommandResult:
    """Run `cmd` to completion and capture its output.

    Parameters
    ----------
    cmd : sequence of str
        Command and arguments.
    cwd : str or Path, optional
        Working directory of the child. Defaults to the current directory.
    env : mapping, optional
        Full child environment. Defaults to the current environment.
    timeout_s : float, optional
        Kill the child after this many seconds. None waits forever.
    input_text : str, optional
        Text written to the child's stdin.

    Returns
    -------
    CommandResult
        Exit code, output and parsed JSON (when stdout looks like JSON).
        A timeout is reported as exit code 124.

    Raises
    ------
    OSError
        If the executable cannot be spawned.
    """
    started = time.time()
    cwd_str = os.path.abspath(cwd or os.getcwd())
    logger.debug("Running %s in %s", " ".join(cmd), cwd_str)
    try:
        proc = subprocess.run(
            list(cmd),
            cwd=cwd_str,
            env=dict(env) if env is not None else None,
            input=input_text,
            check=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            timeout=timeout_s,
        )
    except subprocess.TimeoutExpired as e:
        # Synthesize a result on timeout
        stdout = e.stdout
        if isinstance(stdout, bytes):
            stdout = stdout.decode("utf-8", "ignore")
        stderr = e.stderr
        if isinstance(stderr, bytes):
            stderr = stderr.decode("utf-8", "ignore")
        return CommandResult(
            cmd=list(cmd),
            cwd=cwd_str,
            returncode=124,
            duration_s=time.time() - started,
            stdout=stdout or "",
            stderr=(stderr or "") + f"\n[TIMEOUT after {timeout_s}s]",
            parsed_json=None,
        )

    stdout = cast(Optional[str], proc.stdout) or ""
    stderr = cast(Optional[str], proc.stderr) or ""

    parsed = None
    txt = stdout.strip()
    if txt.startswith("{") or txt.startswith("["):
        parsed = safe_json_loads(txt)

    return CommandResult(
        cmd=list(cmd),
        cwd=cwd_str,
        returncode=proc.returncode,
        duration_s=time.time() - started,
        stdout=stdout,
        stderr=stderr,
        parsed_json=parsed,
    )


def default_node_tools_dir() -> Path:
    """Directory holding the bundled ``node_modules`` (ships with the package)."""
    env = os.environ.get(NODE_TOOLS_ENV)
    if env:
        return Path(env).expanduser().resolve()
    # eslint_bridge/infra/tools/base.py -> eslint_bridge/node_tools
    return Path(__file__).resolve().parents[2] / "node_tools"


def bundled_eslint_dir(node_tools_dir: Union[str, Path, None] = None) -> str:
    base = Path(node_tools_dir).expanduser() if node_tools_dir else default_node_tools_dir()
    return os.path.normpath(str(base / "node_modules" / "eslint"))


def node_env(
    base_env: Mapping[str, str],
    modules_dir: Optional[str] = None,
    extra_paths: Sequence[str] = (),
) -> Dict[str, str]:
    """Copy `base_env` with `extra_paths` prepended to PATH and NODE_PATH set.

    An empty `modules_dir` clears NODE_PATH rather than inheriting it.
    """
    env = dict(base_env)
    if extra_paths:
        prev_path = env.get("PATH", "")
        joined = os.pathsep.join(extra_paths)
        env["PATH"] = f"{joined}{os.pathsep}{prev_path}" if prev_path else joined
    if modules_dir is not None:
        env["NODE_PATH"] = modules_dir
    return env
