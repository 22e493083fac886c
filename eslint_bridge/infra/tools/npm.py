"""npm prefix lookup.

Functions
---------
npm_command : Platform-specific npm executable name
get_npm_prefix : Run ``npm get prefix`` and return its output
"""
from __future__ import annotations

import sys
from typing import List, Mapping, Optional

from eslint_bridge.core.exceptions import PrefixResolutionError
from eslint_bridge.core.logging_config import get_logger

from .base import run_command

logger = get_logger(__name__)


def npm_command(platform: Optional[str] = None) -> str:
    platform = platform or sys.platform
    return "npm.cmd" if platform == "win32" else "npm"


def get_npm_prefix(env: Mapping[str, str], platform: Optional[str] = None) -> str:
    """Return the global npm prefix, blocking until npm exits.

    Raises
    ------
    PrefixResolutionError
        If npm cannot be spawned, exits non-zero or prints nothing.
    """
    cmd: List[str] = [npm_command(platform), "get", "prefix"]
    try:
        result = run_command(cmd, env=env)
    except OSError as e:
        raise PrefixResolutionError(cmd, str(e)) from e

    if result.returncode != 0:
        raise PrefixResolutionError(
            cmd,
            f"exit code {result.returncode}",
            {"stderr": result.stderr.strip()},
        )
    prefix = result.stdout.strip()
    if not prefix:
        raise PrefixResolutionError(cmd, "empty output")
    logger.debug("npm prefix resolved to %s", prefix)
    return prefix
