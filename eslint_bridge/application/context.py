"""Caller-owned state for ESLint resolution.

A ``ResolutionContext`` carries everything the resolution operations would
otherwise keep in globals: memoized lookups, the environment handed to
Node child processes and the working directory chosen for the engine.
Contexts are independent of each other; one context must not be shared by
concurrent jobs.

To memoize the npm prefix for the whole process lifetime, create one
``ProcessCache`` and pass it to every context.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from eslint_bridge.infra.tools.base import bundled_eslint_dir, node_env

UNSET: Any = object()


@dataclass
class ProcessCache:
    node_prefix: Optional[str] = None
    bundled_eslint_path: Optional[str] = None
    finder: Dict[Tuple[str, Tuple[str, ...]], Optional[str]] = field(default_factory=dict)


@dataclass
class ResolutionContext:
    env: Dict[str, str] = field(default_factory=lambda: dict(os.environ))
    cache: ProcessCache = field(default_factory=ProcessCache)
    node_tools_dir: Optional[str] = None
    node_executable: str = "node"
    engine_timeout_s: Optional[float] = None
    # Working directory for the engine process; set by resolve_working_context.
    cwd: Optional[str] = None
    # modules_dir last written to NODE_PATH in `env`.
    last_modules_dir: Any = UNSET

    def bundled_eslint_path(self) -> str:
        if self.cache.bundled_eslint_path is None:
            self.cache.bundled_eslint_path = bundled_eslint_dir(self.node_tools_dir)
        return self.cache.bundled_eslint_path

    @classmethod
    def from_config(cls, config, cache: Optional[ProcessCache] = None) -> "ResolutionContext":
        ctx = cls(
            env=node_env(os.environ, extra_paths=config.engine.path_entries()),
            node_tools_dir=config.engine.node_tools_dir,
            node_executable=config.engine.node_executable,
            engine_timeout_s=config.engine.timeout_s,
        )
        if cache is not None:
            ctx.cache = cache
        return ctx
