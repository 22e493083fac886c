"""Working directory selection for the engine process.

ESLint reads ignore patterns relative to its working directory, so the
engine runs from the directory of the nearest ``.eslintignore``, else the
project root, else the file's own directory. The choice is stored on the
``ResolutionContext`` and used as the child process cwd; the interpreter's
own working directory is never changed.
"""
from __future__ import annotations

import os
from typing import Optional

from eslint_bridge.core.logging_config import get_logger
from eslint_bridge.core.models import ResolutionPolicy, WorkingContext
from eslint_bridge.infra.tools.utils import find_cached, relative_path

from .context import ResolutionContext

logger = get_logger(__name__)

IGNORE_FILE_NAME = ".eslintignore"


def find_ignore_file(
    file_dir: str,
    policy: ResolutionPolicy,
    context: Optional[ResolutionContext] = None,
) -> Optional[str]:
    if policy.disable_eslint_ignore:
        return None
    cache = context.cache.finder if context is not None else None
    return find_cached(file_dir, IGNORE_FILE_NAME, cache)


def resolve_working_context(
    file_dir: str,
    file_path: str,
    policy: ResolutionPolicy,
    project_path: Optional[str],
    context: ResolutionContext,
) -> WorkingContext:
    ignore_file = find_ignore_file(file_dir, policy, context)

    # .eslintignore files are expected to live at the project root
    if ignore_file:
        cwd = os.path.dirname(ignore_file)
        rel = relative_path(file_path, cwd)
    elif project_path:
        cwd = project_path
        rel = relative_path(file_path, cwd)
    else:
        cwd = file_dir
        rel = os.path.basename(file_path)

    context.cwd = cwd
    logger.debug("Engine cwd %s, relative path %s", cwd, rel)
    return WorkingContext(cwd=cwd, relative_path=rel)
