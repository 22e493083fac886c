"""
ESLint package resolution.

Decides which installed copy of ESLint lints a file: the global install
(under the npm prefix), the project's own ``node_modules``, a
user-specified ``node_modules`` directory, or the copy bundled with this
package.

Failure policy:
    * Global mode never falls back. A missing global ESLint is a
      configuration mistake and raises ``PackageNotFoundError``.
    * Local and advanced lookups degrade to the bundled copy, so linting
      never silently stops because a project setup is incomplete.

Example::

    ctx = ResolutionContext()
    location = locate_package("/repo/node_modules", ResolutionPolicy(), "/repo", ctx)
    package = load_package_module("/repo/node_modules", ResolutionPolicy(), "/repo", ctx)
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from eslint_bridge.core.exceptions import PackageNotFoundError
from eslint_bridge.core.logging_config import get_logger
from eslint_bridge.core.models import (
    PackageLocation,
    PackageModule,
    ResolutionPolicy,
    SourceKind,
)
from eslint_bridge.infra.tools.base import node_env
from eslint_bridge.infra.tools.npm import get_npm_prefix
from eslint_bridge.infra.tools.utils import (
    clean_path,
    find_cached,
    is_directory,
    load_json_file,
)

from .context import ResolutionContext

logger = get_logger(__name__)

GLOBAL_NOT_FOUND = "ESLint not found, please ensure the global Node path is set correctly."
GLOBAL_NOT_LOADABLE = "ESLint not found, try restarting the editor to clear caches."


class _ModuleLoadError(Exception):
    pass


def resolve_node_prefix(context: ResolutionContext) -> str:
    """npm's global prefix, memoized on ``context.cache``."""
    if context.cache.node_prefix is None:
        context.cache.node_prefix = get_npm_prefix(context.env)
    return context.cache.node_prefix


def locate_package(
    modules_dir: Optional[str],
    policy: ResolutionPolicy,
    project_path: Optional[str],
    context: ResolutionContext,
) -> PackageLocation:
    """Find the ESLint directory to use.

    Raises
    ------
    PackageNotFoundError
        Global ESLint was requested and is not under the prefix.
    PrefixResolutionError
        Global ESLint was requested without an explicit path and npm failed.
    """
    eslint_dir: Optional[str]
    if policy.use_global_eslint:
        kind = SourceKind.GLOBAL
        prefix = clean_path(policy.global_node_path) or resolve_node_prefix(context)
        # npm on Windows and Yarn everywhere
        eslint_dir = os.path.join(prefix, "node_modules", "eslint")
        if not is_directory(eslint_dir):
            # npm on other platforms
            eslint_dir = os.path.join(prefix, "lib", "node_modules", "eslint")
    elif not policy.advanced_local_node_modules:
        kind = SourceKind.LOCAL_PROJECT
        eslint_dir = os.path.join(modules_dir, "eslint") if modules_dir else None
    else:
        kind = SourceKind.ADVANCED_SPECIFIED
        override = clean_path(policy.advanced_local_node_modules)
        if os.path.isabs(override):
            eslint_dir = os.path.join(override, "eslint")
        else:
            eslint_dir = os.path.join(project_path or "", override, "eslint")

    if eslint_dir and is_directory(eslint_dir):
        logger.debug("Using %s ESLint at %s", kind.value, eslint_dir)
        return PackageLocation(path=eslint_dir, source_kind=kind)
    if policy.use_global_eslint:
        raise PackageNotFoundError(eslint_dir or "", GLOBAL_NOT_FOUND)

    bundled = context.bundled_eslint_path()
    logger.info("No %s ESLint at %s, using bundled copy", kind.value, eslint_dir)
    return PackageLocation(path=bundled, source_kind=SourceKind.BUNDLED_FALLBACK)


def _load_module(location: PackageLocation) -> PackageModule:
    manifest = load_json_file(Path(location.path) / "package.json")
    if not isinstance(manifest, dict):
        raise _ModuleLoadError(f"no readable package.json in {location.path}")

    main = manifest.get("main") or "index.js"
    entry = Path(location.path) / main
    if not entry.is_file() and not entry.with_name(entry.name + ".js").is_file():
        raise _ModuleLoadError(f"entry point {entry} does not exist")

    return PackageModule(
        location=location,
        name=manifest.get("name") or "eslint",
        version=manifest.get("version"),
        main=str(entry),
    )


def load_package_module(
    modules_dir: Optional[str],
    policy: ResolutionPolicy,
    project_path: Optional[str],
    context: ResolutionContext,
) -> PackageModule:
    """Locate ESLint and verify it can be loaded.

    A local or advanced copy that fails to load is replaced by the bundled
    copy. A global copy that fails to load raises ``PackageNotFoundError``.
    """
    location = locate_package(modules_dir, policy, project_path, context)
    try:
        return _load_module(location)
    except _ModuleLoadError as e:
        if location.source_kind is SourceKind.GLOBAL:
            raise PackageNotFoundError(location.path, GLOBAL_NOT_LOADABLE, {"reason": str(e)}) from e
        if location.source_kind is SourceKind.BUNDLED_FALLBACK:
            raise PackageNotFoundError(
                location.path, "The bundled ESLint is missing or damaged.", {"reason": str(e)}
            ) from e
        logger.warning("Could not load ESLint from %s (%s), using bundled copy", location.path, e)

    bundled = PackageLocation(
        path=context.bundled_eslint_path(), source_kind=SourceKind.BUNDLED_FALLBACK
    )
    try:
        return _load_module(bundled)
    except _ModuleLoadError as e:
        raise PackageNotFoundError(
            bundled.path, "The bundled ESLint is missing or damaged.", {"reason": str(e)}
        ) from e


def refresh_module_search_path(modules_dir: Optional[str], context: ResolutionContext) -> bool:
    """Point NODE_PATH of future engine processes at `modules_dir`.

    Returns True when the search path changed.
    """
    if context.last_modules_dir == modules_dir:
        return False
    context.last_modules_dir = modules_dir
    context.env = node_env(context.env, modules_dir=modules_dir or "")
    logger.debug("NODE_PATH set to %r", modules_dir or "")
    return True


def get_engine_package(
    file_dir: str,
    policy: ResolutionPolicy,
    project_path: Optional[str],
    context: ResolutionContext,
) -> PackageModule:
    """Resolve and load the ESLint that should lint files in `file_dir`."""
    found = find_cached(file_dir, "node_modules/eslint", context.cache.finder)
    modules_dir = os.path.dirname(found) if found else None
    refresh_module_search_path(modules_dir, context)
    return load_package_module(modules_dir, policy, project_path, context)
