"""Assembly of the options object handed to the ESLint engine."""
from __future__ import annotations

import os
from typing import Any, List, Mapping, Optional

from eslint_bridge.core.models import EngineOptions, ResolutionPolicy
from eslint_bridge.infra.tools.utils import clean_path, find_cached

from .context import ResolutionContext
from .working_context import find_ignore_file


def resolve_rule_paths(
    rules_dirs, file_dir: str, context: Optional[ResolutionContext] = None
) -> List[str]:
    """Absolute entries pass through; relative ones are searched upward from `file_dir`."""
    cache = context.cache.finder if context is not None else None
    resolved: List[str] = []
    for entry in rules_dirs:
        rules_dir = clean_path(entry)
        if not rules_dir:
            continue
        if not os.path.isabs(rules_dir):
            rules_dir = find_cached(file_dir, rules_dir, cache)
        if rules_dir:
            resolved.append(rules_dir)
    return resolved


def build_engine_options(
    job_type: str,
    policy: ResolutionPolicy,
    rules: Optional[Mapping[str, Any]],
    file_path: str,
    file_dir: str,
    config_path: Optional[str],
    context: Optional[ResolutionContext] = None,
) -> EngineOptions:
    config_file = None
    if config_path is None and policy.eslintrc_path:
        # No configuration found near the file, use the fallback from settings
        config_file = clean_path(policy.eslintrc_path)

    return EngineOptions(
        rules=dict(rules or {}),
        ignore=not policy.disable_eslint_ignore,
        fix=job_type == "fix",
        ignore_path=find_ignore_file(file_dir, policy, context),
        rule_paths=tuple(resolve_rule_paths(policy.eslint_rules_dirs, file_dir, context)),
        config_file=config_file,
    )
