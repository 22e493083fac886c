"""Nearest ESLint configuration file lookup."""
from __future__ import annotations

import os
from typing import Optional

from eslint_bridge.core.logging_config import get_logger
from eslint_bridge.infra.tools.utils import find_cached, load_json_file

from .context import ResolutionContext

logger = get_logger(__name__)

MANIFEST_NAME = "package.json"

# package.json goes last: embedded config is the least preferred form.
CONFIG_FILE_NAMES = (
    ".eslintrc.js",
    ".eslintrc.yaml",
    ".eslintrc.yml",
    ".eslintrc.json",
    ".eslintrc",
    MANIFEST_NAME,
)


def has_embedded_config(manifest_path: str) -> bool:
    manifest = load_json_file(manifest_path)
    if not isinstance(manifest, dict):
        return False
    section = manifest.get("eslintConfig")
    # An empty object still counts as a config section.
    return isinstance(section, (dict, list)) or bool(section)


def find_config_file(start_dir: str, context: Optional[ResolutionContext] = None) -> Optional[str]:
    """Return the config file that applies to files in `start_dir`, or None.

    A ``package.json`` without an ``eslintConfig`` section is skipped and the
    search continues from its parent directory.
    """
    cache = context.cache.finder if context is not None else None
    directory = os.path.abspath(start_dir)
    while True:
        config_file = find_cached(directory, CONFIG_FILE_NAMES, cache)
        if config_file is None:
            return None
        if os.path.basename(config_file) != MANIFEST_NAME or has_embedded_config(config_file):
            logger.debug("Config file for %s: %s", start_dir, config_file)
            return config_file

        manifest_dir = os.path.dirname(config_file)
        parent = os.path.dirname(manifest_dir)
        if parent == manifest_dir:
            return None
        directory = parent
