"""Resolution operations and the job runner.

Modules
-------
context : Caller-owned caches and engine process state
locator : Which ESLint package to use
config_files : Nearest ESLint config file
working_context : Engine working directory and relative path
options : Engine options assembly
rules : Rule inventory extraction and comparison
worker : lint / fix / debug jobs
"""
from __future__ import annotations

from .config_files import find_config_file
from .context import ProcessCache, ResolutionContext
from .locator import (
    get_engine_package,
    load_package_module,
    locate_package,
    refresh_module_search_path,
    resolve_node_prefix,
)
from .options import build_engine_options
from .rules import did_rules_change
from .worker import run_job
from .working_context import resolve_working_context

__all__ = [
    "ProcessCache",
    "ResolutionContext",
    "build_engine_options",
    "did_rules_change",
    "find_config_file",
    "get_engine_package",
    "load_package_module",
    "locate_package",
    "refresh_module_search_path",
    "resolve_node_prefix",
    "resolve_working_context",
    "run_job",
]
