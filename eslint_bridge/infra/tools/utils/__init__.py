from __future__ import annotations

"""Tool utility functions.

Helpers shared by the resolution layer and the engine adapter for JSON
handling and path manipulation.

Modules
-------
json : JSON utilities
paths : Path cleaning and ancestor search

See Also
--------
eslint_bridge.application : Resolution operations
"""

from .json import load_json_file, safe_json_loads
from .paths import (
    clean_path,
    find_cached,
    is_directory,
    relative_path,
    safe_relative_path,
)

__all__ = [
    "load_json_file",
    "safe_json_loads",
    "clean_path",
    "find_cached",
    "is_directory",
    "relative_path",
    "safe_relative_path",
]
