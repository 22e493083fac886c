"""JSON utility functions for manifest and engine output handling.

Functions
---------
safe_json_loads : Safely load JSON without raising
load_json_file : Read and parse a JSON file without raising

Examples
--------
>>> from eslint_bridge.infra.tools.utils.json import safe_json_loads
>>> data = safe_json_loads('{"key": "value"}')
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union


def safe_json_loads(payload: str | bytes | None, default: Any = None) -> Any:
    """Best-effort JSON loader that never raises."""
    if payload is None:
        return default
    try:
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8", "ignore")
        return json.loads(payload)
    except ValueError:
        return default


def load_json_file(path: Union[str, Path], default: Any = None) -> Any:
    """Read `path` as JSON; unreadable or malformed files yield `default`."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        return default
    return safe_json_loads(text, default=default)
