from __future__ import annotations

"""Child-process wrappers for Node.js tooling.

Modules
-------
base : Command execution and Node environment helpers
npm : npm prefix lookup
eslint : ESLint engine adapter

See Also
--------
eslint_bridge.application : Resolution operations
"""

from .base import bundled_eslint_dir, default_node_tools_dir, node_env, run_command

__all__ = [
    "bundled_eslint_dir",
    "default_node_tools_dir",
    "node_env",
    "run_command",
]
