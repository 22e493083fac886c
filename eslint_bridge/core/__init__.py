from __future__ import annotations

"""Core domain models, exceptions and logging setup.

See Also
--------
eslint_bridge.core.models : Pydantic models
eslint_bridge.core.exceptions : Error hierarchy
"""
