from __future__ import annotations

"""Core data models for the resolution layer.

Modules
-------
schema : Pydantic schema models

See Also
--------
eslint_bridge.application : Operations producing these models
"""

from .schema import *
