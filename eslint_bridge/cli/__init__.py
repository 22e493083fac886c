from __future__ import annotations

"""Command-line interface for eslint-bridge, built with Typer.

Examples
--------
    $ python -m eslint_bridge locate src/app.js
"""

from .cli import app

__all__ = ["app"]
