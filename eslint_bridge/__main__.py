"""Main entry point for running eslint_bridge as a module.

Examples
--------
$ python -m eslint_bridge --help
$ python -m eslint_bridge debug src/app.js
"""
from __future__ import annotations

from .main import main


if __name__ == "__main__":
    main()
