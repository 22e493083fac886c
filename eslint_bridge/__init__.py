"""eslint-bridge - locate and drive an installed ESLint for an editor.

The package decides which copy of ESLint lints a file (global install,
project ``node_modules``, a user-specified modules directory, or the
bundled copy), finds the configuration and ignore files that apply,
builds the engine options and reports when the rule inventory changes.
Linting itself happens inside ESLint, in a Node.js child process.

Examples
--------
Resolve ESLint for a file from the command line:
    $ python -m eslint_bridge locate src/app.js --project-root .

Lint a file:
    $ python -m eslint_bridge lint src/app.js

See Also
--------
eslint_bridge.cli.cli : Command-line interface
eslint_bridge.application : Resolution operations
"""
from __future__ import annotations

__version__ = "1.0.0"
__author__ = "Anush Krishna"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
