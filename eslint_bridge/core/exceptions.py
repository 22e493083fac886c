# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Custom exception hierarchy for eslint-bridge.

All exceptions inherit from EslintBridgeError so callers (the editor
integration layer, the CLI) can catch bridge failures separately from
standard Python exceptions.

Exception Hierarchy
-------------------
EslintBridgeError (base)
├── PrefixResolutionError
├── PackageNotFoundError
├── ConfigurationError
└── EngineExecutionError

Missing config files and missing ignore files are not errors; both have
defined fallbacks in the resolution layer.

Examples
--------
>>> try:
...     raise PackageNotFoundError('/usr/lib/node_modules/eslint', 'not a directory')
... except EslintBridgeError as e:
...     print(e.details['path'])
/usr/lib/node_modules/eslint
"""


class EslintBridgeError(Exception):
    """Base exception for all eslint-bridge errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    details : dict, optional
        Dictionary containing additional error context. Default is None.

    Attributes
    ----------
    message : str
        The error message.
    details : dict
        Additional error context information.
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PrefixResolutionError(EslintBridgeError):
    """Raised when ``npm get prefix`` cannot be executed or fails.

    This is fatal to any global ESLint lookup. The message tells the user
    to check that the editor sees the right ``$PATH``.

    Parameters
    ----------
    command : list of str
        The command that was attempted.
    reason : str
        Short description of what went wrong.
    details : dict, optional
        Additional context (exit code, stderr). Default is None.

    Examples
    --------
    >>> error = PrefixResolutionError(['npm', 'get', 'prefix'], 'exit code 1')
    >>> error.command
    ['npm', 'get', 'prefix']
    """

    def __init__(self, command, reason: str, details: dict = None):
        details = details or {}
        details['command'] = list(command)
        details['reason'] = reason
        super().__init__(
            "Unable to execute `npm get prefix`. Please make sure the editor "
            f"is getting $PATH correctly. ({reason})",
            details,
        )
        self.command = list(command)


class PackageNotFoundError(EslintBridgeError):
    """Raised when an explicitly requested ESLint package is unusable.

    Global mode never falls back to the bundled copy: linting with a
    different ESLint than the one the user asked for would silently change
    results.

    Parameters
    ----------
    path : str
        Directory where ESLint was expected.
    message : str
        Error message shown to the user.
    details : dict, optional
        Additional context. Default is None.

    Attributes
    ----------
    path : str
        The directory that was probed.
    """

    def __init__(self, path: str, message: str, details: dict = None):
        details = details or {}
        details['path'] = path
        super().__init__(message, details)
        self.path = path


class ConfigurationError(EslintBridgeError):
    """Raised when there are configuration-related issues.

    Parameters
    ----------
    config_key : str
        Configuration key that caused the error.
    message : str
        Error message describing the configuration issue.
    details : dict, optional
        Additional context. Default is None.

    Examples
    --------
    >>> error = ConfigurationError('engine.timeout_s', 'must be >= 1')
    >>> error.config_key
    'engine.timeout_s'
    """

    def __init__(self, config_key: str, message: str, details: dict = None):
        details = details or {}
        details['config_key'] = config_key
        super().__init__(f"Configuration error for '{config_key}': {message}", details)
        self.config_key = config_key


class EngineExecutionError(EslintBridgeError):
    """Raised when the Node process hosting ESLint fails.

    Parameters
    ----------
    operation : str
        Engine operation that failed (``lint``, ``rules``).
    message : str
        Error message describing the failure.
    details : dict, optional
        Additional context (exit code, stderr). Default is None.
    """

    def __init__(self, operation: str, message: str, details: dict = None):
        details = details or {}
        details['operation'] = operation
        super().__init__(f"ESLint {operation} failed: {message}", details)
        self.operation = operation
