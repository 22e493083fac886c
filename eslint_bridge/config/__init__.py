# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

from __future__ import annotations

"""Configuration management for eslint-bridge.

Modules
-------
config_loader : Configuration loading utilities
config_schema : Configuration data models

Examples
--------
>>> from eslint_bridge.config import load_config
>>> config = load_config("eslint-bridge.yaml")
"""

from .config_schema import (
    Config,
    EngineConfig,
    LoggingConfig,
    PolicyConfig,
    get_default_config,
)
from .config_loader import ConfigLoader, load_config

__all__ = [
    'Config',
    'EngineConfig',
    'LoggingConfig',
    'PolicyConfig',
    'get_default_config',
    'ConfigLoader',
    'load_config',
]
