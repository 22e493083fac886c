# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Configuration loader for eslint-bridge.

Loads configuration from multiple sources with well-defined precedence.

Configuration Sources
---------------------
Priority order (highest to lowest):

1. Command-line arguments (highest priority)
2. Environment variables (prefixed with ESLINT_BRIDGE_), including those
   read from a ``.env`` file
3. Configuration file (YAML or TOML)
4. Default values (lowest priority)

Environment Variables
---------------------
All environment variables must be prefixed with `ESLINT_BRIDGE_`. For nested
configuration, use double underscores: `ESLINT_BRIDGE_POLICY__USE_GLOBAL_ESLINT`

Examples
--------
>>> loader = ConfigLoader()
>>> config = loader.load_config('eslint-bridge.yaml')
>>> config.policy.use_global_eslint
False
"""

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .config_schema import Config
from eslint_bridge.core.exceptions import ConfigurationError
from eslint_bridge.core.logging_config import get_logger

logger = get_logger(__name__)


class ConfigLoader:
    """Configuration loader that supports multiple sources.

    Attributes
    ----------
    ENV_PREFIX : str
        Prefix for environment variables ('ESLINT_BRIDGE_').
    config : Config
        Internal configuration object.
    """

    ENV_PREFIX = "ESLINT_BRIDGE_"
    FILE_KEYS = ("eslint_bridge", "eslint-bridge")

    def __init__(self):
        """Initialize configuration loader with default config."""
        self.config = Config()

    def load_from_file(self, file_path: str) -> Config:
        """
        Load configuration from a file.

        Supports YAML and TOML formats based on file extension. A top-level
        ``eslint_bridge`` key, or ``[tool.eslint_bridge]`` in a
        pyproject.toml, is unwrapped.

        Raises:
            ConfigurationError: If file cannot be loaded or parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise ConfigurationError(
                "file_path",
                f"Configuration file not found: {file_path}"
            )

        try:
            if path.suffix in ['.yaml', '.yml']:
                with open(path, 'r', encoding='utf-8') as f:
                    config_dict = yaml.safe_load(f) or {}
            elif path.suffix == '.toml':
                with open(path, 'rb') as f:
                    config_dict = tomllib.load(f)
            else:
                raise ConfigurationError(
                    "file_format",
                    f"Unsupported configuration file format: {path.suffix}"
                )
        except yaml.YAMLError as e:
            raise ConfigurationError(
                "yaml_parse",
                f"Failed to parse YAML configuration: {e}"
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                "toml_parse",
                f"Failed to parse TOML configuration: {e}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                "file_load",
                f"Failed to load configuration file: {e}"
            ) from e

        if not isinstance(config_dict, dict):
            raise ConfigurationError("file_format", "Configuration root must be a mapping")

        config_dict = self._unwrap(config_dict)
        try:
            self.config = Config.from_dict(config_dict)
        except TypeError as e:
            raise ConfigurationError("file_load", f"Unknown configuration option: {e}") from e
        logger.debug("Loaded configuration from %s", path)
        return self.config

    def load_from_env(self) -> Config:
        """
        Load configuration from environment variables.

        Example:
            ESLINT_BRIDGE_POLICY__USE_GLOBAL_ESLINT=true
            ESLINT_BRIDGE_POLICY__ESLINT_RULES_DIRS=rules,more-rules
            ESLINT_BRIDGE_ENGINE__TIMEOUT_S=30
        """
        env_config: Dict[str, Dict[str, Any]] = {}

        for key, value in os.environ.items():
            if key.startswith(self.ENV_PREFIX):
                config_key = key[len(self.ENV_PREFIX):].lower()
                parts = config_key.split('__')

                if len(parts) == 2:
                    section, option = parts
                    env_config.setdefault(section, {})[option] = self._parse_value(value)

        if env_config:
            self._merge_config(env_config)

        return self.config

    def load_from_args(self, args: Dict[str, Any]) -> Config:
        """
        Load configuration from command-line arguments.

        Args:
            args: Dictionary of argument names and values; None values are ignored
        """
        if not args:
            return self.config

        arg_mapping = {
            'use_global_eslint': ('policy', 'use_global_eslint'),
            'global_node_path': ('policy', 'global_node_path'),
            'advanced_local_node_modules': ('policy', 'advanced_local_node_modules'),
            'disable_eslint_ignore': ('policy', 'disable_eslint_ignore'),
            'eslint_rules_dirs': ('policy', 'eslint_rules_dirs'),
            'eslintrc_path': ('policy', 'eslintrc_path'),
            'node_executable': ('engine', 'node_executable'),
            'node_tools_dir': ('engine', 'node_tools_dir'),
            'timeout': ('engine', 'timeout_s'),
            'log_level': ('logging', 'level'),
            'log_file': ('logging', 'file'),
        }

        for arg_name, value in args.items():
            if value is not None and arg_name in arg_mapping:
                section, option = arg_mapping[arg_name]
                self._set_config_value(section, option, value)

        return self.config

    def load_config(
        self,
        config_file: Optional[str] = None,
        env: bool = True,
        args: Optional[Dict[str, Any]] = None,
        dotenv_path: Optional[str] = None,
    ) -> Config:
        """
        Load configuration from multiple sources.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.config = Config()

        if config_file:
            self.load_from_file(config_file)

        if env:
            load_dotenv(dotenv_path)
            self.load_from_env()

        if args:
            self.load_from_args(args)

        self.config.validate()

        return self.config

    def _unwrap(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        tool = config_dict.get("tool")
        if isinstance(tool, dict):
            for key in self.FILE_KEYS:
                if key in tool:
                    return tool[key]
        for key in self.FILE_KEYS:
            if key in config_dict:
                return config_dict[key]
        return config_dict

    def _merge_config(self, partial_config: Dict[str, Any]):
        for section, values in partial_config.items():
            for key, value in values.items():
                self._set_config_value(section, key, value)

    def _set_config_value(self, section: str, option: str, value: Any):
        if hasattr(self.config, section):
            section_obj = getattr(self.config, section)
            if hasattr(section_obj, option):
                setattr(section_obj, option, value)

    @staticmethod
    def _parse_value(value: str) -> Any:
        """
        Parse string value to appropriate type.

        Returns:
            Parsed value (bool, int, float, or str)
        """
        if value.lower() in ('true', 'yes', 'on'):
            return True
        if value.lower() in ('false', 'no', 'off'):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value


def load_config(
    config_file: Optional[str] = None,
    env: bool = True,
    args: Optional[Dict[str, Any]] = None,
    dotenv_path: Optional[str] = None,
) -> Config:
    """Convenience function to load configuration."""
    loader = ConfigLoader()
    return loader.load_config(config_file=config_file, env=env, args=args, dotenv_path=dotenv_path)
