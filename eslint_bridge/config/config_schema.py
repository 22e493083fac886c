# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""
Configuration schema and validation for eslint-bridge.

This module defines the configuration structure, default values, and
validation logic for all bridge settings.

Classes
-------
Config : Main configuration class
PolicyConfig : ESLint resolution policy settings
EngineConfig : Node engine settings
LoggingConfig : Logging configuration

Examples
--------
>>> config = Config.from_dict({"policy": {"use_global_eslint": True}})
>>> config.policy.to_policy().use_global_eslint
True
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from eslint_bridge.core.models import ResolutionPolicy


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [str(part) for part in value]


@dataclass
class PolicyConfig:
    """Which ESLint to use and how to feed it."""

    use_global_eslint: bool = False
    global_node_path: Optional[str] = None
    advanced_local_node_modules: Optional[str] = None
    disable_eslint_ignore: bool = False
    eslint_rules_dirs: List[str] = field(default_factory=list)
    eslintrc_path: Optional[str] = None

    def validate(self) -> List[str]:
        """
        Validate policy configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []
        for name in ("use_global_eslint", "disable_eslint_ignore"):
            if not isinstance(getattr(self, name), bool):
                errors.append(f"{name} must be a boolean, got {getattr(self, name)!r}")
        for entry in _as_list(self.eslint_rules_dirs):
            if not entry:
                errors.append("eslint_rules_dirs contains an empty entry")
        return errors

    def to_policy(self) -> ResolutionPolicy:
        return ResolutionPolicy(
            use_global_eslint=self.use_global_eslint,
            global_node_path=self.global_node_path or None,
            advanced_local_node_modules=self.advanced_local_node_modules or None,
            disable_eslint_ignore=self.disable_eslint_ignore,
            eslint_rules_dirs=tuple(_as_list(self.eslint_rules_dirs)),
            eslintrc_path=self.eslintrc_path or None,
        )


@dataclass
class EngineConfig:
    """Settings for the Node process hosting ESLint."""

    node_executable: str = "node"
    timeout_s: int = 60  # seconds
    node_tools_dir: Optional[str] = None
    extra_paths: List[str] = field(default_factory=list)

    def validate(self) -> List[str]:
        errors = []
        if not self.node_executable:
            errors.append("node_executable must not be empty")
        if self.timeout_s < 1:
            errors.append(f"timeout_s must be >= 1, got {self.timeout_s}")
        return errors

    def path_entries(self) -> List[str]:
        """`extra_paths` as a list; environment values arrive comma-separated."""
        return [entry for entry in _as_list(self.extra_paths) if entry]


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "WARNING"
    file: Optional[str] = None
    console: bool = True
    max_bytes: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5

    def validate(self) -> List[str]:
        errors = []

        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level.upper() not in valid_levels:
            errors.append(f"Invalid log level: {self.level}")

        if self.max_bytes < 1024:
            errors.append(f"max_bytes too small: {self.max_bytes}")

        if self.backup_count < 0:
            errors.append(f"backup_count must be >= 0, got {self.backup_count}")

        return errors


@dataclass
class Config:
    """
    Main configuration class for eslint-bridge.

    Aggregates all configuration sections and provides validation.
    """

    policy: PolicyConfig = field(default_factory=PolicyConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> bool:
        """
        Validate entire configuration.

        Returns:
            True if valid

        Raises:
            ConfigurationError: If any validation fails
        """
        from eslint_bridge.core.exceptions import ConfigurationError

        all_errors = []
        all_errors.extend(self.policy.validate())
        all_errors.extend(self.engine.validate())
        all_errors.extend(self.logging.validate())

        if all_errors:
            error_msg = "\n".join(f"  - {err}" for err in all_errors)
            raise ConfigurationError(
                "configuration",
                f"Configuration validation failed:\n{error_msg}",
                {"errors": all_errors}
            )

        return True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """
        Create configuration from dictionary.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            Config instance
        """
        return cls(
            policy=PolicyConfig(**config_dict.get("policy", {})),
            engine=EngineConfig(**config_dict.get("engine", {})),
            logging=LoggingConfig(**config_dict.get("logging", {})),
        )


def get_default_config() -> Config:
    return Config()
