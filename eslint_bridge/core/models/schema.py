"""Pydantic models exchanged between the resolution layer and its callers.

Classes
-------
SourceKind : Where a resolved ESLint copy came from
ResolutionPolicy : Immutable per-invocation resolution settings
PackageLocation : Result of an ESLint directory lookup
PackageModule : A located and validated ESLint package
EngineOptions : Options handed to the ESLint engine
WorkingContext : Working directory and file path relative to it
CommandResult : Captured output of a child process
LintJob : A request from the editor host
LintReport : Raw engine output for one file
JobResult : Response sent back to the editor host

Examples
--------
>>> policy = ResolutionPolicy(use_global_eslint=False)
>>> policy.eslint_rules_dirs
()

See Also
--------
eslint_bridge.application.locator : Produces PackageLocation
eslint_bridge.application.options : Produces EngineOptions
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class SourceKind(str, Enum):
    GLOBAL = "global"
    LOCAL_PROJECT = "local project"
    ADVANCED_SPECIFIED = "advanced specified"
    BUNDLED_FALLBACK = "bundled fallback"


class ResolutionPolicy(BaseModel):
    """User/project settings controlling which ESLint is used and how."""

    model_config = ConfigDict(frozen=True)

    use_global_eslint: bool = False
    global_node_path: Optional[str] = None
    advanced_local_node_modules: Optional[str] = None
    disable_eslint_ignore: bool = False
    eslint_rules_dirs: Tuple[str, ...] = ()
    eslintrc_path: Optional[str] = None


class PackageLocation(BaseModel):
    path: str
    source_kind: SourceKind


class PackageModule(BaseModel):
    """An ESLint package whose manifest and entry point were verified."""

    location: PackageLocation
    name: str
    version: Optional[str] = None
    main: str

    @property
    def path(self) -> str:
        return self.location.path


class EngineOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    rules: Dict[str, Any] = Field(default_factory=dict)
    ignore: bool = True
    fix: bool = False
    ignore_path: Optional[str] = None
    rule_paths: Tuple[str, ...] = ()
    config_file: Optional[str] = None

    def to_engine_dict(self) -> Dict[str, Any]:
        """Key names as ESLint's CLIEngine expects them."""
        payload: Dict[str, Any] = {
            "rules": dict(self.rules),
            "ignore": self.ignore,
            "fix": self.fix,
            "rulePaths": list(self.rule_paths),
        }
        if self.ignore_path:
            payload["ignorePath"] = self.ignore_path
        if self.config_file:
            payload["configFile"] = self.config_file
        return payload


class WorkingContext(BaseModel):
    cwd: str
    relative_path: str


class CommandResult(BaseModel):
    cmd: List[str]
    cwd: str
    returncode: int
    duration_s: float
    stdout: str
    stderr: str
    parsed_json: Optional[Any] = None


class LintJob(BaseModel):
    type: str = "lint"
    contents: str = ""
    file_path: str
    project_path: Optional[str] = None
    rules: Dict[str, Any] = Field(default_factory=dict)
    known_rules: Dict[str, Any] = Field(default_factory=dict)


class LintReport(BaseModel):
    messages: List[Dict[str, Any]] = Field(default_factory=list)
    output: Optional[str] = None
    rules: Dict[str, Any] = Field(default_factory=dict)


class JobResult(BaseModel):
    type: str
    messages: List[Dict[str, Any]] = Field(default_factory=list)
    output: Optional[str] = None
    updated_rules: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None


__all__ = [
    "SourceKind",
    "ResolutionPolicy",
    "PackageLocation",
    "PackageModule",
    "EngineOptions",
    "WorkingContext",
    "CommandResult",
    "LintJob",
    "LintReport",
    "JobResult",
]
