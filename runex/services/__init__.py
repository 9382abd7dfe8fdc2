"""Resolution services: environment, modules, artifacts, versions, launch."""

from .artifacts import resolve_artifact
from .environment import check_runtime_home
from .errors import (
    ArtifactNotFound,
    ModuleNotFound,
    RunError,
    RuntimeHomeInvalid,
    RuntimeHomeMissing,
    SubmitFailed,
    VersionQueryFailed,
)
from .launch import Launch, build_launch, execute
from .maven import Coordinate, MavenMetadata, Versions, build_coordinate, resolve_versions
from .modules import DEFAULT_PROBES, Module, resolve_module
from .runner import ExampleRunner

__all__ = [
    # artifacts
    "resolve_artifact",
    # environment
    "check_runtime_home",
    # errors
    "ArtifactNotFound",
    "ModuleNotFound",
    "RunError",
    "RuntimeHomeInvalid",
    "RuntimeHomeMissing",
    "SubmitFailed",
    "VersionQueryFailed",
    # launch
    "Launch",
    "build_launch",
    "execute",
    # maven
    "Coordinate",
    "MavenMetadata",
    "Versions",
    "build_coordinate",
    "resolve_versions",
    # modules
    "DEFAULT_PROBES",
    "Module",
    "resolve_module",
    # runner
    "ExampleRunner",
]
