from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RuntimeHomeMissing:
    var: str


@dataclass(frozen=True, slots=True)
class RuntimeHomeInvalid:
    var: str
    value: str


@dataclass(frozen=True, slots=True)
class ModuleNotFound:
    example: str


@dataclass(frozen=True, slots=True)
class ArtifactNotFound:
    module_name: str
    module_path: Path
    pattern: str
    hint: str = "Run: mvn -DskipTests install"


@dataclass(frozen=True, slots=True)
class VersionQueryFailed:
    expression: str
    module_path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class SubmitFailed:
    command: str
    reason: str


RunError = (
    RuntimeHomeMissing
    | RuntimeHomeInvalid
    | ModuleNotFound
    | ArtifactNotFound
    | VersionQueryFailed
    | SubmitFailed
)
