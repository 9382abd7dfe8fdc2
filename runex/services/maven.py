"""Maven metadata queries and dependency coordinates.

Versions come from ``mvn help:evaluate``. Its captured stdout can still carry
log and download-progress lines, so those are dropped and the last remaining
line is taken as the value. Anything that does not look like a single token
is reported as unavailable rather than passed on.

Usage:
    maven = MavenMetadata(executable=find_maven(project, config))
    match resolve_versions(module, maven, config):
        case Ok(versions):
            coordinate = build_coordinate(module, versions, config)
        case Err(error):
            print(error.reason)
"""

from __future__ import annotations

import re
import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from runex.core.config import Config
from runex.core.project import Project
from runex.core.result import Err, Ok, Result
from runex.platform.process import ProcessError, run
from runex.services.errors import VersionQueryFailed
from runex.services.modules import Module

__all__ = [
    "Coordinate",
    "MavenMetadata",
    "Versions",
    "build_coordinate",
    "extract_value",
    "find_maven",
    "resolve_versions",
]

CommandRunner = Callable[[list[str], Path], Result[str, ProcessError]]

_LOG_LINE = re.compile(r"^\[(INFO|WARNING|WARN|ERROR|DEBUG)\]")
_NOISE_PREFIXES = ("Download", "Progress")
_INVALID_MARKERS = ("null object or invalid expression", "${")


@dataclass(frozen=True, slots=True)
class Versions:
    """Module release version and companion binary-compatibility version."""

    module_version: str
    binary_version: str


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A ``group:artifact:version`` dependency coordinate."""

    group: str
    artifact_id: str
    version: str

    def __str__(self) -> str:
        return f"{self.group}:{self.artifact_id}:{self.version}"


def find_maven(project: Project, config: Config) -> str:
    """Pick the Maven executable.

    Order: ``config.maven`` (relative paths resolve against the project root),
    the project's ``build/mvn`` wrapper, then ``mvn`` from PATH.
    """
    if config.maven:
        candidate = project.root / config.maven
        if "/" in config.maven and candidate.is_file():
            return str(candidate)
        return config.maven
    if project.maven_wrapper.is_file():
        return str(project.maven_wrapper)
    return shutil.which("mvn") or "mvn"


def extract_value(output: str) -> str | None:
    """Return the queried value from ``help:evaluate`` output, or None.

    Log lines and download progress are skipped; the last remaining non-blank
    line is the value. None means nothing usable was printed.
    """
    lines = [
        line.strip()
        for line in output.splitlines()
        if line.strip()
        and not _LOG_LINE.match(line.strip())
        and not line.strip().startswith(_NOISE_PREFIXES)
    ]
    if not lines:
        return None
    value = lines[-1]
    if any(marker in value for marker in _INVALID_MARKERS):
        return None
    if any(ch.isspace() for ch in value):
        return None
    return value


@dataclass
class MavenMetadata:
    """Queries project properties through ``help:evaluate``."""

    executable: str = "mvn"
    runner: CommandRunner = field(default=run)

    def command(self, expression: str) -> list[str]:
        return [
            self.executable,
            "-B",
            "-q",
            "-DforceStdout",
            "help:evaluate",
            f"-Dexpression={expression}",
        ]

    def evaluate(self, expression: str, cwd: Path) -> Result[str, VersionQueryFailed]:
        """Evaluate ``expression`` in the module at ``cwd``."""
        result = self.runner(self.command(expression), cwd)
        if isinstance(result, Err):
            error = result.error
            detail = error.stderr.strip().splitlines()[-1:] if error.stderr.strip() else []
            reason = str(error) + (f": {detail[0]}" if detail else "")
            return Err(VersionQueryFailed(expression=expression, module_path=cwd, reason=reason))

        value = extract_value(result.value)
        if value is None:
            return Err(
                VersionQueryFailed(
                    expression=expression,
                    module_path=cwd,
                    reason="maven printed no usable value",
                )
            )
        return Ok(value)


def resolve_versions(
    module: Module,
    maven: MavenMetadata,
    config: Config,
) -> Result[Versions, VersionQueryFailed]:
    """Query the module version, then the binary-compatibility version."""
    version = maven.evaluate(config.version_property, module.path)
    if isinstance(version, Err):
        return version

    binary = maven.evaluate(config.binary_version_property, module.path)
    if isinstance(binary, Err):
        return binary

    return Ok(Versions(module_version=version.value, binary_version=binary.value))


def build_coordinate(module: Module, versions: Versions, config: Config) -> Coordinate:
    """Compose ``group:prefix-<module>_<binary>:<version>``."""
    return Coordinate(
        group=config.group,
        artifact_id=f"{config.artifact_prefix}-{module.artifact_name}_{versions.binary_version}",
        version=versions.module_version,
    )
