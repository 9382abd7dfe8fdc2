"""Project root detection.

The project is the root of the multi-module Maven checkout that owns the
examples. It is identified by a ``pom.xml``; since every module has one too,
the root is the top-most directory of an unbroken chain of ``pom.xml``
directories above the start directory.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "PROJECT_ROOT_ENV",
    "Project",
    "ProjectError",
    "detect_project",
    "find_project_upward",
    "is_maven_project",
]

PROJECT_ROOT_ENV = "RUN_EXAMPLE_PROJECT_ROOT"


@dataclass(frozen=True)
class ProjectError:
    """Error when the project root cannot be detected."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Project:
    """A detected multi-module checkout."""

    root: Path

    @property
    def maven_wrapper(self) -> Path:
        """Path to the bundled Maven launcher (build/mvn)."""
        return self.root / "build" / "mvn"


def is_maven_project(path: Path) -> bool:
    """Check if a directory holds a ``pom.xml``."""
    return (path / "pom.xml").is_file()


def find_project_upward(start: Path) -> Path | None:
    """Return the top-most pom directory reachable upward from ``start``.

    The walk stops at the first parent without a ``pom.xml`` once a project
    has been entered, so sibling checkouts higher up are never picked.
    """
    found: Path | None = None
    for parent in (start, *start.parents):
        if is_maven_project(parent):
            found = parent
        elif found is not None:
            break
    return found


def detect_project(
    *,
    explicit: Path | None = None,
    start_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Result[Project, ProjectError]:
    """Detect the project root.

    Detection order:
    1. ``explicit`` (the ``--project`` option)
    2. RUN_EXAMPLE_PROJECT_ROOT environment variable
    3. Search upward from start_dir (or cwd) for the top-most ``pom.xml``
    """
    env = os.environ if environ is None else environ

    if explicit is not None:
        return _validate(explicit, source="--project")

    env_value = env.get(PROJECT_ROOT_ENV)
    if env_value:
        return _validate(Path(env_value), source=f"${PROJECT_ROOT_ENV}")

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_project_upward(search_start)
    if found is None:
        return Err(
            ProjectError(
                message="Could not find project root (no pom.xml above the current directory)",
                searched_from=search_start,
            )
        )
    return Ok(Project(root=found))


def _validate(candidate: Path, *, source: str) -> Result[Project, ProjectError]:
    root = candidate.expanduser().resolve()
    if not root.is_dir():
        return Err(ProjectError(message=f"{source} '{candidate}' is not a directory"))
    return Ok(Project(root=root))
