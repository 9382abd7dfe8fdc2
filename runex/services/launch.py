"""Submission command assembly and execution.

The command is built as a ``Launch`` value first and only then executed, so
it can be echoed, inspected in tests, or printed by ``--dry-run`` without
running anything.
"""

from __future__ import annotations

import os
import shlex
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from runex.core.config import Config
from runex.core.example import Example
from runex.core.result import Err, Ok, Result
from runex.platform.process import merged_env, replace_process
from runex.platform.walk import iter_dirs
from runex.services.errors import SubmitFailed
from runex.services.maven import Coordinate
from runex.services.modules import Module

__all__ = ["Launch", "build_launch", "execute", "find_script_roots"]


def _empty_env() -> dict[str, str]:
    return {}


@dataclass(frozen=True)
class Launch:
    """The final hand-off to the submission tool.

    Attributes:
        argv: Full command, submission tool first
        env_overrides: Variables set for the child on top of the current env
    """

    argv: tuple[str, ...]
    env_overrides: dict[str, str] = field(default_factory=_empty_env)

    def display(self) -> str:
        """Shell-quoted command line for echoing."""
        return shlex.join(self.argv)


def find_script_roots(root: Path, config: Config) -> list[Path]:
    """Directories under ``root`` whose name is a configured script root."""
    names = set(config.script_roots)
    return [path for path in iter_dirs(root) if path.name in names]


def _script_path_value(roots: Sequence[Path], current: str | None) -> str:
    parts = [str(p) for p in roots]
    if current:
        parts.append(current)
    return os.pathsep.join(parts)


def build_launch(
    *,
    example: Example,
    module: Module,
    artifact: Path,
    coordinate: Coordinate,
    submit_tool: Path,
    root: Path,
    args: Sequence[str],
    config: Config,
    environ: Mapping[str, str],
) -> Launch:
    """Assemble the submission command for a script or class example.

    Script examples get ``--packages <coordinate> <script> args...`` and every
    script root prepended to the script search path. Class examples get
    ``--packages <coordinate> --class <name> <artifact> args...``.
    """
    base = [str(submit_tool), "--packages", str(coordinate)]

    if example.is_script:
        roots = find_script_roots(root, config)
        value = _script_path_value(roots, environ.get(config.script_path_var))
        return Launch(
            argv=(*base, str(module.source), *args),
            env_overrides={config.script_path_var: value} if value else {},
        )

    return Launch(argv=(*base, "--class", example.name, str(artifact), *args))


def execute(launch: Launch) -> Result[int, SubmitFailed]:
    """Hand the process over to the submission tool.

    On POSIX this only returns on failure to start; the tool's exit status
    becomes this process's own. Elsewhere the tool's status is returned.
    """
    result = replace_process(list(launch.argv), env=merged_env(launch.env_overrides))
    if isinstance(result, Err):
        return Err(SubmitFailed(command=launch.argv[0], reason=result.error.stderr))
    return Ok(result.value)
