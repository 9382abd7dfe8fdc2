from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from runex.core.config import Config, load_project_config
from runex.core.errors import ErrorCode
from runex.core.project import Project, detect_project
from runex.core.result import Err
from runex.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    config: Config
    console: ConsoleProtocol


def build_context(*, project: Path | None = None, verbose: bool = False) -> CLIContext:
    console = RichConsole(verbose=verbose)

    project_result = detect_project(explicit=project)
    if isinstance(project_result, Err):
        console.error(project_result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    config_result = load_project_config(project_result.value.root)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        project=project_result.value,
        config=config_result.value,
        console=console,
    )
