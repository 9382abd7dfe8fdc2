from __future__ import annotations

from pathlib import Path

import typer

from runex.cli.context import build_context
from runex.cli.errors import print_run_error, shows_usage
from runex.cli.usage import is_help_flag, print_usage
from runex.core.config import Config
from runex.core.errors import ErrorCode
from runex.core.result import Err
from runex.output.console import RichConsole
from runex.services.launch import execute
from runex.services.maven import MavenMetadata, find_maven
from runex.services.runner import ExampleRunner


def run_example(
    args: list[str] | None = typer.Argument(
        None,
        metavar="EXAMPLE [ARGS]...",
        help="Example class name or script path, followed by its arguments.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Trace each resolution step."),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the submission command without running it."
    ),
    project: Path | None = typer.Option(
        None,
        "--project",
        help="Project root (overrides auto detection).",
    ),
) -> None:
    """Resolve an example and launch it with the runtime's submission tool."""
    argv = list(args or [])
    if not argv or is_help_flag(argv[0]):
        print_usage(RichConsole(), Config())
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    ctx = build_context(project=project, verbose=verbose)
    runner = ExampleRunner(
        project=ctx.project,
        config=ctx.config,
        maven=MavenMetadata(executable=find_maven(ctx.project, ctx.config)),
        console=ctx.console,
    )

    prepared = runner.prepare(argv[0], argv[1:])
    if isinstance(prepared, Err):
        print_run_error(prepared.error, ctx.console)
        if shows_usage(prepared.error):
            print_usage(ctx.console, ctx.config)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    launch = prepared.value
    for key, value in sorted(launch.env_overrides.items()):
        ctx.console.trace(f"{key}={value}")
    ctx.console.print(launch.display())
    if dry_run:
        return

    result = execute(launch)
    if isinstance(result, Err):
        print_run_error(result.error, ctx.console)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    raise typer.Exit(code=result.value)
