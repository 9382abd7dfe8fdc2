"""Error presentation utilities.

Centralized error formatting. Every error reported here exits with
ErrorCode.USER_ERROR.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from runex.output.console import Style
from runex.services.errors import (
    ArtifactNotFound,
    ModuleNotFound,
    RunError,
    RuntimeHomeInvalid,
    RuntimeHomeMissing,
    SubmitFailed,
    VersionQueryFailed,
)

if TYPE_CHECKING:
    from runex.output.console import ConsoleProtocol

__all__ = ["print_run_error", "shows_usage"]


def print_run_error(error: RunError, console: ConsoleProtocol) -> None:
    """Print a resolution error with its remediation hint."""
    match error:
        case RuntimeHomeMissing(var=var):
            console.error(f"{var} is not set")
            console.print(
                f"hint: export {var}=<runtime installation directory>", Style.DIM, err=True
            )
        case RuntimeHomeInvalid(var=var, value=value):
            console.error(f"{var} is set to '{value}' but it is not a directory")
        case ModuleNotFound(example=example):
            console.error(f"could not find module for example: {example}")
        case ArtifactNotFound(module_name=name, module_path=path, pattern=pattern, hint=hint):
            console.error(f"could not find test artifact {pattern} in module {name} ({path})")
            console.print(f"hint: build and install the project first. {hint}", Style.DIM, err=True)
        case VersionQueryFailed(expression=expression, module_path=path, reason=reason):
            console.error(f"could not evaluate {expression} in {path}: {reason}")
            console.print(
                "hint: check that maven is installed and the property is defined",
                Style.DIM,
                err=True,
            )
        case SubmitFailed(command=command, reason=reason):
            console.error(f"could not start {command}: {reason}")


def shows_usage(error: RunError) -> bool:
    """Whether the usage text should follow the error."""
    return isinstance(error, ModuleNotFound)

