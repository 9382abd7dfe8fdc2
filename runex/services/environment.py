"""Runtime installation precondition check."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from runex.core.config import Config
from runex.core.result import Err, Ok, Result
from runex.services.errors import RuntimeHomeInvalid, RuntimeHomeMissing

__all__ = ["check_runtime_home", "submit_tool_path"]


def check_runtime_home(
    config: Config,
    environ: Mapping[str, str],
) -> Result[Path, RuntimeHomeMissing | RuntimeHomeInvalid]:
    """Return the runtime installation root named by ``config.runtime_home_var``.

    The variable must be set, non-empty, and name an existing directory.
    """
    value = environ.get(config.runtime_home_var, "")
    if not value:
        return Err(RuntimeHomeMissing(var=config.runtime_home_var))

    home = Path(value).expanduser()
    if not home.is_dir():
        return Err(RuntimeHomeInvalid(var=config.runtime_home_var, value=value))
    return Ok(home)


def submit_tool_path(runtime_home: Path, config: Config) -> Path:
    return runtime_home / config.submit_tool
