"""Platform abstraction layer."""

from .process import (
    ProcessError,
    merged_env,
    replace_process,
    run,
    shell_status,
    wait_inherit,
)
from .walk import (
    iter_dirs,
    iter_files,
)

__all__ = [
    # process
    "ProcessError",
    "merged_env",
    "replace_process",
    "run",
    "shell_status",
    "wait_inherit",
    # walk
    "iter_dirs",
    "iter_files",
]
