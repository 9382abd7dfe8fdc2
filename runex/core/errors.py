"""Exit codes for the run-example CLI.

Once the submission tool has been handed control, its own exit code is
propagated unchanged, so only the codes for failures that happen before the
hand-off are defined here.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for failures detected before the submission hand-off.

    These values are used as process exit codes and should remain stable:
    - 0: Success (dry run, or nothing to do)
    - 1: Usage shown, precondition failed, or resolution failed
    """

    OK = 0
    USER_ERROR = 1
