"""Subprocess execution with Result-based error handling.

``run`` captures output (Maven metadata queries). ``replace_process`` hands
the process over to the submission tool, the way a shell ``exec`` does.

Usage:
    match run(["mvn", "-v"], cwd=Path(".")):
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import os
import signal
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from runex.core.result import Err, Ok, Result

__all__ = [
    "ProcessError",
    "merged_env",
    "replace_process",
    "run",
    "shell_status",
    "wait_inherit",
]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process (-1 if it never started).
        stdout: Standard output (may be empty).
        stderr: Standard error (contains error details).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        """Format error for display."""
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def merged_env(overrides: Mapping[str, str]) -> dict[str, str] | None:
    """Return the current environment with ``overrides`` applied.

    Returns None when there is nothing to override, so the child simply
    inherits the parent environment.
    """
    if not overrides:
        return None
    env = dict(os.environ)
    env.update(overrides)
    return env


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return stdout or error.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(stdout) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def shell_status(returncode: int) -> int:
    """Map a subprocess return code to the status a shell would report.

    A child killed by signal N has ``returncode == -N``; shells report
    ``128 + N`` for it.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def wait_inherit(
    cmd: list[str],
    env: dict[str, str] | None = None,
) -> Result[int, ProcessError]:
    """Run a command with inherited standard streams and wait for it.

    SIGINT is ignored by this process while the child runs, so Ctrl-C only
    reaches the child and its own shutdown handling decides the exit status.
    Only a failure to start is ``Err``.
    """
    try:
        proc = subprocess.Popen(cmd, env=env)
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        returncode = proc.wait()
    finally:
        signal.signal(signal.SIGINT, previous)
    return Ok(shell_status(returncode))


def replace_process(
    cmd: list[str],
    env: dict[str, str] | None = None,
) -> Result[int, ProcessError]:
    """Hand this process over to ``cmd``.

    On POSIX the process image is replaced, so on success this never
    returns and the child's exit status is the process's own. Elsewhere the
    child is run with ``wait_inherit``. ``Err`` means the command could not
    be started.
    """
    if os.name != "posix":
        return wait_inherit(cmd, env=env)

    # exec discards anything still buffered in Python's streams.
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        if env is None:
            os.execvp(cmd[0], cmd)
        else:
            os.execvpe(cmd[0], cmd, env)
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))