"""Console output abstraction.

Services and commands print through ``ConsoleProtocol`` so output can be
styled with Rich in production and captured with ``MockConsole`` in tests.
Diagnostics (errors, hints, traces, usage) go to stderr; the echoed
submission command goes to stdout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()
    DIM = auto()
    BOLD = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT, *, err: bool = False) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print
            style: The style to apply
            err: Write to stderr instead of stdout
        """
        ...

    def error(self, message: str) -> None:
        """Print an error message to stderr."""
        ...

    def trace(self, message: str) -> None:
        """Print a dimmed progress line to stderr (verbose mode only)."""
        ...


class RichConsole:
    """Console implementation using Rich library."""

    def __init__(self, *, verbose: bool = False) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self.verbose = verbose
        # Command lines and paths contain brackets; never parse them as markup.
        self._out = Console(highlight=False)
        self._err = Console(stderr=True, highlight=False)
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.DIM: "dim",
            Style.BOLD: "bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT, *, err: bool = False) -> None:
        console = self._err if err else self._out
        rich_style = self._style_map.get(style, "")
        if rich_style:
            console.print(message, style=rich_style, markup=False, soft_wrap=True)
        else:
            console.print(message, markup=False, soft_wrap=True)

    def error(self, message: str) -> None:
        self._err.print("error:", style="red bold", end=" ")
        self._err.print(message, markup=False, soft_wrap=True)

    def trace(self, message: str) -> None:
        if self.verbose:
            self._err.print(message, style="dim", markup=False, soft_wrap=True)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style
    err: bool = False


def _empty_outputs() -> list[OutputRecord]:
    """Factory for empty outputs list (helps type inference)."""
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    verbose: bool = True
    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT, *, err: bool = False) -> None:
        self.outputs.append(OutputRecord(message, style, err))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR, True))

    def trace(self, message: str) -> None:
        if self.verbose:
            self.outputs.append(OutputRecord(message, Style.DIM, True))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """Get all output as a single newline-separated string."""
        return "\n".join(self.messages)

    @property
    def stdout(self) -> str:
        """Get output written to stdout."""
        return "\n".join(o.message for o in self.outputs if not o.err)

    @property
    def stderr(self) -> str:
        """Get output written to stderr."""
        return "\n".join(o.message for o in self.outputs if o.err)

    def has_error(self) -> bool:
        """Check if any error was printed."""
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
