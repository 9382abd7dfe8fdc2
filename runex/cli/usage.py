"""Usage text for run-example."""

from __future__ import annotations

from typing import TYPE_CHECKING

from runex.core.config import Config
from runex.output.console import Style

if TYPE_CHECKING:
    from runex.output.console import ConsoleProtocol

__all__ = ["is_help_flag", "print_usage", "usage_text"]


def is_help_flag(arg: str) -> bool:
    """True for ``-h``, ``--help``, ``-help`` and similar spellings."""
    return arg.lstrip("-").startswith("h") and arg.startswith("-")


def usage_text(config: Config) -> str:
    return "\n".join(
        [
            "Usage: run-example [options] <example-class-or-script> [example-args...]",
            "",
            "Options (only before the example):",
            "  --verbose        Trace each resolution step on stderr",
            "  --dry-run        Print the submission command without running it",
            "  --project DIR    Project root (default: top-most pom.xml above the cwd)",
            "",
            "Examples:",
            "  run-example org.apache.spark.examples.streaming.akka.ActorWordCount localhost 9999",
            "  run-example streaming-mqtt/examples/src/main/python/"
            f"mqtt_wordcount{config.script_extension} tcp://localhost:1883 foo",
            "",
            "Environment:",
            f"  {config.runtime_home_var}  runtime installation directory (required)",
        ]
    )


def print_usage(console: ConsoleProtocol, config: Config) -> None:
    console.print(usage_text(config), Style.DEFAULT, err=True)
