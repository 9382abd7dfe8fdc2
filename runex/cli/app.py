from __future__ import annotations

import typer

from runex.cli.commands.run_cmd import run_example

# Everything after the example identifier belongs to the example, including
# dash-prefixed arguments; -h is handled by the command itself.
CONTEXT_SETTINGS = {
    "allow_interspersed_args": False,
    "ignore_unknown_options": True,
    "help_option_names": [],
}

app = typer.Typer(
    add_completion=False,
    rich_markup_mode=None,
)

app.command(context_settings=CONTEXT_SETTINGS)(run_example)


def main() -> None:
    app()
