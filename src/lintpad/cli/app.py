# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared state."""

from __future__ import annotations

from typing import Annotated

import typer

from ..console import detect_tty
from .commands import register_commands
from .shared import CLIState, configure_logging

app = typer.Typer(
    name="lintpad",
    help="Lint Python sources with an external checker and keep a workspace of edited files.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in console output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show debug traces.")] = False,
) -> None:
    """Configure presentation flags shared by every command."""

    use_color = not no_color and detect_tty()
    configure_logging(debug=debug, color=use_color)
    ctx.obj = CLIState(use_emoji=not no_emoji, use_color=use_color, debug=debug)


register_commands(app)

__all__ = ["app", "main"]
