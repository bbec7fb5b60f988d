# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, state)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from ..classification import LintOutcome, LintReport
from ..console import get_console_manager
from ..logging import fail as core_fail
from ..logging import ok as core_ok
from ..logging import outcome as core_outcome
from ..logging import warn as core_warn

OUTCOME_STYLES: Final[dict[str, str]] = {
    LintOutcome.SUCCESS.value: "bold green",
    LintOutcome.WARNINGS.value: "bold yellow",
    LintOutcome.ERRORS.value: "bold red",
    LintOutcome.AMBIGUOUS.value: "bold red",
}
COMMAND_KEYS: Final[frozenset[str]] = frozenset({"argv", "cmd", "command"})


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji and colour settings."""

    console: Console
    use_emoji: bool
    use_color: bool
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def report(self, report: LintReport, subject: str) -> None:
        """Print the summary line of ``report`` styled by its outcome."""

        core_outcome(report, subject, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        typer.echo(message)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        ``key=value`` pairs in ``message`` are highlighted: command values in
        blue, ``outcome=`` values in the colour of that outcome and non-zero
        ``exit=`` codes in red.

        Args:
            message: Debug payload rendered with simple highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            text.append(raw_value, style=self._value_style(key, raw_value))
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)

    @staticmethod
    def _value_style(key: str, value: str) -> str:
        if key in COMMAND_KEYS:
            return "bold blue"
        if key == "outcome":
            return OUTCOME_STYLES.get(value, "bold green")
        if key == "exit" and value != "0":
            return "bold red"
        return "bold green"


def build_cli_logger(*, emoji: bool, color: bool, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided preferences.

    Args:
        emoji: Whether log output may include emoji glyphs.
        color: Whether terminal colour output is enabled.
        debug: Whether debug logging should be enabled.

    Returns:
        CLILogger: Logger instance bound to the shared Rich console.
    """

    console = get_console_manager().get(color=color, emoji=emoji)
    return CLILogger(console=console, use_emoji=emoji, use_color=color, debug_enabled=debug)


def configure_logging(*, debug: bool, color: bool = False) -> None:
    """Route stdlib ``logging`` records through Rich on stderr.

    Only errors are shown unless ``debug`` is set; warnings raised by the runner
    are already surfaced to the user through the command's own output.
    Records share the colour preference of the rest of the CLI output.
    """

    console = get_console_manager().get(color=color, emoji=False, stderr=True)
    handler = RichHandler(console=console, show_path=False, rich_tracebacks=debug)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.ERROR,
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )


@dataclass(frozen=True, slots=True)
class CLIState:
    """Presentation flags shared by every command through ``ctx.obj``."""

    use_emoji: bool = True
    use_color: bool = False
    debug: bool = False

    def logger(self) -> CLILogger:
        return build_cli_logger(emoji=self.use_emoji, color=self.use_color, debug=self.debug)


def state_from_context(ctx: typer.Context) -> CLIState:
    """Return the :class:`CLIState` stored by the app callback, or defaults."""

    obj = ctx.find_root().obj
    return obj if isinstance(obj, CLIState) else CLIState()


__all__ = [
    "CLIError",
    "CLILogger",
    "CLIState",
    "COMMAND_KEYS",
    "OUTCOME_STYLES",
    "build_cli_logger",
    "configure_logging",
    "state_from_context",
]
