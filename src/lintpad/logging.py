# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from rich.text import Text

from .classification import LintOutcome, LintReport
from .console import detect_tty, get_console_manager


def emoji(symbol: str, enable: bool) -> str:
    """Select an emoji symbol based on the caller's preference.

    Args:
        symbol: Emoji text to include in the output.
        enable: Flag indicating whether emoji output is desired.

    Returns:
        str: Emoji symbol when enabled, otherwise an empty string.
    """

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


_OUTCOME_EMITTERS: Final[dict[LintOutcome, Callable[..., None]]] = {
    LintOutcome.SUCCESS: ok,
    LintOutcome.WARNINGS: warn,
    LintOutcome.ERRORS: fail,
    LintOutcome.AMBIGUOUS: fail,
}


def outcome(report: LintReport, subject: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit the one-line summary of ``report`` in the style of its outcome.

    Clean runs print as success, warnings as warnings, and both errors and
    runs that could not be classified (for example a linter that never
    started) as failures.

    Args:
        report: Classified lint report.
        subject: Name of the linted file or input.
        use_emoji: Whether an emoji prefix should be printed.
        use_color: Colour override; ``None`` follows the terminal.
    """

    emit = _OUTCOME_EMITTERS[report.outcome]
    emit(report.summary(subject), use_emoji=use_emoji, use_color=use_color)


__all__ = ["emoji", "fail", "ok", "outcome", "warn"]
