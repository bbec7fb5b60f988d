# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console rendering for classified lint reports."""

from __future__ import annotations

from typing import Final

from rich import box
from rich.table import Table
from rich.text import Text

from ..classification import LintOutcome, LintReport
from ..diagnostics import parse_diagnostics
from .shared import CLILogger

EXIT_CODES: Final[dict[LintOutcome, int]] = {
    LintOutcome.SUCCESS: 0,
    LintOutcome.WARNINGS: 1,
    LintOutcome.ERRORS: 2,
    LintOutcome.AMBIGUOUS: 2,
}


def exit_code_for(report: LintReport) -> int:
    """Return the process exit status matching ``report``."""

    return EXIT_CODES[report.outcome]


def build_diagnostics_table(report: LintReport, *, color: bool) -> Table:
    """Return a table listing the report's messages with their locations.

    Args:
        report: Report whose messages are rendered.
        color: Whether the heavier coloured box style should be used.

    Returns:
        Table: Rich table with ``Location`` and ``Message`` columns.
    """

    table = Table(box=box.SIMPLE_HEAVY if color else box.SIMPLE)
    table.add_column("Location", justify="right", no_wrap=True)
    table.add_column("Message", overflow="fold")
    for diagnostic in parse_diagnostics(report.messages):
        table.add_row(Text(diagnostic.location), Text(diagnostic.message))
    return table


def render_report(report: LintReport, *, subject: str, logger: CLILogger) -> int:
    """Print ``report`` for ``subject`` and return the matching exit status.

    Args:
        report: Classified lint report.
        subject: Name of the linted file or input shown in messages.
        logger: CLI logger carrying presentation preferences.

    Returns:
        int: Exit status for the report.
    """

    logger.report(report, subject)
    if report.messages:
        logger.console.print(build_diagnostics_table(report, color=logger.use_color))
    logger.debug(f"subject={subject} exit={report.result.exit_code} outcome={report.outcome.value}")
    return exit_code_for(report)


__all__ = ["EXIT_CODES", "build_diagnostics_table", "exit_code_for", "render_report"]
