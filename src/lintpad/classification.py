# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Classify lint results into success, warnings or errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .runner import SPAWN_FAILURE_EXIT_CODE, TIMEOUT_EXIT_CODE, LintResult


class LintOutcome(str, Enum):
    """Enumerate the ways a lint run can be reported to the user."""

    SUCCESS = "success"
    WARNINGS = "warnings"
    ERRORS = "errors"
    AMBIGUOUS = "ambiguous"


def split_messages(text: str) -> tuple[str, ...]:
    """Return the non-blank lines of ``text`` with trailing whitespace removed.

    Args:
        text: Captured stream output.

    Returns:
        tuple[str, ...]: One entry per non-blank line.
    """

    return tuple(line.rstrip() for line in text.splitlines() if line.strip())


@dataclass(frozen=True, slots=True)
class LintReport:
    """Classified view of a :class:`LintResult`."""

    outcome: LintOutcome
    result: LintResult
    messages: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.outcome is LintOutcome.SUCCESS

    def summary(self, subject: str = "content") -> str:
        """Return a one-line description of the report.

        Args:
            subject: Name of the linted item used in the message.

        Returns:
            str: Human readable summary.
        """

        count = len(self.messages)
        plural = "" if count == 1 else "s"
        if self.outcome is LintOutcome.SUCCESS:
            return f"{subject} passed"
        if self.outcome is LintOutcome.WARNINGS:
            return f"{subject}: {count} warning{plural}"
        if self.outcome is LintOutcome.ERRORS:
            return f"{subject}: {count} error{plural}"
        code = self.result.exit_code
        if code == SPAWN_FAILURE_EXIT_CODE:
            return f"{subject}: lint command could not be started (exit {code})"
        if code == TIMEOUT_EXIT_CODE:
            return f"{subject}: lint command timed out (exit {code})"
        return f"{subject}: lint command exited with status {code} without output"


def classify(result: LintResult) -> LintReport:
    """Apply the warnings/errors policy to ``result``.

    A zero exit is a success. Otherwise standard output, when present, holds
    warnings; failing that, standard error holds errors. A non-zero exit with
    both streams empty carries no information and is reported as ambiguous.

    Args:
        result: Captured lint result.

    Returns:
        LintReport: Classified report.
    """

    if result.exit_code == 0:
        return LintReport(outcome=LintOutcome.SUCCESS, result=result)
    warnings = split_messages(result.stdout)
    if warnings:
        return LintReport(outcome=LintOutcome.WARNINGS, result=result, messages=warnings)
    errors = split_messages(result.stderr)
    if errors:
        return LintReport(outcome=LintOutcome.ERRORS, result=result, messages=errors)
    return LintReport(outcome=LintOutcome.AMBIGUOUS, result=result)


__all__ = ["LintOutcome", "LintReport", "classify", "split_messages"]
