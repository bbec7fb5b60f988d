# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for lint result classification."""

from __future__ import annotations

import pytest

from lintpad.classification import LintOutcome, classify, split_messages
from lintpad.runner import SPAWN_FAILURE_EXIT_CODE, TIMEOUT_EXIT_CODE, LintResult


def test_zero_exit_is_success_even_with_output() -> None:
    report = classify(LintResult(exit_code=0, stdout="noise\n", stderr="more noise"))

    assert report.outcome is LintOutcome.SUCCESS
    assert report.ok
    assert report.messages == ()
    assert report.summary("app.py") == "app.py passed"


def test_stdout_lines_become_warnings() -> None:
    report = classify(
        LintResult(exit_code=1, stdout="1:1: 'os' imported but unused\n3:5: undefined name 'x'\n", stderr="ignored"),
    )

    assert report.outcome is LintOutcome.WARNINGS
    assert report.messages == ("1:1: 'os' imported but unused", "3:5: undefined name 'x'")
    assert report.summary("app.py") == "app.py: 2 warnings"


def test_stderr_lines_become_errors_when_stdout_is_empty() -> None:
    report = classify(LintResult(exit_code=1, stdout="", stderr="1:7: invalid syntax\nprint 'x'\n"))

    assert report.outcome is LintOutcome.ERRORS
    assert report.messages == ("1:7: invalid syntax", "print 'x'")
    assert not report.ok


def test_whitespace_only_stdout_falls_through_to_errors() -> None:
    report = classify(LintResult(exit_code=2, stdout="\n  \n", stderr="boom"))

    assert report.outcome is LintOutcome.ERRORS
    assert report.messages == ("boom",)
    assert report.summary() == "content: 1 error"


@pytest.mark.parametrize(
    ("exit_code", "expected"),
    [
        (SPAWN_FAILURE_EXIT_CODE, "could not be started"),
        (TIMEOUT_EXIT_CODE, "timed out"),
        (3, "exited with status 3 without output"),
    ],
)
def test_non_zero_exit_without_output_is_ambiguous(exit_code: int, expected: str) -> None:
    report = classify(LintResult(exit_code=exit_code))

    assert report.outcome is LintOutcome.AMBIGUOUS
    assert report.messages == ()
    assert expected in report.summary("app.py")


def test_split_messages_drops_blank_lines() -> None:
    assert split_messages("a\n\n  b  \n") == ("a", "  b")
    assert split_messages("") == ()
