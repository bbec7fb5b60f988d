# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for diagnostic line parsing."""

from __future__ import annotations

from lintpad.diagnostics import Diagnostic, parse_diagnostic, parse_diagnostics


def test_parse_line_and_column() -> None:
    diagnostic = parse_diagnostic("3:5: undefined name 'x'")

    assert diagnostic == Diagnostic(message="undefined name 'x'", line=3, column=5)
    assert diagnostic.location == "3:5"


def test_parse_line_only() -> None:
    diagnostic = parse_diagnostic("12: invalid syntax")

    assert diagnostic == Diagnostic(message="invalid syntax", line=12)
    assert diagnostic.location == "12"


def test_free_text_has_no_location() -> None:
    diagnostic = parse_diagnostic("    print 'x'")

    assert diagnostic == Diagnostic(message="print 'x'")
    assert diagnostic.location == "-"


def test_parse_diagnostics_skips_blank_lines() -> None:
    diagnostics = parse_diagnostics(["1:1: a", "", "   ", "^"])

    assert [item.message for item in diagnostics] == ["a", "^"]
