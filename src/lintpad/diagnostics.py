# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse pyflakes-style text diagnostics into structured records."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

_LOCATION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<line>\d+)(?::(?P<column>\d+))?:\s*(?P<message>.*)$",
)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Single diagnostic line with an optional source location."""

    message: str
    line: int | None = None
    column: int | None = None

    @property
    def location(self) -> str:
        if self.line is None:
            return "-"
        if self.column is None:
            return str(self.line)
        return f"{self.line}:{self.column}"


def parse_diagnostic(text: str) -> Diagnostic:
    """Parse one cleaned output line.

    Lines of the form ``LINE:COL: message`` or ``LINE: message`` keep their
    location; anything else (source excerpts, caret markers, tracebacks) is
    returned as a message without a location.

    Args:
        text: Output line with any ``<stdin>:`` prefix already removed.

    Returns:
        Diagnostic: Parsed diagnostic.
    """

    stripped = text.strip()
    match = _LOCATION_PATTERN.match(stripped)
    if match is None:
        return Diagnostic(message=stripped)
    column = match.group("column")
    return Diagnostic(
        message=match.group("message"),
        line=int(match.group("line")),
        column=int(column) if column is not None else None,
    )


def parse_diagnostics(lines: Iterable[str]) -> list[Diagnostic]:
    """Parse every non-blank line in ``lines``."""

    return [parse_diagnostic(line) for line in lines if line.strip()]


__all__ = ["Diagnostic", "parse_diagnostic", "parse_diagnostics"]
