# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint text content with an external checker and classify the outcome."""

from __future__ import annotations

from .classification import LintOutcome, LintReport, classify
from .config import ConfigError, LintConfig, load_config
from .runner import (
    SPAWN_FAILURE_EXIT_CODE,
    TIMEOUT_EXIT_CODE,
    ExternalLintRunner,
    LintInvocation,
    LintResult,
    run_lint,
)
from .workspace import FileWorkspace, SaveResult, WorkspaceError

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ExternalLintRunner",
    "FileWorkspace",
    "LintConfig",
    "LintInvocation",
    "LintOutcome",
    "LintReport",
    "LintResult",
    "SPAWN_FAILURE_EXIT_CODE",
    "SaveResult",
    "TIMEOUT_EXIT_CODE",
    "WorkspaceError",
    "classify",
    "load_config",
    "run_lint",
]
