# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command linting files, literal text or stdin."""

from __future__ import annotations

from pathlib import Path

import typer

from ...classification import classify
from ...config import ConfigError, LintConfig, load_config
from ..options import (
    COMMAND_OPTION,
    FILES_ARGUMENT,
    ROOT_OPTION,
    TEXT_OPTION,
    TIMEOUT_OPTION,
    CheckOptions,
    build_check_options,
)
from ..rendering import render_report
from ..shared import CLIError, state_from_context

STDIN_SUBJECT = "<stdin>"
TEXT_SUBJECT = "<text>"


def load_effective_config(root: Path, *, command: str | None = None, timeout: float | None = None) -> LintConfig:
    """Load configuration for ``root`` and apply CLI overrides.

    Raises:
        CLIError: If the configuration is invalid or the override command is not allow-listed.
    """

    try:
        return load_config(root).with_overrides(command=command, timeout=timeout)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=2) from exc


def _collect_inputs(options: CheckOptions) -> list[tuple[str, str]]:
    if options.text is not None and options.files:
        raise CLIError("Provide either FILES or --text, not both.", exit_code=2)
    if options.text is not None:
        return [(TEXT_SUBJECT, options.text)]
    if not options.files:
        return [(STDIN_SUBJECT, typer.get_text_stream("stdin").read())]
    inputs: list[tuple[str, str]] = []
    for path in options.files:
        if not path.is_file():
            raise CLIError(f"File not found: {path}", exit_code=2)
        try:
            inputs.append((str(path), path.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as exc:
            raise CLIError(f"Unable to read {path}: {exc}", exit_code=2) from exc
    return inputs


def check(
    ctx: typer.Context,
    files: FILES_ARGUMENT = None,
    text: TEXT_OPTION = None,
    command: COMMAND_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    root: ROOT_OPTION = None,
) -> None:
    """Lint files, ``--text`` or stdin and report warnings or errors.

    Exits with 0 when every input is clean, 1 when the worst result is a
    warning and 2 for errors, ambiguous failures or invalid input.
    """

    state = state_from_context(ctx)
    logger = state.logger()
    options = build_check_options(files, text, command, timeout, root)
    try:
        config = load_effective_config(options.root, command=options.command, timeout=options.timeout)
        inputs = _collect_inputs(options)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    logger.debug(f"command={config.command!r} timeout={config.timeout} inputs={len(inputs)}")
    runner = config.build_runner()
    worst = 0
    for subject, content in inputs:
        report = classify(runner.run(config.command, content))
        worst = max(worst, render_report(report, subject=subject, logger=logger))
    raise typer.Exit(code=worst)


__all__ = ["check", "load_effective_config"]
