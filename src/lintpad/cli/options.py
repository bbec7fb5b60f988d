# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option declarations and normalised inputs for the lintpad CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Project root used for configuration and workspace files."),
]
TEXT_OPTION = Annotated[
    str | None,
    typer.Option("--text", help="Text content to lint directly."),
]
COMMAND_OPTION = Annotated[
    str | None,
    typer.Option("--command", "-c", help="Lint command to run; must be allow-listed."),
]
TIMEOUT_OPTION = Annotated[
    float | None,
    typer.Option("--timeout", min=0.1, help="Seconds to wait before killing the lint command."),
]
FILES_ARGUMENT = Annotated[
    list[Path] | None,
    typer.Argument(metavar="[FILES]...", help="Files to lint; reads stdin when omitted."),
]
SOURCE_OPTION = Annotated[
    Path | None,
    typer.Option("--from", help="Read the new content from this file instead of stdin."),
]
WORKSPACE_PATH_ARGUMENT = Annotated[
    str,
    typer.Argument(metavar="PATH", help="File path relative to the workspace root."),
]


@dataclass(slots=True)
class CheckOptions:
    """Normalised CLI inputs for the ``check`` command."""

    root: Path
    files: tuple[Path, ...]
    text: str | None
    command: str | None
    timeout: float | None


def build_check_options(
    files: FILES_ARGUMENT,
    text: TEXT_OPTION,
    command: COMMAND_OPTION,
    timeout: TIMEOUT_OPTION,
    root: ROOT_OPTION,
) -> CheckOptions:
    """Construct ``CheckOptions`` from Typer parameters."""

    resolved_root = (root or Path.cwd()).resolve()
    resolved_files = tuple(path.expanduser().resolve() for path in files or ())
    return CheckOptions(
        root=resolved_root,
        files=resolved_files,
        text=text,
        command=command,
        timeout=timeout,
    )


def resolve_root(root: Path | None) -> Path:
    return (root or Path.cwd()).resolve()


__all__ = [
    "COMMAND_OPTION",
    "CheckOptions",
    "FILES_ARGUMENT",
    "ROOT_OPTION",
    "SOURCE_OPTION",
    "TEXT_OPTION",
    "TIMEOUT_OPTION",
    "WORKSPACE_PATH_ARGUMENT",
    "build_check_options",
    "resolve_root",
]
