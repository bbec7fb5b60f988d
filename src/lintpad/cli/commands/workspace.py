# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI commands storing and removing workspace files."""

from __future__ import annotations

import typer

from ...workspace import FileWorkspace, WorkspaceError
from ..options import ROOT_OPTION, SOURCE_OPTION, WORKSPACE_PATH_ARGUMENT, resolve_root
from ..rendering import render_report
from ..shared import CLIError, state_from_context
from .check import load_effective_config


def save(
    ctx: typer.Context,
    path: WORKSPACE_PATH_ARGUMENT,
    source: SOURCE_OPTION = None,
    root: ROOT_OPTION = None,
) -> None:
    """Store content at PATH in the workspace, then lint it.

    The file is written before linting, so it is kept even when the lint
    reports problems. Exit codes match ``check``.
    """

    logger = state_from_context(ctx).logger()
    workspace_root = resolve_root(root)
    try:
        config = load_effective_config(workspace_root)
        if source is not None:
            try:
                content = source.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise CLIError(f"Unable to read {source}: {exc}", exit_code=2) from exc
        else:
            content = typer.get_text_stream("stdin").read()
        workspace = FileWorkspace(root=workspace_root, config=config)
        result = workspace.save(path, content)
    except WorkspaceError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=2) from exc
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    logger.echo(f"{'Created' if result.created else 'Saved'} {path}")
    raise typer.Exit(code=render_report(result.report, subject=path, logger=logger))


def delete(
    ctx: typer.Context,
    path: WORKSPACE_PATH_ARGUMENT,
    root: ROOT_OPTION = None,
) -> None:
    """Remove PATH from the workspace."""

    logger = state_from_context(ctx).logger()
    workspace = FileWorkspace(root=resolve_root(root))
    try:
        workspace.delete(path)
    except WorkspaceError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    logger.ok(f"{path} deleted")


__all__ = ["delete", "save"]
