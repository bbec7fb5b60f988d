# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""File workspace that lints Python sources whenever they are saved."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .classification import LintReport, classify
from .config import LintConfig
from .runner import ExternalLintRunner

LOGGER = logging.getLogger(__name__)


class WorkspaceError(Exception):
    """Raised when a workspace file operation cannot be completed."""


@dataclass(frozen=True, slots=True)
class SaveResult:
    """Outcome of :meth:`FileWorkspace.save`."""

    path: Path
    created: bool
    report: LintReport


@dataclass(slots=True)
class FileWorkspace:
    """Create, read, save and delete files below ``root``.

    Attributes:
        root: Directory every workspace path is resolved against.
        config: Lint configuration used by :meth:`save`.
        runner: Runner executing the lint command; built from ``config`` when omitted.
    """

    root: Path
    config: LintConfig = field(default_factory=LintConfig)
    runner: ExternalLintRunner | None = None
    _lint_runner: ExternalLintRunner = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()
        self._lint_runner = self.runner if self.runner is not None else self.config.build_runner()

    def resolve(self, relative: str | Path) -> Path:
        """Return the absolute path for ``relative`` inside the workspace.

        Args:
            relative: Path relative to :attr:`root`.

        Returns:
            Path: Resolved absolute path.

        Raises:
            WorkspaceError: If the path is empty or escapes :attr:`root`.
        """

        candidate = Path(relative)
        if not str(relative).strip() or candidate == Path():
            raise WorkspaceError("a file path is required")
        resolved = (self.root / candidate).resolve()
        if resolved == self.root or not resolved.is_relative_to(self.root):
            raise WorkspaceError(f"'{relative}' is outside the workspace {self.root}")
        return resolved

    def read(self, relative: str | Path) -> str:
        path = self.resolve(relative)
        if not path.is_file():
            raise WorkspaceError(f"'{relative}' does not exist")
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise WorkspaceError(f"unable to read '{relative}': {exc}") from exc

    def create(self, relative: str | Path, content: str) -> Path:
        """Create a new file, refusing to replace an existing one.

        Raises:
            WorkspaceError: If the file already exists or cannot be written.
        """

        path = self.resolve(relative)
        if path.exists():
            raise WorkspaceError(f"'{relative}' already exists")
        self._write(path, content)
        return path

    def upload(self, relative: str | Path, content: str) -> Path:
        """Create ``relative`` or replace its content."""

        path = self.resolve(relative)
        self._write(path, content)
        return path

    def save(self, relative: str | Path, content: str) -> SaveResult:
        """Persist ``content`` then lint it with the configured command.

        The write happens first, so the content is kept even when the lint
        reports warnings or errors.

        Args:
            relative: Path relative to :attr:`root`.
            content: New file content.

        Returns:
            SaveResult: Saved path, whether it was new and the lint report.

        Raises:
            WorkspaceError: If the path is invalid or the file cannot be written.
        """

        path = self.resolve(relative)
        created = not path.exists()
        self._write(path, content)
        report = self.lint(content)
        LOGGER.debug("saved %s outcome=%s", path, report.outcome.value)
        return SaveResult(path=path, created=created, report=report)

    def lint(self, content: str) -> LintReport:
        """Lint ``content`` with the configured command and classify the result."""

        return classify(self._lint_runner.run(self.config.command, content))

    def delete(self, relative: str | Path) -> Path:
        """Remove ``relative`` from the workspace.

        Raises:
            WorkspaceError: If the file does not exist or cannot be removed.
        """

        path = self.resolve(relative)
        if not path.is_file():
            raise WorkspaceError(f"'{relative}' does not exist")
        try:
            path.unlink()
        except OSError as exc:
            raise WorkspaceError(f"unable to delete '{relative}': {exc}") from exc
        return path

    @staticmethod
    def _write(path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise WorkspaceError(f"unable to write '{path}': {exc}") from exc


__all__ = ["FileWorkspace", "SaveResult", "WorkspaceError"]
