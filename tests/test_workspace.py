# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the lint-on-save file workspace."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from lintpad.classification import LintOutcome
from lintpad.config import LintConfig
from lintpad.workspace import FileWorkspace, WorkspaceError

WARN_BODY = """
source = sys.stdin.read()
if "import os" in source:
    sys.stdout.write("<stdin>:1:1: 'os' imported but unused\\n")
    sys.exit(1)
"""


@pytest.fixture
def workspace(tmp_path: Path, make_tool) -> FileWorkspace:
    config = LintConfig(command=make_tool("warner", WARN_BODY), allowed_commands=(sys.executable,), timeout=30)
    root = tmp_path / "project"
    root.mkdir()
    return FileWorkspace(root=root, config=config)


def test_save_creates_file_and_reports_success(workspace: FileWorkspace) -> None:
    result = workspace.save("pkg/app.py", "x = 1\n")

    assert result.created
    assert result.path == workspace.root / "pkg" / "app.py"
    assert result.report.outcome is LintOutcome.SUCCESS
    assert workspace.read("pkg/app.py") == "x = 1\n"


def test_save_keeps_content_when_lint_warns(workspace: FileWorkspace) -> None:
    workspace.create("app.py", "x = 1\n")

    result = workspace.save("app.py", "import os\n")

    assert not result.created
    assert result.report.outcome is LintOutcome.WARNINGS
    assert result.report.messages == ("1:1: 'os' imported but unused",)
    assert workspace.read("app.py") == "import os\n"


def test_create_refuses_existing_file(workspace: FileWorkspace) -> None:
    workspace.create("app.py", "")

    with pytest.raises(WorkspaceError, match="already exists"):
        workspace.create("app.py", "x = 2\n")


def test_upload_overwrites(workspace: FileWorkspace) -> None:
    workspace.upload("app.py", "a = 1\n")
    workspace.upload("app.py", "a = 2\n")

    assert workspace.read("app.py") == "a = 2\n"


def test_delete_removes_file(workspace: FileWorkspace) -> None:
    workspace.create("app.py", "")

    workspace.delete("app.py")

    assert not (workspace.root / "app.py").exists()
    with pytest.raises(WorkspaceError, match="does not exist"):
        workspace.delete("app.py")


def test_read_missing_file(workspace: FileWorkspace) -> None:
    with pytest.raises(WorkspaceError, match="does not exist"):
        workspace.read("missing.py")


def test_read_undecodable_file(workspace: FileWorkspace) -> None:
    (workspace.root / "binary.py").write_bytes(b"\xff\xfe")

    with pytest.raises(WorkspaceError, match="unable to read"):
        workspace.read("binary.py")


@pytest.mark.parametrize("relative", ["../escape.py", "/etc/passwd", "", ".", "pkg/../../x.py"])
def test_paths_outside_root_are_rejected(workspace: FileWorkspace, relative: str) -> None:
    with pytest.raises(WorkspaceError):
        workspace.resolve(relative)


def test_save_with_unstartable_command_is_ambiguous(tmp_path: Path) -> None:
    config = LintConfig(command="missing-linter-binary", allowed_commands=("missing-linter-binary",))
    workspace = FileWorkspace(root=tmp_path, config=config)

    result = workspace.save("app.py", "x = 1\n")

    assert result.report.outcome is LintOutcome.AMBIGUOUS
    assert (tmp_path / "app.py").read_text(encoding="utf-8") == "x = 1\n"
