# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import shlex
import sys
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

ToolFactory = Callable[[str, str], str]


@pytest.fixture
def make_tool(tmp_path: Path) -> ToolFactory:
    """Return a factory writing a fake lint tool and returning its command line.

    The tool body runs with ``sys`` already imported and is executed by the
    current interpreter, so no shebang or executable bit is needed.
    """

    tools_dir = tmp_path / "tools"
    tools_dir.mkdir()

    def _make(name: str, body: str) -> str:
        script = tools_dir / f"{name}.py"
        script.write_text("import sys\n" + textwrap.dedent(body), encoding="utf-8")
        return shlex.join([sys.executable, str(script)])

    return _make
