# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintpad.config import COMMAND_ENV_VAR, DEFAULT_TIMEOUT_SECONDS, ConfigError, LintConfig, load_config


def test_defaults_without_any_files(tmp_path: Path) -> None:
    config = load_config(tmp_path, env={})

    assert config == LintConfig()
    assert config.command == "pyflakes"
    assert config.allowed_commands == ("pyflakes",)
    assert config.timeout == DEFAULT_TIMEOUT_SECONDS


def test_pyproject_section_is_applied(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.lintpad]\ntimeout = 5\nstrip-stdin-prefix = false\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path, env={})

    assert config.timeout == 5
    assert config.strip_stdin_prefix is False


def test_dot_file_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.lintpad]\ntimeout = 5\n", encoding="utf-8")
    (tmp_path / ".lintpad.toml").write_text(
        'command = "flake8 -"\nallowed_commands = ["pyflakes", "flake8"]\ntimeout = 9\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path, env={})

    assert config.command == "flake8 -"
    assert config.executable == "flake8"
    assert config.timeout == 9


def test_environment_overrides_command(tmp_path: Path) -> None:
    config = load_config(tmp_path, env={COMMAND_ENV_VAR: "/opt/tools/bin/pyflakes"})

    assert config.command == "/opt/tools/bin/pyflakes"


def test_command_must_be_allow_listed(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="allowed_commands"):
        load_config(tmp_path, env={COMMAND_ENV_VAR: "rm -rf /"})


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / ".lintpad.toml").write_text("command = [", encoding="utf-8")

    with pytest.raises(ConfigError, match="unable to read"):
        load_config(tmp_path, env={})


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    (tmp_path / ".lintpad.toml").write_text("colour = true\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path, env={})


@pytest.mark.parametrize("timeout", [0, -1])
def test_timeout_must_be_positive(timeout: float) -> None:
    with pytest.raises(ConfigError, match="timeout"):
        LintConfig().with_overrides(timeout=timeout)


def test_with_overrides_ignores_none() -> None:
    config = LintConfig().with_overrides(command=None, timeout=2.5)

    assert config.command == "pyflakes"
    assert config.timeout == 2.5


def test_build_runner_carries_policy() -> None:
    runner = LintConfig(timeout=4).build_runner()

    assert runner.allowed_commands == frozenset({"pyflakes"})
    assert runner.timeout == 4
    assert runner.strip_prefix is True
