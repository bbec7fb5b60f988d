# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loaders for lintpad."""

from __future__ import annotations

import os
import shlex
import tomllib
from collections.abc import Mapping
from pathlib import Path, PurePath
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .runner import ExternalLintRunner

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
CONFIG_FILENAME: Final[str] = ".lintpad.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintpad"
COMMAND_ENV_VAR: Final[str] = "LINTPAD_COMMAND"
DEFAULT_COMMAND: Final[str] = "pyflakes"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LintConfig(BaseModel):
    """Settings controlling which lint command runs and how."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    command: str = DEFAULT_COMMAND
    allowed_commands: tuple[str, ...] = Field(default=(DEFAULT_COMMAND,))
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS
    strip_stdin_prefix: bool = True

    @field_validator("command")
    @classmethod
    def _validate_command(cls, value: str) -> str:
        """Ensure the command parses into at least one token.

        Args:
            value: Raw command line.

        Returns:
            str: The stripped command line.

        Raises:
            ValueError: If the command is blank or has unbalanced quotes.
        """

        stripped = value.strip()
        if not stripped or not shlex.split(stripped):
            raise ValueError("command must not be empty")
        return stripped

    @field_validator("timeout")
    @classmethod
    def _validate_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @model_validator(mode="after")
    def _command_is_allowed(self) -> LintConfig:
        """Reject a command whose executable is missing from ``allowed_commands``.

        Returns:
            LintConfig: The validated configuration.

        Raises:
            ValueError: If the executable is not allow-listed.
        """

        executable = self.executable
        if executable not in self.allowed_commands and PurePath(executable).name not in self.allowed_commands:
            raise ValueError(f"command '{executable}' is not listed in allowed_commands")
        return self

    @property
    def executable(self) -> str:
        return shlex.split(self.command)[0]

    def with_overrides(self, **overrides: Any) -> LintConfig:
        """Return a validated copy with ``overrides`` applied, skipping ``None`` values.

        Args:
            **overrides: Field names mapped to replacement values.

        Returns:
            LintConfig: Updated configuration.

        Raises:
            ConfigError: If the merged values fail validation.
        """

        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return _validate(data, source="overrides")

    def build_runner(self) -> ExternalLintRunner:
        """Return an :class:`ExternalLintRunner` enforcing this configuration."""

        return ExternalLintRunner(
            allowed_commands=frozenset(self.allowed_commands),
            timeout=self.timeout,
            strip_prefix=self.strip_stdin_prefix,
        )


def _validate(data: Mapping[str, Any], *, source: str) -> LintConfig:
    try:
        return LintConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"invalid lintpad configuration from {source}: {exc}") from exc


def _read_toml(path: Path) -> dict[str, Any]:
    """Return the TOML document at ``path`` or an empty mapping when absent.

    Raises:
        ConfigError: If the file cannot be parsed.
    """

    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"unable to read {path}: {exc}") from exc


def _pyproject_section(path: Path) -> dict[str, Any]:
    document = _read_toml(path)
    tool_section = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return dict(section)


def _normalise(fragment: Mapping[str, Any]) -> dict[str, Any]:
    normalised = {key.replace("-", "_"): value for key, value in fragment.items()}
    allowed = normalised.get("allowed_commands")
    if isinstance(allowed, list):
        normalised["allowed_commands"] = tuple(allowed)
    return normalised


def load_config(root: Path, *, env: Mapping[str, str] | None = None) -> LintConfig:
    """Load configuration for the project rooted at ``root``.

    Sources are merged in increasing precedence: built-in defaults,
    ``[tool.lintpad]`` in ``pyproject.toml``, ``.lintpad.toml`` and finally the
    ``LINTPAD_COMMAND`` environment variable.

    Args:
        root: Project root directory.
        env: Environment mapping; defaults to :data:`os.environ`.

    Returns:
        LintConfig: Validated configuration.

    Raises:
        ConfigError: If any source is unreadable or the merged values are invalid.
    """

    environ = os.environ if env is None else env
    merged: dict[str, Any] = LintConfig().model_dump()
    sources: list[str] = ["defaults"]
    for name, fragment in (
        (str(root / PYPROJECT_FILENAME), _pyproject_section(root / PYPROJECT_FILENAME)),
        (str(root / CONFIG_FILENAME), _read_toml(root / CONFIG_FILENAME)),
    ):
        if fragment:
            merged.update(_normalise(fragment))
            sources.append(name)
    command = environ.get(COMMAND_ENV_VAR)
    if command:
        merged["command"] = command
        sources.append(COMMAND_ENV_VAR)
    return _validate(merged, source=", ".join(sources))


__all__ = [
    "COMMAND_ENV_VAR",
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_COMMAND",
    "DEFAULT_TIMEOUT_SECONDS",
    "LintConfig",
    "load_config",
]
