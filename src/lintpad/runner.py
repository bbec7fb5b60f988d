# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run an external lint command against in-memory text content."""

from __future__ import annotations

import logging
import re
import shlex

# Bandit: subprocess usage is intentional. Commands are split into argument
# vectors and executed without ``shell=True``; input only travels over stdin.
import subprocess  # nosec B404
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from pathlib import PurePath
from typing import Final, TypeAlias

LOGGER = logging.getLogger(__name__)

SPAWN_FAILURE_EXIT_CODE: Final[int] = 255
TIMEOUT_EXIT_CODE: Final[int] = 124
STDIN_PREFIX_PATTERN: Final[re.Pattern[str]] = re.compile(r"^<stdin>:", re.MULTILINE)
DEFAULT_ALLOWED_COMMANDS: Final[frozenset[str]] = frozenset({"pyflakes"})

CommandLine: TypeAlias = str | Sequence[str]


@dataclass(frozen=True, slots=True)
class LintInvocation:
    """Describe a single lint request: the command and the text piped to it."""

    command: CommandLine
    input_text: str

    def argv(self) -> list[str]:
        """Return the argument vector for :attr:`command`.

        Returns:
            list[str]: Command tokens split with POSIX shell-word rules.

        Raises:
            ValueError: If the command is empty or contains unbalanced quotes.
        """

        if isinstance(self.command, str):
            tokens = shlex.split(self.command)
        else:
            tokens = [str(token) for token in self.command]
        if not tokens:
            raise ValueError("lint command requires at least one token")
        return tokens


@dataclass(frozen=True, slots=True)
class LintResult:
    """Outcome of one lint invocation. Streams are always strings."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def spawn_failed(self) -> bool:
        return self.exit_code == SPAWN_FAILURE_EXIT_CODE and not self.stdout and not self.stderr

    @classmethod
    def spawn_failure(cls) -> LintResult:
        """Return the sentinel result used when a command cannot be started.

        Returns:
            LintResult: Result carrying :data:`SPAWN_FAILURE_EXIT_CODE` and empty streams.
        """

        return cls(exit_code=SPAWN_FAILURE_EXIT_CODE)


def strip_stdin_prefix(text: str) -> str:
    """Remove the ``<stdin>:`` marker tools print at the start of diagnostic lines.

    Args:
        text: Captured stream output.

    Returns:
        str: Output with the leading marker removed from every line.
    """

    return STDIN_PREFIX_PATTERN.sub("", text)


def is_command_allowed(argv: Sequence[str], allowed_commands: Collection[str]) -> bool:
    """Return whether the executable in ``argv`` appears in ``allowed_commands``.

    Entries match either the executable token verbatim or its basename, so
    ``pyflakes`` permits both ``pyflakes`` and ``/usr/bin/pyflakes``.

    Args:
        argv: Argument vector whose first token names the executable.
        allowed_commands: Permitted executables.

    Returns:
        bool: ``True`` when the executable is permitted.
    """

    if not argv:
        return False
    executable = argv[0]
    return executable in allowed_commands or PurePath(executable).name in allowed_commands


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def _clean(text: str, *, strip_prefix: bool) -> str:
    return strip_stdin_prefix(text) if strip_prefix else text


def _execute(argv: Sequence[str], input_text: str, timeout: float | None) -> LintResult:
    """Spawn ``argv``, pipe ``input_text`` to it and collect both output streams.

    ``communicate`` writes stdin, closes it and drains stdout/stderr together,
    so a child that fills one pipe while the other is unread cannot deadlock.
    Pipes stay in binary mode so line endings reach the caller untranslated.
    """

    try:
        process = subprocess.Popen(  # nosec B603 - argument vector, no shell
            list(argv),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except (OSError, ValueError) as exc:
        LOGGER.warning("unable to start lint command %r: %s", argv[0], exc)
        return LintResult.spawn_failure()

    payload = input_text.encode("utf-8", errors="replace")
    with process:
        try:
            stdout, stderr = process.communicate(payload, timeout=timeout)
        except subprocess.TimeoutExpired as exc:
            process.kill()
            stdout, stderr = process.communicate()
            stdout_text = _ensure_text(stdout) or _ensure_text(exc.stdout)
            stderr_text = _ensure_text(stderr) or _ensure_text(exc.stderr)
            timeout_msg = f"Command timed out after {timeout:.1f}s"
            LOGGER.warning("lint command %s killed: %s", argv[0], timeout_msg)
            combined_stderr = f"{stderr_text.rstrip()}\n{timeout_msg}" if stderr_text.strip() else timeout_msg
            return LintResult(exit_code=TIMEOUT_EXIT_CODE, stdout=stdout_text, stderr=combined_stderr)
    return LintResult(
        exit_code=process.returncode,
        stdout=_ensure_text(stdout),
        stderr=_ensure_text(stderr),
    )


def run_lint(
    command: CommandLine,
    input_text: str,
    *,
    timeout: float | None = None,
    allowed_commands: Collection[str] | None = DEFAULT_ALLOWED_COMMANDS,
    strip_prefix: bool = True,
) -> LintResult:
    """Run ``command`` with ``input_text`` on stdin and return the captured result.

    The call never raises for process-level failures: a command that cannot be
    started, or that is not in ``allowed_commands``, yields exit code
    :data:`SPAWN_FAILURE_EXIT_CODE` with empty streams, and a command killed
    after ``timeout`` seconds yields :data:`TIMEOUT_EXIT_CODE`.

    Args:
        command: Command line string or pre-split argument vector.
        input_text: Text written to the child's standard input.
        timeout: Optional number of seconds to wait before killing the child.
        allowed_commands: Executables permitted to run, :data:`DEFAULT_ALLOWED_COMMANDS`
            unless given. Pass ``None`` to run any command.
        strip_prefix: Remove ``<stdin>:`` line prefixes from both streams.

    Returns:
        LintResult: Exit code plus cleaned stdout and stderr.
    """

    invocation = LintInvocation(command=command, input_text=input_text)
    try:
        argv = invocation.argv()
    except ValueError as exc:
        LOGGER.warning("invalid lint command %r: %s", command, exc)
        return LintResult.spawn_failure()

    if allowed_commands is not None and not is_command_allowed(argv, allowed_commands):
        LOGGER.warning("lint command %s is not in the allowed commands", argv[0])
        return LintResult.spawn_failure()

    LOGGER.debug("running lint command argv=%s bytes=%d", argv, len(input_text))
    raw = _execute(argv, invocation.input_text, timeout)
    return LintResult(
        exit_code=raw.exit_code,
        stdout=_clean(raw.stdout, strip_prefix=strip_prefix),
        stderr=_clean(raw.stderr, strip_prefix=strip_prefix),
    )


@dataclass(frozen=True, slots=True)
class ExternalLintRunner:
    """Stateless service running allow-listed lint commands.

    Attributes:
        allowed_commands: Executables the runner may start.
        timeout: Seconds to wait before killing the child, or ``None`` to wait indefinitely.
        strip_prefix: Whether ``<stdin>:`` prefixes are removed from output lines.
    """

    allowed_commands: frozenset[str] = DEFAULT_ALLOWED_COMMANDS
    timeout: float | None = None
    strip_prefix: bool = True

    def run(self, command: CommandLine, input_text: str) -> LintResult:
        """Run ``command`` against ``input_text`` under the runner's policy.

        Args:
            command: Command line string or argument vector.
            input_text: Text written to the child's standard input.

        Returns:
            LintResult: Captured exit code and cleaned output streams.
        """

        return run_lint(
            command,
            input_text,
            timeout=self.timeout,
            allowed_commands=self.allowed_commands,
            strip_prefix=self.strip_prefix,
        )

    def invoke(self, invocation: LintInvocation) -> LintResult:
        """Run a prepared :class:`LintInvocation`."""

        return self.run(invocation.command, invocation.input_text)


__all__ = [
    "CommandLine",
    "DEFAULT_ALLOWED_COMMANDS",
    "ExternalLintRunner",
    "LintInvocation",
    "LintResult",
    "SPAWN_FAILURE_EXIT_CODE",
    "TIMEOUT_EXIT_CODE",
    "is_command_allowed",
    "run_lint",
    "strip_stdin_prefix",
]
