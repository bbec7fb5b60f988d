# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from functools import lru_cache
from typing import Final, Literal

from rich.console import Console

NO_COLOR_ENV_VARS: Final[tuple[str, ...]] = ("NO_COLOR", "LINTPAD_NO_COLOR")


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stdout`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Provision Rich :class:`Console` instances keyed by stream, colour and emoji settings.

    Colour is forced off when ``NO_COLOR`` or ``LINTPAD_NO_COLOR`` is set,
    whatever the caller requests.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._cache: dict[tuple[bool, bool, bool, bool], Console] = {}
        self._env = os.environ if env is None else env

    def color_allowed(self) -> bool:
        return not any(self._env.get(name) for name in NO_COLOR_ENV_VARS)

    def get(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        """Return a Rich console configured for ``color`` and ``emoji`` preferences.

        Args:
            color: ``True`` when ANSI colour output should be enabled.
            emoji: ``True`` when Rich should render emoji glyphs.
            stderr: ``True`` for the console carrying log records on stderr.

        Returns:
            Console: Cached or newly constructed console matching the preferences.
        """

        tty = detect_tty()
        enabled = color and tty and self.color_allowed()
        key = (enabled, emoji, tty, stderr)
        if key not in self._cache:
            color_system: Literal["auto"] | None = "auto" if enabled else None
            self._cache[key] = Console(
                color_system=color_system,
                force_terminal=tty,
                no_color=not enabled,
                emoji=emoji,
                soft_wrap=not stderr,
                stderr=stderr,
            )
        return self._cache[key]


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


__all__ = ["NO_COLOR_ENV_VARS", "RichConsoleManager", "detect_tty", "get_console_manager"]
