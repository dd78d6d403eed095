# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console messages with optional colour and emoji support."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be a TTY."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):  # pragma: no cover - exotic streams
        return False


@lru_cache(maxsize=4)
def get_console(*, color: bool, stderr: bool = False) -> Console:
    """Return a shared ``rich`` console for the requested colour mode.

    Args:
        color: Flag indicating whether colour output is desired.
        stderr: Write to standard error instead of standard output.

    Returns:
        Console: Cached console instance.
    """

    return Console(no_color=not color, highlight=False, soft_wrap=True, stderr=stderr)


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_color: bool | None = None,
    stderr: bool = False,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_color: Optional explicit colour flag overriding TTY detection.
        stderr: Write to standard error.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console(color=color_enabled, stderr=stderr)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def section(title: str, *, use_color: bool) -> None:
    """Render a section header to delineate console output blocks.

    Args:
        title: Section title displayed to the user.
        use_color: Flag indicating whether colour output is desired.
    """

    console = get_console(color=use_color)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    _print_line(f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan", use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message to standard error."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_color=use_color, stderr=True)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message to standard error."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_color=use_color, stderr=True)


def configure_logging(*, verbose: bool) -> None:
    """Route library log records through ``rich`` for command-line use.

    Library modules only create loggers; handlers are installed here, once,
    by the command-line entry point.

    Args:
        verbose: Emit debug records instead of warnings only.
    """

    root = logging.getLogger("cookbook_meta")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        root.addHandler(RichHandler(console=get_console(color=detect_tty(), stderr=True), show_path=False))


__all__ = ["configure_logging", "detect_tty", "emoji", "fail", "get_console", "info", "ok", "section", "warn"]
