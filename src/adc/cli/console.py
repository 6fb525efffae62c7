"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so every command keeps working, in plain text, when Rich
is not installed.

Two proxies are exported: :data:`console` writes to stdout (status and
success lines), :data:`err_console` writes to stderr (diagnostics).
"""

from __future__ import annotations

import re
import sys
from typing import Any, TextIO

from adc.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"(?<!\\)\[/?[a-z #]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console instance targeting stdout or stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False, emoji=False)


def strip_markup(text: str) -> str:
    """Drop Rich style tags such as ``[bold red]`` from *text*.

    Brackets escaped with :func:`escape` are kept and unescaped.
    """
    return _MARKUP_TAG.sub("", text).replace("\\[", "[")


def escape(text: str) -> str:
    """Escape user-supplied *text* so Rich prints it literally."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text.replace("[", "\\[")
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool = False) -> None:
        self._stderr = stderr

    def _stream(self) -> TextIO:
        return sys.stderr if self._stderr else sys.stdout

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            plain = [strip_markup(o) if isinstance(o, str) else o for o in objects]
            print(*plain, file=self._stream())
            return
        rich_console.print(*objects, soft_wrap=True)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
