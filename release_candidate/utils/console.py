"""
Console output utilities for release-candidate using Rich.

User-facing status messages are written to ``stderr`` so that ``stdout``
carries nothing but the rendered output. For diagnostic or debug output,
use :mod:`release_candidate.utils.logger`.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Optional

from rich.theme import Theme
from rich.console import Console

RELEASE_CANDIDATE_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
    }
)

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("CI"):
        return False
    try:
        return sys.stderr.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return a singleton Rich Console bound to stderr."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    theme=RELEASE_CANDIDATE_THEME,
                    stderr=True,
                    no_color=not use_color,
                    highlight=False,
                )
    return _console


def reconfigure_console() -> None:
    """Reset the global console instance.

    Useful if environment variables (e.g. NO_COLOR) change at runtime.
    """
    global _console
    with _console_lock:
        _console = None


def _print(message: str, style: str) -> None:
    # Messages may echo templates such as ``##teamcity[...]``; never parse markup
    _get_console().print(message, style=style, markup=False)


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    """Print a success message."""
    _print(f"{prefix} {message}", "success")


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message."""
    _print(f"{prefix} {message}", "error")


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message."""
    _print(f"{prefix} {message}", "warning")
