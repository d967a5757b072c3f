"""Shared utilities for CLI commands."""

from __future__ import annotations

import sys
import traceback
from pathlib import Path
from typing import TYPE_CHECKING

from edgerouter_tools.exceptions import EdgeRouterToolsError, ParseError

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ["format_error", "print_error", "get_error_console", "describe_parse_error"]

# Module-level console for error output, created lazily
_error_console: Console | None = None


def get_error_console() -> Console:
    """Get or create the Rich console for error output.

    The console is created lazily and cached for reuse.
    """
    global _error_console
    if _error_console is None:
        from rich.console import Console

        _error_console = Console(stderr=True, force_terminal=None)
    return _error_console


def print_error(
    e: Exception,
    verbose: bool = False,
    use_rich: bool | None = None,
) -> None:
    """
    Print an exception with Rich formatting on a terminal.

    Falls back to plain text for non-TTY output (pipes, redirected stderr).

    Args:
        e: The exception to print
        verbose: If True, include full stack trace
        use_rich: Override automatic TTY detection (None = auto-detect)
    """
    console = get_error_console()

    if use_rich is None:
        use_rich = console.is_terminal

    if verbose:
        # Always use plain text for stack traces
        print(traceback.format_exc(), file=sys.stderr)
        return

    if use_rich and isinstance(e, EdgeRouterToolsError):
        from rich.markup import escape
        from rich.panel import Panel

        title = "Parse error" if isinstance(e, ParseError) else "Error"
        console.print(Panel(escape(str(e)), title=title, border_style="red", expand=False))
    else:
        print(format_error(e, verbose=False), file=sys.stderr)


def format_error(e: Exception, verbose: bool = False) -> str:
    """
    Format an exception for user-friendly display (plain text).

    Args:
        e: The exception to format
        verbose: If True, include full stack trace

    Returns:
        Formatted error message string
    """
    if verbose:
        return traceback.format_exc()

    if isinstance(e, EdgeRouterToolsError):
        return f"Error: {e}"

    return f"Error: {type(e).__name__}: {e}"


def describe_parse_error(path: str | Path, e: ParseError) -> str:
    """One-line ``file:line:column: message`` summary of a parse error."""
    location = f"{path}:{e.location}" if e.location else str(path)
    if e.expected:
        return f"{location}: {e.message} (expected {', '.join(e.expected)})"
    return f"{location}: {e.message}"
