"""
Custom exception hierarchy for edgerouter-tools.

Provides consistent error handling with context, suggestions, and actionable guidance.
All exceptions include:
- Context information (file paths, line numbers, etc.)
- Suggestions for how to fix the issue
- Clear, formatted error messages

Example::

    from edgerouter_tools.exceptions import FileFormatError, ParseError

    raise ParseError(
        "Expected '{' after the root key",
        line=1,
        column=8,
        expected=["object"],
        file_path="config.boot",
    )
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union


class EdgeRouterToolsError(Exception):
    """
    Base exception for all edgerouter-tools errors.

    Provides consistent formatting with context and suggestions.

    Attributes:
        context: Dictionary of contextual information (file, line, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ParseError(EdgeRouterToolsError):
    """
    A config.boot document does not match the grammar.

    Carries the offending position and the productions that would have
    been accepted there. No partial result accompanies a parse error.

    Example::

        raise ParseError(
            "Unexpected token after value",
            position=57,
            line=4,
            column=15,
            expected=["end of line", "'}'"],
        )
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        file_path: Optional[Union[str, Path]] = None,
        position: Optional[int] = None,
        expected: Optional[Sequence[str]] = None,
    ):
        self.line = line
        self.column = column
        self.position = position
        self.expected = list(expected or [])

        # Build context from convenience parameters
        ctx = context or {}
        if file_path and "file" not in ctx:
            ctx["file"] = str(file_path)
        if line is not None and "line" not in ctx:
            ctx["line"] = line
        if column is not None and "column" not in ctx:
            ctx["column"] = column
        if self.expected and "expected" not in ctx:
            ctx["expected"] = ", ".join(self.expected)

        super().__init__(message, ctx, suggestions)

    @property
    def location(self) -> str:
        """Short ``line:column`` description, empty when unknown."""
        if self.line is None:
            return ""
        if self.column is None:
            return str(self.line)
        return f"{self.line}:{self.column}"

    def with_file(self, file_path: Union[str, Path]) -> ParseError:
        """Return a copy of this error that names the file it came from."""
        context = {k: v for k, v in self.context.items() if k != "file"}
        return ParseError(
            self.message,
            context={"file": str(file_path), **context},
            suggestions=list(self.suggestions),
            line=self.line,
            column=self.column,
            position=self.position,
            expected=self.expected,
        )


class GrammarInvariantError(AssertionError):
    """
    The grammar accepted input that the AST builder cannot classify.

    This is an internal defect, never a user input error, so it is not
    part of the recoverable ``EdgeRouterToolsError`` hierarchy.
    """


class FileFormatError(EdgeRouterToolsError):
    """
    File exists but cannot be read as a config.boot document.

    Example::

        raise FileFormatError(
            "File is not valid UTF-8",
            context={"file": "config.boot", "encoding": "utf-8"},
            suggestions=["Re-save the file as UTF-8"],
        )
    """

    pass


class FileNotFoundError(EdgeRouterToolsError):
    """
    Required file was not found.

    Example::

        raise FileNotFoundError(
            "Configuration file not found",
            context={"file": "config.boot"},
            suggestions=["Check that the file path is correct"],
        )
    """

    pass


class ConfigurationError(EdgeRouterToolsError):
    """
    Tool configuration (``.edgerouter-tools.toml``) is invalid or unreadable.
    """

    pass


__all__ = [
    "EdgeRouterToolsError",
    "ParseError",
    "GrammarInvariantError",
    "FileFormatError",
    "FileNotFoundError",
    "ConfigurationError",
]
