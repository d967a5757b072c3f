"""
Serializer for config.boot ASTs.

Output is canonical rather than a copy of the input: every level is
indented by four spaces, blank lines inside objects are dropped, and the
three trailing lines follow one blank line after the root object.
"""

from __future__ import annotations

import logging
from typing import List

from .types import (
    Boolean,
    File,
    Key,
    KeyValue,
    Null,
    Object,
    ObjectKeyValue,
    ObjectValue,
    String,
    UnquotedString,
    Value,
)

logger = logging.getLogger(__name__)


class BootSerializer:
    """Serializer for ``File`` trees to config.boot text."""

    def __init__(self, indent: str = "    "):
        """
        Args:
            indent: String to use for each indentation level (default: 4 spaces)
        """
        self.indent = indent

    def serialize(self, file: File) -> str:
        """Serialize a whole document."""
        if not isinstance(file.values, Object):
            raise TypeError(
                f"Top level value is not an object: {type(file.values).__name__}"
            )

        lines: List[str] = []
        for entry in file.values:
            self._serialize_entry(entry, 0, lines)

        lines.append("")
        lines.extend(file.trailing_lines)

        logger.debug(
            "Serialized %d root entries and %d trailing lines",
            len(file.values),
            len(file.trailing_lines),
        )
        return "\n".join(lines) + "\n"

    def serialize_value(self, value: Value, depth: int = 0) -> str:
        """Serialize a value; objects close at ``depth``."""
        if isinstance(value, Object):
            lines = ["{"]
            for entry in value:
                self._serialize_entry(entry, depth + 1, lines)
            lines.append(f"{self.indent * depth}}}")
            return "\n".join(lines)
        return self._format_scalar(value)

    def serialize_entry(self, entry: ObjectValue, depth: int = 0) -> str:
        """Serialize one settings line (plus its block, for objects)."""
        lines: List[str] = []
        self._serialize_entry(entry, depth, lines)
        return "\n".join(lines) + "\n"

    def _serialize_entry(self, entry: ObjectValue, depth: int, lines: List[str]) -> None:
        prefix = self.indent * depth

        if isinstance(entry, Key):
            lines.append(f"{prefix}{entry.name}")
            return
        if isinstance(entry, KeyValue):
            head = f"{prefix}{entry.name}"
        elif isinstance(entry, ObjectKeyValue):
            head = f"{prefix}{entry.category} {entry.instance}"
        else:
            raise TypeError(f"Unknown object entry: {entry!r}")

        value = entry.value
        if isinstance(value, Object):
            lines.append(f"{head} {{")
            for child in value:
                self._serialize_entry(child, depth + 1, lines)
            lines.append(f"{prefix}}}")
        else:
            lines.append(f"{head} {self._format_scalar(value)}")

    def _format_scalar(self, value: Value) -> str:
        """Format a non-object value."""
        if isinstance(value, String):
            return f'"{value.text}"'
        if isinstance(value, UnquotedString):
            return value.text
        if isinstance(value, Boolean):
            return "true" if value.value else "false"
        if isinstance(value, Null):
            return "null"
        raise TypeError(f"Unknown value: {value!r}")


def serialize_file(file: File, indent: str = "    ") -> str:
    """Serialize a ``File`` to config.boot text.

    Args:
        file: The parsed document
        indent: String to use for each indentation level

    Returns:
        Canonical document text ending with a newline

    Raises:
        TypeError: If the root value is not an object
    """
    return BootSerializer(indent=indent).serialize(file)


def serialize_value(value: Value, depth: int = 0) -> str:
    """Serialize a single value; nested objects close at ``depth``."""
    return BootSerializer().serialize_value(value, depth)
