#!/usr/bin/env python3
"""
config.boot parser and generator.

Parses router boot configuration files into an immutable AST and writes
them back in canonical form:
- Full structural round-trip (parse → serialize → parse gives the same AST)
- Named instances (``ethernet eth0 { ... }``) kept apart from plain keys
- Quoted and unquoted scalars kept apart

Usage:
    from edgerouter_tools.boot import parse_file, parse_string

    doc = parse_file("config.boot")

    interfaces = doc.find("interfaces")
    print(doc.serialize())
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .builder import build_file
from .grammar import Grammar
from .serializer import serialize_file
from .types import File, Object, ObjectValue

logger = logging.getLogger(__name__)


def parse_string(text: str) -> File:
    """
    Parse config.boot text.

    Raises:
        ParseError: If the text does not match the grammar
    """
    tree = Grammar(text).parse()
    file = build_file(tree)
    logger.debug(
        "Parsed %d characters into %d entries",
        len(text),
        sum(1 for _ in file.values.iter_all()) if isinstance(file.values, Object) else 0,
    )
    return file


def parse_file(path: str | Path, encoding: str = "utf-8") -> File:
    """
    Parse a config.boot file.

    Same as ``edgerouter_tools.core.load_boot``.

    Raises:
        FileNotFoundError: If the file doesn't exist (package exception)
        FileFormatError: If the file cannot be decoded
        ParseError: If the text does not match the grammar; names the file
    """
    from edgerouter_tools.core.boot_file import load_boot

    return load_boot(path, encoding=encoding)


class Document:
    """
    A config.boot document bound to a path.

    Usage:
        doc = Document.load("config.boot")
        doc.find("system", "host-name")
        doc.save()  # or doc.save("normalized.boot")
    """

    def __init__(self, file: File, path: Optional[Path] = None):
        self.file = file
        self.path = Path(path) if path else None

    @classmethod
    def load(cls, path: str | Path, encoding: str = "utf-8") -> Document:
        """Load a document from file."""
        path = Path(path)
        return cls(parse_file(path, encoding=encoding), path)

    def save(self, path: Optional[str | Path] = None, encoding: str = "utf-8") -> Path:
        """
        Save the canonical text of the document to file.

        Raises:
            ValueError: If neither ``path`` nor the load path is known
            FileFormatError: If the document has no root object
        """
        from edgerouter_tools.core.boot_file import save_boot

        save_path = Path(path) if path else self.path
        if save_path is None:
            raise ValueError("No path specified for save")
        save_boot(self.file, save_path, encoding=encoding)
        logger.info(f"Wrote {save_path}")
        return save_path

    def to_string(self) -> str:
        return serialize_file(self.file)

    def find(self, *path: str) -> Optional[ObjectValue]:
        """Find the entry at ``path`` below the root."""
        return self.file.find(*path)

    @property
    def trailing_lines(self) -> tuple[str, ...]:
        return self.file.trailing_lines
