"""
config.boot parser and serializer.

This is the canonical config.boot implementation for edgerouter_tools.
It provides:
- A recursive-descent grammar producing a parse tree
- An immutable AST (``File``, ``Value``, ``ObjectValue``)
- Canonical serialization with structural round-trip
- JSON/YAML and ``set``-command exporters

Usage:
    from edgerouter_tools.boot import parse_string, parse_file

    doc = parse_string(text)
    doc.values           # Object([KeyValue("interfaces", Object([...]))])
    doc.trailing_lines   # ("/* ... */", "/* ... */", "/* ... */")
    doc.serialize()      # canonical text
"""

from .export import to_commands, to_data, to_json, to_yaml
from .grammar import MAX_DEPTH, RESERVED_KEYWORDS, TRAILING_LINE_COUNT, Grammar, Node, Rule, parse_tree
from .parser import Document, parse_file, parse_string
from .serializer import BootSerializer, serialize_file, serialize_value
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

__all__ = [
    # AST
    "Value",
    "Object",
    "String",
    "UnquotedString",
    "Boolean",
    "Null",
    "ObjectValue",
    "Key",
    "KeyValue",
    "ObjectKeyValue",
    "File",
    # Grammar
    "Grammar",
    "Node",
    "Rule",
    "parse_tree",
    "RESERVED_KEYWORDS",
    "MAX_DEPTH",
    "TRAILING_LINE_COUNT",
    # Parsing and serialization
    "parse_string",
    "parse_file",
    "Document",
    "BootSerializer",
    "serialize_file",
    "serialize_value",
    # Exporters
    "to_data",
    "to_json",
    "to_yaml",
    "to_commands",
]
