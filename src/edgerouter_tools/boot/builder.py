"""
AST builder: converts the grammar's parse tree into ``File``/``Value`` objects.

The grammar guarantees the shapes handled here. Anything else is a
mismatch between grammar and builder and raises ``GrammarInvariantError``
instead of producing a wrong tree.
"""

from __future__ import annotations

from edgerouter_tools.exceptions import GrammarInvariantError

from .grammar import TRAILING_LINE_COUNT, Node, Rule
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


def build_file(document: Node) -> File:
    """Build a ``File`` from a DOCUMENT node."""
    if document.rule is not Rule.DOCUMENT:
        raise GrammarInvariantError(f"Expected a document node, got {document.rule.value}")

    children = iter(document.children)
    top = next(children, None)
    if top is None:
        raise GrammarInvariantError("Document has no top-level node")
    values = build_value(top)

    trailing_lines = []
    for index in range(TRAILING_LINE_COUNT):
        line = next(children, None)
        if line is None or line.rule is not Rule.TRAILING_LINE:
            raise GrammarInvariantError(
                f"Expected {TRAILING_LINE_COUNT} trailing lines, got {index}"
            )
        trailing_lines.append(line.text)

    return File(values=values, trailing_lines=tuple(trailing_lines))


def build_value(node: Node) -> Value:
    """Build a ``Value`` by dispatching on the node's rule."""
    rule = node.rule

    if rule is Rule.PAIRS:
        return Object(tuple(build_entry(pair) for pair in node.children))
    if rule is Rule.STRING or rule is Rule.KEYWORD:
        # Both are written back quoted, so they share a representation
        return String(node.text)
    if rule is Rule.UNQUOTED_STRING:
        return UnquotedString(node.text)
    if rule is Rule.BOOLEAN:
        return Boolean(parse_boolean(node.text))
    if rule is Rule.NULL:
        return Null()
    if rule is Rule.TOP:
        return _build_top(node)

    raise GrammarInvariantError(f"Rule '{rule.value}' does not produce a value")


def build_entry(pair: Node) -> ObjectValue:
    """Classify a PAIR node by the number of tokens it carries."""
    if pair.rule is not Rule.PAIR:
        raise GrammarInvariantError(f"Expected a pair node, got {pair.rule.value}")

    arity = len(pair.children)
    if arity == 1:
        return Key(pair.children[0].text)
    if arity == 2:
        name, value = pair.children
        return KeyValue(name.text, build_value(value))
    if arity == 3:
        category, instance, value = pair.children
        return ObjectKeyValue(category.text, instance.text, build_value(value))

    raise GrammarInvariantError(f"Pair with {arity} children cannot be classified")


def parse_boolean(text: str) -> bool:
    """Read a boolean literal; only ``true`` and ``false`` are accepted."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise GrammarInvariantError(f"Invalid boolean literal: {text!r}")


def _build_top(node: Node) -> Object:
    # The root is always one key with an object value
    if len(node.children) != 2:
        raise GrammarInvariantError(
            f"Top-level node must have 2 children, got {len(node.children)}"
        )
    name, body = node.children
    return Object((KeyValue(name.text, build_value(body)),))
