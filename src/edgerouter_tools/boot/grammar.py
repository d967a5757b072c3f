"""
Grammar for config.boot documents.

Turns raw text into a parse tree of ``Node`` objects without interpreting
it. The productions are::

    document       = top trailing_line{3} EOI
    top            = KEY "{" pairs "}"
    pairs          = pair*
    pair           = KEY [value] | KEY KEY object
    value          = object | STRING | BOOLEAN | NULL | KEYWORD | UNQUOTED_STRING
    trailing_line  = <rest of a non-blank line>

Between pairs any whitespace is skipped. Inside a pair the tokens are
separated by spaces or tabs only, and the pair ends at a line break, at
the ``}`` closing its object or at end of input::

    ethernet eth0 {                 <- KEY KEY object
        address 192.168.0.1/24      <- KEY value
        disable                     <- KEY
        description "uplink port"   <- KEY value (quoted)
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from edgerouter_tools.exceptions import ParseError

# Number of opaque lines that follow the root object in this format version
TRAILING_LINE_COUNT = 3

# Deepest allowed object nesting, root object included
MAX_DEPTH = 128

WHITESPACE = " \t\r\n\f\v"
INLINE_WHITESPACE = " \t\r\f\v"

# Characters that end an unquoted token
TOKEN_DELIMITERS = WHITESPACE + '{}"'

BOOLEAN_LITERALS = frozenset({"true", "false"})
NULL_LITERAL = "null"

# Literal look-alikes that are kept as strings and always written back quoted
RESERVED_KEYWORDS = frozenset(
    {
        "True",
        "False",
        "TRUE",
        "FALSE",
        "Null",
        "NULL",
        "None",
        "nil",
    }
)


class Rule(Enum):
    """Syntactic category of a parse tree node."""

    DOCUMENT = "document"
    TOP = "top"
    PAIRS = "pairs"
    PAIR = "pair"
    KEY = "key"
    STRING = "string"
    KEYWORD = "keyword"
    BOOLEAN = "boolean"
    NULL = "null"
    UNQUOTED_STRING = "unquoted_string"
    TRAILING_LINE = "trailing_line"


@dataclass
class Node:
    """
    Parse tree node.

    Attributes:
        rule: Production that matched
        start: Offset of the first matched character
        end: Offset just past the last matched character
        text: Token text for leaf rules (for STRING, the text between the
            quotes); empty for composite rules
        children: Sub-nodes in source order
    """

    rule: Rule
    start: int
    end: int
    text: str = ""
    children: list[Node] = field(default_factory=list)

    def __repr__(self) -> str:
        if self.children:
            return f"Node({self.rule.value}, {self.start}..{self.end}, [{len(self.children)} children])"
        return f"Node({self.rule.value}, {self.start}..{self.end}, {self.text!r})"


class Grammar:
    """Recursive-descent matcher for the config.boot grammar."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)
        self.depth = 0

    def parse(self) -> Node:
        """Match a whole document and return its DOCUMENT node."""
        top = self._parse_top()
        document = Node(Rule.DOCUMENT, 0, self.length, children=[top])

        for found in range(TRAILING_LINE_COUNT):
            self._skip_whitespace()
            if self.pos >= self.length:
                raise self._error(
                    f"Expected {TRAILING_LINE_COUNT} trailing lines after the root object, "
                    f"found {found}",
                    ["trailing line"],
                )
            document.children.append(self._parse_trailing_line())

        self._skip_whitespace()
        if self.pos < self.length:
            raise self._error(
                f"Unexpected content after the {TRAILING_LINE_COUNT} trailing lines",
                ["end of input"],
            )
        return document

    def _parse_top(self) -> Node:
        """Match the single root pair: a key followed by an object."""
        self._skip_whitespace()
        start = self.pos

        if self.pos >= self.length:
            raise self._error("Missing top-level object", ["key"])
        if self.text[self.pos] in '{}"':
            raise self._error("Expected the name of the top-level object", ["key"])

        key = self._parse_key()
        self._skip_inline_whitespace()

        if self.pos >= self.length or self.text[self.pos] != "{":
            raise self._error(f"Expected '{{' after top-level key '{key.text}'", ["object"])

        body = self._parse_object()
        return Node(Rule.TOP, start, self.pos, children=[key, body])

    def _parse_object(self) -> Node:
        """Match ``{ pair* }`` and return a PAIRS node."""
        assert self.text[self.pos] == "{"
        start = self.pos
        if self.depth >= MAX_DEPTH:
            raise self._error(f"Objects nested deeper than {MAX_DEPTH} levels", ["'}'"])
        self.depth += 1
        self.pos += 1
        node = Node(Rule.PAIRS, start, start)

        while True:
            self._skip_whitespace()

            if self.pos >= self.length:
                raise self._error("Unexpected end of input, expected '}'", ["pair", "'}'"])

            char = self.text[self.pos]
            if char == "}":
                self.pos += 1
                break
            if char in '{"':
                raise self._error("Expected a setting name", ["key", "'}'"])

            node.children.append(self._parse_pair())

        node.end = self.pos
        self.depth -= 1
        return node

    def _parse_pair(self) -> Node:
        """Match one settings line: 1 or 2 leading tokens and an optional value."""
        start = self.pos
        first = self._parse_key()
        self._skip_inline_whitespace()

        if self._at_pair_end():
            return Node(Rule.PAIR, start, first.end, children=[first])

        if self.text[self.pos] in '{"':
            value = self._parse_value()
            self._expect_pair_end()
            return Node(Rule.PAIR, start, value.end, children=[first, value])

        second_start = self.pos
        second_text = self._read_token()
        self._skip_inline_whitespace()

        if self._at_pair_end():
            value = self._classify_token(second_text, second_start)
            return Node(Rule.PAIR, start, value.end, children=[first, value])

        if self.text[self.pos] == "{":
            instance = Node(Rule.KEY, second_start, second_start + len(second_text), second_text)
            body = self._parse_object()
            self._expect_pair_end()
            return Node(Rule.PAIR, start, body.end, children=[first, instance, body])

        raise self._error(
            f"'{first.text} {second_text}' must be followed by an object",
            ["'{'", "end of line"],
        )

    def _parse_value(self) -> Node:
        """Match a delimited value: an object or a quoted string."""
        if self.text[self.pos] == "{":
            return self._parse_object()
        return self._parse_string()

    def _parse_string(self) -> Node:
        """Match a double-quoted string; the contents are kept verbatim."""
        assert self.text[self.pos] == '"'
        start = self.pos
        self.pos += 1

        while self.pos < self.length:
            char = self.text[self.pos]

            if char == '"':
                self.pos += 1
                return Node(Rule.STRING, start, self.pos, self.text[start + 1 : self.pos - 1])
            if char == "\n":
                break
            if char == "\\":
                # A backslash hides the next character from the terminator check
                if self.pos + 1 >= self.length or self.text[self.pos + 1] == "\n":
                    break
                self.pos += 2
                continue

            self.pos += 1

        raise self._error("Unterminated string", ['\'"\''], position=start)

    def _parse_key(self) -> Node:
        start = self.pos
        text = self._read_token()
        return Node(Rule.KEY, start, self.pos, text)

    def _parse_trailing_line(self) -> Node:
        """Match the rest of the current line as one opaque token."""
        start = self.pos
        end = self.text.find("\n", start)
        if end == -1:
            end = self.length
        self.pos = end
        text = self.text[start:end].rstrip(INLINE_WHITESPACE)
        return Node(Rule.TRAILING_LINE, start, start + len(text), text)

    def _classify_token(self, text: str, start: int) -> Node:
        """Sort an unquoted value token into its lexical category."""
        end = start + len(text)
        if text in BOOLEAN_LITERALS:
            return Node(Rule.BOOLEAN, start, end, text)
        if text == NULL_LITERAL:
            return Node(Rule.NULL, start, end, text)
        if text in RESERVED_KEYWORDS:
            return Node(Rule.KEYWORD, start, end, text)
        return Node(Rule.UNQUOTED_STRING, start, end, text)

    def _read_token(self) -> str:
        """Consume a run of characters up to whitespace, a brace or a quote."""
        start = self.pos
        while self.pos < self.length and self.text[self.pos] not in TOKEN_DELIMITERS:
            self.pos += 1

        if self.pos == start:
            raise self._error("Expected a token", ["key"])

        return self.text[start : self.pos]

    def _at_pair_end(self) -> bool:
        return self.pos >= self.length or self.text[self.pos] in "\n}"

    def _expect_pair_end(self) -> None:
        self._skip_inline_whitespace()
        if not self._at_pair_end():
            raise self._error("Unexpected content after value", ["end of line", "'}'"])

    def _skip_whitespace(self) -> None:
        """Skip whitespace including line breaks."""
        while self.pos < self.length and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def _skip_inline_whitespace(self) -> None:
        """Skip whitespace up to, not including, a line break."""
        while self.pos < self.length and self.text[self.pos] in INLINE_WHITESPACE:
            self.pos += 1

    def _error(self, message: str, expected: list[str], position: int | None = None) -> ParseError:
        """Build a ParseError pointing at ``position`` (default: current position)."""
        if position is None:
            position = min(self.pos, self.length)

        line_start = self.text.rfind("\n", 0, position) + 1
        line_end = self.text.find("\n", position)
        if line_end == -1:
            line_end = self.length

        line = self.text.count("\n", 0, position) + 1
        column = position - line_start + 1
        source_line = self.text[line_start:line_end].rstrip(INLINE_WHITESPACE)

        context = {"line": line, "column": column, "expected": ", ".join(expected)}
        if source_line:
            context["source"] = source_line

        return ParseError(
            message,
            context=context,
            line=line,
            column=column,
            position=position,
            expected=expected,
        )


def parse_tree(text: str) -> Node:
    """Match ``text`` against the document grammar and return the parse tree."""
    return Grammar(text).parse()
