"""Tests for the parse tree to AST builder."""

import pytest

from edgerouter_tools.boot import Key, KeyValue, Node, Object, ObjectKeyValue, Rule, String
from edgerouter_tools.boot.builder import build_entry, build_file, build_value, parse_boolean
from edgerouter_tools.exceptions import EdgeRouterToolsError, GrammarInvariantError


def key(text):
    return Node(Rule.KEY, 0, len(text), text)


def trailing(text):
    return Node(Rule.TRAILING_LINE, 0, len(text), text)


def pairs(*children):
    return Node(Rule.PAIRS, 0, 0, children=list(children))


def pair(*children):
    return Node(Rule.PAIR, 0, 0, children=list(children))


class TestBuildEntry:
    """Tests for classifying pairs by arity."""

    def test_one_child_is_key(self):
        assert build_entry(pair(key("disable"))) == Key("disable")

    def test_two_children_is_key_value(self):
        value = Node(Rule.STRING, 0, 5, "text")
        assert build_entry(pair(key("name"), value)) == KeyValue("name", String("text"))

    def test_three_children_is_object_key_value(self):
        entry = build_entry(pair(key("ethernet"), key("eth0"), pairs()))
        assert entry == ObjectKeyValue("ethernet", "eth0", Object())

    @pytest.mark.parametrize("arity", [0, 4])
    def test_unsupported_arity(self, arity):
        with pytest.raises(GrammarInvariantError, match=f"Pair with {arity} children"):
            build_entry(pair(*[key("k")] * arity))

    def test_not_a_pair(self):
        with pytest.raises(GrammarInvariantError, match="Expected a pair node"):
            build_entry(key("disable"))


class TestBuildValue:
    """Tests for dispatching value nodes."""

    def test_keyword_becomes_string(self):
        assert build_value(Node(Rule.KEYWORD, 0, 4, "None")) == String("None")

    @pytest.mark.parametrize("rule", [Rule.KEY, Rule.PAIR, Rule.TRAILING_LINE, Rule.DOCUMENT])
    def test_non_value_rules(self, rule):
        with pytest.raises(GrammarInvariantError, match="does not produce a value"):
            build_value(Node(rule, 0, 0, "x"))

    def test_invalid_boolean_text(self):
        with pytest.raises(GrammarInvariantError, match="Invalid boolean literal"):
            build_value(Node(Rule.BOOLEAN, 0, 3, "yes"))

    def test_top_with_wrong_shape(self):
        with pytest.raises(GrammarInvariantError, match="must have 2 children"):
            build_value(Node(Rule.TOP, 0, 0, children=[key("root")]))


class TestBuildFile:
    """Tests for whole-document building."""

    def test_build_file(self):
        top = Node(Rule.TOP, 0, 0, children=[key("root"), pairs(pair(key("disable")))])
        document = Node(
            Rule.DOCUMENT, 0, 0, children=[top, trailing("a"), trailing("b"), trailing("c")]
        )

        file = build_file(document)

        assert file.values == Object([KeyValue("root", Object([Key("disable")]))])
        assert file.trailing_lines == ("a", "b", "c")

    def test_missing_trailing_lines(self):
        top = Node(Rule.TOP, 0, 0, children=[key("root"), pairs()])
        document = Node(Rule.DOCUMENT, 0, 0, children=[top, trailing("a")])

        with pytest.raises(GrammarInvariantError, match="got 1"):
            build_file(document)

    def test_empty_document(self):
        with pytest.raises(GrammarInvariantError, match="no top-level node"):
            build_file(Node(Rule.DOCUMENT, 0, 0))

    def test_wrong_root_rule(self):
        with pytest.raises(GrammarInvariantError, match="Expected a document node"):
            build_file(pairs())


class TestParseBoolean:
    def test_literals(self):
        assert parse_boolean("true") is True
        assert parse_boolean("false") is False

    @pytest.mark.parametrize("text", ["True", "FALSE", "1", ""])
    def test_rejects_other_text(self, text):
        with pytest.raises(GrammarInvariantError):
            parse_boolean(text)


class TestGrammarInvariantError:
    def test_is_assertion_error(self):
        assert issubclass(GrammarInvariantError, AssertionError)

    def test_not_a_user_error(self):
        assert not issubclass(GrammarInvariantError, EdgeRouterToolsError)
