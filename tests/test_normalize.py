"""Tests for input classification and normalization."""

from typing import Any

import pytest

from codeshift.core.errors import InvalidInputError, ParseError
from codeshift.normalize import InputShape, classify, normalize
from codeshift.parsing.treesitter import TreeSitterParser
from codeshift.tree.nodes import Node
from codeshift.tree.paths import NodePath


class _ExplodingParser:
    """Parser stand-in that must never be consulted."""

    def parse(self, source: str) -> Node:
        raise AssertionError("parser should not be called")


class _AttributeTrap:
    """Object whose attribute access fails loudly."""

    def __getattr__(self, name: str) -> Any:
        raise AssertionError(f"attribute {name} was probed")


class TestClassify:
    """Shape classification."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("var foo;", InputShape.TEXT),
            ("", InputShape.TEXT),
            (Node.leaf("identifier", "foo"), InputShape.NODE),
            ([Node.leaf("identifier", "foo")], InputShape.NODE_SEQUENCE),
            ((Node.leaf("identifier", "foo"),), InputShape.NODE_SEQUENCE),
            (NodePath(Node.leaf("identifier", "foo")), InputShape.PATH),
            ([NodePath(Node.leaf("identifier", "foo"))], InputShape.PATH_SEQUENCE),
            ([], InputShape.PATH_SEQUENCE),
        ],
    )
    def test_recognized_shapes(self, value: Any, expected: InputShape) -> None:
        assert classify(value) is expected

    @pytest.mark.parametrize(
        "value",
        [
            42,
            3.5,
            None,
            {},
            {"type": "identifier"},
            b"var foo;",
            object(),
            [1, 2],
            [Node.leaf("identifier", "foo"), NodePath(Node.leaf("identifier", "bar"))],
            {Node.leaf("identifier", "foo")},
        ],
    )
    def test_unrecognized_values_raise(self, value: Any) -> None:
        with pytest.raises(InvalidInputError):
            classify(value)

    def test_no_attribute_probing(self) -> None:
        """Objects are rejected without touching their attributes."""
        with pytest.raises(InvalidInputError):
            classify(_AttributeTrap())
        with pytest.raises(InvalidInputError):
            classify([_AttributeTrap()])


class TestNormalize:
    """Conversion to ordered path lists."""

    def test_text_is_parsed_into_one_root(self, js_parser: TreeSitterParser) -> None:
        paths = normalize("var foo;", js_parser)

        assert len(paths) == 1
        assert paths[0].is_root
        assert paths[0].node.type == "program"

    def test_parse_errors_propagate_unchanged(self, js_parser: TreeSitterParser) -> None:
        with pytest.raises(ParseError):
            normalize("var = ;", js_parser)

    def test_single_node_becomes_root_path(self) -> None:
        node = Node.leaf("identifier", "foo")

        paths = normalize(node, _ExplodingParser())

        assert len(paths) == 1
        assert paths[0].node is node
        assert paths[0].parent is None

    def test_node_sequence_keeps_order_and_distinct_roots(self) -> None:
        n1, n2 = Node.leaf("identifier", "a"), Node.leaf("identifier", "b")

        paths = normalize([n1, n2], _ExplodingParser())

        assert [p.node for p in paths] == [n1, n2]
        assert paths[0] is not paths[1]
        assert all(p.parent is None for p in paths)

    def test_duplicate_nodes_are_kept(self) -> None:
        node = Node.leaf("identifier", "a")

        paths = normalize([node, node], _ExplodingParser())

        assert len(paths) == 2
        assert paths[0].same_element(paths[1])

    def test_path_is_used_as_is(self) -> None:
        path = NodePath(Node.leaf("identifier", "foo"))

        assert normalize(path, _ExplodingParser())[0] is path

    def test_path_sequence_is_used_as_is(self) -> None:
        p1 = NodePath(Node.leaf("identifier", "a"))
        p2 = NodePath(Node.leaf("identifier", "b"))

        result = normalize((p2, p1), _ExplodingParser())

        assert result[0] is p2
        assert result[1] is p1

    def test_empty_sequence(self) -> None:
        assert normalize([], _ExplodingParser()) == []
