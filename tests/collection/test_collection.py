"""Tests for Collection."""

import pytest

from codeshift.collection import GENERIC_KIND, Collection, MethodRegistry
from codeshift.core.errors import InvalidInputError, SerializationError
from codeshift.parsing.printer import DiffPrinter
from codeshift.parsing.treesitter import TreeSitterParser
from codeshift.tree.nodes import Node
from codeshift.tree.paths import NodePath


def _collection(paths: list[NodePath], methods: MethodRegistry, **kwargs) -> Collection:
    return Collection(paths, methods=methods, printer=DiffPrinter(), **kwargs)


def _identifiers(*names: str) -> list[NodePath]:
    return [NodePath(Node.leaf("identifier", name)) for name in names]


class TestKind:
    """Element-kind tagging."""

    def test_kind_from_homogeneous_elements(self, methods: MethodRegistry) -> None:
        assert _collection(_identifiers("a", "b"), methods).kind == "identifier"

    def test_mixed_elements_get_generic_kind(self, methods: MethodRegistry) -> None:
        paths = [*_identifiers("a"), NodePath(Node.leaf("number", "1"))]

        assert _collection(paths, methods).kind == GENERIC_KIND

    def test_empty_collection_is_generic(self, methods: MethodRegistry) -> None:
        assert _collection([], methods).kind == GENERIC_KIND

    def test_explicit_kind_must_match(self, methods: MethodRegistry) -> None:
        assert _collection([], methods, kind="identifier").kind == "identifier"
        with pytest.raises(InvalidInputError):
            _collection(_identifiers("a"), methods, kind="number")

    def test_non_path_elements_rejected(self, methods: MethodRegistry) -> None:
        with pytest.raises(InvalidInputError):
            _collection([Node.leaf("identifier", "a")], methods)  # type: ignore[list-item]


class TestAccess:
    """Sequence behaviour."""

    def test_len_index_iter(self, methods: MethodRegistry) -> None:
        paths = _identifiers("a", "b", "a")
        collection = _collection(paths, methods)

        assert len(collection) == collection.size() == 3
        assert collection[0] is paths[0]
        assert collection[-1] is paths[2]
        assert list(collection) == paths
        assert collection.paths() == paths
        assert [n.text for n in collection.nodes()] == ["a", "b", "a"]

    def test_slice_derives_collection(self, methods: MethodRegistry) -> None:
        collection = _collection(_identifiers("a", "b", "c"), methods)

        sliced = collection[1:]

        assert isinstance(sliced, Collection)
        assert sliced.parent is collection
        assert [n.text for n in sliced.nodes()] == ["b", "c"]

    def test_at_filter_map_for_each(self, methods: MethodRegistry) -> None:
        collection = _collection(_identifiers("a", "bb", "c"), methods)

        assert collection.at(1).nodes()[0].text == "bb"
        long_names = collection.filter(lambda p: len(p.node.text or "") > 1)
        assert [n.text for n in long_names.nodes()] == ["bb"]

        wrapped = collection.map(lambda p: Node.branch("wrapper", [p.node]))
        assert wrapped.kind == "wrapper"
        assert len(wrapped) == 3
        assert collection.map(lambda p: None).size() == 0

        seen: list[str] = []
        assert collection.for_each(lambda p: seen.append(p.node.text or "")) is collection
        assert seen == ["a", "bb", "c"]

    def test_map_rejects_unsupported_results(self, methods: MethodRegistry) -> None:
        collection = _collection(_identifiers("a"), methods)

        with pytest.raises(InvalidInputError):
            collection.map(lambda p: 42)

    def test_types(self, methods: MethodRegistry) -> None:
        collection = _collection(_identifiers("a", "b"), methods)

        assert collection.get_types() == frozenset({"identifier"})
        assert collection.is_of_type("identifier")
        assert not collection.is_of_type("number")
        assert not _collection([], methods).is_of_type("identifier")


class TestToSource:
    """Serialization policy."""

    def test_unmodified_parse_round_trips(
        self, methods: MethodRegistry, js_parser: TreeSitterParser
    ) -> None:
        source = "\nvar foo;\n"
        collection = _collection([NodePath(js_parser.parse(source))], methods)

        assert collection.to_source() == source

    def test_elements_from_one_tree_print_the_root(
        self, methods: MethodRegistry, js_parser: TreeSitterParser
    ) -> None:
        source = "var a;\nvar b;\n"
        root = NodePath(js_parser.parse(source))
        collection = _collection(root.child_paths(), methods)

        assert collection.to_source() == source

    def test_derived_collection_prints_parent(
        self, methods: MethodRegistry, js_parser: TreeSitterParser
    ) -> None:
        collection = _collection([NodePath(js_parser.parse("var a;"))], methods)

        assert collection.filter(lambda p: False).to_source() == "var a;"

    def test_bare_node_is_full_printed(self, methods: MethodRegistry) -> None:
        collection = _collection(_identifiers("foo"), methods)

        assert collection.to_source() == "foo"

    def test_multiple_roots_rejected(
        self, methods: MethodRegistry, js_parser: TreeSitterParser
    ) -> None:
        paths = [NodePath(js_parser.parse("var a;")), NodePath(js_parser.parse("var b;"))]

        with pytest.raises(SerializationError) as exc_info:
            _collection(paths, methods).to_source()

        assert exc_info.value.details == {"roots": 2}

    def test_empty_without_parent_rejected(self, methods: MethodRegistry) -> None:
        with pytest.raises(SerializationError):
            _collection([], methods).to_source()
