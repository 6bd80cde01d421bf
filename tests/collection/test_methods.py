"""Tests for the collection capability surface."""

import pytest

from codeshift.collection import Collection, MethodRegistry
from codeshift.core.errors import DuplicateMethodError
from codeshift.parsing.printer import DiffPrinter
from codeshift.tree.nodes import Node
from codeshift.tree.paths import NodePath


def _collection(methods: MethodRegistry, *nodes: Node) -> Collection:
    return Collection([NodePath(n) for n in nodes], methods=methods, printer=DiffPrinter())


def _texts(collection: Collection) -> list[str]:
    return [n.text or "" for n in collection.nodes()]


class TestRegister:
    """Installing operations."""

    def test_generic_method_bound_to_collection(self, methods: MethodRegistry) -> None:
        methods.register({"texts": _texts})
        collection = _collection(methods, Node.leaf("identifier", "a"))

        assert collection.texts() == ["a"]

    def test_methods_visible_on_existing_collections(self, methods: MethodRegistry) -> None:
        collection = _collection(methods, Node.leaf("identifier", "a"))
        with pytest.raises(AttributeError):
            collection.texts()

        methods.register({"texts": _texts})

        assert collection.texts() == ["a"]

    def test_extra_arguments_forwarded(self, methods: MethodRegistry) -> None:
        methods.register({"joined": lambda c, sep=",": sep.join(_texts(c))})
        collection = _collection(methods, Node.leaf("identifier", "a"), Node.leaf("identifier", "b"))

        assert collection.joined() == "a,b"
        assert collection.joined(sep="-") == "a-b"

    def test_typed_method_only_on_matching_kind(self, methods: MethodRegistry) -> None:
        methods.register({"rename": lambda c, name: None}, node_type="identifier")

        assert callable(_collection(methods, Node.leaf("identifier", "a")).rename)
        with pytest.raises(AttributeError, match="kind 'number'"):
            _collection(methods, Node.leaf("number", "1")).rename

    def test_same_name_for_different_types(self, methods: MethodRegistry) -> None:
        methods.register({"describe": lambda c: "id"}, node_type="identifier")
        methods.register({"describe": lambda c: "num"}, node_type="number")

        assert _collection(methods, Node.leaf("identifier", "a")).describe() == "id"
        assert _collection(methods, Node.leaf("number", "1")).describe() == "num"
        assert methods.names("number") == ["describe"]


class TestConflicts:
    """Name clashes."""

    def test_duplicate_generic(self, methods: MethodRegistry) -> None:
        methods.register({"texts": _texts})

        with pytest.raises(DuplicateMethodError):
            methods.register({"texts": _texts})

    def test_typed_clashes_with_generic(self, methods: MethodRegistry) -> None:
        methods.register({"texts": _texts})

        with pytest.raises(DuplicateMethodError):
            methods.register({"texts": _texts}, node_type="identifier")

    def test_generic_clashes_with_typed(self, methods: MethodRegistry) -> None:
        methods.register({"texts": _texts}, node_type="identifier")

        with pytest.raises(DuplicateMethodError):
            methods.register({"texts": _texts})

    @pytest.mark.parametrize("name", ["filter", "to_source", "kind", "parent", "_private"])
    def test_builtin_names_reserved(self, methods: MethodRegistry, name: str) -> None:
        with pytest.raises(DuplicateMethodError):
            methods.register({name: _texts})

    def test_conflict_installs_nothing(self, methods: MethodRegistry) -> None:
        methods.register({"texts": _texts})

        with pytest.raises(DuplicateMethodError):
            methods.register({"first": lambda c: c[0], "texts": _texts})

        assert methods.lookup("first", "identifier") is None

    def test_reset(self, methods: MethodRegistry) -> None:
        methods.register({"texts": _texts})
        methods.reset()

        assert methods.names("identifier") == []
