"""Collection of path references.

A ``Collection`` is the object callers and plugins work with: an ordered,
fixed sequence of ``NodePath`` objects tagged with the node kind it holds.
The sequence is never deduplicated or reordered. Nodes it references may be
mutated freely; ``to_source`` prints the tree they live in.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator
from typing import Any, overload

from codeshift.collection.methods import MethodRegistry
from codeshift.core.errors import InvalidInputError, SerializationError
from codeshift.core.logging import get_logger
from codeshift.parsing.base import Printer
from codeshift.tree.nodes import Node
from codeshift.tree.paths import NodePath

log = get_logger("collection")

GENERIC_KIND = "node"


class Collection:
    """Ordered, homogeneous sequence of ``NodePath`` objects.

    Usage::

        collection = shift("var foo;")
        len(collection)          # 1
        collection[0].node.type  # "program"
        collection.to_source()   # "var foo;"

    Operations installed on the ``MethodRegistry`` are reachable as
    attributes.
    """

    def __init__(
        self,
        paths: Iterable[NodePath],
        *,
        methods: MethodRegistry,
        printer: Printer,
        parent: Collection | None = None,
        kind: str | None = None,
    ) -> None:
        self._paths = tuple(paths)
        for path in self._paths:
            if not isinstance(path, NodePath):
                raise InvalidInputError.unsupported(path)
        self._methods = methods
        self._printer = printer
        self._parent = parent
        self._kind = self._infer_kind(kind)

    def _infer_kind(self, kind: str | None) -> str:
        if kind is not None:
            if kind != GENERIC_KIND:
                for path in self._paths:
                    if path.node.type != kind:
                        raise InvalidInputError.kind_mismatch(kind, path.node.type)
            return kind
        if not self._paths:
            return GENERIC_KIND
        first = self._paths[0].node.type
        if all(path.node.type == first for path in self._paths):
            return first
        return GENERIC_KIND

    @property
    def kind(self) -> str:
        """Node type shared by every element, or ``"node"``."""
        return self._kind

    @property
    def parent(self) -> Collection | None:
        """Collection this one was derived from, if any."""
        return self._parent

    def __len__(self) -> int:
        return len(self._paths)

    def size(self) -> int:
        return len(self._paths)

    @overload
    def __getitem__(self, index: int) -> NodePath: ...

    @overload
    def __getitem__(self, index: slice) -> Collection: ...

    def __getitem__(self, index: int | slice) -> NodePath | Collection:
        if isinstance(index, slice):
            return self.derive(self._paths[index])
        return self._paths[index]

    def __iter__(self) -> Iterator[NodePath]:
        return iter(self._paths)

    def paths(self) -> list[NodePath]:
        return list(self._paths)

    def nodes(self) -> list[Node]:
        return [path.node for path in self._paths]

    def derive(self, paths: Iterable[NodePath], kind: str | None = None) -> Collection:
        """Build a collection whose parent is this one.

        The new collection shares this one's operations and printer.
        """
        return Collection(
            paths,
            methods=self._methods,
            printer=self._printer,
            parent=self,
            kind=kind,
        )

    def at(self, index: int) -> Collection:
        """Single-element collection holding the path at ``index``."""
        return self.derive([self._paths[index]])

    def filter(self, predicate: Callable[[NodePath], bool]) -> Collection:
        return self.derive(path for path in self._paths if predicate(path))

    def map(self, fn: Callable[[NodePath], Any], kind: str | None = None) -> Collection:
        """Collect whatever ``fn`` returns for each path.

        ``fn`` may return a path, a node, a list/tuple of either, or None.
        Nodes are wrapped as root paths.
        """
        mapped: list[NodePath] = []
        for path in self._paths:
            result = fn(path)
            if result is None:
                continue
            items = result if isinstance(result, list | tuple) else [result]
            for item in items:
                if isinstance(item, NodePath):
                    mapped.append(item)
                elif isinstance(item, Node):
                    mapped.append(NodePath(item))
                else:
                    raise InvalidInputError.unsupported(item)
        return self.derive(mapped, kind=kind)

    def for_each(self, fn: Callable[[NodePath], Any]) -> Collection:
        for path in self._paths:
            fn(path)
        return self

    def get_types(self) -> frozenset[str]:
        return frozenset(path.node.type for path in self._paths)

    def is_of_type(self, node_type: str) -> bool:
        return bool(self._paths) and all(path.node.type == node_type for path in self._paths)

    def to_source(self) -> str:
        """Print the tree the elements belong to.

        A derived collection prints its parent. Otherwise every element must
        live in the same tree; that tree's root is printed, reusing the
        original text of everything left untouched.

        Raises:
            SerializationError: Empty collection without a parent, or
                elements from more than one tree.
        """
        if self._parent is not None:
            return self._parent.to_source()
        if not self._paths:
            raise SerializationError.empty()

        roots: list[Node] = []
        for path in self._paths:
            root = path.root().node
            if not any(root is seen for seen in roots):
                roots.append(root)
        if len(roots) > 1:
            raise SerializationError.multiple_roots(len(roots))

        root = roots[0]
        log.debug("collection_serialized", root_type=root.type, diff_aware=root.source is not None)
        return self._printer.print(root, root.source)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        spec = self._methods.lookup(name, self._kind)
        if spec is None:
            raise AttributeError(
                f"'{type(self).__name__}' of kind '{self._kind}' has no method '{name}'"
            )
        return functools.partial(spec.handler, self)

    def __repr__(self) -> str:
        return f"Collection(kind={self._kind!r}, size={len(self._paths)})"
