"""Path references: a node plus its position inside the owning tree.

A ``NodePath`` records the node, the path of the node that holds it, and the
index of the child slot it occupies. For every attached, non-root path::

    path.parent.node.children[path.name] is path.node

Replacing through a path writes into that slot, which is what lets the
printer detect the changed region. Child paths are created on demand and
cached per slot, so asking twice for the same location yields the same
``NodePath`` object. A child path built directly with ``NodePath(node,
parent, index)`` takes over that slot in the cache; only the cached path of
each slot is re-indexed when earlier siblings are spliced or pruned.
"""

from __future__ import annotations

from collections.abc import Iterator

from codeshift.tree.nodes import Node


class NodePath:
    """Location of a node inside a syntax tree."""

    __slots__ = ("node", "parent", "name", "_children")

    def __init__(self, node: Node, parent: NodePath | None = None, name: int | None = None) -> None:
        if (parent is None) != (name is None):
            raise ValueError("parent and name must be given together")
        if parent is not None and parent.node.children[name] is not node:  # type: ignore[index]
            raise ValueError(f"{parent.node.type} does not hold the given node at slot {name}")
        self.node = node
        self.parent = parent
        self.name = name
        self._children: dict[int, NodePath] = {}
        if parent is not None:
            parent._children[name] = self  # type: ignore[index]

    @property
    def value(self) -> Node:
        return self.node

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def field(self) -> str | None:
        """Grammar field name of the slot holding this node, if any."""
        if self.parent is None or self.name is None:
            return None
        return self.parent.node.fields[self.name]

    def get(self, index: int) -> NodePath:
        """Return the path of the child at ``index``, creating it if needed."""
        children = self.node.children
        if index < 0:
            index += len(children)
        if not 0 <= index < len(children):
            raise IndexError(f"{self.node.type} has no child at index {index}")
        cached = self._children.get(index)
        if cached is None or cached.node is not children[index]:
            cached = NodePath(children[index], self, index)
        return cached

    def child_paths(self) -> list[NodePath]:
        return [self.get(i) for i in range(len(self.node.children))]

    def walk(self) -> Iterator[NodePath]:
        """Yield this path and every descendant path in pre-order."""
        stack: list[NodePath] = [self]
        while stack:
            path = stack.pop()
            yield path
            stack.extend(reversed(path.child_paths()))

    def ancestors(self) -> Iterator[NodePath]:
        path = self.parent
        while path is not None:
            yield path
            path = path.parent

    def root(self) -> NodePath:
        path = self
        while path.parent is not None:
            path = path.parent
        return path

    def same_element(self, other: NodePath) -> bool:
        """True if both paths reference the same node object."""
        return self.node is other.node

    def replace(self, *nodes: Node) -> list[NodePath]:
        """Replace this node in its parent slot.

        Several nodes are spliced in place, none removes the slot. Sibling
        paths after the slot are re-indexed. Returns the paths that now
        occupy the slot; this path is reused for the first of them.
        """
        if self.parent is None:
            if len(nodes) != 1:
                raise ValueError("a root path must be replaced by exactly one node")
            self.node = nodes[0]
            self._children.clear()
            return [self]

        parent = self.parent
        index = self.name
        if index is None:
            raise ValueError(f"path to {self.node.type} has no slot in its parent")
        container = parent.node
        if index >= len(container.children) or container.children[index] is not self.node:
            raise ValueError(f"path to {self.node.type} is no longer attached at slot {index}")

        field_name = container.fields[index]
        container.children[index : index + 1] = list(nodes)
        container.fields[index : index + 1] = [field_name] * len(nodes)
        parent._reindex(index, len(nodes) - 1)

        if not nodes:
            self.parent = None
            self.name = None
            return []

        self.node = nodes[0]
        self._children.clear()
        parent._children[index] = self
        return [self] + [parent.get(index + offset) for offset in range(1, len(nodes))]

    def prune(self) -> NodePath | None:
        """Remove this node from its parent and return the parent path."""
        parent = self.parent
        self.replace()
        return parent

    def _reindex(self, index: int, delta: int) -> None:
        """Drop the cached path at ``index`` and shift later ones by ``delta``."""
        shifted: dict[int, NodePath] = {}
        for slot, path in self._children.items():
            if slot < index:
                shifted[slot] = path
            elif slot > index:
                path.name = slot + delta
                shifted[slot + delta] = path
        self._children = shifted

    def __repr__(self) -> str:
        if self.parent is None:
            return f"NodePath({self.node.type}, root)"
        return f"NodePath({self.node.type}, {self.parent.node.type}[{self.name}])"
