"""Mutable syntax-tree node model.

Nodes produced by a parser keep a snapshot of their original text and child
identities, plus the byte span they occupied in the original ``SourceText``.
The printer compares the live node against that snapshot to decide whether
the original text can be reused verbatim. There are no dirty flags: any
mutation, through a ``NodePath`` or directly on ``children``, is detected.

Nodes compare by identity. Two structurally equal nodes are still two
different elements.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, eq=False)
class SourceText:
    """Original source of one parse, shared by every node of that parse."""

    text: str
    data: bytes = field(default=b"", repr=False)

    def __post_init__(self) -> None:
        if not self.data and self.text:
            object.__setattr__(self, "data", self.text.encode("utf-8"))

    def slice(self, start: int, end: int) -> str:
        """Decode the original bytes in ``[start, end)``."""
        return self.data[start:end].decode("utf-8")


@dataclass(eq=False)
class Node:
    """A syntax-tree element.

    Leaves carry ``text``; interior nodes carry ``children`` and a parallel
    ``fields`` list naming the grammar field of each child slot.
    """

    type: str
    text: str | None = None
    children: list[Node] = field(default_factory=list)
    fields: list[str | None] = field(default_factory=list)
    named: bool = True
    span: tuple[int, int] | None = None
    source: SourceText | None = field(default=None, repr=False)
    _original_text: str | None = field(default=None, init=False, repr=False)
    _original_children: tuple[Node, ...] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.fields) < len(self.children):
            self.fields.extend([None] * (len(self.children) - len(self.fields)))

    @classmethod
    def leaf(cls, type: str, text: str, *, named: bool = True) -> Node:
        """Build a synthesized leaf node."""
        return cls(type=type, text=text, named=named)

    @classmethod
    def branch(
        cls,
        type: str,
        children: Sequence[Node],
        fields: Sequence[str | None] | None = None,
    ) -> Node:
        """Build a synthesized interior node."""
        return cls(
            type=type,
            children=list(children),
            fields=list(fields) if fields is not None else [],
        )

    def mark_original(self) -> None:
        """Snapshot the current state as the parsed original.

        Called by parsers once the node and its children are fully built.
        """
        self._original_text = self.text
        self._original_children = tuple(self.children)

    @property
    def is_leaf(self) -> bool:
        return self.text is not None or not self.children

    @property
    def is_parsed(self) -> bool:
        return self.span is not None and self.source is not None and self._original_children is not None

    @property
    def original_children(self) -> tuple[Node, ...]:
        return self._original_children or ()

    def is_modified(self) -> bool:
        """True if this node's own text or child list differs from the parse.

        Synthesized nodes are always considered modified.
        """
        if not self.is_parsed:
            return True
        if self.text != self._original_text:
            return True
        original = self.original_children
        if len(original) != len(self.children):
            return True
        return any(a is not b for a, b in zip(original, self.children, strict=True))

    def is_pristine(self) -> bool:
        """True if neither this node nor any descendant was modified."""
        return not any(node.is_modified() for node in self.walk())

    def child_by_field(self, name: str) -> Node | None:
        for child, field_name in zip(self.children, self.fields, strict=False):
            if field_name == name:
                return child
        return None

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants in pre-order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
