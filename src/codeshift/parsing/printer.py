"""Diff-aware printer.

Reprints a ``Node`` tree so that untouched regions come out byte-for-byte as
they were parsed and only modified regions are reformatted:

- A pristine node (parsed, unmodified, with pristine descendants) is the
  verbatim slice of its own source.
- A modified parsed node is rebuilt from its children. The node's
  leading and trailing padding is always kept. The text between children
  is taken from the original wherever the neighbouring slots still hold
  original children.
- Synthesized nodes are formatted by joining their tokens with
  ``separator``.

Without an original source (full-print mode) every node is formatted the
synthesized way.
"""

from __future__ import annotations

from dataclasses import dataclass

from codeshift.tree.nodes import Node, SourceText

# Token types that never take a separator before / after them
_NO_SPACE_BEFORE = frozenset({")", "]", "}", ";", ",", ".", ":"})
_NO_SPACE_AFTER = frozenset({"(", "[", "."})


@dataclass
class DiffPrinter:
    """Implementation of the ``Printer`` protocol for ``Node`` trees.

    Both modes run off explicit stacks, so tree depth is bounded by memory
    rather than the interpreter's recursion limit.
    """

    separator: str = " "

    def print(self, node: Node, original: SourceText | None = None) -> str:
        out: list[str] = []
        if original is None:
            self._emit_full(node, out)
        else:
            self._emit(node, out, self._pristine_map(node))
        return "".join(out)

    def _pristine_map(self, root: Node) -> dict[int, bool]:
        """Pristine flag for every node under ``root``, keyed by ``id``."""
        memo: dict[int, bool] = {}
        stack: list[tuple[Node, bool]] = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            if id(node) in memo:
                continue
            if not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in node.children if id(child) not in memo)
                continue
            memo[id(node)] = not node.is_modified() and all(
                memo[id(child)] for child in node.children
            )
        return memo

    def _spaced(self, prev: Node, cur: Node) -> bool:
        return cur.type not in _NO_SPACE_BEFORE and prev.type not in _NO_SPACE_AFTER

    def _joined(self, node: Node) -> list[Node | str]:
        """Children of ``node`` with separators between spaced tokens."""
        parts: list[Node | str] = []
        for i, child in enumerate(node.children):
            if i and self._spaced(node.children[i - 1], child):
                parts.append(self.separator)
            parts.append(child)
        return parts

    def _emit_full(self, root: Node, out: list[str]) -> None:
        stack: list[Node | str] = [root]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                out.append(item)
            elif item.is_leaf:
                out.append(item.text or "")
            else:
                stack.extend(reversed(self._joined(item)))

    def _emit(self, root: Node, out: list[str], pristine: dict[int, bool]) -> None:
        stack: list[Node | str] = [root]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                out.append(item)
                continue
            if pristine[id(item)]:
                assert item.source is not None and item.span is not None
                out.append(item.source.slice(*item.span))
            elif item.text is not None:
                out.append(item.text)
            elif item.is_parsed:
                stack.extend(reversed(self._modified_parts(item)))
            else:
                stack.extend(reversed(self._joined(item)))

    def _modified_parts(self, node: Node) -> list[Node | str]:
        """Rebuild a parsed node whose own text or children changed.

        Leading and trailing padding come from the original first and last
        child, even when every child has since been removed.
        """
        assert node.source is not None and node.span is not None
        source = node.source
        start, end = node.span
        original = node.original_children
        positions = {id(child): pos for pos, child in enumerate(original)}

        parts: list[Node | str] = []
        if original:
            parts.append(source.slice(start, _span(original[0])[0]))
        for i, child in enumerate(node.children):
            if i:
                parts.append(self._gap(node, i, positions))
            parts.append(child)
        if original:
            parts.append(source.slice(_span(original[-1])[1], end))
        return parts

    def _gap(self, node: Node, i: int, positions: dict[int, int]) -> str:
        """Text between child ``i - 1`` and child ``i`` of a modified node."""
        assert node.source is not None
        source = node.source
        original = node.original_children
        children = node.children

        # Same slot layout: reuse the slot-wise original gap
        if len(original) == len(children):
            return source.slice(_span(original[i - 1])[1], _span(original[i])[0])

        prev_pos = positions.get(id(children[i - 1]))
        if prev_pos is not None and prev_pos + 1 < len(original):
            return source.slice(_span(original[prev_pos])[1], _span(original[prev_pos + 1])[0])
        cur_pos = positions.get(id(children[i]))
        if cur_pos is not None and cur_pos > 0:
            return source.slice(_span(original[cur_pos - 1])[1], _span(original[cur_pos])[0])
        if self._spaced(children[i - 1], children[i]):
            return self.separator
        return ""


def _span(node: Node) -> tuple[int, int]:
    assert node.span is not None
    return node.span
