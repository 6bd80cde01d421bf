"""Parser and printer protocols consumed by the entry point."""

from typing import Protocol

from codeshift.tree.nodes import Node, SourceText


class Parser(Protocol):
    """Turns source text into a tree of ``Node`` objects.

    Implementations raise their own errors for unparseable input; callers
    propagate them unchanged.
    """

    def parse(self, source: str) -> Node:
        """Parse source text and return the root node."""
        ...


class Printer(Protocol):
    """Turns a tree back into source text."""

    def print(self, node: Node, original: SourceText | None = None) -> str:
        """Print ``node``.

        Args:
            node: Root of the tree to print.
            original: Source the tree was parsed from. When given, untouched
                      subtrees are reproduced verbatim (diff-aware mode);
                      otherwise every node is formatted (full-print mode).
        """
        ...
