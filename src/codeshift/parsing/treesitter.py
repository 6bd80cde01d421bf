"""Tree-sitter parser adapter.

Converts a tree-sitter concrete syntax tree into mutable ``Node`` objects.
Every tree-sitter child becomes a node: named nodes, anonymous tokens such as
``var`` or ``;``, and extras such as comments. Leaves keep their exact text,
and every node keeps its byte span in the shared ``SourceText`` so the
printer can reuse untouched regions verbatim.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from typing import Any

import tree_sitter

from codeshift.core.errors import ParseError
from codeshift.core.logging import get_logger
from codeshift.parsing.languages import get_language_spec
from codeshift.tree.nodes import Node, SourceText

log = get_logger("parsing.treesitter")


@dataclass
class TreeSitterParser:
    """
    Tree-sitter backed implementation of the ``Parser`` protocol.

    Usage::

        parser = TreeSitterParser("javascript")
        root = parser.parse("var foo;")
        root.type  # "program"

    Unless ``tolerant`` is set, source whose tree contains ERROR or MISSING
    nodes raises ``ParseError``.
    """

    language: str = "javascript"
    tolerant: bool = False
    _parser: Any = field(default=None, init=False, repr=False)
    _languages: dict[str, Any] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.language = self.language.lower()
        self._parser = tree_sitter.Parser()

    def _get_language(self, lang_name: str) -> Any:
        """Get or load a tree-sitter language."""
        if lang_name in self._languages:
            return self._languages[lang_name]

        spec = get_language_spec(lang_name)
        if spec is None:
            raise ParseError.unsupported_language(lang_name)

        try:
            mod = importlib.import_module(spec.grammar_module)
            lang_fn = getattr(mod, spec.language_func)
            lang = tree_sitter.Language(lang_fn())
        except (ImportError, AttributeError) as err:
            raise ParseError.unsupported_language(lang_name, package=spec.grammar_package) from err

        self._languages[lang_name] = lang
        return lang

    def parse(self, source: str) -> Node:
        """Parse source text into a tree of ``Node`` objects.

        Args:
            source: Program text.

        Returns:
            Root node. Its span covers the whole input, including leading
            and trailing whitespace.

        Raises:
            ParseError: Unknown language, or a syntax error when not tolerant.
        """
        self._parser.language = self._get_language(self.language)
        text = SourceText(source)
        tree = self._parser.parse(text.data)

        if not self.tolerant and tree.root_node.has_error:
            bad = _first_error(tree.root_node)
            row, column = bad.start_point
            raise ParseError.syntax_error(self.language, row + 1, column + 1, bad.type)

        root = _convert(tree, text)
        log.debug("source_parsed", language=self.language, size=len(text.data))
        return root


def _first_error(ts_node: Any) -> Any:
    """Find the first ERROR or MISSING node in document order."""
    stack = [ts_node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current
        stack.extend(reversed(current.children))
    return ts_node


def _make_node(ts_node: Any, source: SourceText) -> Node:
    start, end = ts_node.start_byte, ts_node.end_byte
    return Node(
        type=ts_node.type,
        text=source.slice(start, end) if ts_node.child_count == 0 else None,
        named=ts_node.is_named,
        span=(start, end),
        source=source,
    )


def _convert(tree: Any, source: SourceText) -> Node:
    """Build the ``Node`` tree with a cursor walk (no recursion)."""
    cursor = tree.walk()
    root = _make_node(cursor.node, source)
    root.span = (0, len(source.data))

    if not cursor.goto_first_child():
        root.mark_original()
        return root

    stack: list[Node] = [root]
    while True:
        ts_node = cursor.node
        node = _make_node(ts_node, source)
        owner = stack[-1]
        owner.children.append(node)
        owner.fields.append(cursor.field_name)

        if ts_node.child_count and cursor.goto_first_child():
            stack.append(node)
            continue
        node.mark_original()

        while not cursor.goto_next_sibling():
            cursor.goto_parent()
            finished = stack.pop()
            finished.mark_original()
            if not stack:
                return finished
