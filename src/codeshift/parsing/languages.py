"""Grammar table for the tree-sitter parser.

``LANGUAGES`` is the canonical lookup: ``LANGUAGES["javascript"]``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageSpec:
    """Where to find a tree-sitter grammar."""

    name: str
    grammar_package: str
    grammar_module: str
    language_func: str = "language"  # Non-standard for typescript/tsx


LANGUAGES: dict[str, LanguageSpec] = {
    "javascript": LanguageSpec(
        name="javascript",
        grammar_package="tree-sitter-javascript",
        grammar_module="tree_sitter_javascript",
    ),
    "typescript": LanguageSpec(
        name="typescript",
        grammar_package="tree-sitter-typescript",
        grammar_module="tree_sitter_typescript",
        language_func="language_typescript",
    ),
    "tsx": LanguageSpec(
        name="tsx",
        grammar_package="tree-sitter-typescript",
        grammar_module="tree_sitter_typescript",
        language_func="language_tsx",
    ),
    "python": LanguageSpec(
        name="python",
        grammar_package="tree-sitter-python",
        grammar_module="tree_sitter_python",
    ),
}


def get_language_spec(name: str) -> LanguageSpec | None:
    return LANGUAGES.get(name.lower())
