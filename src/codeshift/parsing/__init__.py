"""Parser and printer collaborators."""

from codeshift.parsing.base import Parser, Printer
from codeshift.parsing.languages import LANGUAGES, LanguageSpec, get_language_spec
from codeshift.parsing.printer import DiffPrinter
from codeshift.parsing.treesitter import TreeSitterParser

__all__ = [
    "LANGUAGES",
    "DiffPrinter",
    "LanguageSpec",
    "Parser",
    "Printer",
    "TreeSitterParser",
    "get_language_spec",
]
