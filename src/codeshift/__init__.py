"""codeshift: normalization and collection core for codemods."""

from codeshift.collection import Collection, MethodRegistry
from codeshift.core.errors import (
    CodeshiftError,
    DuplicateMethodError,
    InvalidInputError,
    ParseError,
    SerializationError,
)
from codeshift.entry import Core, shift
from codeshift.plugins import PluginRegistry
from codeshift.tree import Node, NodePath, SourceText

__all__ = [
    "CodeshiftError",
    "Collection",
    "Core",
    "DuplicateMethodError",
    "InvalidInputError",
    "MethodRegistry",
    "Node",
    "NodePath",
    "ParseError",
    "PluginRegistry",
    "SerializationError",
    "SourceText",
    "shift",
]
