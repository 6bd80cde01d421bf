"""Syntax-tree model exports."""

from codeshift.tree.nodes import Node, SourceText
from codeshift.tree.paths import NodePath

__all__ = [
    "Node",
    "NodePath",
    "SourceText",
]
