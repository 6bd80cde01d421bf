"""Input normalization for the entry point.

Every value handed to the entry point is classified into one of a closed set
of shapes and turned into an ordered list of ``NodePath`` objects. Anything
outside that set raises ``InvalidInputError`` before a collection exists.

Classification uses ``isinstance`` checks only; nothing is read from the
value until its shape is known.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from codeshift.core.errors import InvalidInputError
from codeshift.core.logging import get_logger
from codeshift.parsing.base import Parser
from codeshift.tree.nodes import Node
from codeshift.tree.paths import NodePath

log = get_logger("normalize")


class InputShape(StrEnum):
    """Recognized entry point input shapes."""

    TEXT = "text"
    NODE = "node"
    NODE_SEQUENCE = "node_sequence"
    PATH = "path"
    PATH_SEQUENCE = "path_sequence"


def classify(value: Any) -> InputShape:
    """Decide the shape of ``value``.

    Sequences are lists or tuples whose items are all nodes or all paths.
    An empty sequence is a path sequence.

    Raises:
        InvalidInputError: The value matches none of the shapes.
    """
    if isinstance(value, str):
        return InputShape.TEXT
    if isinstance(value, Node):
        return InputShape.NODE
    if isinstance(value, NodePath):
        return InputShape.PATH
    if isinstance(value, list | tuple):
        if all(isinstance(item, NodePath) for item in value):
            return InputShape.PATH_SEQUENCE
        if all(isinstance(item, Node) for item in value):
            return InputShape.NODE_SEQUENCE
    raise InvalidInputError.unsupported(value)


def normalize(value: Any, parser: Parser) -> list[NodePath]:
    """Turn an entry point input into an ordered list of paths.

    Args:
        value: Source text, a node, a path, or a list/tuple of nodes or paths.
        parser: Used only for source text. Its errors propagate unchanged.

    Returns:
        Paths in input order. Nodes are wrapped as root paths.
    """
    shape = classify(value)

    if shape is InputShape.TEXT:
        paths = [NodePath(parser.parse(value))]
    elif shape is InputShape.NODE:
        paths = [NodePath(value)]
    elif shape is InputShape.NODE_SEQUENCE:
        paths = [NodePath(node) for node in value]
    elif shape is InputShape.PATH:
        paths = [value]
    elif shape is InputShape.PATH_SEQUENCE:
        paths = list(value)
    else:
        raise InvalidInputError.unsupported(value)

    log.debug("input_normalized", shape=shape.value, count=len(paths))
    return paths
