"""Capability surface for collections.

Plugins install named operations here instead of patching ``Collection``.
A collection consults the registry on every unknown attribute lookup, so an
operation installed once is visible on every collection sharing the
registry, including ones created before the installation.

Operations are plain functions taking the collection as first argument::

    def names(collection):
        return [path.node.text for path in collection]

    methods.register({"names": names}, node_type="identifier")
    shift(tree_of_identifiers).names()
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from codeshift.core.errors import DuplicateMethodError
from codeshift.core.logging import get_logger

log = get_logger("collection.methods")

MethodFn = Callable[..., Any]


@dataclass(frozen=True)
class MethodSpec:
    """A registered collection operation."""

    name: str
    handler: MethodFn
    node_type: str | None = None  # None: available on every collection


class MethodRegistry:
    """Mapping from operation name to implementation, optionally per node type."""

    def __init__(self) -> None:
        self._generic: dict[str, MethodSpec] = {}
        self._typed: dict[str, dict[str, MethodSpec]] = {}

    def register(self, methods: Mapping[str, MethodFn], node_type: str | None = None) -> None:
        """Install operations.

        Generic operations (``node_type=None``) may not share a name with any
        other operation. Typed operations may not share a name with a
        generic one or another operation of the same type. Nothing is
        installed if any name conflicts.

        Raises:
            DuplicateMethodError: A name is taken or shadows a built-in
                ``Collection`` attribute.
        """
        reserved = _reserved_names()
        for name in methods:
            if name.startswith("_") or name in reserved or self._conflicts(name, node_type):
                raise DuplicateMethodError.for_name(name, node_type)

        for name, handler in methods.items():
            spec = MethodSpec(name=name, handler=handler, node_type=node_type)
            if node_type is None:
                self._generic[name] = spec
            else:
                self._typed.setdefault(node_type, {})[name] = spec

        log.debug("methods_registered", names=sorted(methods), node_type=node_type)

    def _conflicts(self, name: str, node_type: str | None) -> bool:
        if name in self._generic:
            return True
        if node_type is None:
            return any(name in table for table in self._typed.values())
        return name in self._typed.get(node_type, {})

    def lookup(self, name: str, kind: str) -> MethodSpec | None:
        """Find the operation visible on a collection of ``kind``."""
        typed = self._typed.get(kind, {}).get(name)
        if typed is not None:
            return typed
        return self._generic.get(name)

    def names(self, kind: str) -> list[str]:
        return sorted({*self._generic, *self._typed.get(kind, {})})

    def reset(self) -> None:
        """Remove all operations (for testing)."""
        self._generic.clear()
        self._typed.clear()


def _reserved_names() -> frozenset[str]:
    # Import here to avoid circular dependency
    from codeshift.collection.collection import Collection

    return frozenset(name for name in dir(Collection) if not name.startswith("_"))
