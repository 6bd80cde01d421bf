"""Entry point: turn any supported input into a ``Collection``.

Usage::

    from codeshift import shift

    collection = shift("var foo;")
    collection.to_source()  # "var foo;"

    def plugin(core):
        core.register_methods({"count": lambda c: len(c)})

    shift.use(plugin)
    shift("var foo;").count()  # 1
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from codeshift.collection.collection import Collection
from codeshift.collection.methods import MethodFn, MethodRegistry
from codeshift.config.loader import load_config
from codeshift.config.models import CodeshiftConfig
from codeshift.core.logging import configure_logging
from codeshift.normalize import normalize
from codeshift.parsing.base import Parser, Printer
from codeshift.parsing.printer import DiffPrinter
from codeshift.parsing.treesitter import TreeSitterParser
from codeshift.plugins import Plugin, PluginRegistry


class Core:
    """Callable entry point bound to a parser, printer, and registries.

    Entry points derived with ``with_parser`` share the printer, the plugin
    registry, and the capability surface of the one they came from.
    """

    def __init__(
        self,
        parser: Parser | None = None,
        printer: Printer | None = None,
        *,
        plugins: PluginRegistry | None = None,
        methods: MethodRegistry | None = None,
    ) -> None:
        self.parser: Parser = parser if parser is not None else TreeSitterParser()
        self.printer: Printer = printer if printer is not None else DiffPrinter()
        self.plugins = plugins if plugins is not None else PluginRegistry()
        self.methods = methods if methods is not None else MethodRegistry()

    @classmethod
    def from_config(
        cls, config: CodeshiftConfig | None = None, *, apply_logging: bool = False
    ) -> Core:
        """Build an entry point from configuration.

        Args:
            config: Resolved configuration. Defaults to ``load_config()``,
                    which reads the global and project YAML files and
                    ``CODESHIFT__*`` environment variables.
            apply_logging: Also install ``config.logging`` as the process-wide
                           logging setup.

        Raises:
            ConfigError: The loaded configuration is invalid.
        """
        if config is None:
            config = load_config()
        if apply_logging:
            configure_logging(config=config.logging)
        return cls(
            parser=TreeSitterParser(config.parser.language, tolerant=config.parser.tolerant),
            printer=DiffPrinter(separator=config.printer.separator),
        )

    def __call__(self, source: Any) -> Collection:
        """Normalize ``source`` into a collection.

        Args:
            source: Source text, a ``Node``, a ``NodePath``, or a list/tuple
                    of nodes or of paths.

        Raises:
            InvalidInputError: ``source`` is none of the above.
        """
        return Collection(normalize(source, self.parser), methods=self.methods, printer=self.printer)

    def use(self, plugin: Plugin) -> Core:
        """Run ``plugin(self)`` once per plugin function. Returns self."""
        self.plugins.register(plugin, self)
        return self

    def register_methods(self, methods: Mapping[str, MethodFn], node_type: str | None = None) -> None:
        """Install collection operations, optionally only for one node type."""
        self.methods.register(methods, node_type)

    def with_parser(self, parser: Parser) -> Core:
        """Entry point using ``parser`` for source text."""
        return Core(parser, self.printer, plugins=self.plugins, methods=self.methods)

    def __repr__(self) -> str:
        return f"Core(parser={self.parser!r}, plugins={len(self.plugins)})"


# Production entry point, configured from YAML files and the environment
shift = Core.from_config()
