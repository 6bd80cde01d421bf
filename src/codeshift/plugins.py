"""Plugin registry.

A plugin is a function taking the entry point. It usually installs
collection operations as a side effect. Registration is keyed by the
function object itself, so registering the same function again is a no-op
no matter how many import paths lead to it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from codeshift.core.logging import get_logger

log = get_logger("plugins")

Plugin = Callable[[Any], Any]


class PluginRegistry:
    """Identity-keyed record of plugins that have already run."""

    def __init__(self) -> None:
        self._plugins: dict[int, Plugin] = {}

    def register(self, plugin: Plugin, entry: Any) -> bool:
        """Run ``plugin(entry)`` unless this exact function already ran.

        The plugin is recorded before it is invoked, so a plugin that
        registers itself again from its own setup is not re-run. If the
        plugin raises, the error propagates and the plugin stays recorded.

        Returns:
            True if the plugin was invoked, False if it was already registered.
        """
        if self.is_registered(plugin):
            log.debug("plugin_already_registered", plugin=_plugin_name(plugin))
            return False

        self._plugins[id(plugin)] = plugin
        log.debug("plugin_registered", plugin=_plugin_name(plugin))
        plugin(entry)
        return True

    def is_registered(self, plugin: Plugin) -> bool:
        return self._plugins.get(id(plugin)) is plugin

    def plugins(self) -> list[Plugin]:
        """Registered plugins in first-registration order."""
        return list(self._plugins.values())

    def __len__(self) -> int:
        return len(self._plugins)

    def reset(self) -> None:
        """Forget all plugins (for testing)."""
        self._plugins.clear()


def _plugin_name(plugin: Plugin) -> str:
    return getattr(plugin, "__qualname__", None) or repr(plugin)
