"""Plugin discovery, registration, and item-event fan-out.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
in the ``jobteardown.plugins`` group. Built-in plugins are registered
directly by :func:`create_plugin_manager`.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from jobteardown.plugins.hookspecs import JobTeardownHookSpec

if TYPE_CHECKING:
    from jobteardown.config.models import TeardownConfig
    from jobteardown.domain.contracts import HostServices
    from jobteardown.plugins.builtins.teardown import ConfigSource, ResultObserver

PROJECT_NAME = "jobteardown"
ENTRY_POINT_GROUP = "jobteardown.plugins"
BUILTIN_TEARDOWN = "teardown-builtin"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(JobTeardownHookSpec)

    def discover(self) -> list[str]:
        """Load entry-point plugins. Returns the names of all registered plugins."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def get_plugin(self, name: str) -> object | None:
        return self._pm.get_plugin(name)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def notify_item_updated(self, item: object) -> None:
        """Deliver an item-update event through the hook relay.

        pluggy runs wrappers and honours ``tryfirst``/``trylast``. A plugin
        failure ends delivery of this event and is logged; it never reaches
        the host.
        """
        try:
            self._pm.hook.item_updated(item=item)
        except Exception:
            logger.warning("Plugin hook item_updated failed", exc_info=True)

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly, which
        leaves ``self`` unbound at dispatch time.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Whether *cls* has a method decorated with ``@hookimpl``.

        ``HookimplMarker("jobteardown")`` tags decorated methods with a
        ``jobteardown_impl`` attribute.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False


def create_plugin_manager(
    host: HostServices,
    config: TeardownConfig | ConfigSource | None = None,
    *,
    discover: bool = False,
    on_result: ResultObserver | None = None,
) -> PluginManager:
    """PluginManager with the teardown listener registered for *host*."""
    from jobteardown.plugins.builtins.teardown import TeardownPlugin

    pm = PluginManager()
    if discover:
        pm.discover()
    pm.register_plugin(TeardownPlugin(host, config, on_result), name=BUILTIN_TEARDOWN)
    return pm
