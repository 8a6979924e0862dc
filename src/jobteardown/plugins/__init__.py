"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) in the ``jobteardown.plugins`` group.
The teardown listener itself is the built-in ``teardown-builtin`` plugin.
INVARIANT: Plugin failures are warnings, never errors.
"""

from jobteardown.plugins.manager import PluginManager, create_plugin_manager

__all__ = ["PluginManager", "create_plugin_manager"]
