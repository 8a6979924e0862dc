"""Pluggy hook specifications for host item lifecycle events."""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("jobteardown")


class JobTeardownHookSpec:
    """Hook specifications for the jobteardown plugin system."""

    @hookspec
    def item_updated(self, item: object) -> None:
        """Called synchronously after the host saves an item.

        *item* may be any host item, job-shaped or not.
        """
