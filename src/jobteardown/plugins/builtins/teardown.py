"""Built-in teardown plugin — the host-facing listener.

Implements ``item_updated``: every update of a disabled job may enqueue
one teardown build. This hook is the error boundary; a failing host
collaborator is logged and the event is dropped so the host's own update
path is never disturbed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pluggy
import structlog

from jobteardown.config.models import TeardownConfig
from jobteardown.domain.contracts import HostServices
from jobteardown.services.result import TeardownResult
from jobteardown.services.teardown import TeardownService, item_label

hookimpl = pluggy.HookimplMarker("jobteardown")

logger = logging.getLogger(__name__)

ConfigSource = Callable[[], TeardownConfig]
ResultObserver = Callable[[TeardownResult], None]


class TeardownPlugin:
    """Teardown listener bound to one host.

    *config* may be a fixed :class:`TeardownConfig` or a callable returning
    the current one; the callable is read on every event so host-side
    configuration changes apply without re-registering. *on_result*, when
    given, receives the outcome of every event handled without error.
    """

    def __init__(
        self,
        host: HostServices,
        config: TeardownConfig | ConfigSource | None = None,
        on_result: ResultObserver | None = None,
    ) -> None:
        self._service = TeardownService(host)
        self._on_result = on_result
        if config is None or isinstance(config, TeardownConfig):
            fixed = config if config is not None else TeardownConfig()
            self._config_source: ConfigSource = lambda: fixed
        else:
            self._config_source = config

    @hookimpl
    def item_updated(self, item: object) -> None:
        """Dispatch a teardown for *item* when it qualifies.

        Log records emitted while handling the event carry ``item``.
        """
        with structlog.contextvars.bound_contextvars(item=item_label(item)):
            try:
                result = self._service.handle(item, self._config_source())
            except Exception:
                logger.warning("Teardown handling failed for %r", item, exc_info=True)
                return
            if result.reason is not None:
                logger.debug("Teardown %s: %s", result.outcome, result.reason)
            if self._on_result is not None:
                self._on_result(result)
