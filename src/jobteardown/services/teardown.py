"""TeardownService: one item-update event from gate to dispatch.

State machine per event::

    RECEIVED -> NOT_ELIGIBLE
             -> ELIGIBLE -> SKIPPED      (no remote or no branch)
                         -> SKIPPED      (no teardown target)
                         -> DISPATCHED | FAILED

Everything runs synchronously on the caller's thread. Registry and
library-lookup errors propagate to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jobteardown.domain.types import Outcome
from jobteardown.services.branch import resolve_branch
from jobteardown.services.dispatch import Dispatcher, build_request
from jobteardown.services.gate import is_eligible
from jobteardown.services.remote import RemoteResolver
from jobteardown.services.result import TeardownResult
from jobteardown.services.target import TeardownTargetResolver

if TYPE_CHECKING:
    from jobteardown.config.models import TeardownConfig
    from jobteardown.domain.contracts import HostServices

logger = logging.getLogger(__name__)


def item_label(item: object) -> str:
    return str(getattr(item, "full_name", None) or type(item).__name__)


class TeardownService:
    """Decide whether an updated item needs a teardown, and dispatch it."""

    def __init__(self, host: HostServices) -> None:
        self._remotes = RemoteResolver(host.libraries)
        self._targets = TeardownTargetResolver(host.items)
        self._dispatcher = Dispatcher(host.queue)

    def handle(self, item: object, config: TeardownConfig | None = None) -> TeardownResult:
        logger.debug("Job Class: %s", type(item).__name__)
        if not is_eligible(item):
            return TeardownResult(outcome=Outcome.NOT_ELIGIBLE, item=item_label(item))

        branch = resolve_branch(item)
        remote = self._remotes.resolve(item)
        logger.debug("Job Info: %s %s %s", item.full_name, branch, remote)
        if remote is None or branch is None:
            missing = "remote" if remote is None else "branch"
            return TeardownResult(
                outcome=Outcome.SKIPPED,
                item=item.full_name,
                reason=f"no {missing} resolved",
            )

        target = self._targets.resolve(item, config)
        if target is None:
            return TeardownResult(
                outcome=Outcome.SKIPPED,
                item=item.full_name,
                reason="no teardown target",
            )

        request = build_request(item, target, remote, branch)
        return self._dispatcher.dispatch(item, target, request)
