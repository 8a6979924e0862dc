"""Fire-and-forget enqueue of the teardown build.

INVARIANT: One enqueue per call, never retried. A refused or failing
enqueue is logged and reported in the result; nothing propagates.
"""

from __future__ import annotations

import logging

from jobteardown.domain.contracts import BuildQueue
from jobteardown.domain.models import DispatchRequest, JobItem, UpstreamCause
from jobteardown.domain.types import Outcome
from jobteardown.services.result import TeardownResult

logger = logging.getLogger(__name__)


def build_request(item: JobItem, target: JobItem, remote: str, branch: str) -> DispatchRequest:
    """Parameters and causation for tearing down *item*'s environment."""
    return DispatchRequest(
        git_url=remote,
        branch_name=branch,
        cause=UpstreamCause.from_item(item),
        target=target.full_name,
    )


class Dispatcher:
    """Request one build of the teardown target."""

    def __init__(self, queue: BuildQueue) -> None:
        self._queue = queue

    def dispatch(self, item: JobItem, target: JobItem, request: DispatchRequest) -> TeardownResult:
        logger.debug("Execute Job: %s %s", request.branch_name, request.git_url)
        try:
            number = self._queue.enqueue(target, request.parameters(), request.cause)
        except Exception as exc:
            logger.warning("Failed to enqueue %s for %s: %s", target.full_name, item.full_name, exc)
            return TeardownResult(
                outcome=Outcome.FAILED,
                item=item.full_name,
                reason=f"enqueue failed: {exc}",
                request=request,
            )

        if number is None:
            logger.warning("Build queue refused %s for %s", target.full_name, item.full_name)
            return TeardownResult(
                outcome=Outcome.FAILED,
                item=item.full_name,
                reason="enqueue refused",
                request=request,
            )

        return TeardownResult(
            outcome=Outcome.DISPATCHED,
            item=item.full_name,
            request=request,
            build_number=number,
        )
