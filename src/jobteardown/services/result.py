"""TeardownResult: what happened to one item-update event.

The host-facing hook returns nothing; the result exists for logging, the
CLI, and tests.
"""

from __future__ import annotations

from pydantic import BaseModel

from jobteardown.domain.models import DispatchRequest
from jobteardown.domain.types import Outcome


class TeardownResult(BaseModel):
    """Terminal state of one event.

    Attributes:
        outcome: Where the event ended up.
        item: Full name of the updated item.
        reason: Why the event stopped short of dispatch, if it did.
        request: The dispatch request, once remote/branch/target resolved.
        build_number: Queued build number when dispatched.
    """

    model_config = {"frozen": True}

    outcome: Outcome
    item: str
    reason: str | None = None
    request: DispatchRequest | None = None
    build_number: int | None = None

    @property
    def dispatched(self) -> bool:
        return self.outcome is Outcome.DISPATCHED
