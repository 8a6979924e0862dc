"""Eligibility check for item-update events."""

from __future__ import annotations

from typing import TypeGuard

from jobteardown.domain.models import JobItem, is_job


def is_eligible(item: object) -> TypeGuard[JobItem]:
    """True when *item* is job-shaped and currently disabled.

    Level-triggered: every update of a disabled job qualifies, not only the
    update that disabled it.
    """
    return is_job(item) and item.disabled
