"""Teardown target resolution.

Precedence, first match wins:
  1. The job's own teardown property, whenever one is attached
  2. The global default from ``[teardown] tear_down_job``
  3. ``job-tear-down-executor``

The chosen name must exist in the item registry and be a job that can
take parameters; otherwise there is no target and the event is skipped.
"""

from __future__ import annotations

import logging

from jobteardown.config.models import TeardownConfig
from jobteardown.domain.contracts import ItemRegistry
from jobteardown.domain.models import JobItem, is_job

FALLBACK_JOB = "job-tear-down-executor"

logger = logging.getLogger(__name__)


def target_name(item: JobItem, config: TeardownConfig | None) -> str:
    """Name of the teardown job *item* should trigger."""
    prop = item.teardown_property
    if prop is not None:
        logger.debug("Execute tear down on: %s", prop.job_name)
        return prop.job_name
    default = config.tear_down_job if config is not None else None
    if default is not None and default.strip():
        logger.debug("Default Job: %s", default)
        return default.strip()
    return FALLBACK_JOB


class TeardownTargetResolver:
    """Look up the teardown job for an item in the host registry."""

    def __init__(self, registry: ItemRegistry) -> None:
        self._registry = registry

    def resolve(self, item: JobItem, config: TeardownConfig | None) -> JobItem | None:
        name = target_name(item, config)
        target = self._registry.get_item(name)
        if target is None:
            logger.debug("Teardown job %s not found", name)
            return None
        if not is_job(target):
            logger.debug("Teardown job %s cannot take parameters", name)
            return None
        return target
