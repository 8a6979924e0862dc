"""Branch resolution for jobs projected from a multi-branch container."""

from __future__ import annotations

from jobteardown.domain.contracts import MultiBranchContainer
from jobteardown.domain.models import JobItem, PipelineJob


def resolve_branch(item: JobItem) -> str | None:
    """Branch name *item* was projected from, or None.

    Only pipeline jobs are branch projections. The parent container must
    still recognise the item as one of its current branches.
    """
    if not isinstance(item, PipelineJob):
        return None
    parent = item.parent
    if not isinstance(parent, MultiBranchContainer):
        return None
    if not parent.is_project(item):
        return None
    return parent.branch_for(item) or None
