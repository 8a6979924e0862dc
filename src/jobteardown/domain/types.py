"""Classification enums for job items, SCM bindings, and library retrievers."""

from __future__ import annotations

from enum import StrEnum


class JobShape(StrEnum):
    """Job-shaped item variants that can be torn down."""

    SIMPLE = "simple"
    PIPELINE = "pipeline"


class ScmKind(StrEnum):
    """Source-control kinds. Only git remotes are teardown candidates."""

    GIT = "git"
    OTHER = "other"


class RetrieverKind(StrEnum):
    """How a shared library locates its source code."""

    SCM = "scm"
    SCM_SOURCE = "scm-source"


class Outcome(StrEnum):
    """Terminal states of one item-update event."""

    NOT_ELIGIBLE = "not_eligible"
    SKIPPED = "skipped"
    DISPATCHED = "dispatched"
    FAILED = "failed"
