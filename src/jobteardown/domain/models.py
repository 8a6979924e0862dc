"""Frozen value types describing job items and shared library sources.

INVARIANT: The host owns every item; nothing in jobteardown mutates one.
``JobItem`` is a closed variant: ``SimpleJob | PipelineJob``. Anything else
the host delivers (folders, views, containers) is not job-shaped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, TypeGuard

from jobteardown.domain.types import JobShape, RetrieverKind, ScmKind

GIT_URL_PARAM = "git_url"
BRANCH_NAME_PARAM = "branch_name"


@dataclass(frozen=True)
class ScmBinding:
    """An SCM configured on a job. Only the first remote is canonical."""

    kind: ScmKind
    remotes: tuple[str, ...] = ()

    @classmethod
    def git(cls, *remotes: str) -> ScmBinding:
        return cls(kind=ScmKind.GIT, remotes=remotes)

    @property
    def canonical_remote(self) -> str | None:
        return self.remotes[0] if self.remotes else None


@dataclass(frozen=True)
class ScmSource:
    """A branch-discovery source with a single remote."""

    kind: ScmKind
    remote: str


@dataclass(frozen=True)
class LibrarySource:
    """A globally registered shared library.

    ``scm`` retrievers carry an :class:`ScmBinding`; ``scm-source``
    retrievers carry an :class:`ScmSource`.
    """

    name: str
    retriever: RetrieverKind
    scm: ScmBinding | None = None
    source: ScmSource | None = None


@dataclass(frozen=True)
class BuildRef:
    job_full_name: str
    number: int


@dataclass(frozen=True)
class TeardownProperty:
    """Item-level override naming the teardown job to run."""

    job_name: str


@dataclass(frozen=True)
class _JobBase:
    full_name: str
    disabled: bool = False
    parent: object | None = field(default=None, compare=False, repr=False)
    teardown_property: TeardownProperty | None = None
    last_build: BuildRef | None = None

    @property
    def name(self) -> str:
        return self.full_name.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class SimpleJob(_JobBase):
    """Freestyle-style job with at most one SCM."""

    shape: ClassVar[JobShape] = JobShape.SIMPLE

    scm: ScmBinding | None = None

    def scm_bindings(self) -> tuple[ScmBinding, ...]:
        return (self.scm,) if self.scm is not None else ()


@dataclass(frozen=True)
class PipelineJob(_JobBase):
    """Pipeline job; every checkout it performed contributes a binding."""

    shape: ClassVar[JobShape] = JobShape.PIPELINE

    scms: tuple[ScmBinding, ...] = ()

    def scm_bindings(self) -> tuple[ScmBinding, ...]:
        return self.scms


JobItem = SimpleJob | PipelineJob
JOB_TYPES: tuple[type, ...] = (SimpleJob, PipelineJob)


def is_job(item: object) -> TypeGuard[JobItem]:
    """Whether *item* is one of the job-shaped variants."""
    return isinstance(item, JOB_TYPES)


@dataclass(frozen=True)
class UpstreamCause:
    """Causation record linking a teardown build to the job that triggered it."""

    upstream_project: str
    upstream_build: int | None = None

    @classmethod
    def from_item(cls, item: JobItem) -> UpstreamCause:
        build = item.last_build.number if item.last_build is not None else None
        return cls(upstream_project=item.full_name, upstream_build=build)


@dataclass(frozen=True)
class DispatchRequest:
    """Everything needed to enqueue one teardown build. Never persisted."""

    git_url: str
    branch_name: str
    cause: UpstreamCause
    target: str

    def parameters(self) -> dict[str, str]:
        return {GIT_URL_PARAM: self.git_url, BRANCH_NAME_PARAM: self.branch_name}
