"""In-memory host implementing every collaborator protocol.

Used by the ``simulate`` command and by tests. Items are stored by full
name; enqueues are recorded instead of run.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from jobteardown.domain.contracts import HostServices
from jobteardown.domain.models import JobItem, LibrarySource, PipelineJob, UpstreamCause


@dataclass(frozen=True)
class Folder:
    """A plain container item. Not job-shaped."""

    full_name: str


@dataclass(frozen=True)
class QueuedBuild:
    target: str
    number: int
    parameters: dict[str, str]
    cause: UpstreamCause


def branch_job_name(branch: str) -> str:
    return branch.replace("/", "%2F")


class InMemoryMultiBranch:
    """Multi-branch container projecting one pipeline job per branch.

    Job names encode ``/`` in branch names as ``%2F``.
    """

    def __init__(self, full_name: str) -> None:
        self.full_name = full_name
        self._branches: dict[str, str] = {}

    def project(self, branch: str, **fields: Any) -> PipelineJob:
        """Create the pipeline job for *branch* and remember the projection."""
        job_name = branch_job_name(branch)
        self._branches[job_name] = branch
        return PipelineJob(full_name=f"{self.full_name}/{job_name}", parent=self, **fields)

    def drop(self, branch: str) -> None:
        self._branches.pop(branch_job_name(branch), None)

    def is_project(self, item: JobItem) -> bool:
        return item.parent is self and item.name in self._branches

    def branch_for(self, item: JobItem) -> str | None:
        if not self.is_project(item):
            return None
        return self._branches[item.name]


class InMemoryHost:
    """Item registry, build queue, and library registry in one object."""

    def __init__(self, libraries: Iterable[LibrarySource] = ()) -> None:
        self._items: dict[str, object] = {}
        self._libraries: list[LibrarySource] = list(libraries)
        self._numbers: dict[str, itertools.count[int]] = {}
        self.queued: list[QueuedBuild] = []

    @property
    def services(self) -> HostServices:
        return HostServices(items=self, queue=self, libraries=self)

    def add(self, item: Any) -> Any:
        """Register *item* under its full name, replacing any previous one."""
        self._items[item.full_name] = item
        return item

    def add_library(self, library: LibrarySource) -> None:
        self._libraries.append(library)

    def items(self) -> list[object]:
        return list(self._items.values())

    # --- ItemRegistry ---

    def get_item(self, full_name: str) -> object | None:
        return self._items.get(full_name)

    # --- BuildQueue ---

    def enqueue(
        self,
        target: JobItem,
        parameters: Mapping[str, str],
        cause: UpstreamCause,
    ) -> int | None:
        counter = self._numbers.setdefault(target.full_name, itertools.count(1))
        build = QueuedBuild(
            target=target.full_name,
            number=next(counter),
            parameters=dict(parameters),
            cause=cause,
        )
        self.queued.append(build)
        return build.number

    # --- LibraryRegistry ---

    def libraries(self) -> list[LibrarySource]:
        return list(self._libraries)


