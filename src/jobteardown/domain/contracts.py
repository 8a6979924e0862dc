"""Protocols for the host-platform collaborators jobteardown consumes.

All calls are synchronous. Implementations are owned by the host; the
teardown core only reads through them and requests enqueues.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from jobteardown.domain.models import JobItem, LibrarySource, UpstreamCause


@runtime_checkable
class MultiBranchContainer(Protocol):
    """A container that projects one job per discovered branch."""

    def is_project(self, item: JobItem) -> bool:
        """Whether *item* is currently a valid branch projection."""
        ...

    def branch_for(self, item: JobItem) -> str | None:
        """Branch name *item* was projected from."""
        ...


class ItemRegistry(Protocol):
    def get_item(self, full_name: str) -> object | None:
        """Look an item up by fully qualified name."""
        ...


class BuildQueue(Protocol):
    def enqueue(
        self,
        target: JobItem,
        parameters: Mapping[str, str],
        cause: UpstreamCause,
    ) -> int | None:
        """Schedule *target*. Returns the queued build number, or None if refused."""
        ...


class LibraryRegistry(Protocol):
    def libraries(self) -> Iterable[LibrarySource]:
        """Globally registered shared libraries."""
        ...


@dataclass(frozen=True)
class HostServices:
    """Bundle of host collaborators handed to the teardown service."""

    items: ItemRegistry
    queue: BuildQueue
    libraries: LibraryRegistry
