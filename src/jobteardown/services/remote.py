"""Remote URL resolution with shared-library exclusion.

Candidates are the first remote of every git binding on the job, in
binding order. Each globally registered library removes at most one
matching candidate, compared as exact strings. The first survivor is the
canonical remote.

Folder-scoped libraries are not consulted; only the global registry is.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from jobteardown.domain.contracts import LibraryRegistry
from jobteardown.domain.models import JobItem, LibrarySource, ScmBinding
from jobteardown.domain.types import RetrieverKind, ScmKind

logger = logging.getLogger(__name__)


def git_remote(binding: ScmBinding | None) -> str | None:
    """First configured remote of a git binding, else None."""
    if binding is None or binding.kind is not ScmKind.GIT:
        return None
    return binding.canonical_remote


def library_url(library: LibrarySource) -> str | None:
    """Backing remote of a shared library, for either retriever kind."""
    if library.retriever is RetrieverKind.SCM:
        return git_remote(library.scm)
    if library.retriever is RetrieverKind.SCM_SOURCE:
        source = library.source
        if source is not None and source.kind is ScmKind.GIT:
            return source.remote
    return None


def candidate_remotes(item: JobItem) -> tuple[str, ...]:
    """Ordered remote candidates for *item*; duplicates are kept."""
    candidates: list[str] = []
    for binding in item.scm_bindings():
        url = git_remote(binding)
        if not url:
            continue
        logger.debug("SCM URL: %s", url)
        candidates.append(url)
    return tuple(candidates)


def subtract(candidates: Sequence[str], excluded: Iterable[str]) -> tuple[str, ...]:
    """Multiset difference preserving order.

    Each entry in *excluded* cancels the first not-yet-cancelled equal
    entry in *candidates*.
    """
    pending = list(excluded)
    kept: list[str] = []
    for url in candidates:
        if url in pending:
            pending.remove(url)
        else:
            kept.append(url)
    return tuple(kept)


class RemoteResolver:
    """Resolve the one remote URL that identifies a job's environment."""

    def __init__(self, libraries: LibraryRegistry) -> None:
        self._libraries = libraries

    def library_urls(self) -> tuple[str, ...]:
        urls = (library_url(lib) for lib in self._libraries.libraries())
        return tuple(url for url in urls if url is not None)

    def resolve(self, item: JobItem) -> str | None:
        candidates = candidate_remotes(item)
        if not candidates:
            return None
        survivors = subtract(candidates, self.library_urls())
        if len(survivors) > 1:
            # TODO: decide whether several surviving remotes should fan out
            # into one teardown each instead of picking the first.
            logger.debug("Multiple remotes for %s, using first: %s", item.full_name, survivors)
        return survivors[0] if survivors else None
