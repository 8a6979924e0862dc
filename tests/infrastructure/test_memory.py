"""Tests for the in-memory host and multi-branch container."""

from __future__ import annotations

from jobteardown.domain.contracts import MultiBranchContainer
from jobteardown.domain.models import (
    LibrarySource,
    PipelineJob,
    ScmBinding,
    UpstreamCause,
)
from jobteardown.domain.types import RetrieverKind
from jobteardown.infrastructure.memory import InMemoryHost, InMemoryMultiBranch


class TestInMemoryHost:
    def test_registry_lookup(self, host: InMemoryHost) -> None:
        job = host.add(PipelineJob(full_name="infra/destroy"))
        assert host.get_item("infra/destroy") is job
        assert host.get_item("missing") is None

    def test_add_replaces(self, host: InMemoryHost) -> None:
        host.add(PipelineJob(full_name="p"))
        updated = host.add(PipelineJob(full_name="p", disabled=True))
        assert host.get_item("p") is updated
        assert len(host.items()) == 1

    def test_build_numbers_per_target(self, host: InMemoryHost) -> None:
        a = PipelineJob(full_name="a")
        b = PipelineJob(full_name="b")
        cause = UpstreamCause("up", 1)
        assert host.enqueue(a, {}, cause) == 1
        assert host.enqueue(a, {}, cause) == 2
        assert host.enqueue(b, {}, cause) == 1
        assert [q.target for q in host.queued] == ["a", "a", "b"]

    def test_enqueue_copies_parameters(self, host: InMemoryHost) -> None:
        params = {"git_url": "u", "branch_name": "b"}
        host.enqueue(PipelineJob(full_name="a"), params, UpstreamCause("up"))
        params["git_url"] = "changed"
        assert host.queued[0].parameters["git_url"] == "u"

    def test_libraries(self) -> None:
        lib = LibrarySource(name="l", retriever=RetrieverKind.SCM, scm=ScmBinding.git("u"))
        host = InMemoryHost([lib])
        other = LibrarySource(name="m", retriever=RetrieverKind.SCM)
        host.add_library(other)
        assert host.libraries() == [lib, other]

    def test_services_bundle(self, host: InMemoryHost) -> None:
        services = host.services
        assert services.items is host
        assert services.queue is host
        assert services.libraries is host


class TestInMemoryMultiBranch:
    def test_satisfies_protocol(self, container: InMemoryMultiBranch) -> None:
        assert isinstance(container, MultiBranchContainer)

    def test_project(self, container: InMemoryMultiBranch) -> None:
        job = container.project("main", disabled=True)
        assert job.full_name == "app/main"
        assert job.parent is container
        assert job.disabled is True
        assert container.is_project(job)
        assert container.branch_for(job) == "main"

    def test_foreign_item(self, container: InMemoryMultiBranch) -> None:
        other = InMemoryMultiBranch("other")
        job = other.project("main")
        assert not container.is_project(job)
        assert container.branch_for(job) is None

    def test_drop(self, container: InMemoryMultiBranch) -> None:
        job = container.project("main")
        container.drop("main")
        assert not container.is_project(job)
