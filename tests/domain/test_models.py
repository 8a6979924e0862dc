"""Tests for job item variants and dispatch value types."""

from __future__ import annotations

import dataclasses

import pytest

from jobteardown.domain.models import (
    BuildRef,
    DispatchRequest,
    PipelineJob,
    ScmBinding,
    SimpleJob,
    UpstreamCause,
    is_job,
)
from jobteardown.domain.types import JobShape, ScmKind
from jobteardown.infrastructure.memory import Folder


class TestScmBinding:
    def test_git_constructor(self) -> None:
        binding = ScmBinding.git("a", "b")
        assert binding.kind is ScmKind.GIT
        assert binding.remotes == ("a", "b")

    def test_canonical_remote_is_first(self) -> None:
        assert ScmBinding.git("a", "b").canonical_remote == "a"

    def test_canonical_remote_empty(self) -> None:
        assert ScmBinding(kind=ScmKind.GIT).canonical_remote is None


class TestJobVariants:
    def test_simple_job_bindings(self) -> None:
        binding = ScmBinding.git("https://example.com/a.git")
        assert SimpleJob(full_name="a", scm=binding).scm_bindings() == (binding,)

    def test_simple_job_without_scm(self) -> None:
        assert SimpleJob(full_name="a").scm_bindings() == ()

    def test_pipeline_job_bindings_keep_order(self) -> None:
        first, second = ScmBinding.git("x"), ScmBinding.git("y")
        job = PipelineJob(full_name="p", scms=(first, second))
        assert job.scm_bindings() == (first, second)

    def test_shapes(self) -> None:
        assert SimpleJob.shape is JobShape.SIMPLE
        assert PipelineJob.shape is JobShape.PIPELINE

    def test_name_is_last_segment(self) -> None:
        assert PipelineJob(full_name="folder/app/feature").name == "feature"

    def test_frozen(self) -> None:
        job = SimpleJob(full_name="a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            job.disabled = True  # type: ignore[misc]

    def test_is_job(self) -> None:
        assert is_job(SimpleJob(full_name="a"))
        assert is_job(PipelineJob(full_name="p"))
        assert not is_job(Folder(full_name="f"))
        assert not is_job("job")


class TestUpstreamCause:
    def test_from_item_with_build(self) -> None:
        job = PipelineJob(full_name="app/feature", last_build=BuildRef("app/feature", 12))
        cause = UpstreamCause.from_item(job)
        assert cause.upstream_project == "app/feature"
        assert cause.upstream_build == 12

    def test_from_item_never_built(self) -> None:
        cause = UpstreamCause.from_item(PipelineJob(full_name="app/feature"))
        assert cause.upstream_build is None


class TestDispatchRequest:
    def test_parameters_are_exactly_two(self) -> None:
        request = DispatchRequest(
            git_url="https://example.com/repo.git",
            branch_name="feature",
            cause=UpstreamCause("app/feature", 1),
            target="job-tear-down-executor",
        )
        assert request.parameters() == {
            "git_url": "https://example.com/repo.git",
            "branch_name": "feature",
        }
