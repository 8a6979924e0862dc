"""Shared pytest fixtures and builders for jobteardown tests."""

from __future__ import annotations

from typing import Any

import pytest
from click.testing import CliRunner

from jobteardown.domain.models import BuildRef, PipelineJob, ScmBinding
from jobteardown.infrastructure.memory import InMemoryHost, InMemoryMultiBranch
from jobteardown.services.target import FALLBACK_JOB

REPO_URL = "https://example.com/repo.git"
LIBRARY_URL = "https://example.com/pipeline-library.git"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def host() -> InMemoryHost:
    """Empty in-memory host: no items, no libraries, nothing queued."""
    return InMemoryHost()


@pytest.fixture
def container(host: InMemoryHost) -> InMemoryMultiBranch:
    """Multi-branch container ``app`` registered on the host."""
    return host.add(InMemoryMultiBranch("app"))


@pytest.fixture
def fallback_target(host: InMemoryHost) -> PipelineJob:
    """The fixed-name teardown job, registered on the host."""
    return host.add(PipelineJob(full_name=FALLBACK_JOB))


def branch_job(
    container: InMemoryMultiBranch,
    branch: str = "feature",
    *remotes: str,
    **fields: Any,
) -> PipelineJob:
    """Disabled branch projection with one git binding per remote."""
    fields.setdefault("disabled", True)
    fields.setdefault("last_build", BuildRef(f"{container.full_name}/{branch}", 7))
    scms = tuple(ScmBinding.git(url) for url in (remotes or (REPO_URL,)))
    return container.project(branch, scms=scms, **fields)
