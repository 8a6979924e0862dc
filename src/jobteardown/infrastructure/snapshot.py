"""Load a JSON host snapshot into an :class:`InMemoryHost`.

Snapshot layout::

    {
      "libraries": [
        {"name": "pipeline-lib", "retriever": "scm-source",
         "remotes": ["https://example.com/lib.git"]}
      ],
      "items": [
        {"full_name": "job-tear-down-executor", "shape": "pipeline"},
        {"full_name": "infra", "shape": "folder"}
      ],
      "multibranch": [
        {"full_name": "app", "branches": [
          {"branch": "feature", "disabled": true, "last_build": 4,
           "scms": [{"remotes": ["https://example.com/repo.git"]}]}
        ]}
      ]
    }
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from jobteardown.domain.models import (
    BuildRef,
    LibrarySource,
    PipelineJob,
    ScmBinding,
    ScmSource,
    SimpleJob,
    TeardownProperty,
)
from jobteardown.domain.types import RetrieverKind, ScmKind
from jobteardown.infrastructure.memory import (
    Folder,
    InMemoryHost,
    InMemoryMultiBranch,
    branch_job_name,
)


class ScmEntry(BaseModel):
    model_config = {"frozen": True}

    kind: ScmKind = ScmKind.GIT
    remotes: list[str] = Field(default_factory=list)

    def to_binding(self) -> ScmBinding:
        return ScmBinding(kind=self.kind, remotes=tuple(self.remotes))


class LibraryEntry(BaseModel):
    model_config = {"frozen": True}

    name: str
    retriever: RetrieverKind = RetrieverKind.SCM_SOURCE
    kind: ScmKind = ScmKind.GIT
    remotes: list[str] = Field(default_factory=list)

    def to_source(self) -> LibrarySource:
        if self.retriever is RetrieverKind.SCM:
            binding = ScmBinding(kind=self.kind, remotes=tuple(self.remotes))
            return LibrarySource(name=self.name, retriever=self.retriever, scm=binding)
        source = ScmSource(kind=self.kind, remote=self.remotes[0]) if self.remotes else None
        return LibrarySource(name=self.name, retriever=self.retriever, source=source)


class JobFields(BaseModel):
    """Fields shared by standalone jobs and branch projections."""

    model_config = {"frozen": True}

    disabled: bool = False
    scms: list[ScmEntry] = Field(default_factory=list)
    teardown_job: str | None = None
    last_build: int | None = None

    def job_kwargs(self, full_name: str) -> dict[str, Any]:
        return {
            "disabled": self.disabled,
            "teardown_property": (
                TeardownProperty(self.teardown_job) if self.teardown_job else None
            ),
            "last_build": (
                BuildRef(full_name, self.last_build) if self.last_build is not None else None
            ),
        }


class ItemEntry(JobFields):
    full_name: str
    shape: Literal["simple", "pipeline", "folder"] = "pipeline"

    @model_validator(mode="after")
    def _simple_has_one_scm(self) -> ItemEntry:
        if self.shape == "simple" and len(self.scms) > 1:
            msg = f"simple job {self.full_name!r} may carry at most one SCM"
            raise ValueError(msg)
        return self

    def to_item(self) -> object:
        if self.shape == "folder":
            return Folder(full_name=self.full_name)
        bindings = tuple(s.to_binding() for s in self.scms)
        kwargs = self.job_kwargs(self.full_name)
        if self.shape == "simple":
            return SimpleJob(
                full_name=self.full_name,
                scm=bindings[0] if bindings else None,
                **kwargs,
            )
        return PipelineJob(full_name=self.full_name, scms=bindings, **kwargs)


class BranchEntry(JobFields):
    branch: str


class MultiBranchEntry(BaseModel):
    model_config = {"frozen": True}

    full_name: str
    branches: list[BranchEntry] = Field(default_factory=list)


class HostSnapshot(BaseModel):
    """Root of a snapshot file."""

    model_config = {"frozen": True}

    libraries: list[LibraryEntry] = Field(default_factory=list)
    items: list[ItemEntry] = Field(default_factory=list)
    multibranch: list[MultiBranchEntry] = Field(default_factory=list)

    def build_host(self) -> InMemoryHost:
        host = InMemoryHost(lib.to_source() for lib in self.libraries)
        for entry in self.items:
            host.add(entry.to_item())
        for container_entry in self.multibranch:
            container = InMemoryMultiBranch(container_entry.full_name)
            host.add(container)
            for branch in container_entry.branches:
                full_name = f"{container.full_name}/{branch_job_name(branch.branch)}"
                host.add(
                    container.project(
                        branch.branch,
                        scms=tuple(s.to_binding() for s in branch.scms),
                        **branch.job_kwargs(full_name),
                    )
                )
        return host


def load_snapshot(path: Path) -> InMemoryHost:
    """Parse *path* and build the host it describes.

    Raises:
        pydantic.ValidationError: If the file does not match the layout.
    """
    snapshot = HostSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
    return snapshot.build_host()
