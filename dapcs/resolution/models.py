"""Value types produced during a single resolution.

Everything here is created fresh for each launch request and discarded
afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
import os
from typing import Any


@dataclass(frozen=True)
class ProjectDescriptor:
    """A discovered project-definition file."""

    name: str
    root_path: str
    project_file_path: str

    @classmethod
    def from_project_file(cls, path: str) -> ProjectDescriptor:
        """Derive name (file stem) and root (containing directory) from *path*."""
        return cls(
            name=os.path.splitext(os.path.basename(path))[0],
            root_path=os.path.dirname(path),
            project_file_path=path,
        )


@dataclass(frozen=True)
class BuildArtifactSet:
    """Build outputs found for one project.

    ``artifact_paths`` is always empty when ``is_built`` is false.
    """

    project: ProjectDescriptor
    is_built: bool
    artifact_paths: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.is_built and self.artifact_paths:
            object.__setattr__(self, "artifact_paths", ())


@dataclass(frozen=True)
class LaunchProfile:
    """The ``Project`` entry picked from a launch-configuration document."""

    command_kind: str
    environment: dict[str, str] = field(default_factory=dict)
    name: str | None = None
    application_url: str | None = None


@dataclass(frozen=True)
class StartupProject:
    """A built project, optionally backed by a launch profile."""

    artifacts: BuildArtifactSet
    profile: LaunchProfile | None = None

    @property
    def project(self) -> ProjectDescriptor:
        return self.artifacts.project

    @property
    def environment(self) -> dict[str, str] | None:
        return self.profile.environment if self.profile else None


@dataclass(frozen=True)
class ResolvedTarget:
    """What to run and how; handed to the debug-launch collaborator."""

    project_root: str
    artifact_path: str
    environment: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SelectionRequest:
    """A question for the human-selection collaborator."""

    prompt_title: str
    labeled_options: tuple[tuple[str, Any], ...]

    def labels(self) -> list[str]:
        return [label for label, _value in self.labeled_options]
