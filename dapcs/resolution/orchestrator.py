"""Turn a workspace directory into one runnable target.

The orchestrator is constructed with every collaborator it needs; a missing
one is a setup error raised from ``__init__``, never a failure in the middle
of a launch. ``resolve()`` itself never raises for "nothing found" or "user
cancelled": those outcomes return ``None`` after a notice.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from dapcs.errors import require
from dapcs.resolution.artifacts import ArtifactMatcher
from dapcs.resolution.artifacts import artifact_label
from dapcs.resolution.launch_profile import LaunchProfileParser
from dapcs.resolution.locator import ProjectFileLocator
from dapcs.resolution.models import ResolvedTarget
from dapcs.resolution.models import StartupProject
from dapcs.resolution.selector import CandidateSelector
from dapcs.services.filesystem import LocalFileSystem
from dapcs.services.workspace import WorkspaceRootResolver

if TYPE_CHECKING:
    from dapcs.config import DapcsConfig
    from dapcs.services.filesystem import FileSystem
    from dapcs.services.notify import Notifier
    from dapcs.services.prompt import Prompt
    from dapcs.services.workspace import LanguageServerClient

logger = logging.getLogger(__name__)

LAUNCH_SETTINGS_NAME = "launchSettings.json"

SELECT_PROJECT_TITLE = "Select .NET Project:"
SELECT_VERSION_TITLE = "Select .NET Version:"
NO_DLL_MESSAGE = 'No dotnet DLLs found in the "bin" directory. Ensure project has been built.'


def no_startup_projects_message(root: str) -> str:
    return f"No start up csproj files found in {root}.\nIs the project built?"


def project_label(candidate: StartupProject) -> str:
    return candidate.project.name


class ResolutionOrchestrator:
    """Compose discovery, matching, profile parsing and selection."""

    def __init__(
        self,
        *,
        workspace: WorkspaceRootResolver,
        filesystem: FileSystem,
        locator: ProjectFileLocator,
        matcher: ArtifactMatcher,
        parser: LaunchProfileParser,
        selector: CandidateSelector,
        notifier: Notifier,
        launch_settings_name: str = LAUNCH_SETTINGS_NAME,
    ) -> None:
        self._workspace = require(workspace, "workspace root resolver")
        self._fs = require(filesystem, "filesystem")
        self._locator = require(locator, "project locator")
        self._matcher = require(matcher, "artifact matcher")
        self._parser = require(parser, "launch profile parser")
        self._selector = require(selector, "candidate selector")
        self._notifier = require(notifier, "notifier")
        self._launch_settings_name = launch_settings_name

    @classmethod
    def from_config(
        cls,
        config: DapcsConfig,
        *,
        prompt: Prompt,
        notifier: Notifier,
        filesystem: FileSystem | None = None,
        language_servers: list[LanguageServerClient] | None = None,
        cwd: str | None = None,
    ) -> ResolutionOrchestrator:
        """Wire the default components from a ``DapcsConfig``."""
        require(prompt, "prompt")
        require(notifier, "notifier")
        fs = filesystem or LocalFileSystem()
        settings = config.resolution
        workspace = WorkspaceRootResolver(
            language_servers or (),
            known_servers=settings.language_servers,
            cwd=(lambda: cwd) if cwd else os.getcwd,
        )
        return cls(
            workspace=workspace,
            filesystem=fs,
            locator=ProjectFileLocator(fs, suffix=settings.project_suffix),
            matcher=ArtifactMatcher(fs, build_configuration=settings.build_configuration),
            parser=LaunchProfileParser(fs),
            selector=CandidateSelector(prompt, notifier),
            notifier=notifier,
            launch_settings_name=settings.launch_settings_name,
        )

    def startup_projects(self, root: str) -> list[StartupProject]:
        """Built projects under *root*, each with its launch profile if one parses."""
        startup: list[StartupProject] = []
        for project in self._locator.find_projects(root):
            artifacts = self._matcher.match_artifacts(project)
            if not artifacts.is_built:
                continue

            profile = None
            settings = self._fs.find(self._launch_settings_name, project.root_path, limit=1, type="file")
            if settings:
                profile = self._parser.parse(settings[0])
            startup.append(StartupProject(artifacts=artifacts, profile=profile))

        logger.debug(
            "%d startup project(s) under %s, %d with a launch profile",
            len(startup),
            root,
            sum(1 for candidate in startup if candidate.profile is not None),
        )
        return startup

    def choose_project(self, startup: list[StartupProject]) -> StartupProject | None:
        """Pick a startup project.

        When any project has a launch profile only those projects are
        offered; projects without one are not shown in that case.
        """
        profile_backed = [candidate for candidate in startup if candidate.profile is not None]
        pool = profile_backed or startup
        return self._selector.select_one(pool, project_label, SELECT_PROJECT_TITLE)

    def choose_artifact(self, candidate: StartupProject) -> str | None:
        # Outputs can vanish between discovery and now (a rebuild in progress).
        paths = [path for path in candidate.artifacts.artifact_paths if self._fs.is_file(path)]
        if not paths:
            self._notifier.notify(NO_DLL_MESSAGE)
            return None
        return self._selector.select_one(paths, artifact_label, SELECT_VERSION_TITLE, NO_DLL_MESSAGE)

    def resolve(self) -> ResolvedTarget | None:
        """Resolve the workspace into a ``ResolvedTarget``, or ``None`` to abort."""
        root = self._workspace.resolve()

        startup = self.startup_projects(root)
        if not startup:
            self._notifier.notify(no_startup_projects_message(root))
            return None

        candidate = self.choose_project(startup)
        if candidate is None:
            logger.debug("No project selected")
            return None

        artifact_path = self.choose_artifact(candidate)
        if artifact_path is None:
            logger.debug("No assembly selected for %s", candidate.project.name)
            return None

        target = ResolvedTarget(
            project_root=candidate.project.root_path,
            artifact_path=artifact_path,
            environment=dict(candidate.environment or {}),
        )
        logger.info("Resolved %s -> %s", candidate.project.name, artifact_path)
        return target
