"""Match source projects with their build outputs under ``bin/<config>``."""

from __future__ import annotations

import logging
import os
import re
from typing import TYPE_CHECKING

from dapcs.resolution.models import BuildArtifactSet

if TYPE_CHECKING:
    from dapcs.resolution.models import ProjectDescriptor
    from dapcs.services.filesystem import FileSystem

logger = logging.getLogger(__name__)

DEFAULT_BUILD_CONFIGURATION = "Debug"

# Target-framework folder directly above the file, e.g. ".../net8.0/App.dll".
_NET_VERSION_RE = re.compile(r"(net\d+\.\d+)[\\/][^\\/]+$")


def get_net_version(path: str) -> str | None:
    """Return the target-framework folder name (``net8.0``) for *path*, if any."""
    match = _NET_VERSION_RE.search(path)
    return match.group(1) if match else None


def artifact_label(path: str) -> str:
    """Display label for a build output: its framework, else its bare file name."""
    version = get_net_version(path)
    if version:
        return version
    return os.path.splitext(os.path.basename(path))[0]


def runtime_config_name(project: ProjectDescriptor) -> str:
    return f"{project.name}.runtimeconfig.json"


def assembly_name(project: ProjectDescriptor) -> str:
    return f"{project.name}.dll"


class ArtifactMatcher:
    """Classify projects as built and collect their output assemblies."""

    def __init__(
        self,
        filesystem: FileSystem,
        build_configuration: str = DEFAULT_BUILD_CONFIGURATION,
    ) -> None:
        self._fs = filesystem
        self._build_configuration = build_configuration

    def bin_root(self, project: ProjectDescriptor, build_config: str | None = None) -> str:
        return os.path.join(project.root_path, "bin", build_config or self._build_configuration)

    def match_artifacts(
        self,
        project: ProjectDescriptor,
        build_config: str | None = None,
    ) -> BuildArtifactSet:
        """Return the build outputs of *project*.

        A project counts as built only when ``<name>.runtimeconfig.json``
        exists somewhere below its ``bin/<config>`` directory. A stray
        ``<name>.dll`` without that marker (a class library, say) does not
        make the project runnable.
        """
        bin_root = self.bin_root(project, build_config)

        markers = self._fs.find(runtime_config_name(project), bin_root, limit=1, type="file")
        if not markers:
            logger.debug("Project %s is not built (no runtimeconfig under %s)", project.name, bin_root)
            return BuildArtifactSet(project=project, is_built=False)

        # Each target framework produces its own copy; they are distinct candidates.
        dlls = self._fs.find(assembly_name(project), bin_root, limit=None, type="file")
        logger.debug("Project %s is built with %d assembly candidate(s)", project.name, len(dlls))
        return BuildArtifactSet(project=project, is_built=True, artifact_paths=tuple(dlls))
