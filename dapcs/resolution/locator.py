"""Project-definition file discovery."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dapcs.resolution.models import ProjectDescriptor

if TYPE_CHECKING:
    from dapcs.services.filesystem import FileSystem

logger = logging.getLogger(__name__)

PROJECT_SUFFIX = ".csproj"


class ProjectFileLocator:
    """Find every project file below a directory."""

    def __init__(self, filesystem: FileSystem, suffix: str = PROJECT_SUFFIX) -> None:
        self._fs = filesystem
        self._suffix = suffix

    def is_project_file(self, name: str, _path: str = "") -> bool:
        # Case-sensitive: "App.CSPROJ" does not match.
        return name.endswith(self._suffix)

    def find_projects(self, root: str) -> list[ProjectDescriptor]:
        """Return descriptors in traversal order; an unreadable root yields none."""
        paths = self._fs.find(self.is_project_file, root, limit=None, type="file")
        projects = [ProjectDescriptor.from_project_file(path) for path in paths]
        logger.debug("Found %d project file(s) under %s", len(projects), root)
        return projects
