"""Directory enumeration and file reading."""

from __future__ import annotations

import logging
import os
from typing import Callable
from typing import Literal
from typing import Protocol
from typing import Union

logger = logging.getLogger(__name__)

# Either an exact file name or a predicate called with (name, path).
NameMatcher = Union[str, Callable[[str, str], bool]]
EntryType = Literal["file", "directory"]


class FileSystem(Protocol):
    """Read-only view of the filesystem used during one resolution."""

    def find(
        self,
        match: NameMatcher,
        root: str,
        *,
        limit: int | None = None,
        type: EntryType = "file",
    ) -> list[str]:
        """Return paths under *root* whose name matches, searching downward."""
        ...

    def read_bytes(self, path: str) -> bytes | None:
        """Return the file contents, or ``None`` if it cannot be read."""
        ...

    def is_file(self, path: str) -> bool: ...


def _matches(match: NameMatcher, name: str, path: str) -> bool:
    if callable(match):
        return bool(match(name, path))
    return name == match


class LocalFileSystem:
    """``FileSystem`` backed by ``os.walk``.

    Unreadable directories are skipped rather than reported, so a missing or
    vanished root simply yields no results. Entries are visited in sorted
    order within each directory, top-down, at unbounded depth.
    """

    def find(
        self,
        match: NameMatcher,
        root: str,
        *,
        limit: int | None = None,
        type: EntryType = "file",
    ) -> list[str]:
        results: list[str] = []
        if limit is not None and limit <= 0:
            return results

        def _on_error(error: OSError) -> None:
            logger.debug("Skipping unreadable directory %s: %s", error.filename, error)

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            dirnames.sort()
            candidates = dirnames if type == "directory" else sorted(filenames)
            for name in candidates:
                path = os.path.join(dirpath, name)
                if _matches(match, name, path):
                    results.append(path)
                    if limit is not None and len(results) >= limit:
                        return results
        return results

    def read_bytes(self, path: str) -> bytes | None:
        try:
            with open(path, "rb") as handle:
                return handle.read()
        except OSError as exc:
            logger.debug("Could not read %s: %s", path, exc)
            return None

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)
