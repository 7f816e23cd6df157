"""Workspace root detection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging
import os
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE_SERVERS = ("roslyn", "omnisharp")


@dataclass(frozen=True)
class LanguageServerClient:
    """An active language server as reported by the editor."""

    name: str
    root_dir: str | None = None


class WorkspaceRootResolver:
    """Pick the directory a resolution should search.

    A running C# language server knows the solution root better than the
    process working directory does, so its root wins when present.
    """

    def __init__(
        self,
        clients: Iterable[LanguageServerClient] | Callable[[], Iterable[LanguageServerClient]] = (),
        *,
        known_servers: Iterable[str] = DEFAULT_LANGUAGE_SERVERS,
        cwd: Callable[[], str] = os.getcwd,
    ) -> None:
        self._clients = clients
        self._known_servers = tuple(known_servers)
        self._cwd = cwd

    def _active_clients(self) -> Iterable[LanguageServerClient]:
        if callable(self._clients):
            return self._clients()
        return self._clients

    def resolve(self) -> str:
        for client in self._active_clients():
            if client.name in self._known_servers and client.root_dir:
                logger.debug("Using %s root directory %s", client.name, client.root_dir)
                return client.root_dir

        cwd = self._cwd()
        logger.debug("No C# language server root; using working directory %s", cwd)
        return cwd
