"""Collaborator services used by the resolution engine.

Each service is described by a ``Protocol`` so hosts and tests can supply
their own implementation; the classes here are the local defaults.
"""

from dapcs.services.filesystem import FileSystem
from dapcs.services.filesystem import LocalFileSystem
from dapcs.services.notify import ConsoleNotifier
from dapcs.services.notify import Notifier
from dapcs.services.processes import ProcessInfo
from dapcs.services.processes import ProcessPicker
from dapcs.services.processes import list_processes
from dapcs.services.prompt import ConsolePrompt
from dapcs.services.prompt import Prompt
from dapcs.services.workspace import LanguageServerClient
from dapcs.services.workspace import WorkspaceRootResolver

__all__ = [
    "ConsoleNotifier",
    "ConsolePrompt",
    "FileSystem",
    "LanguageServerClient",
    "LocalFileSystem",
    "Notifier",
    "ProcessInfo",
    "ProcessPicker",
    "Prompt",
    "WorkspaceRootResolver",
    "list_processes",
]
