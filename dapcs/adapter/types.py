"""Type definitions for debug adapter and configuration records."""

from __future__ import annotations

from typing import Any
from typing import Literal
from typing import TypedDict

from typing_extensions import NotRequired  # noqa: TC002

__all__ = [
    "AdapterDefinition",
    "AttachConfiguration",
    "LaunchConfiguration",
]


class AdapterDefinition(TypedDict):
    """How the host starts the debug adapter process."""

    type: Literal["executable"]
    command: str
    args: list[str]


class LaunchConfiguration(TypedDict):
    """A ``launch`` request configuration.

    ``program`` holds either a path or the ``ABORT`` sentinel.
    """

    type: str
    name: str
    request: Literal["launch"]
    program: Any
    cwd: NotRequired[str | None]
    env: NotRequired[dict[str, str]]


class AttachConfiguration(TypedDict):
    """An ``attach`` request configuration.

    ``processId`` holds a PID, the pick-process placeholder or ``ABORT``.
    """

    type: str
    name: str
    request: Literal["attach"]
    processId: Any
