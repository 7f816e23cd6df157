"""Configuration templates and their resolution into concrete launches.

Templates are static records registered with the host. Right before a
launch the host passes the chosen template to ``resolve_configuration``,
which returns a filled-in copy; the template itself is never modified.
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING
from typing import Any
from typing import Callable

if TYPE_CHECKING:
    from dapcs.adapter.types import AttachConfiguration
    from dapcs.adapter.types import LaunchConfiguration
    from dapcs.resolution.models import ResolvedTarget

logger = logging.getLogger(__name__)

ADAPTER_TYPE = "coreclr"
LAUNCH_PROJECT_NAME = "Launch Project"
ATTACH_PROCESS_NAME = "Attach to Process"


class _Sentinel:
    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f"<dapcs.{self._name}>"

    def __copy__(self) -> _Sentinel:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Sentinel:
        return self


# Tells the host to cancel the launch instead of starting the debugger.
ABORT = _Sentinel("ABORT")
# Stands in for a PID until the user picks a process.
PICK_PROCESS = _Sentinel("PICK_PROCESS")


def launch_template() -> LaunchConfiguration:
    return {
        "type": ADAPTER_TYPE,
        "name": LAUNCH_PROJECT_NAME,
        "request": "launch",
        "program": "${file}",
        "cwd": "${fileDirname}",
        "env": {},
    }


def attach_template() -> AttachConfiguration:
    return {
        "type": ADAPTER_TYPE,
        "name": ATTACH_PROCESS_NAME,
        "request": "attach",
        "processId": PICK_PROCESS,
    }


def is_aborted(configuration: dict[str, Any]) -> bool:
    """True when resolution asked the host to cancel this launch."""
    return configuration.get("program") is ABORT or configuration.get("processId") is ABORT


def resolve_launch_configuration(
    template: LaunchConfiguration,
    resolve: Callable[[], ResolvedTarget | None],
) -> LaunchConfiguration:
    """Fill ``program``/``cwd``/``env`` from a resolution, or set ``program`` to ``ABORT``."""
    configuration = copy.deepcopy(template)
    target = resolve()
    if target is None:
        logger.info("Launch of %r aborted: nothing to run", template.get("name"))
        configuration["program"] = ABORT
        configuration["cwd"] = None
        configuration["env"] = {}
        return configuration

    configuration["program"] = target.artifact_path
    configuration["cwd"] = target.project_root
    configuration["env"] = dict(target.environment)
    return configuration


def resolve_attach_configuration(
    template: AttachConfiguration,
    pick_process: Callable[[], int | None],
) -> AttachConfiguration:
    """Replace the pick-process placeholder with a PID, or ``ABORT``."""
    configuration = copy.deepcopy(template)
    if configuration.get("processId") is not PICK_PROCESS:
        return configuration

    pid = pick_process()
    configuration["processId"] = ABORT if pid is None else pid
    return configuration


def resolve_configuration(
    template: dict[str, Any],
    *,
    resolve: Callable[[], ResolvedTarget | None],
    pick_process: Callable[[], int | None],
) -> dict[str, Any]:
    """Resolve any registered template; user-supplied ones come back as copies."""
    if template.get("name") == LAUNCH_PROJECT_NAME and template.get("request") == "launch":
        return resolve_launch_configuration(template, resolve)  # type: ignore[arg-type,return-value]
    if template.get("request") == "attach":
        return resolve_attach_configuration(template, pick_process)  # type: ignore[arg-type,return-value]
    return copy.deepcopy(template)
