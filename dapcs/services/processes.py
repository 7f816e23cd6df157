"""Running-process listing for the attach configuration."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import subprocess
from typing import TYPE_CHECKING
from typing import Callable

from dapcs.resolution.models import SelectionRequest

if TYPE_CHECKING:
    from dapcs.services.prompt import Prompt

logger = logging.getLogger(__name__)

PS_COMMAND = ["ps", "-A", "-o", "pid=,comm="]


@dataclass(frozen=True)
class ProcessInfo:
    pid: int
    name: str

    @property
    def label(self) -> str:
        return f"{self.pid} {self.name}"


def parse_ps_output(output: str) -> list[ProcessInfo]:
    """Parse ``ps -o pid=,comm=`` output into ``ProcessInfo`` records."""
    processes: list[ProcessInfo] = []
    for line in output.splitlines():
        parts = line.strip().split(None, 1)
        if len(parts) != 2:
            continue
        pid_text, name = parts
        try:
            pid = int(pid_text)
        except ValueError:
            continue
        processes.append(ProcessInfo(pid=pid, name=name.strip()))
    return processes


def list_processes(
    run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> list[ProcessInfo]:
    """List running processes, or an empty list if ``ps`` is unavailable."""
    try:
        completed = run(PS_COMMAND, capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.warning("Could not list processes: %s", exc)
        return []
    return parse_ps_output(completed.stdout)


class ProcessPicker:
    """Let the user choose a running process by PID."""

    def __init__(
        self,
        prompt: Prompt,
        lister: Callable[[], list[ProcessInfo]] = list_processes,
    ) -> None:
        self._prompt = prompt
        self._lister = lister

    def pick(self) -> int | None:
        processes = self._lister()
        if not processes:
            return None
        request = SelectionRequest(
            prompt_title="Select process:",
            labeled_options=tuple((process.label, process) for process in processes),
        )
        choice = self._prompt.choose(request)
        if not choice or choice <= 0 or choice > len(processes):
            return None
        return processes[choice - 1].pid
