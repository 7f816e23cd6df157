"""Single-choice prompt shown when more than one candidate is available."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING
from typing import Callable
from typing import Protocol

if TYPE_CHECKING:
    from typing import TextIO

    from dapcs.resolution.models import SelectionRequest

logger = logging.getLogger(__name__)


class Prompt(Protocol):
    def choose(self, request: SelectionRequest) -> int | None:
        """Return the 1-based index the user picked; ``None`` or ``<= 0`` cancels."""
        ...


def render_request(request: SelectionRequest) -> list[str]:
    """Lay out a request as numbered lines framed by the title and blank lines."""
    lines = [request.prompt_title, ""]
    lines.extend(f"{index}: {label}" for index, label in enumerate(request.labels(), start=1))
    lines.append("")
    return lines


class ConsolePrompt:
    """Blocking numbered-list prompt on a terminal.

    Anything that is not a number (including an empty line or EOF) is read
    as ``0``, which callers treat as cancellation.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self._input = input_func
        self._output = output

    def choose(self, request: SelectionRequest) -> int | None:
        output = self._output or sys.stderr
        for line in render_request(request):
            output.write(line + "\n")
        output.flush()

        try:
            answer = self._input("Type number and <Enter> (empty cancels): ")
        except EOFError:
            return 0

        try:
            choice = int(answer.strip())
        except ValueError:
            logger.debug("Non-numeric selection %r treated as cancel", answer)
            return 0
        return choice
