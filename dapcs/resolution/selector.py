"""Disambiguation policy shared by every decision point of a resolution."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import TYPE_CHECKING
from typing import Callable
from typing import Generic
from typing import TypeVar

from dapcs.resolution.models import SelectionRequest

if TYPE_CHECKING:
    from dapcs.services.notify import Notifier
    from dapcs.services.prompt import Prompt

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CandidateSelector(Generic[T]):
    """Auto-resolve a single candidate, prompt for several, report none.

    Policy, in order:

    1. ``allow_multiple`` returns every candidate untouched, never prompting.
    2. No candidates: emit ``empty_message`` and return ``None``.
    3. One candidate: return it without asking.
    4. Several: ask the prompt service. A cancelled or out-of-range answer
       yields ``None``; answer ``i`` yields the ``i``-th candidate (1-based).
    """

    def __init__(self, prompt: Prompt, notifier: Notifier) -> None:
        self._prompt = prompt
        self._notifier = notifier

    def select(
        self,
        candidates: Sequence[T],
        label: Callable[[T], str],
        prompt_title: str,
        empty_message: str | None = None,
        allow_multiple: bool = False,
    ) -> T | Sequence[T] | None:
        if allow_multiple:
            return candidates

        if not candidates:
            if empty_message:
                self._notifier.notify(empty_message)
            return None

        if len(candidates) == 1:
            return candidates[0]

        request = SelectionRequest(
            prompt_title=prompt_title,
            labeled_options=tuple((label(candidate), candidate) for candidate in candidates),
        )
        choice = self._prompt.choose(request)
        if choice is None or choice <= 0 or choice > len(candidates):
            logger.debug("Selection %r for %r treated as cancelled", choice, prompt_title)
            return None
        return candidates[choice - 1]

    def select_one(
        self,
        candidates: Sequence[T],
        label: Callable[[T], str],
        prompt_title: str,
        empty_message: str | None = None,
    ) -> T | None:
        """``select`` without ``allow_multiple``; always a single candidate or ``None``."""
        return self.select(candidates, label, prompt_title, empty_message)  # type: ignore[return-value]
