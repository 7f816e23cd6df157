"""User-facing notices."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING
from typing import Protocol

if TYPE_CHECKING:
    from typing import TextIO

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


class ConsoleNotifier:
    """Write notices to a text stream (stderr unless told otherwise)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def notify(self, message: str) -> None:
        logger.info("Notice: %s", message)
        stream = self._stream or sys.stderr
        stream.write(message + "\n")
        stream.flush()
