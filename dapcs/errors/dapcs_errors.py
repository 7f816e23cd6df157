"""Error hierarchy for dapcs.

Resolution outcomes such as "no project found" or "user cancelled" are not
errors and never raise; they surface as ``None``. The exceptions below cover
invalid setup (bad options, missing collaborators) and the internal signal
used while reading launch-configuration files.
"""

from __future__ import annotations

from typing import Any


class DapcsError(Exception):
    """Base exception for all dapcs errors.

    ``details`` carries the offending key, path or collaborator so the
    command line can report it without parsing the message.
    """

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause!s})"
        return self.message


class ConfigurationError(DapcsError):
    """A user option failed validation."""

    def __init__(self, message: str, config_key: str | None = None, **kwargs: Any) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details=details, **kwargs)
        self.config_key = config_key


class MissingCollaboratorError(DapcsError):
    """A required host service was not provided at setup time."""

    def __init__(self, message: str, *, collaborator: str | None = None, **kwargs: Any) -> None:
        details = kwargs.pop("details", {})
        if collaborator:
            details["collaborator"] = collaborator
        super().__init__(message, details=details, **kwargs)
        self.collaborator = collaborator


class LaunchProfileError(DapcsError):
    """A launch-configuration file could not be read or decoded."""

    def __init__(self, message: str, *, path: str | None = None, **kwargs: Any) -> None:
        details = kwargs.pop("details", {})
        if path:
            details["path"] = path
        super().__init__(message, details=details, **kwargs)
        self.path = path


def require(value: Any, collaborator: str) -> Any:
    """Return *value*, raising ``MissingCollaboratorError`` when it is ``None``."""
    if value is None:
        raise MissingCollaboratorError(
            f"dapcs dependency error: {collaborator} not available",
            collaborator=collaborator,
        )
    return value
