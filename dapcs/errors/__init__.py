"""Error handling for dapcs."""

from dapcs.errors.dapcs_errors import ConfigurationError
from dapcs.errors.dapcs_errors import DapcsError
from dapcs.errors.dapcs_errors import LaunchProfileError
from dapcs.errors.dapcs_errors import MissingCollaboratorError
from dapcs.errors.dapcs_errors import require

__all__ = [
    "ConfigurationError",
    "DapcsError",
    "LaunchProfileError",
    "MissingCollaboratorError",
    "require",
]
