"""Tests for the dapcs error hierarchy."""

import pytest

from dapcs.errors import ConfigurationError
from dapcs.errors import DapcsError
from dapcs.errors import LaunchProfileError
from dapcs.errors import MissingCollaboratorError
from dapcs.errors import require


class TestDapcsError:
    """Test cases for DapcsError base class."""

    def test_basic_error(self) -> None:
        error = DapcsError("Test message")

        assert error.message == "Test message"
        assert error.details == {}
        assert error.cause is None
        assert str(error) == "Test message"

    def test_error_with_cause(self) -> None:
        original_error = ValueError("Original error")
        error = DapcsError("Wrapped error", cause=original_error)

        assert error.cause is original_error
        assert "caused by: Original error" in str(error)

    def test_details_default_to_empty_dict(self) -> None:
        assert DapcsError("a").details == {}
        assert DapcsError("b", details={"key": "value"}).details == {"key": "value"}


class TestSpecificErrors:
    def test_configuration_error(self) -> None:
        error = ConfigurationError("Invalid config", config_key="netcoredbg.path")

        assert error.config_key == "netcoredbg.path"
        assert error.details["config_key"] == "netcoredbg.path"
        assert isinstance(error, DapcsError)

    def test_missing_collaborator_error(self) -> None:
        error = MissingCollaboratorError("no host", collaborator="debug host")

        assert error.details == {"collaborator": "debug host"}

    def test_launch_profile_error(self) -> None:
        error = LaunchProfileError("bad json", path="/w/launchSettings.json", details={"line": 3})

        assert error.path == "/w/launchSettings.json"
        assert error.details == {"line": 3, "path": "/w/launchSettings.json"}


def test_require_passes_value_through() -> None:
    sentinel = object()

    assert require(sentinel, "thing") is sentinel


def test_require_raises_for_none() -> None:
    with pytest.raises(MissingCollaboratorError, match="prompt not available") as exc_info:
        require(None, "prompt")

    assert exc_info.value.collaborator == "prompt"
