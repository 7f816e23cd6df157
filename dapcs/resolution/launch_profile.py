"""Read ``launchSettings.json`` and derive the debuggee environment.

Expected document shape::

    {
      "profiles": {
        "<name>": {
          "commandName": "Project",
          "environmentVariables": {"ASPNETCORE_ENVIRONMENT": "Development"},
          "applicationUrl": "https://localhost:5001"
        }
      }
    }

Only the first profile whose ``commandName`` is ``"Project"`` is used. Any
problem reading or decoding the file makes the parser report "no profile"
instead of raising, so the caller can fall back to manual project selection.
"""

from __future__ import annotations

from collections.abc import Mapping
import json
import logging
from typing import TYPE_CHECKING
from typing import Any
from typing import Callable

from dapcs.errors import LaunchProfileError
from dapcs.resolution.models import LaunchProfile

if TYPE_CHECKING:
    from dapcs.services.filesystem import FileSystem

logger = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"
PROJECT_COMMAND = "Project"
DEFAULT_ENVIRONMENT = {"ASPNETCORE_ENVIRONMENT": "Development"}
URLS_VARIABLE = "ASPNETCORE_URLS"


def strip_bom(raw: bytes) -> bytes:
    """Drop a leading UTF-8 byte-order mark."""
    if raw.startswith(UTF8_BOM):
        return raw[len(UTF8_BOM):]
    return raw


def read_json_text(filesystem: FileSystem, path: str) -> str:
    """Return the text of a JSON file with any BOM removed.

    Raises:
        LaunchProfileError: the file is unreadable, empty or not UTF-8.
    """
    raw = filesystem.read_bytes(path)
    if raw is None:
        raise LaunchProfileError("Could not read launch settings", path=path)
    if not raw:
        raise LaunchProfileError("Launch settings file is empty", path=path)

    try:
        return strip_bom(raw).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise LaunchProfileError("Launch settings are not valid UTF-8", path=path, cause=exc) from exc


def _env_value(value: Any) -> str:
    # Non-string JSON values keep their JSON spelling ("true", "1.5").
    if isinstance(value, str):
        return value
    return json.dumps(value)


def derive_environment(entry: Mapping[str, Any]) -> dict[str, str]:
    """Environment for a profile entry.

    ``environmentVariables`` replaces the default outright; it is not merged
    with it. ``applicationUrl`` is always added as ``ASPNETCORE_URLS``.
    """
    variables = entry.get("environmentVariables")
    if isinstance(variables, Mapping) and variables:
        environment = {
            str(key): _env_value(value) for key, value in variables.items() if value is not None
        }
    else:
        environment = dict(DEFAULT_ENVIRONMENT)

    url = entry.get("applicationUrl")
    if url:
        environment[URLS_VARIABLE] = str(url)
    return environment


def select_profile(document: Any) -> LaunchProfile | None:
    """Pick the first ``Project`` profile from a decoded document."""
    if not isinstance(document, Mapping):
        return None
    profiles = document.get("profiles")
    if not isinstance(profiles, Mapping):
        return None

    for name, entry in profiles.items():
        if not isinstance(entry, Mapping):
            continue
        if entry.get("commandName") != PROJECT_COMMAND:
            continue
        url = entry.get("applicationUrl")
        return LaunchProfile(
            command_kind=PROJECT_COMMAND,
            environment=derive_environment(entry),
            name=str(name),
            application_url=str(url) if url else None,
        )
    return None


class LaunchProfileParser:
    """Turn a launch-configuration file into a ``LaunchProfile``."""

    def __init__(
        self,
        filesystem: FileSystem,
        decoder: Callable[[str], Any] = json.loads,
    ) -> None:
        self._fs = filesystem
        self._decode = decoder

    def load(self, path: str) -> Any:
        """Return the decoded document, raising ``LaunchProfileError`` on failure."""
        text = read_json_text(self._fs, path)
        try:
            return self._decode(text)
        except (ValueError, RecursionError) as exc:
            raise LaunchProfileError("Could not decode launch settings", path=path, cause=exc) from exc

    def parse(self, path: str) -> LaunchProfile | None:
        try:
            document = self.load(path)
        except LaunchProfileError as exc:
            logger.warning("Ignoring launch settings %s: %s", path, exc)
            return None

        profile = select_profile(document)
        if profile is None:
            logger.debug("No '%s' launch profile in %s", PROJECT_COMMAND, path)
        else:
            logger.debug("Using launch profile %r from %s", profile.name, path)
        return profile
