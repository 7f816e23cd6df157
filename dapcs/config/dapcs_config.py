"""Configuration for the dapcs debug integration.

User options arrive as a plain mapping (the same shape the editor plugin
accepts) and are merged field by field onto documented defaults. There is
no deep-merge: each known key is copied across explicitly and anything else
is ignored with a warning.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
import logging
from typing import Any

from dapcs.errors import ConfigurationError

logger = logging.getLogger(__name__)

_TOP_LEVEL_KEYS = {"netcoredbg", "resolution", "dap_configurations"}
_NETCOREDBG_KEYS = {"path", "args"}
_RESOLUTION_KEYS = {
    "build_configuration",
    "project_suffix",
    "launch_settings_name",
    "language_servers",
}


def _warn_unknown(section: str, options: Mapping[str, Any], allowed: set[str]) -> None:
    unknown_keys = sorted(set(options) - allowed)
    if unknown_keys:
        logger.warning("Ignoring unknown %s option(s): %s", section, ", ".join(unknown_keys))


@dataclass
class NetcoredbgConfig:
    """How to start the netcoredbg debug adapter."""

    path: str = "netcoredbg"
    args: list[str] = field(default_factory=lambda: ["--interpreter=vscode"])

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None) -> NetcoredbgConfig:
        config = cls()
        if not options:
            return config
        _warn_unknown("netcoredbg", options, _NETCOREDBG_KEYS)
        if "path" in options:
            config.path = options["path"]
        if "args" in options:
            config.args = list(options["args"])
        return config


@dataclass
class ResolutionConfig:
    """Knobs used while discovering projects and build outputs."""

    build_configuration: str = "Debug"
    project_suffix: str = ".csproj"
    launch_settings_name: str = "launchSettings.json"
    # Language servers whose root directory is trusted as the workspace root.
    language_servers: tuple[str, ...] = ("roslyn", "omnisharp")

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None) -> ResolutionConfig:
        config = cls()
        if not options:
            return config
        _warn_unknown("resolution", options, _RESOLUTION_KEYS)
        if "build_configuration" in options:
            config.build_configuration = options["build_configuration"]
        if "project_suffix" in options:
            config.project_suffix = options["project_suffix"]
        if "launch_settings_name" in options:
            config.launch_settings_name = options["launch_settings_name"]
        if "language_servers" in options:
            config.language_servers = tuple(options["language_servers"])
        return config


@dataclass
class DapcsConfig:
    """Top-level configuration.

    Attributes:
        netcoredbg: Debug adapter executable settings.
        resolution: Project discovery settings.
        dap_configurations: Extra debug configurations appended after the
            built-in ones. Only entries with ``type == "coreclr"`` are used.
    """

    netcoredbg: NetcoredbgConfig = field(default_factory=NetcoredbgConfig)
    resolution: ResolutionConfig = field(default_factory=ResolutionConfig)
    dap_configurations: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> DapcsConfig:
        """Build a config from user options; user values win over defaults."""
        options = options or {}
        _warn_unknown("top-level", options, _TOP_LEVEL_KEYS)

        config = cls(
            netcoredbg=NetcoredbgConfig.from_options(options.get("netcoredbg")),
            resolution=ResolutionConfig.from_options(options.get("resolution")),
        )
        if "dap_configurations" in options:
            config.dap_configurations = list(options["dap_configurations"] or [])
        return config

    def validate(self) -> None:
        """Validate configuration and raise errors for invalid setups."""
        if not isinstance(self.netcoredbg.path, str) or not self.netcoredbg.path:
            raise ConfigurationError(
                "netcoredbg path must be a non-empty string",
                config_key="netcoredbg.path",
                details={"value": self.netcoredbg.path},
            )

        if not self.resolution.build_configuration:
            raise ConfigurationError(
                "Build configuration name is required",
                config_key="resolution.build_configuration",
            )

        if not self.resolution.project_suffix:
            raise ConfigurationError(
                "Project file suffix is required",
                config_key="resolution.project_suffix",
            )

        for index, entry in enumerate(self.dap_configurations):
            if not isinstance(entry, Mapping):
                raise ConfigurationError(
                    "Each extra debug configuration must be a mapping",
                    config_key="dap_configurations",
                    details={"index": index, "value": entry},
                )


# Default configuration instance
DEFAULT_CONFIG = DapcsConfig()
