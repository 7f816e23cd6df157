"""Register the netcoredbg adapter and C# configurations with a debug host."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
import logging
from typing import Any
from typing import Protocol

from dapcs.adapter.configurations import ADAPTER_TYPE
from dapcs.adapter.configurations import attach_template
from dapcs.adapter.configurations import launch_template
from dapcs.adapter.types import AdapterDefinition
from dapcs.config import DapcsConfig
from dapcs.errors import require

logger = logging.getLogger(__name__)

ADAPTER_NAMES = (ADAPTER_TYPE, "netcoredbg")
FILETYPE = "cs"


class DebugHost(Protocol):
    """The editor-side registry that adapters and configurations go into."""

    adapters: dict[str, Any]
    configurations: dict[str, list[dict[str, Any]]]


@dataclass
class DebugRegistry:
    """In-memory ``DebugHost``."""

    adapters: dict[str, Any] = field(default_factory=dict)
    configurations: dict[str, list[dict[str, Any]]] = field(default_factory=dict)

    def find_configuration(self, name: str, filetype: str = FILETYPE) -> dict[str, Any] | None:
        for configuration in self.configurations.get(filetype, []):
            if configuration.get("name") == name:
                return configuration
        return None


def adapter_definition(config: DapcsConfig) -> AdapterDefinition:
    return AdapterDefinition(
        type="executable",
        command=config.netcoredbg.path,
        args=list(config.netcoredbg.args),
    )


def setup_adapter(host: DebugHost, config: DapcsConfig) -> None:
    adapter = adapter_definition(config)
    for name in ADAPTER_NAMES:
        host.adapters[name] = adapter


def setup_configuration(host: DebugHost, config: DapcsConfig) -> None:
    configurations: list[dict[str, Any]] = [dict(launch_template()), dict(attach_template())]

    for extra in config.dap_configurations:
        if isinstance(extra, Mapping) and extra.get("type") == ADAPTER_TYPE:
            configurations.append(dict(extra))
        else:
            logger.debug("Skipping non-%s configuration %r", ADAPTER_TYPE, extra)

    host.configurations[FILETYPE] = configurations


def setup(host: DebugHost | None, opts: Mapping[str, Any] | None = None) -> DapcsConfig:
    """Validate options and register everything with *host*.

    Raises:
        MissingCollaboratorError: *host* is ``None``.
        ConfigurationError: the merged options are invalid.
    """
    host = require(host, "debug host")
    config = DapcsConfig.from_options(opts)
    config.validate()
    setup_adapter(host, config)
    setup_configuration(host, config)
    logger.debug("Registered adapters %s and %d configuration(s)", ADAPTER_NAMES, len(host.configurations[FILETYPE]))
    return config
