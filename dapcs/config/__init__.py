"""Configuration for dapcs."""

from dapcs.config.dapcs_config import DEFAULT_CONFIG
from dapcs.config.dapcs_config import DapcsConfig
from dapcs.config.dapcs_config import NetcoredbgConfig
from dapcs.config.dapcs_config import ResolutionConfig

__all__ = [
    "DEFAULT_CONFIG",
    "DapcsConfig",
    "NetcoredbgConfig",
    "ResolutionConfig",
]
