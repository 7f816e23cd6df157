"""Debug host integration for dapcs."""

from dapcs.adapter.configurations import ABORT
from dapcs.adapter.configurations import PICK_PROCESS
from dapcs.adapter.configurations import is_aborted
from dapcs.adapter.configurations import resolve_configuration
from dapcs.adapter.registry import DebugRegistry
from dapcs.adapter.registry import adapter_definition
from dapcs.adapter.registry import setup

__all__ = [
    "ABORT",
    "PICK_PROCESS",
    "DebugRegistry",
    "adapter_definition",
    "is_aborted",
    "resolve_configuration",
    "setup",
]
