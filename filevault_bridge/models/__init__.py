"""Shared data models for the filevault bridge."""

from filevault_bridge.models.command import (
    NO_EXIT_CODE,
    CommandResult,
    InvocationRequest,
    RawProcessOutcome,
)
from filevault_bridge.models.errors import (
    BridgeError,
    ConfigError,
    ExecutableNotFound,
    SpawnFailure,
)

__all__ = [
    "BridgeError",
    "CommandResult",
    "ConfigError",
    "ExecutableNotFound",
    "InvocationRequest",
    "NO_EXIT_CODE",
    "RawProcessOutcome",
    "SpawnFailure",
]
