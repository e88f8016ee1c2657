"""Bridge between a desktop front-end and the filevault command-line tool."""

from filevault_bridge.bridge import FileVaultBridge
from filevault_bridge.config import BridgeSettings, load_settings
from filevault_bridge.models import (
    CommandResult,
    ExecutableNotFound,
    SpawnFailure,
)

__all__ = [
    "BridgeSettings",
    "CommandResult",
    "ExecutableNotFound",
    "FileVaultBridge",
    "SpawnFailure",
    "load_settings",
]
