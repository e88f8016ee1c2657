"""Process runner implementations and interfaces."""

from filevault_bridge.providers.process.base import ProcessRunner
from filevault_bridge.providers.process.local import LocalProcessRunner

__all__ = ["LocalProcessRunner", "ProcessRunner"]
