"""Provider package for executable lookup and process execution."""

from filevault_bridge.providers.locator import ExecutableLocator, ResourceLocator
from filevault_bridge.providers.platform import (
    POSIX,
    WINDOWS,
    PlatformProfile,
    current_profile,
)
from filevault_bridge.providers.process import LocalProcessRunner, ProcessRunner

__all__ = [
    "ExecutableLocator",
    "LocalProcessRunner",
    "POSIX",
    "PlatformProfile",
    "ProcessRunner",
    "ResourceLocator",
    "WINDOWS",
    "current_profile",
]
