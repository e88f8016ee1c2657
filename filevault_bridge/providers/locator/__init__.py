"""Executable locator implementations and interfaces."""

from filevault_bridge.providers.locator.base import ExecutableLocator
from filevault_bridge.providers.locator.resource import ResourceLocator

__all__ = ["ExecutableLocator", "ResourceLocator"]
