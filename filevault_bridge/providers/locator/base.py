"""Executable locator interface."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ExecutableLocator(Protocol):
    def locate(self) -> Path:
        ...
