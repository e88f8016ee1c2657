"""Errors raised while resolving or launching the filevault executable."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class BridgeError(RuntimeError):
    pass


class ExecutableNotFound(BridgeError):
    def __init__(self, primary: Path, fallbacks: Sequence[Path]) -> None:
        self.primary = primary
        self.fallbacks = tuple(fallbacks)
        tried = ", ".join(str(path) for path in self.fallbacks)
        super().__init__(
            f"FileVault executable not found at {primary}. Tried paths: [{tried}]"
        )

    @property
    def attempted(self) -> tuple[Path, ...]:
        return (self.primary, *self.fallbacks)


class SpawnFailure(BridgeError):
    def __init__(self, executable: Path, reason: str) -> None:
        self.executable = executable
        self.reason = reason
        super().__init__(f"Failed to execute command: {reason}")


class ConfigError(BridgeError):
    pass
