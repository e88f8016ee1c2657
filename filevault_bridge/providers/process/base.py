"""Process runner interface."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from filevault_bridge.models.command import RawProcessOutcome


class ProcessRunner(Protocol):
    def run(self, executable: Path, args: Sequence[str]) -> RawProcessOutcome:
        ...
