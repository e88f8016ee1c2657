"""Local process runner backed by ``subprocess``."""

from __future__ import annotations

from pathlib import Path
import subprocess
from typing import Sequence

from filevault_bridge.models.command import RawProcessOutcome
from filevault_bridge.models.errors import SpawnFailure
from filevault_bridge.providers.platform import PlatformProfile
from filevault_bridge.providers.process.base import ProcessRunner


class LocalProcessRunner(ProcessRunner):
    def __init__(self, profile: PlatformProfile) -> None:
        self._profile = profile

    def run(self, executable: Path, args: Sequence[str]) -> RawProcessOutcome:
        # No timeout and no cancellation: a hung child hangs this call.
        try:
            process = subprocess.run(
                [str(executable), *args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                creationflags=self._profile.creation_flags,
                check=False,
            )
        except (OSError, ValueError) as exc:
            # ValueError: NUL bytes in the executable path or an argument.
            raise SpawnFailure(executable, str(exc)) from exc
        return RawProcessOutcome(
            stdout=process.stdout,
            stderr=process.stderr,
            exit_code=self._exit_code(process.returncode),
        )

    @staticmethod
    def _exit_code(returncode: int) -> int | None:
        # Negative codes mean the child was killed by a signal.
        if returncode < 0:
            return None
        return returncode
