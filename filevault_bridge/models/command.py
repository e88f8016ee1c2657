"""Data models for a single filevault invocation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

NO_EXIT_CODE = -1


@dataclass(frozen=True)
class InvocationRequest:
    args: tuple[str, ...]

    @classmethod
    def of(cls, args: Sequence[str]) -> "InvocationRequest":
        return cls(args=tuple(args))


@dataclass(frozen=True)
class RawProcessOutcome:
    stdout: bytes
    stderr: bytes
    exit_code: Optional[int]

    @property
    def process_success(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class CommandResult:
    success: bool
    stdout: str
    stderr: str
    exit_code: int
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("A successful result cannot carry an error.")
        if not self.success and self.error is None:
            raise ValueError("A failed result must carry an error.")

    @classmethod
    def from_error(cls, message: str) -> "CommandResult":
        """Fold a bridge error into the result shape the front-end renders."""
        return cls(
            success=False,
            stdout="",
            stderr=message,
            exit_code=1,
            error=message,
        )
