"""Turn a raw filevault process outcome into a ``CommandResult``.

The filevault CLI sometimes exits with code 0 after failing internally, so the
exit status alone is not trusted. A run only counts as successful when the
exit code is 0 *and* the captured output carries none of the known failure
markers. The marker lists live in ``MarkerSet`` so they can follow changes in
the CLI's wording without touching the reconciliation logic.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Optional

from filevault_bridge.models.command import (
    NO_EXIT_CODE,
    CommandResult,
    RawProcessOutcome,
)

_ANSI_ESCAPE = re.compile(r"\x1B\[[0-9;]*[a-zA-Z]")
_ZERO_WIDTH = re.compile("[\u200B-\u200D\uFEFF]")


@dataclass(frozen=True)
class MarkerSet:
    stdout_failure: tuple[str, ...] = (
        "✗ ",
        "Authentication failed",
        "Wrong password",
        "File corrupted",
        "Failed to",
        "Error:",
    )
    stderr_failure: tuple[str, ...] = ("error", "failed")
    error_lines: tuple[str, ...] = ("✗ ", "Error", "failed")


DEFAULT_MARKERS = MarkerSet()


def decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def sanitize(text: str) -> str:
    """Strip terminal escape sequences and zero-width formatting characters."""
    text = _ZERO_WIDTH.sub("", text)
    # Removing one sequence can splice together another, so repeat until stable.
    while True:
        text, count = _ANSI_ESCAPE.subn("", text)
        if not count:
            return text


def has_error_marker(
    stdout: str, stderr: str, markers: MarkerSet = DEFAULT_MARKERS
) -> bool:
    if any(marker in stdout for marker in markers.stdout_failure):
        return True
    return any(marker in stderr for marker in markers.stderr_failure)


def reconcile_success(exit_code: Optional[int], marker_found: bool) -> bool:
    return exit_code == 0 and not marker_found


def extract_error(
    stdout: str,
    stderr: str,
    exit_code: int,
    marker_found: bool,
    markers: MarkerSet = DEFAULT_MARKERS,
) -> str:
    if stderr:
        return stderr
    if marker_found:
        lines = [
            line
            for line in stdout.splitlines()
            if any(marker in line for marker in markers.error_lines)
        ]
        if lines:
            return "\n".join(lines)
    return f"Command failed with exit code {exit_code}"


def normalize(
    outcome: RawProcessOutcome, markers: MarkerSet = DEFAULT_MARKERS
) -> CommandResult:
    stdout = sanitize(decode(outcome.stdout))
    stderr = sanitize(decode(outcome.stderr))
    exit_code = outcome.exit_code if outcome.exit_code is not None else NO_EXIT_CODE
    marker_found = has_error_marker(stdout, stderr, markers)
    success = reconcile_success(outcome.exit_code, marker_found)
    error = None
    if not success:
        error = extract_error(stdout, stderr, exit_code, marker_found, markers)
    return CommandResult(
        success=success,
        stdout=stdout,
        stderr=stderr,
        exit_code=exit_code,
        error=error,
    )
