"""Platform profiles selecting binary names, spawn flags and dev paths."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath, PurePosixPath, PureWindowsPath
import sys

CREATE_NO_WINDOW = 0x08000000


@dataclass(frozen=True)
class PlatformProfile:
    name: str
    binary_suffix: str
    creation_flags: int
    fallback_paths: tuple[PurePath, ...]

    def binary_name(self, stem: str) -> str:
        return f"{stem}{self.binary_suffix}"


WINDOWS = PlatformProfile(
    name="windows",
    binary_suffix=".exe",
    creation_flags=CREATE_NO_WINDOW,
    fallback_paths=(
        PureWindowsPath("..\\..\\build\\build\\Release\\bin\\release\\filevault.exe"),
        PureWindowsPath("bin\\filevault.exe"),
    ),
)

POSIX = PlatformProfile(
    name="posix",
    binary_suffix="",
    creation_flags=0,
    fallback_paths=(
        PurePosixPath("../../build/build/Release/bin/release/filevault"),
        PurePosixPath("../build/build/Release/bin/release/filevault"),
        PurePosixPath("bin/filevault"),
    ),
)


def current_profile(platform: str | None = None) -> PlatformProfile:
    platform = platform or sys.platform
    if platform.startswith("win"):
        return WINDOWS
    return POSIX
