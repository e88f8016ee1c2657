"""Locator that prefers the packaged resource directory."""

from __future__ import annotations

from pathlib import Path

from filevault_bridge.models.errors import ExecutableNotFound
from filevault_bridge.providers.locator.base import ExecutableLocator
from filevault_bridge.providers.platform import PlatformProfile


class ResourceLocator(ExecutableLocator):
    def __init__(
        self,
        resource_root: str | Path,
        profile: PlatformProfile,
        binary_name: str = "filevault",
    ) -> None:
        self._resource_root = Path(resource_root)
        self._profile = profile
        self._binary_name = binary_name

    @property
    def primary_path(self) -> Path:
        return (
            self._resource_root
            / "bin"
            / self._profile.binary_name(self._binary_name)
        )

    @property
    def fallback_paths(self) -> tuple[Path, ...]:
        return tuple(Path(path) for path in self._profile.fallback_paths)

    def locate(self) -> Path:
        # Checked on every call; the binary may be rebuilt between invocations.
        primary = self.primary_path
        if primary.exists():
            return primary
        fallbacks = self.fallback_paths
        for candidate in fallbacks:
            if candidate.exists():
                return candidate
        raise ExecutableNotFound(primary, fallbacks)
