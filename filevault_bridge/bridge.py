"""Caller-facing entry point: one filevault invocation, one result."""

from __future__ import annotations

import logging
from typing import Sequence

from filevault_bridge.config import BridgeSettings
from filevault_bridge.models.command import CommandResult, InvocationRequest
from filevault_bridge.normalize import DEFAULT_MARKERS, MarkerSet, normalize
from filevault_bridge.providers.locator import ExecutableLocator, ResourceLocator
from filevault_bridge.providers.platform import PlatformProfile, current_profile
from filevault_bridge.providers.process import LocalProcessRunner, ProcessRunner

logger = logging.getLogger(__name__)


class FileVaultBridge:
    def __init__(
        self,
        locator: ExecutableLocator,
        runner: ProcessRunner,
        markers: MarkerSet = DEFAULT_MARKERS,
    ) -> None:
        self._locator = locator
        self._runner = runner
        self._markers = markers

    @classmethod
    def from_settings(
        cls,
        settings: BridgeSettings,
        profile: PlatformProfile | None = None,
    ) -> "FileVaultBridge":
        profile = profile or current_profile()
        return cls(
            locator=ResourceLocator(
                settings.resource_root, profile, settings.binary_name
            ),
            runner=LocalProcessRunner(profile),
            markers=settings.markers,
        )

    def run_command(self, args: Sequence[str]) -> CommandResult:
        """Run filevault with ``args`` and return its normalized result.

        Raises ``ExecutableNotFound`` when no candidate binary exists and
        ``SpawnFailure`` when the OS refuses to start it. A run that starts
        but fails is reported through ``CommandResult.success`` instead.
        """
        request = InvocationRequest.of(args)
        executable = self._locator.locate()
        logger.debug("Executable: %s", executable)
        logger.debug("Arguments count: %d", len(request.args))
        for index, arg in enumerate(request.args):
            logger.debug("  Arg[%d]: %r", index, arg)

        outcome = self._runner.run(executable, request.args)
        logger.debug("Exit code: %s", outcome.exit_code)

        result = normalize(outcome, self._markers)
        if not result.success:
            logger.info(
                "filevault reported failure (exit code %d): %s",
                result.exit_code,
                result.error,
            )
        return result
