"""Bridge settings loaded from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass
import importlib
import importlib.util
import logging
from pathlib import Path
from typing import Any

from filevault_bridge.models.errors import ConfigError
from filevault_bridge.normalize import DEFAULT_MARKERS, MarkerSet

DEFAULT_CONFIG_PATH = "config/bridge.yaml"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_MARKER_KEYS = ("stdout_failure", "stderr_failure", "error_lines")


@dataclass(frozen=True)
class BridgeSettings:
    resource_root: Path = Path(".")
    binary_name: str = "filevault"
    log_level: str = "INFO"
    markers: MarkerSet = DEFAULT_MARKERS


def load_settings(config_path: str | Path = DEFAULT_CONFIG_PATH) -> BridgeSettings:
    path = Path(config_path)
    if not path.exists():
        return BridgeSettings()
    data = _read_yaml(path)
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}.")
    defaults = BridgeSettings()
    return BridgeSettings(
        resource_root=Path(data.get("resource_root", defaults.resource_root)),
        binary_name=str(data.get("binary_name", defaults.binary_name)),
        log_level=str(data.get("log_level", defaults.log_level)).upper(),
        markers=_parse_markers(data.get("markers"), path),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _read_yaml(path: Path) -> Any:
    yaml_spec = importlib.util.find_spec("yaml")
    if yaml_spec is None:
        raise RuntimeError("PyYAML is required to load bridge settings.")
    yaml = importlib.import_module("yaml")
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _parse_markers(raw: Any, path: Path) -> MarkerSet:
    if raw is None:
        return DEFAULT_MARKERS
    if not isinstance(raw, dict):
        raise ConfigError(f"'markers' in {path} must be a mapping.")
    overrides: dict[str, tuple[str, ...]] = {}
    for key in _MARKER_KEYS:
        if key not in raw:
            continue
        values = raw[key]
        if not isinstance(values, list) or not all(
            isinstance(value, str) for value in values
        ):
            raise ConfigError(f"'markers.{key}' in {path} must be a list of strings.")
        overrides[key] = tuple(values)
    return MarkerSet(**overrides)
