from __future__ import annotations

from pathlib import Path
from typing import Iterator, Sequence

from fastapi.testclient import TestClient
import pytest

from filevault_bridge.api import main
from filevault_bridge.api.main import app, get_bridge
from filevault_bridge.bridge import FileVaultBridge
from filevault_bridge.config import BridgeSettings
from filevault_bridge.models.command import CommandResult
from filevault_bridge.models.errors import ExecutableNotFound, SpawnFailure
from filevault_bridge.providers.platform import POSIX
from filevault_bridge.providers.process import LocalProcessRunner


class _StubBridge:
    def __init__(self, result: CommandResult | None = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.args: list[str] | None = None

    def run_command(self, args: Sequence[str]) -> CommandResult:
        self.args = list(args)
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


@pytest.fixture
def client() -> Iterator[TestClient]:
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use(bridge: _StubBridge) -> None:
    app.dependency_overrides[get_bridge] = lambda: bridge


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_command_result_is_returned(client: TestClient) -> None:
    bridge = _StubBridge(
        result=CommandResult(
            success=False,
            stdout="✗ Wrong password",
            stderr="",
            exit_code=0,
            error="✗ Wrong password",
        )
    )
    _use(bridge)
    response = client.post("/commands", json={"args": ["decrypt", "a.fv", "-p", "x"]})
    assert response.status_code == 200
    assert response.json() == {
        "success": False,
        "stdout": "✗ Wrong password",
        "stderr": "",
        "exit_code": 0,
        "error": "✗ Wrong password",
    }
    assert bridge.args == ["decrypt", "a.fv", "-p", "x"]


def test_missing_executable_maps_to_503(client: TestClient) -> None:
    error = ExecutableNotFound(Path("res/bin/filevault"), [Path("bin/filevault")])
    _use(_StubBridge(error=error))
    response = client.post("/commands", json={"args": ["info"]})
    assert response.status_code == 503
    assert "bin/filevault" in response.json()["detail"]


def test_spawn_failure_maps_to_500(client: TestClient) -> None:
    _use(_StubBridge(error=SpawnFailure(Path("filevault"), "Permission denied")))
    response = client.post("/commands", json={"args": ["info"]})
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to execute command: Permission denied"


def test_args_must_be_strings(client: TestClient) -> None:
    _use(_StubBridge(result=CommandResult(True, "", "", 0)))
    response = client.post("/commands", json={"args": "info"})
    assert response.status_code == 422


class _FixedLocator:
    def locate(self) -> Path:
        return Path("filevault")


def test_nul_byte_argument_reports_spawn_failure_detail(client: TestClient) -> None:
    app.dependency_overrides[get_bridge] = lambda: FileVaultBridge(
        _FixedLocator(), LocalProcessRunner(POSIX)
    )
    response = client.post("/commands", json={"args": ["a\u0000b"]})
    assert response.status_code == 500
    assert response.json()["detail"].startswith("Failed to execute command:")


def test_logging_and_bridge_are_set_up_at_startup(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    levels: list[str] = []
    monkeypatch.setattr(
        main,
        "load_settings",
        lambda: BridgeSettings(resource_root=tmp_path, log_level="DEBUG"),
    )
    monkeypatch.setattr(main, "configure_logging", levels.append)
    with TestClient(app) as started:
        assert levels == ["DEBUG"]
        assert isinstance(app.state.bridge, FileVaultBridge)
        response = started.get("/health")
    assert response.status_code == 200
    assert levels == ["DEBUG"]
