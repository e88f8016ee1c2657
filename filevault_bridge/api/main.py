from contextlib import asynccontextmanager
from dataclasses import asdict
import logging
from typing import AsyncIterator

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel

from filevault_bridge.bridge import FileVaultBridge
from filevault_bridge.config import configure_logging, load_settings
from filevault_bridge.models.errors import ExecutableNotFound, SpawnFailure

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = load_settings()
    configure_logging(settings.log_level)
    app.state.bridge = FileVaultBridge.from_settings(settings)
    yield


app = FastAPI(title="filevault-bridge", lifespan=lifespan)


class CommandRequest(BaseModel):
    args: list[str]


def get_bridge(request: Request) -> FileVaultBridge:
    return request.app.state.bridge


@app.get("/health")
def health_check() -> dict:
    return {"status": "ok"}


@app.post("/commands")
def run_filevault_command(
    request: CommandRequest, bridge: FileVaultBridge = Depends(get_bridge)
) -> dict:
    try:
        result = bridge.run_command(request.args)
    except ExecutableNotFound as exc:
        logger.error("%s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except SpawnFailure as exc:
        logger.error("%s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return asdict(result)
