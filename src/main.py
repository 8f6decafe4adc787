from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.app_config import router as app_config_router
from src.adapters.api.controllers.isochrones import router as isochrones_router
from src.adapters.api.dependencies import init_services
from src.config import EngineConfig
from src.domain.exceptions import DatasetError, EngineNotReady

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    config = EngineConfig.from_env()
    configure_logging(config.log_level)
    # A failure here aborts startup; the engine never runs on a partial graph.
    init_services(config)
    logger.info("TransitScope ready")
    yield


app = FastAPI(title="TransitScope", lifespan=lifespan)
app.include_router(isochrones_router)
app.include_router(app_config_router)


@app.exception_handler(EngineNotReady)
async def engine_not_ready_handler(request: Request, exc: EngineNotReady) -> JSONResponse:
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render unexpected failures as JSON instead of Starlette's plain-text 500."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("TRANSITSCOPE_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (DatasetError, RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
