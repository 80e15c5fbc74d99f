from __future__ import annotations

import json
import logging
import os
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from bikes import router as bikes_router
from core import db, errors, log, responses
from exports import router as exports_router
from stations import router as stations_router

_STARTED_AT = time.monotonic()

DEFAULT_OPENAPI_DOCUMENT = Path(__file__).resolve().parent / "core" / "openapi.json"

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def openapi_document_path() -> Path:
    raw = os.environ.get("OPENAPI_DOCUMENT_PATH", "").strip()
    return Path(raw) if raw else DEFAULT_OPENAPI_DOCUMENT


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    await db.check_connection()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Bike-share inventory API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.register_exception_handlers(app)

app.include_router(stations_router.router, tags=["stations"])
app.include_router(bikes_router.router, tags=["bikes"])
app.include_router(exports_router.router, tags=["exports"])


@app.get("/api/health")
def health() -> dict:
    return responses.ok("Server is running", {"uptime": time.monotonic() - _STARTED_AT})


@app.get("/api/specification")
def specification() -> dict:
    try:
        return json.loads(openapi_document_path().read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("specification_unavailable error=%s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Cannot load OpenAPI specification",
        ) from exc


def run() -> None:
    log.configure_logging()
    host = os.environ.get("HOST", "").strip() or "0.0.0.0"
    port = _env_int("PORT", 3000)
    logger.info("server_starting host=%s port=%s", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
