from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from volunteer_match.core.config import get_settings
from volunteer_match.core.logging import configure_logging, request_id_middleware
from volunteer_match.matching.exceptions import MatchingError
from volunteer_match.matching.router import router as matches_router

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.ENV)

SERVER_ERROR_MESSAGE = "Server error while computing matches"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    from volunteer_match.db.base import engine
    from volunteer_match.db.init import sanitize_db_url

    logger.info(f"🚀 Starting {settings.APP_NAME}...")
    logger.info(f"Environment: {settings.ENV}")
    logger.info(f"Database: {sanitize_db_url(settings.database_url)}")

    yield

    logger.info(f"🛑 Shutting down {settings.APP_NAME}...")
    await engine.dispose()


app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)
app.middleware("http")(request_id_middleware)
app.include_router(matches_router)


@app.exception_handler(MatchingError)
async def matching_error_handler(request: Request, exc: MatchingError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"Match routes error: {exc.message}")
        message = SERVER_ERROR_MESSAGE
    else:
        logger.warning(f"Match request rejected ({exc.status_code}): {exc.message}")
        message = exc.message
    return JSONResponse(status_code=exc.status_code, content={"error": message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": SERVER_ERROR_MESSAGE})


@app.get("/")
def health_check():
    logger.debug("Health check endpoint called")
    return {"status": "ok"}


@app.get("/healthz")
def healthz():
    logger.debug(f"Healthz endpoint called (env: {settings.ENV})")
    return {"status": "healthy", "env": settings.ENV}
