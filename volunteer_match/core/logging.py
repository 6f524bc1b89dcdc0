from __future__ import annotations

import logging
import sys
import time
import uuid
from typing import Any, Dict

import structlog
from fastapi import Request

SERVICE_NAME = "volunteer-match"

# Libraries that log every statement or connection at INFO/DEBUG
NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncio")


def _add_log_level(
    logger: Any, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    event_dict["level"] = method_name
    return event_dict


def _add_service(
    logger: Any, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(env: str = "development") -> None:
    """Configure structlog and stdlib logging to write to stdout.

    Development gets coloured console output at DEBUG; staging and
    production get one JSON object per line at INFO.
    """
    is_dev = env == "development"

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        _add_log_level,
        _add_service,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(colors=True)
        if is_dev
        else structlog.processors.JSONRenderer(),
    ]

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if is_dev else logging.INFO,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def bind_volunteer(volunteer_id: int) -> None:
    """Attach the volunteer being matched to every log line of this request."""
    structlog.contextvars.bind_contextvars(volunteer_id=volunteer_id)


async def request_id_middleware(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Tag each request with an x-request-id and log its status and latency."""
    start = time.perf_counter()
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id, method=request.method, path=request.url.path
    )

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
    finally:
        structlog.get_logger("request").info(
            "request.completed",
            status=status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        structlog.contextvars.clear_contextvars()

    response.headers["x-request-id"] = request_id
    return response
