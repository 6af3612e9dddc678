"""
Logging Config - Configuration structlog.

Responsabilite unique:
----------------------
Configurer structlog pour l'API et les adapters.

Modes:
------
- Development: Pretty print, couleurs
- Production: JSON, timestamp ISO

Usage:
------
    from src.infrastructure.logging import configure_logging, get_logger

    configure_logging(json_logs=True)
    logger = get_logger(__name__)
    logger.info("user_saved", user_id="123")
"""

import logging
import sys
import time
from typing import Optional
from uuid import uuid4

import structlog


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure le logging global.

    Args:
        json_logs: True pour JSON (production), False pour pretty.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        renderer = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]

    structlog.configure(
        processors=shared_processors + renderer,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Retourne un logger structure.

    Example:
        logger = get_logger(__name__)
        logger.info("event", key="value")
    """
    return structlog.get_logger(name)


class RequestLogger:
    """
    Middleware de logging pour FastAPI.

    Lie un request_id au contexte structlog et log chaque requete
    avec sa duree et son status.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        self._logger = logger or get_logger("api.requests")

    async def __call__(self, request, call_next):
        start_time = time.perf_counter()
        request_id = request.headers.get("x-request-id") or str(uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            self._logger.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        self._logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        response.headers["x-request-id"] = request_id
        return response
