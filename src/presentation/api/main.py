"""
Main - Factory FastAPI.

Responsabilite unique:
----------------------
Creer et configurer l'application FastAPI.

Usage:
------
    # Development
    uvicorn src.presentation.api.main:create_app --factory --reload

    # Production
    python run.py
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.domain.exceptions import FieldValidationError
from src.infrastructure.config import Settings, get_settings
from src.infrastructure.container import Container
from src.infrastructure.logging import RequestLogger, configure_logging, get_logger
from src.infrastructure.persistence.exceptions import PersistenceError
from src.presentation.api.tasks.router import router as tasks_router
from src.presentation.api.users.router import router as users_router


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Factory pour creer l'application FastAPI.

    Args:
        settings: Configuration (defaut: get_settings()).
        container: Container deja cable (tests); cree depuis settings sinon.

    Returns:
        Application FastAPI configuree.
    """
    settings = settings or get_settings()

    configure_logging(json_logs=settings.use_json_logs, log_level=settings.log_level)
    logger = get_logger("api")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.container = container or Container.create(settings)

    # Request logging middleware
    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestLogger())

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FieldValidationError)
    async def field_validation_handler(request: Request, exc: FieldValidationError):
        logger.warning("validation_failed", field=exc.field, code=exc.code)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message, "field": exc.field, "code": exc.code},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_handler(request: Request, exc: PersistenceError):
        logger.error("persistence_failed", operation=exc.operation, error=str(exc.cause))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage unavailable", "operation": exc.operation},
        )

    # Health check
    @app.get("/health", tags=["Health"])
    def health():
        """Endpoint de sante."""
        return {"status": "healthy"}

    # Routers
    app.include_router(users_router, prefix=settings.api_prefix)
    app.include_router(tasks_router, prefix=settings.api_prefix)

    logger.info("app_started", version=settings.api_version)

    return app
