"""
crudmount Application Entry Point

FastAPI application factory: builds the store and the resource services,
mounts the generic CRUD routes and configures the application.
"""

import logging
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import async_sessionmaker

from crudmount import __version__
from crudmount.api import mount, setup_openapi, users_router
from crudmount.common.errors import AppError
from crudmount.config import get_settings
from crudmount.db import AsyncSessionLocal, engine, get_models
from crudmount.logging_config import setup_logging
from crudmount.middleware import RequestLogMiddleware
from crudmount.repositories.sqlalchemy import SQLAlchemyStore
from crudmount.services import OrganizationService, TagService, UserService

logger = logging.getLogger(__name__)


def _allowed_origins(raw: str, debug: bool) -> list[str]:
    """Parse ALLOWED_ORIGINS from comma-separated string to list"""
    raw = raw.strip()
    if raw:
        return [origin.strip() for origin in raw.split(",") if origin.strip()]
    # Empty list means no CORS outside development
    if debug:
        return ["http://localhost:3000", "http://127.0.0.1:3000"]
    return []


def create_app(session_factory: Optional[async_sessionmaker] = None) -> FastAPI:
    """
    Create the FastAPI application

    Args:
        session_factory: Session factory backing the store, defaults to the
            configured database

    Returns:
        FastAPI: Configured application
    """
    setup_logging()
    settings = get_settings()

    owns_engine = session_factory is None
    if owns_engine:
        session_factory = AsyncSessionLocal

    store = SQLAlchemyStore(session_factory)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application Lifecycle Management

        Create missing tables on startup, release the engine on shutdown.
        """
        # Startup
        await store.run_migrations(*get_models())
        yield
        # Shutdown
        if owns_engine:
            await engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Generic CRUD service for organizations, users and tags",
        version=__version__,
        lifespan=lifespan,
        docs_url="/swagger",
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(settings.ALLOWED_ORIGINS, settings.DEBUG),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Handle application custom exceptions"""
        logger.warning("%s (%s): %s", exc.error_type, exc.code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_envelope())

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """
        Handle uncaught exceptions

        In production mode, stack traces and error details are logged but not returned to clients.
        """
        logger.error(
            "Uncaught exception: %s\nPath: %s\nTraceback:\n%s",
            str(exc),
            request.url.path,
            traceback.format_exc(),
        )
        message = f"{type(exc).__name__}: {exc}" if settings.DEBUG else "Internal server error"
        return JSONResponse(
            status_code=500,
            content={"status": 500, "errors": [message], "data": None},
        )

    # Health Check Endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """
        Health Check

        Used for service liveness probe.
        """
        return {"status": "healthy"}

    @app.get("/", tags=["Health"])
    async def root():
        """Basic service information"""
        return {
            "name": settings.APP_NAME,
            "version": __version__,
            "docs": "/swagger",
        }

    # Resource routes
    mount(app, OrganizationService(store))
    mount(app, UserService(store, password_rounds=settings.PASSWORD_HASH_ROUNDS))
    mount(app, TagService(store))
    app.include_router(users_router)

    setup_openapi(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "crudmount.main:app",
        host=settings.HTTP_HOST,
        port=settings.HTTP_PORT,
        reload=settings.DEBUG,
    )
