# picstash/main.py
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from picstash.config import Settings
from picstash.database import Base, build_engine, build_session_factory
from picstash.api.routes import users, photos, search_history
from picstash.core.exceptions import (
    PicstashError,
    picstash_error_handler,
    request_validation_error_handler,
)
from picstash.core.logger import setup_logging
from picstash.core.logging_middleware import log_requests
from picstash.services.unsplash_service import UnsplashClient

# Register every model on Base.metadata
from picstash.models import user, photo, tag  # noqa: F401
from picstash.models import search_history as search_history_model  # noqa: F401


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API; settings are read from the environment when not given"""

    # fails when UNSPLASH_ACCESS_KEY is missing
    settings = settings or Settings()

    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug
    )

    # ===== Shared resources =====
    engine = build_engine(settings)
    if settings.create_tables:
        Base.metadata.create_all(bind=engine)

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.unsplash_client = UnsplashClient(settings)
    # ============================

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        return await log_requests(request, call_next)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PicstashError, picstash_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Routers
    app.include_router(users.router)
    app.include_router(photos.router)
    app.include_router(search_history.router)

    @app.on_event("startup")
    async def startup_event():
        logger.info(f"{settings.app_name} started")

    @app.on_event("shutdown")
    async def shutdown_event():
        await app.state.unsplash_client.aclose()
        engine.dispose()
        logger.info(f"{settings.app_name} stopped")

    @app.get("/health")
    def health_check():
        """Health check"""
        return {
            "status": "healthy",
            "service": settings.app_name
        }

    return app
