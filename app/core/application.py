"""
Application builder.
Splits the FastAPI setup into middleware, routes, lifecycle and error handling steps.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging import app_logger, init_app_logging
from app.infra.db import health_check
from app.routers import dashboard, health, reports


class ApplicationBuilder:
    """Builder for FastAPI application with separated concerns."""

    def __init__(self):
        self.app = FastAPI(
            title=settings.APP_NAME,
            version="1.0.0",
            description="Store operations API: daily stats, trends and alerts",
            openapi_url="/api/v1/openapi.json",
            docs_url="/docs",
            redoc_url="/redoc",
        )
        self._middlewares_added = False
        self._routes_added = False
        self._startup_handlers_added = False

    def add_cors_middleware(self) -> ApplicationBuilder:
        """Add CORS middleware configuration."""
        if self._middlewares_added:
            raise RuntimeError("Middlewares already added")

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS_LIST or ["http://localhost:8081", "http://localhost:19006"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        app_logger.info("CORS middleware added")
        return self

    def add_security_middleware(self) -> ApplicationBuilder:
        """Add security-related response headers."""
        if self._middlewares_added:
            raise RuntimeError("Middlewares already added")

        @self.app.middleware("http")
        async def add_security_headers(request: Request, call_next):
            response = await call_next(request)
            response.headers["X-Content-Type-Options"] = "nosniff"
            response.headers["X-Frame-Options"] = "DENY"
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
            return response

        app_logger.info("Security middleware added")
        return self

    def add_request_logging_middleware(self) -> ApplicationBuilder:
        """Add request logging middleware."""
        if self._middlewares_added:
            raise RuntimeError("Middlewares already added")

        @self.app.middleware("http")
        async def log_requests(request: Request, call_next):
            app_logger.info("Request", method=request.method, path=request.url.path)
            response = await call_next(request)
            app_logger.info("Response", path=request.url.path, status=response.status_code)
            return response

        app_logger.info("Request logging middleware added")
        return self

    def finalize_middlewares(self) -> ApplicationBuilder:
        """Mark middlewares as finalized."""
        self._middlewares_added = True
        return self

    def add_routes(self) -> ApplicationBuilder:
        """Add all API routes."""
        if self._routes_added:
            raise RuntimeError("Routes already added")

        self.app.include_router(health.router)
        self.app.include_router(dashboard.router)
        self.app.include_router(reports.router)

        @self.app.get("/")
        def root():
            return {
                "name": settings.APP_NAME,
                "env": settings.ENV,
                "docs": "/docs",
                "openapi": "/api/v1/openapi.json",
                "healthz": "/healthz",
                "readyz": "/readyz",
            }

        app_logger.info("All routes added")
        self._routes_added = True
        return self

    def add_startup_handlers(self) -> ApplicationBuilder:
        """Add startup and shutdown event handlers."""
        if self._startup_handlers_added:
            raise RuntimeError("Startup handlers already added")

        @asynccontextmanager
        async def lifespan(app: FastAPI):
            app_logger.info("Starting application...")
            try:
                health_check()
                app_logger.info("Database connection validated")
            except SQLAlchemyError as exc:
                app_logger.error("Database connection failed", exc=exc)
                raise

            app_logger.info("Application started successfully")
            yield

            app_logger.info("Shutting down application...")

        self.app.router.lifespan_context = lifespan
        self._startup_handlers_added = True
        app_logger.info("Startup handlers added")
        return self

    def add_exception_handlers(self) -> ApplicationBuilder:
        """Add global exception handlers."""

        @self.app.exception_handler(SQLAlchemyError)
        async def database_error_handler(request: Request, exc: SQLAlchemyError):
            app_logger.error("Database error", exc=exc, path=request.url.path)
            return JSONResponse(
                status_code=503,
                content={"detail": "Service temporarily unavailable"},
            )

        @self.app.exception_handler(500)
        async def internal_error_handler(request: Request, exc: Exception):
            app_logger.error("Internal error", exc=exc, path=request.url.path)
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal server error"},
            )

        app_logger.info("Exception handlers added")
        return self

    def build(self) -> FastAPI:
        """Build and return the configured FastAPI application."""
        if not self._middlewares_added:
            raise RuntimeError("Middlewares not finalized")
        if not self._routes_added:
            raise RuntimeError("Routes not added")
        if not self._startup_handlers_added:
            raise RuntimeError("Startup handlers not added")

        app_logger.info("FastAPI application built successfully")
        return self.app


def create_application() -> FastAPI:
    """Create and configure the FastAPI application using the builder."""
    init_app_logging()

    builder = (
        ApplicationBuilder()
        .add_cors_middleware()
        .add_security_middleware()
        .add_request_logging_middleware()
        .finalize_middlewares()
        .add_routes()
        .add_startup_handlers()
        .add_exception_handlers()
    )

    return builder.build()
