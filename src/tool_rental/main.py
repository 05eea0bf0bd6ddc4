"""Main FastAPI application for Tool Rental."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes import router as api_router
from .catalog import default_catalog
from .engine import CheckoutEngine
from .config import get_settings
from .observability.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()

    configure_logging(
        environment=settings.environment,
        log_level="DEBUG" if settings.debug else settings.log_level,
    )

    # Catalog is built once here and read-only afterwards
    catalog = default_catalog()
    app.state.catalog = catalog
    app.state.engine = CheckoutEngine(catalog, max_rental_days=settings.max_rental_days)

    logger.info("%s v%s started", settings.app_name, settings.app_version)
    logger.info("Environment: %s", settings.environment)
    logger.info("Tool catalog: %d tools", len(catalog))

    yield

    logger.info("%s shutdown complete", settings.app_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Tool rental checkout and agreement service",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
            "endpoints": {
                "health": "/health",
                "tools": "GET /api/v1/tools",
                "tool": "GET /api/v1/tools/{code}",
                "checkout": "POST /api/v1/checkout",
            },
        }

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    @app.get("/health/live")
    async def health_live():
        """Liveness probe — process is running."""
        return {"status": "alive"}

    @app.get("/health/ready")
    async def health_ready(request: Request):
        """Readiness probe — catalog loaded and engine installed."""
        catalog = getattr(request.app.state, "catalog", None)
        engine = getattr(request.app.state, "engine", None)
        if catalog is None or engine is None:
            return JSONResponse(
                content={"status": "not_ready", "checks": {"catalog": "missing"}},
                status_code=503,
            )
        return {"status": "ready", "checks": {"catalog": f"ok (tools={len(catalog)})"}}

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "tool_rental.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
