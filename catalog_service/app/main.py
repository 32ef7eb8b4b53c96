"""
Catalog Service FastAPI Application
===================================

Main application entry point for the Catalog Service.
Exposes product and category management over REST, backed by in-memory
stores that live for the lifetime of the process.
"""

import time
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.categories import router as categories_router
from .api.v1.health import router as health_router
from .api.v1.products import router as products_router
from .core.setting import CatalogSettings, get_settings
from .core.storage import CatalogStorageManager
from .middleware.error.error_handler import setup_catalog_error_handling
from .utils.logging import setup_catalog_logging as setup_logging

settings = get_settings()
enable_file_logging = settings.ENABLE_FILE_LOGGING or settings.ENVIRONMENT.lower() in [
    "production",
    "staging",
]

logger = setup_logging(
    "catalog_service",
    log_level=settings.LOG_LEVEL,
    enable_file_logging=enable_file_logging,
    log_dir=settings.LOG_DIR,
)


# Lifespan management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager for startup and shutdown."""
    startup_start = time.time()
    app_settings: CatalogSettings = app.state.settings

    try:
        app.state.storage = CatalogStorageManager(
            seed_data=app_settings.SEED_SAMPLE_DATA
        )
    except Exception as e:
        logger.error(
            "Failed to start catalog service",
            exc_info=True,
            extra={
                "startup_duration_ms": int((time.time() - startup_start) * 1000),
                "error_type": type(e).__name__,
            },
        )
        raise

    logger.info(
        "Catalog service started successfully",
        extra={
            "environment": app_settings.ENVIRONMENT,
            "service_version": app_settings.APP_VERSION,
            "seed_data": app_settings.SEED_SAMPLE_DATA,
            "total_startup_duration_ms": int((time.time() - startup_start) * 1000),
        },
    )

    yield

    logger.info("Starting catalog service shutdown")
    await app.state.storage.close()
    logger.info("Catalog service shutdown completed")


# Application factory
def create_app(app_settings: Optional[CatalogSettings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
        openapi_url="/openapi.json" if app_settings.DEBUG else None,
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url="/redoc" if app_settings.DEBUG else None,
    )
    app.state.settings = app_settings

    setup_catalog_error_handling(app)
    _setup_cors(app, app_settings)
    _setup_routers(app)

    return app


def _setup_cors(app: FastAPI, app_settings: CatalogSettings) -> None:
    """Configure CORS settings with logging."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=app_settings.CORS_CREDENTIALS,
        allow_methods=app_settings.CORS_METHODS,
        allow_headers=app_settings.CORS_HEADERS,
    )

    logger.info(
        "CORS middleware configured",
        extra={
            "allowed_origins": len(app_settings.CORS_ORIGINS),
            "credentials_allowed": app_settings.CORS_CREDENTIALS,
        },
    )


def _setup_routers(app: FastAPI) -> None:
    """Configure all application routers."""
    routers_info: list[dict[str, Any]] = []

    app.include_router(health_router, tags=["Health"])
    routers_info.append({"router": "health", "prefix": "", "tags": ["Health"]})

    app.include_router(products_router, prefix="/api/v1", tags=["Product Management"])
    routers_info.append(
        {"router": "products", "prefix": "/api/v1", "tags": ["Product Management"]}
    )

    app.include_router(
        categories_router, prefix="/api/v1", tags=["Category Management"]
    )
    routers_info.append(
        {"router": "categories", "prefix": "/api/v1", "tags": ["Category Management"]}
    )

    logger.info(
        "API routes configured",
        extra={"total_routers": len(routers_info), "routers": routers_info},
    )


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_service.app.main:app",
        host="0.0.0.0",
        port=8000,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True,
    )
