"""
Error handling middleware for Catalog Service.
Maps catalog exceptions to HTTP responses with one standardized error body.
"""

import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...core.exceptions import CatalogConflictError, CatalogValidationError
from ...utils.logging import setup_catalog_logging

logger = setup_catalog_logging("catalog_service_error_handler")


class CatalogServiceErrorHandler:
    """
    Centralized error handling for Catalog Service.

    - CatalogValidationError -> 400
    - CatalogConflictError -> 409
    - HTTP exceptions keep their status (404 for absent entities)
    - Request body validation -> 422
    - Anything else -> 500, logged with traceback
    """

    @staticmethod
    def setup_error_handlers(app: FastAPI) -> None:
        """
        Setup all error handlers for the FastAPI application.
        """

        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(
            request: Request, exc: StarletteHTTPException
        ) -> JSONResponse:
            """Handle HTTP exceptions raised by the routers."""
            return CatalogServiceErrorHandler._create_error_response(
                request=request,
                status_code=exc.status_code,
                error_type="http_error",
                message=str(exc.detail),
            )

        @app.exception_handler(RequestValidationError)
        async def validation_exception_handler(
            request: Request, exc: RequestValidationError
        ) -> JSONResponse:
            """Handle malformed request bodies and parameters."""
            error_details: list[Dict[str, Any]] = []
            for error in exc.errors():
                error_details.append(
                    {
                        "field": ".".join(str(loc) for loc in error["loc"]),
                        "message": error["msg"],
                        "type": error["type"],
                    }
                )

            return CatalogServiceErrorHandler._create_error_response(
                request=request,
                status_code=422,
                error_type="validation_error",
                message="Request validation failed",
                details={"validation_errors": error_details},
            )

        @app.exception_handler(CatalogValidationError)
        async def catalog_validation_error_handler(
            request: Request, exc: CatalogValidationError
        ) -> JSONResponse:
            """Handle business rule violations caused by caller input."""
            return CatalogServiceErrorHandler._create_error_response(
                request=request,
                status_code=400,
                error_type="catalog_validation_error",
                message=str(exc),
            )

        @app.exception_handler(CatalogConflictError)
        async def catalog_conflict_error_handler(
            request: Request, exc: CatalogConflictError
        ) -> JSONResponse:
            """Handle operations blocked by the current catalog state."""
            return CatalogServiceErrorHandler._create_error_response(
                request=request,
                status_code=409,
                error_type="catalog_conflict_error",
                message=str(exc),
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(
            request: Request, exc: Exception
        ) -> JSONResponse:
            """Handle everything else as an internal error."""
            logger.error(
                "Unhandled exception occurred",
                extra={
                    "correlation_id": getattr(
                        request.state, "correlation_id", "unknown"
                    ),
                    "path": request.url.path,
                    "method": request.method,
                    "exception_type": type(exc).__name__,
                    "exception_message": str(exc),
                    "traceback": traceback.format_exc(),
                    "service": "catalog_service",
                    "event_type": "unhandled_exception",
                },
            )

            return CatalogServiceErrorHandler._create_error_response(
                request=request,
                status_code=500,
                error_type="internal_server_error",
                message="An internal server error occurred",
                details={"exception_type": type(exc).__name__},
            )

    @staticmethod
    def _create_error_response(
        request: Request,
        status_code: int,
        error_type: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        """
        Create a standardized error response.

        Args:
            request: The FastAPI request object
            status_code: HTTP status code
            error_type: Type of error for categorization
            message: Human-readable error message
            details: Additional error details

        Returns:
            JSONResponse with standardized error format
        """
        correlation_id = getattr(request.state, "correlation_id", "unknown")

        error_response: Dict[str, Any] = {
            "error": {
                "type": error_type,
                "message": message,
                "correlation_id": correlation_id,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "path": request.url.path,
                "method": request.method,
            }
        }

        if details:
            error_response["error"]["details"] = details

        if status_code < 500:
            logger.warning(
                f"Client error: {error_type}",
                extra={
                    "correlation_id": correlation_id,
                    "status_code": status_code,
                    "error_type": error_type,
                    "path": request.url.path,
                    "method": request.method,
                    "service": "catalog_service",
                    "event_type": "client_error",
                },
            )

        return JSONResponse(status_code=status_code, content=error_response)


def setup_catalog_error_handling(app: FastAPI) -> None:
    """
    Convenience function to setup error handling for Catalog Service.

    Args:
        app: FastAPI application instance
    """
    CatalogServiceErrorHandler.setup_error_handlers(app)

    logger.info(
        "Catalog Service error handling configured",
        extra={"service": "catalog_service", "event_type": "error_handler_setup"},
    )
