"""
This module creates and configures the main FastAPI application for the
Energy Mix API. It exposes the GB generation mix summarised per day and
finds the cleanest window to charge an electric vehicle.

Tags:
    - fastapi
    - generation-mix
    - carbon-intensity
    - rest-api

Features:
    - Daily average generation mix for yesterday, today and tomorrow
    - Optimal EV charging window (1-6 hours) within the next 48 hours
    - Swagger documentation
    - CORS-enabled for web applications

API Categories:
    - System Information: API metadata and health
    - Energy Mix: Daily generation mix summaries
    - EV Charging: Clean-energy charging window search
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .controllers import energy_controller
from .config import app_config


def flatten_request_errors(errors) -> dict:
    """Group FastAPI request validation errors by field name."""
    field_errors = {}
    for error in errors:
        field = str(error["loc"][-1]) if error.get("loc") else "request"
        field_errors.setdefault(field, []).append(error["msg"])
    return {"formErrors": [], "fieldErrors": field_errors}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": detail}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render invalid query parameters as HTTP 400 with field-level detail."""
    return JSONResponse(
        status_code=400,
        content={"error": flatten_request_errors(exc.errors())}
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance ready for deployment.

    Routes:
        - /docs: Interactive Swagger UI documentation
        - /redoc: Alternative ReDoc documentation
        - /energy-mix, /optimal-charging: Energy mix endpoints
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = FastAPI(
        title=app_config.api.title,
        debug=app_config.is_debug,
        description=app_config.api.description,
        version=app_config.api.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "System Information",
                "description": "API info and health endpoints"
            },
            {
                "name": "Energy Mix",
                "description": "Daily generation mix and clean-energy share"
            },
            {
                "name": "EV Charging",
                "description": "Cleanest charging window for a given duration"
            }
        ]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.api.allow_origins,
        allow_credentials=app_config.api.allow_credentials,
        allow_methods=app_config.api.allow_methods,
        allow_headers=app_config.api.allow_headers,
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(energy_controller.router)

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=app_config.api.host,
        port=app_config.api.port,
        reload=app_config.api.reload
    )
