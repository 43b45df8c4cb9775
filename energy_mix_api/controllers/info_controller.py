"""
Controller for API information and health endpoints.
"""

from .base_controller import BaseController
from ..config import app_config
from ..models import APIInfo, HealthResponse


class InfoController(BaseController):
    """Controller for API information and health endpoints."""

    def _setup_routes(self):
        """Setup routes for API info and health."""

        @self.router.get("/", response_model=APIInfo, tags=["System Information"])
        async def get_api_info():
            """API root endpoint with basic information."""
            return APIInfo(
                message=app_config.api.title,
                version=app_config.api.version,
                docs="/docs",
                endpoints={
                    "energy_mix": "/energy-mix - Get the daily generation mix",
                    "optimal_charging": "/optimal-charging?hours=N - Get the cleanest N-hour charging window",
                    "health": "/health - Health check"
                }
            )

        @self.router.get("/health", response_model=HealthResponse, tags=["System Information"])
        async def health_check():
            """Health check endpoint."""
            return HealthResponse(
                status="healthy",
                service="energy-mix-api",
                upstream=app_config.upstream.base_url
            )
