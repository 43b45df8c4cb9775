"""
Controller for the optimal EV charging window endpoint.

Endpoints:
    - GET /optimal-charging?hours=N: Cleanest N-hour window in the next two days
"""

from fastapi import Query, Depends
from typing import Iterator

from .base_controller import BaseController
from ..config import app_config
from ..services import ChargingWindowService
from ..repositories import GenerationRepository
from ..models import OptimalChargingWindow


def get_charging_window_service() -> Iterator[ChargingWindowService]:
    """Dependency injection for ChargingWindowService, closing its HTTP session afterwards."""
    repository = GenerationRepository()
    try:
        yield ChargingWindowService(repository)
    finally:
        repository.close()


class ChargingController(BaseController):
    """Controller for charging window endpoints."""

    def _setup_routes(self):
        """Setup routes for charging window operations."""

        @self.router.get(
            "/optimal-charging",
            response_model=OptimalChargingWindow,
            tags=["EV Charging"],
            summary="Find the cleanest charging window",
            description="""
            Find the contiguous window of the requested length with the highest
            average share of clean energy within the next 48 hours.

            **Parameters:**
            - **hours**: Charging duration in whole hours (1-6)

            **Notes:**
            - Windows are aligned to the provider's half-hour intervals
            - When several windows score the same, the earliest one is returned
            """,
            response_description="Start and end of the best window with its average clean-energy share"
        )
        async def get_optimal_charging(
            hours: int = Query(
                ...,
                description="Charging duration in hours",
                ge=app_config.energy.min_charging_hours,
                le=app_config.energy.max_charging_hours
            ),
            service: ChargingWindowService = Depends(get_charging_window_service)
        ):
            """Find the optimal charging window for the requested duration."""
            try:
                return await service.get_optimal_window(hours)
            except Exception as e:
                self.handle_exception(e, "Failed to calculate optimal charging window")
