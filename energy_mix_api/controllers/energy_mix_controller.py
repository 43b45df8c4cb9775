"""
Controller for the daily energy mix endpoint.

Endpoints:
    - GET /energy-mix: Average generation mix for yesterday, today and tomorrow
"""

from fastapi import Depends
from typing import Iterator, List

from .base_controller import BaseController
from ..services import EnergyMixService
from ..repositories import GenerationRepository
from ..models import DailyEnergyMix


def get_energy_mix_service() -> Iterator[EnergyMixService]:
    """Dependency injection for EnergyMixService, closing its HTTP session afterwards."""
    repository = GenerationRepository()
    try:
        yield EnergyMixService(repository)
    finally:
        repository.close()


class EnergyMixController(BaseController):
    """Controller for daily energy mix endpoints."""

    def _setup_routes(self):
        """Setup routes for energy mix operations."""

        @self.router.get(
            "/energy-mix",
            response_model=List[DailyEnergyMix],
            tags=["Energy Mix"],
            summary="Get the daily GB generation mix",
            description="""
            Average generation mix per UTC calendar day for yesterday, today and tomorrow.

            **Per day:**
            - **mix**: Average share of every fuel type seen that day (percent)
            - **cleanEnergyPerc**: Combined share of biomass, nuclear, hydro, wind and solar

            Data is fetched fresh from the Carbon Intensity API on every request.
            Days with partial data are averaged over the intervals available.
            """,
            response_description="Up to three daily mixes, oldest first"
        )
        async def get_energy_mix(
            service: EnergyMixService = Depends(get_energy_mix_service)
        ):
            """Get the average generation mix for the days around today."""
            try:
                return await service.get_energy_mix()
            except Exception as e:
                self.handle_exception(e, "Failed to fetch energy mix data")
