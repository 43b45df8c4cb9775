"""
Controllers package for API endpoint handlers.
Imports all controllers for easy access.
"""

from fastapi import APIRouter

# Base controller
from .base_controller import BaseController

# Individual controllers
from .info_controller import InfoController
from .energy_mix_controller import EnergyMixController, get_energy_mix_service
from .charging_controller import ChargingController, get_charging_window_service


class EnergyController:
    """
    Aggregate controller that combines all energy mix controllers.
    """

    def __init__(self):
        """Initialize aggregate controller with all sub-controllers."""
        self.router = APIRouter()

        self.info_controller = InfoController()
        self.energy_mix_controller = EnergyMixController()
        self.charging_controller = ChargingController()

        self._setup_aggregate_routes()

    def _setup_aggregate_routes(self):
        """Setup aggregate routes by including all controller routers."""
        self.router.include_router(self.info_controller.router)
        self.router.include_router(self.energy_mix_controller.router)
        self.router.include_router(self.charging_controller.router)


# Create aggregate controller
energy_controller = EnergyController()

__all__ = [
    # Base controller
    "BaseController",

    # Individual controllers
    "InfoController",
    "EnergyMixController",
    "ChargingController",

    # Dependencies
    "get_energy_mix_service",
    "get_charging_window_service",

    # Aggregate controller
    "EnergyController",
    "energy_controller"
]
