"""
Services package for business logic layer.
Imports all services for easy access.
"""

# Base service
from .base_service import BaseService

# Scoring
from .clean_energy import calculate_clean_energy_score, is_clean_fuel

# Individual services
from .energy_mix_service import EnergyMixService
from .charging_window_service import ChargingWindowService

__all__ = [
    # Base service
    "BaseService",

    # Scoring
    "calculate_clean_energy_score",
    "is_clean_fuel",

    # Individual services
    "EnergyMixService",
    "ChargingWindowService"
]
