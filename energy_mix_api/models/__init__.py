"""
Models package for API data structures.
Imports all models for easy access.
"""

# Upstream generation models
from .generation_models import GenerationMixItem, GenerationInterval, GenerationResponse

# Derived energy models
from .energy_models import DailyEnergyMix, OptimalChargingWindow

# Response models
from .response_models import APIInfo, HealthResponse

__all__ = [
    # Upstream generation models
    "GenerationMixItem",
    "GenerationInterval",
    "GenerationResponse",

    # Derived energy models
    "DailyEnergyMix",
    "OptimalChargingWindow",

    # Response models
    "APIInfo",
    "HealthResponse"
]
