"""
Configuration package for application settings.
"""

from .settings import (
    ApplicationConfig,
    APIConfig,
    UpstreamConfig,
    EnergyConfig,
    CLEAN_ENERGY_SOURCES,
    app_config,
)

__all__ = [
    "ApplicationConfig",
    "APIConfig",
    "UpstreamConfig",
    "EnergyConfig",
    "CLEAN_ENERGY_SOURCES",
    "app_config",
]
