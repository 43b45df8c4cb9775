"""
Application configuration settings.
Spring Boot-like configuration management.
"""

from typing import Dict, FrozenSet
from pydantic import BaseModel


# Low-carbon generation sources; never mutated at runtime
CLEAN_ENERGY_SOURCES: FrozenSet[str] = frozenset(
    {"biomass", "nuclear", "hydro", "wind", "solar"}
)


class APIConfig(BaseModel):
    """API configuration settings."""

    title: str = "Energy Mix API"
    description: str = "REST API for the GB generation mix and clean-energy EV charging windows"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 4000
    debug: bool = False
    reload: bool = False

    # CORS settings
    allow_origins: list = ["*"]
    allow_credentials: bool = False
    allow_methods: list = ["*"]
    allow_headers: list = ["*"]


class UpstreamConfig(BaseModel):
    """Generation data provider settings."""

    base_url: str = "https://api.carbonintensity.org.uk/generation"
    timeout: int = 30  # seconds
    headers: Dict[str, str] = {"Accept": "application/json"}
    timestamp_format: str = "%Y-%m-%dT%H:%MZ"


class EnergyConfig(BaseModel):
    """Aggregation and charging window settings."""

    clean_sources: FrozenSet[str] = CLEAN_ENERGY_SOURCES
    days_returned: int = 3
    charging_horizon_days: int = 2
    interval_minutes: int = 30
    min_charging_hours: int = 1
    max_charging_hours: int = 6

    @property
    def intervals_per_hour(self) -> int:
        return 60 // self.interval_minutes


class ApplicationConfig:
    """Main application configuration."""

    def __init__(self):
        self.api = APIConfig()
        self.upstream = UpstreamConfig()
        self.energy = EnergyConfig()

    @property
    def is_debug(self) -> bool:
        """Check if debug mode is enabled."""
        return self.api.debug


# Global configuration instance
app_config = ApplicationConfig()
