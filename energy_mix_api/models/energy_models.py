"""
Derived models exposed by the energy mix endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict


class DailyEnergyMix(BaseModel):
    """Model for the average generation mix of one calendar day."""
    model_config = ConfigDict(populate_by_name=True)

    date: str  # YYYY-MM-DD
    clean_energy_perc: float = Field(alias="cleanEnergyPerc")
    # fuel type -> average percentage, in order of first appearance
    mix: Dict[str, float]


class OptimalChargingWindow(BaseModel):
    """Model for the cleanest contiguous charging window."""
    model_config = ConfigDict(populate_by_name=True)

    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    clean_energy_perc: float = Field(alias="cleanEnergyPerc")
