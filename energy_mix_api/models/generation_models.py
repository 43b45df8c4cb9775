"""
Models for half-hourly generation mix records returned by the data provider.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List


class GenerationMixItem(BaseModel):
    """Share of one fuel type within a half-hour interval."""
    fuel: str
    perc: float  # 0-100, not guaranteed to sum to exactly 100


class GenerationInterval(BaseModel):
    """Model for one half-hour generation interval."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_: str = Field(alias="from")  # ISO-8601 UTC, e.g. 2025-01-01T00:30Z
    to: str
    generationmix: List[GenerationMixItem] = []

    @property
    def date(self) -> str:
        """Calendar date (UTC) the interval starts on."""
        return self.from_.split("T")[0]


class GenerationResponse(BaseModel):
    """Body of the provider's generation endpoint."""
    data: List[GenerationInterval]
