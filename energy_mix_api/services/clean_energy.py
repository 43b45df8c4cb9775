"""
Clean-energy scoring for a single interval's generation mix.
"""

from typing import AbstractSet, Iterable

from ..config import CLEAN_ENERGY_SOURCES
from ..models import GenerationMixItem


def is_clean_fuel(fuel: str, clean_sources: AbstractSet[str] = CLEAN_ENERGY_SOURCES) -> bool:
    return fuel in clean_sources


def calculate_clean_energy_score(
    mix: Iterable[GenerationMixItem],
    clean_sources: AbstractSet[str] = CLEAN_ENERGY_SOURCES
) -> float:
    """
    Sum the percentages of the clean fuels in one interval.

    Unknown fuel types count as non-clean.

    Args:
        mix: Fuel shares of one half-hour interval
        clean_sources: Fuel types counted as low-carbon

    Returns:
        float: Clean-energy percentage of the interval
    """
    return sum(
        (item.perc for item in mix if is_clean_fuel(item.fuel, clean_sources)),
        0.0
    )
