"""Tests for the clean-energy score of a single interval."""

from energy_mix_api.config import CLEAN_ENERGY_SOURCES
from energy_mix_api.models import GenerationMixItem
from energy_mix_api.services import calculate_clean_energy_score, is_clean_fuel


def _items(**percs):
    return [GenerationMixItem(fuel=fuel, perc=perc) for fuel, perc in percs.items()]


def test_clean_fuel_set():
    assert CLEAN_ENERGY_SOURCES == {"biomass", "nuclear", "hydro", "wind", "solar"}
    assert is_clean_fuel("wind")
    assert not is_clean_fuel("gas")


def test_score_sums_clean_fuels_only():
    mix = _items(biomass=5, coal=1, gas=20, nuclear=15, hydro=2, wind=40, solar=7, imports=10)
    assert calculate_clean_energy_score(mix) == 69


def test_unknown_fuels_are_not_clean():
    mix = _items(wind=30, tidal=25, fusion=10)
    assert calculate_clean_energy_score(mix) == 30


def test_empty_mix_scores_zero():
    assert calculate_clean_energy_score([]) == 0.0


def test_custom_clean_set():
    mix = _items(wind=30, gas=50)
    assert calculate_clean_energy_score(mix, frozenset({"gas"})) == 50
