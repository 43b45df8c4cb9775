from datetime import datetime, timedelta, timezone

import pytest

from energy_mix_api.models import GenerationInterval
from energy_mix_api.repositories import BaseRepository

START = datetime(2025, 1, 15, tzinfo=timezone.utc)
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%MZ"


def _mix(clean_day: bool) -> dict:
    # Clean day: 85% clean, dirty day: 30% clean
    return {
        "biomass": 5,
        "coal": 0,
        "imports": 5,
        "gas": 10 if clean_day else 80,
        "nuclear": 10,
        "other": 0,
        "hydro": 5,
        "solar": 5,
        "wind": 60 if clean_day else 5,
    }


class FakeRepository(BaseRepository):
    """Serves canned intervals and records the requested ranges."""

    def __init__(self, intervals=None, error=None):
        self.intervals = intervals or []
        self.error = error
        self.calls = []

    async def find_between(self, start, end):
        self.calls.append((start, end))
        if self.error is not None:
            raise self.error
        return list(self.intervals)


@pytest.fixture
def make_interval():
    def _make(start: datetime, mix: dict) -> GenerationInterval:
        return GenerationInterval.model_validate({
            "from": start.strftime(TIMESTAMP_FORMAT),
            "to": (start + timedelta(minutes=30)).strftime(TIMESTAMP_FORMAT),
            "generationmix": [{"fuel": fuel, "perc": perc} for fuel, perc in mix.items()],
        })
    return _make


@pytest.fixture
def make_series(make_interval):
    """Consecutive half-hour intervals from START, one per mix."""
    def _make(mixes, start: datetime = START):
        return [
            make_interval(start + timedelta(minutes=30 * i), mix)
            for i, mix in enumerate(mixes)
        ]
    return _make


@pytest.fixture
def three_day_intervals(make_series):
    # Day 1 clean, days 2 and 3 dirty; 48 intervals per day
    return make_series([_mix(clean_day=i < 48) for i in range(48 * 3)])


@pytest.fixture
def fake_repository_factory():
    return FakeRepository


@pytest.fixture
def series_start():
    return START
