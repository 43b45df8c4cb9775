"""Tests for the optimal charging window search."""

import asyncio
import random
from datetime import datetime, timedelta, timezone

import pytest

from energy_mix_api.exceptions import InsufficientDataError, UpstreamError, ValidationError
from energy_mix_api.services import ChargingWindowService, calculate_clean_energy_score


def _service(repository_factory, intervals=None, error=None):
    return ChargingWindowService(repository_factory(intervals, error))


def _index_of(intervals, window):
    starts = [interval.from_ for interval in intervals]
    ends = [interval.to for interval in intervals]
    return starts.index(window.start_time), ends.index(window.end_time)


def test_three_day_scenario(three_day_intervals, fake_repository_factory):
    window = _service(fake_repository_factory).find_optimal_window(three_day_intervals, 3)

    assert window.clean_energy_perc == 85
    assert window.start_time == three_day_intervals[0].from_
    assert window.start_time.startswith("2025-01-15")
    assert window.end_time == three_day_intervals[5].to


@pytest.mark.parametrize("hours", [1, 2, 3, 4, 5, 6])
def test_window_spans_two_intervals_per_hour(make_series, fake_repository_factory, hours):
    rng = random.Random(hours)
    intervals = make_series([{"wind": rng.uniform(0, 90), "gas": 10} for _ in range(96)])

    window = _service(fake_repository_factory).find_optimal_window(intervals, hours)
    first, last = _index_of(intervals, window)

    assert last - first + 1 == hours * 2


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_no_window_beats_the_result(make_series, fake_repository_factory, seed):
    rng = random.Random(seed)
    mixes = [
        {"wind": rng.uniform(0, 60), "solar": rng.uniform(0, 20), "gas": rng.uniform(0, 40)}
        for _ in range(96)
    ]
    intervals = make_series(mixes)
    hours = rng.randint(1, 6)
    k = hours * 2

    window = _service(fake_repository_factory).find_optimal_window(intervals, hours)
    first, _ = _index_of(intervals, window)

    scores = [calculate_clean_energy_score(interval.generationmix) for interval in intervals]
    averages = [sum(scores[i:i + k]) / k for i in range(len(scores) - k + 1)]
    assert max(averages) == pytest.approx(averages[first])
    assert window.clean_energy_perc == pytest.approx(averages[first], abs=0.01)


def test_peak_in_the_middle_is_found(make_series, fake_repository_factory):
    mixes = [{"wind": 10, "gas": 90}] * 20
    mixes[10:14] = [{"wind": 95, "gas": 5}] * 4
    intervals = make_series(mixes)

    window = _service(fake_repository_factory).find_optimal_window(intervals, 2)

    assert _index_of(intervals, window) == (10, 13)
    assert window.clean_energy_perc == 95


def test_ties_go_to_the_earliest_window(make_series, fake_repository_factory):
    mixes = [{"wind": 20}] * 4 + [{"wind": 70}] * 2 + [{"wind": 20}] * 4 + [{"wind": 70}] * 2
    intervals = make_series(mixes)

    window = _service(fake_repository_factory).find_optimal_window(intervals, 1)

    assert _index_of(intervals, window) == (4, 5)


def test_constant_scores_pick_first_window(make_series, fake_repository_factory):
    intervals = make_series([{"nuclear": 40, "gas": 60}] * 30)
    window = _service(fake_repository_factory).find_optimal_window(intervals, 4)

    assert _index_of(intervals, window) == (0, 7)


def test_average_is_rounded_to_two_decimals(make_series, fake_repository_factory):
    intervals = make_series([{"wind": 10}, {"wind": 10}, {"wind": 0.001}] * 2)
    window = _service(fake_repository_factory).find_optimal_window(intervals, 1)

    assert window.clean_energy_perc == 10


def test_fewer_intervals_than_window(make_series, fake_repository_factory):
    intervals = make_series([{"wind": 50}] * 5)

    with pytest.raises(InsufficientDataError, match="Not enough data"):
        _service(fake_repository_factory).find_optimal_window(intervals, 3)


def test_exactly_one_window(make_series, fake_repository_factory):
    intervals = make_series([{"wind": 30}, {"wind": 50}] * 3)
    window = _service(fake_repository_factory).find_optimal_window(intervals, 3)

    assert window.start_time == intervals[0].from_
    assert window.end_time == intervals[-1].to
    assert window.clean_energy_perc == 40


def test_empty_upstream_is_insufficient(fake_repository_factory):
    service = _service(fake_repository_factory, [])

    with pytest.raises(InsufficientDataError):
        asyncio.run(service.get_optimal_window(1))


@pytest.mark.parametrize("hours", [0, 7, -1, "3", 2.5, True, None])
def test_invalid_hours(fake_repository_factory, hours):
    repository = fake_repository_factory([])
    service = ChargingWindowService(repository)

    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(service.get_optimal_window(hours))

    assert excinfo.value.field == "hours"
    assert repository.calls == []


def test_get_optimal_window_fetches_next_two_days(three_day_intervals, fake_repository_factory):
    repository = fake_repository_factory(three_day_intervals)
    service = ChargingWindowService(repository)
    now = datetime(2025, 1, 15, 8, 12, tzinfo=timezone.utc)

    window = asyncio.run(service.get_optimal_window(2, now=now))

    assert repository.calls == [(now, now + timedelta(days=2))]
    assert window.clean_energy_perc == 85


def test_upstream_errors_propagate(fake_repository_factory):
    service = _service(fake_repository_factory, error=UpstreamError("boom"))

    with pytest.raises(UpstreamError):
        asyncio.run(service.get_optimal_window(2))


def _running_total_best(scores, k):
    # Left-to-right sums with a strict > incumbent search
    best_index, best_average = None, -1.0
    for offset in range(len(scores) - k + 1):
        total = 0.0
        for score in scores[offset:offset + k]:
            total += score
        average = total / k
        if average > best_average:
            best_index, best_average = offset, average
    return best_index, best_average


@pytest.mark.parametrize("seed,hours", [(3, 4), (11, 5), (19, 6), (23, 6)])
def test_long_windows_match_running_total_search(make_series, fake_repository_factory, seed, hours):
    rng = random.Random(seed)
    # Few distinct values make many float near-ties
    mixes = [{"wind": rng.choice([0.1, 0.2, 0.3, 10.7, 33.3]), "gas": 5} for _ in range(96)]
    intervals = make_series(mixes)

    window = _service(fake_repository_factory).find_optimal_window(intervals, hours)
    first, _ = _index_of(intervals, window)

    scores = [calculate_clean_energy_score(interval.generationmix) for interval in intervals]
    best_index, best_average = _running_total_best(scores, hours * 2)
    assert first == best_index
    assert window.clean_energy_perc == round(best_average, 2)
