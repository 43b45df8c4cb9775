"""
Service for finding the cleanest EV charging window.

Slides a window of `hours * 2` half-hour intervals over the next two days of
forecast generation and picks the placement with the highest average
clean-energy share.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .base_service import BaseService
from .clean_energy import calculate_clean_energy_score
from ..config import EnergyConfig, app_config
from ..exceptions import InsufficientDataError, OptimizationError, ValidationError
from ..models import GenerationInterval, OptimalChargingWindow
from ..repositories import BaseRepository, GenerationRepository


class ChargingWindowService(BaseService):
    """Service for optimal charging window calculation."""

    def __init__(self, repository: BaseRepository = None,
                 config: Optional[EnergyConfig] = None):
        """Initialize service with repository dependency injection."""
        super().__init__(repository or GenerationRepository())
        self.config = config or app_config.energy
        self.logger = logging.getLogger(__name__)

    def validate_input(self, **kwargs) -> bool:
        """Validate the requested charging duration in hours."""
        hours = kwargs.get('hours')
        min_hours = self.config.min_charging_hours
        max_hours = self.config.max_charging_hours

        if (isinstance(hours, bool) or not isinstance(hours, int)
                or hours < min_hours or hours > max_hours):
            raise ValidationError(
                "hours",
                f"Hours must be a number between {min_hours} and {max_hours}"
            )

        return True

    async def get_optimal_window(self, hours: int,
                                 now: Optional[datetime] = None) -> OptimalChargingWindow:
        """Fetch the next two days of intervals and find the cleanest window."""
        self.validate_input(hours=hours)

        start = now or datetime.now(timezone.utc)
        end = start + timedelta(days=self.config.charging_horizon_days)
        intervals = await self.repository.find_between(start, end)

        return self.find_optimal_window(intervals, hours)

    def find_optimal_window(self, intervals: List[GenerationInterval],
                            hours: int) -> OptimalChargingWindow:
        """
        Find the contiguous window with the highest average clean-energy score.

        Every start offset from 0 to n - k is evaluated. On equal averages the
        earliest window wins. Each window is summed left to right, so near-ties resolve the same way
        as a plain running total over the window.

        Args:
            intervals: Half-hour intervals ordered by start time
            hours: Charging duration, 1-6

        Returns:
            OptimalChargingWindow: Start of the first and end of the last interval

        Raises:
            InsufficientDataError: Fewer intervals than the window needs
        """
        self.validate_input(hours=hours)
        window_size = hours * self.config.intervals_per_hour

        if len(intervals) < window_size:
            raise InsufficientDataError(
                "Not enough data available to calculate optimal window")

        scores = np.array([
            calculate_clean_energy_score(interval.generationmix, self.config.clean_sources)
            for interval in intervals
        ], dtype=float)
        averages = self._window_sums(scores, window_size) / window_size

        if averages.size == 0:
            raise OptimizationError("Could not calculate optimal window")

        # argmax returns the first maximum
        best = int(np.argmax(averages))
        first = intervals[best]
        last = intervals[best + window_size - 1]

        self.logger.info(
            f"Best {hours}h window out of {averages.size}: {first.from_} - {last.to}")

        return OptimalChargingWindow(
            start_time=first.from_,
            end_time=last.to,
            clean_energy_perc=round(float(averages[best]), 2)
        )

    @staticmethod
    def _window_sums(scores: np.ndarray, window_size: int) -> np.ndarray:
        """Sum of every window, accumulated one position at a time."""
        windows = sliding_window_view(scores, window_size)
        sums = np.zeros(windows.shape[0])
        for position in range(window_size):
            sums += windows[:, position]
        return sums
