"""
Service for the daily generation mix summary.

Groups the half-hourly intervals around today by UTC calendar date and
averages every fuel's share across each day's intervals.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

import pandas as pd

from .base_service import BaseService
from ..config import EnergyConfig, app_config
from ..models import DailyEnergyMix, GenerationInterval
from ..repositories import BaseRepository, GenerationRepository


class EnergyMixService(BaseService):
    """Service for daily energy mix aggregation."""

    def __init__(self, repository: BaseRepository = None,
                 config: Optional[EnergyConfig] = None):
        """Initialize service with repository dependency injection."""
        super().__init__(repository or GenerationRepository())
        self.config = config or app_config.energy
        self.logger = logging.getLogger(__name__)

    def validate_input(self, **kwargs) -> bool:
        """The daily summary takes no parameters."""
        return True

    @staticmethod
    def fetch_range(now: datetime) -> Tuple[datetime, datetime]:
        """
        Compute the fetch range around the current moment.

        Starts yesterday at 00:30 UTC (the first interval ending after
        midnight) and ends the day after tomorrow at 00:00 UTC.
        """
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        now = now.astimezone(timezone.utc)
        today = datetime(now.year, now.month, now.day, tzinfo=timezone.utc)
        start = today - timedelta(days=1) + timedelta(minutes=30)
        end = today + timedelta(days=2)
        return start, end

    async def get_energy_mix(self, now: Optional[datetime] = None) -> List[DailyEnergyMix]:
        """Fetch intervals for yesterday, today and tomorrow and summarise them per day."""
        start, end = self.fetch_range(now or datetime.now(timezone.utc))
        intervals = await self.repository.find_between(start, end)
        return self.aggregate_daily(intervals)

    def aggregate_daily(self, intervals: List[GenerationInterval]) -> List[DailyEnergyMix]:
        """
        Summarise intervals per UTC calendar date.

        Each fuel's mean is its summed percentage divided by the number of
        intervals in that day, so partial days are averaged over what exists.
        Only fuels seen on a given day appear in that day's mix.

        Args:
            intervals: Half-hour intervals, any number of days

        Returns:
            List[DailyEnergyMix]: At most `days_returned` days, oldest first
        """
        if not intervals:
            return []

        df = self._to_dataframe(intervals)
        fuel_order = self._fuel_order(intervals)

        days = []
        for date, day in df.groupby("date", sort=True):
            if len(days) == self.config.days_returned:
                break

            fuels = day.drop(columns="date").dropna(axis=1, how="all")
            fuels = fuels[fuel_order[date]]
            averages = fuels.sum() / len(day)
            clean = averages[averages.index.isin(list(self.config.clean_sources))]

            days.append(DailyEnergyMix(
                date=date,
                clean_energy_perc=round(float(clean.sum()), 2),
                mix={fuel: round(float(avg), 2) for fuel, avg in averages.items()}
            ))

        self.logger.info(f"Aggregated {len(intervals)} intervals into {len(days)} days")
        return days

    @staticmethod
    def _fuel_order(intervals: List[GenerationInterval]) -> Dict[str, List[str]]:
        """Fuels of each date in the order they first appear on that date."""
        order = {}
        for interval in intervals:
            seen = order.setdefault(interval.date, {})
            for item in interval.generationmix:
                seen.setdefault(item.fuel, None)
        return {date: list(seen) for date, seen in order.items()}

    @staticmethod
    def _to_dataframe(intervals: List[GenerationInterval]) -> pd.DataFrame:
        """One row per interval, one column per fuel (NaN where a fuel is absent)."""
        rows = []
        for interval in intervals:
            row = {"date": interval.date}
            for item in interval.generationmix:
                row[item.fuel] = row.get(item.fuel, 0.0) + item.perc
            rows.append(row)
        return pd.DataFrame(rows)
