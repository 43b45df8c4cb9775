"""
Base repository interface for data access.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from ..models import GenerationInterval


class BaseRepository(ABC):
    """Abstract base repository interface."""

    @abstractmethod
    async def find_between(self, start: datetime, end: datetime) -> List[GenerationInterval]:
        """Find all half-hour intervals between start and end."""
        pass
