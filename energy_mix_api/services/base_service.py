"""
Base service interface for business logic.
"""

from abc import ABC, abstractmethod


class BaseService(ABC):
    """Abstract base service interface."""

    def __init__(self, repository=None):
        """Initialize service with repository dependency."""
        self.repository = repository

    @abstractmethod
    def validate_input(self, **kwargs) -> bool:
        """Validate input parameters."""
        pass
