"""
Error taxonomy for the energy mix API.

Every failure raised below the controllers derives from EnergyMixError so the
request boundary can map it to a status code in one place.
"""

from typing import Optional


class EnergyMixError(Exception):
    """Base class for all energy mix errors."""


class ValidationError(EnergyMixError):
    """A request parameter is missing or out of range."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def flatten(self) -> dict:
        """Field-level error body used in 400 responses."""
        return {"formErrors": [], "fieldErrors": {self.field: [self.message]}}


class UpstreamError(EnergyMixError):
    """The generation data provider did not answer successfully."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 status_text: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text


class ParseError(EnergyMixError):
    """The provider answered with a body that is not a list of intervals."""


class InsufficientDataError(EnergyMixError):
    """Fewer intervals were fetched than the requested window needs."""


class OptimizationError(EnergyMixError):
    """No charging window could be evaluated."""
