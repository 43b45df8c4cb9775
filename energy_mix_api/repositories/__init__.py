"""
Repository package for data access layer.
"""

from .base_repository import BaseRepository
from .generation_repository import GenerationRepository

__all__ = [
    "BaseRepository",
    "GenerationRepository"
]
