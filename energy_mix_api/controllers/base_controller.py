"""
Base controller interface for API endpoints.

This module provides the abstract base class for all API controllers of the
energy mix service. It enforces consistent patterns and provides the single
place where service errors are turned into HTTP errors.

Tags:
    - base-controller
    - abstract-interface
    - error-handling

Architecture:
    All controllers inherit from BaseController and must implement:
    - _setup_routes(): Define endpoint routes and handlers

Usage:
    ```python
    class MyController(BaseController):
        def _setup_routes(self):
            @self.router.get("/my-endpoint")
            async def my_endpoint():
                return {"message": "Hello World"}
    ```
"""

import logging
from abc import ABC, abstractmethod
from fastapi import APIRouter, HTTPException

from ..exceptions import ValidationError


class BaseController(ABC):
    """
    Abstract base controller for consistent API endpoint patterns.

    Attributes:
        router (APIRouter): FastAPI router instance for endpoint registration
        logger (logging.Logger): Logger named after the concrete controller module

    Methods:
        _setup_routes(): Abstract method for route definition (must implement)
        handle_exception(): Maps service errors to HTTP errors
    """

    def __init__(self):
        """
        Initialize controller with FastAPI router.

        Creates a new APIRouter instance and calls _setup_routes() to register
        all endpoint handlers defined by the concrete controller implementation.
        """
        self.router = APIRouter()
        self.logger = logging.getLogger(type(self).__module__)
        self._setup_routes()

    @abstractmethod
    def _setup_routes(self):
        """
        Setup routes for this controller.

        Example:
            def _setup_routes(self):
                @self.router.get("/endpoint")
                async def my_endpoint():
                    return {"status": "success"}
        """
        pass

    def handle_exception(self, e: Exception, message: str) -> None:
        """
        Handle exceptions consistently across all controllers.

        Validation errors become HTTP 400 with field-level detail. Anything
        else is logged with its traceback and becomes HTTP 500 carrying only
        the generic message; the underlying cause is never sent to the client.

        Must be called from inside an ``except`` block.

        Args:
            e (Exception): The exception that occurred
            message (str): Client-safe message for the 500 response

        Raises:
            HTTPException: Always
        """
        if isinstance(e, ValidationError):
            raise HTTPException(status_code=400, detail=e.flatten())

        self.logger.exception(f"❌ {message}: {e}")
        raise HTTPException(status_code=500, detail=message)
