"""Domain error taxonomy shared by services.

These carry no transport concepts; ``apps.api.exceptions`` owns the mapping
from each kind to an HTTP status.
"""
from typing import Any, Optional


class StoreError(Exception):
    """Base class for errors raised deliberately by the store's services."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidInputError(StoreError):
    """Caller supplied malformed or inconsistent input."""


class NotFoundError(StoreError):
    """A referenced resource does not exist."""


class UnauthorizedError(StoreError):
    """Caller is not allowed to perform the operation."""


__all__ = ["StoreError", "InvalidInputError", "NotFoundError", "UnauthorizedError"]
