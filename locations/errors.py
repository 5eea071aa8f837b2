"""Exceptions raised while resolving repository locations."""
from __future__ import annotations


class InvalidLocationError(ValueError):
    """Exception raised when a string is neither an existing path nor a git URL."""

    def __init__(self, location: str):
        """Initialize with the offending location.

        Args:
            location: The raw location string that failed validation
        """
        self.location = location
        super().__init__(f"{location} is an invalid location.")
