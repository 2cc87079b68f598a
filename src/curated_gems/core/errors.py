"""Errors raised at the dataset load boundary."""

from typing import Optional


class DatasetLoadError(Exception):
    """Dataset could not be fetched or parsed."""

    def __init__(self, location: str, reason: str, status_code: Optional[int] = None) -> None:
        self.location = location
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to load dataset from {location}: {reason}")
