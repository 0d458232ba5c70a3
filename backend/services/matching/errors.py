"""Exceptions raised by the matching engine."""


class MatchingError(Exception):
    """Base class for matching engine errors."""


class ValidationError(MatchingError, ValueError):
    """A mentee or mentor record is missing mandatory data or cannot be parsed."""

    def __init__(self, message: str, record_id: str = "") -> None:
        super().__init__(message)
        self.record_id = record_id
