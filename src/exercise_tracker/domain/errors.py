"""Errors raised by exercise tracker services."""


class ExerciseTrackerError(Exception):
    """Base class for errors reported back to API clients."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ExerciseTrackerError):
    """Raised when request input is missing or malformed."""


class NotFoundError(ExerciseTrackerError):
    """Raised when a referenced user does not exist."""
