"""Domain models for the exercise tracker."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class UserRecord:
    """Represents a user held in the store."""

    id: str
    username: str


@dataclass(frozen=True)
class ExerciseRecord:
    """A single entry in a user's exercise log."""

    description: str
    duration: int
    date: date


@dataclass(frozen=True)
class ExerciseLog:
    """Filtered view of a user's exercise log."""

    user: UserRecord
    entries: list[ExerciseRecord]

    @property
    def count(self) -> int:
        """Number of entries in this view."""
        return len(self.entries)
