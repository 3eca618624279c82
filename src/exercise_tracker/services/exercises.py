"""Exercise logging and log retrieval."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from exercise_tracker.domain.dates import parse_date
from exercise_tracker.domain.errors import NotFoundError, ValidationError
from exercise_tracker.domain.models import ExerciseLog, ExerciseRecord, UserRecord

_logger = logging.getLogger(__name__)


class ExerciseRepository(Protocol):
    """Storage interface for user exercise logs."""

    def get(self, user_id: str) -> UserRecord | None:
        """Return the user for an id, if present."""

    def append_exercise(self, user_id: str, exercise: ExerciseRecord) -> None:
        """Append an exercise to the end of a user's log."""

    def list_exercises(self, user_id: str) -> list[ExerciseRecord]:
        """Return a copy of a user's log in insertion order."""


@dataclass
class ExerciseService:
    """Service for adding exercises and reading filtered logs."""

    repository: ExerciseRepository
    today: Callable[[], date] = field(default=date.today)

    def add_exercise(
        self,
        user_id: str,
        description: str | None,
        duration: str | int | None,
        date_value: str | None = None,
    ) -> tuple[UserRecord, ExerciseRecord]:
        """Validate and append an exercise to a user's log."""
        if not description or duration is None or duration == "":
            raise ValidationError("Description and duration are required")
        minutes = _parse_duration(duration)
        user = self._require_user(user_id)
        if date_value:
            exercise_date = parse_date(date_value)
        else:
            exercise_date = self.today()

        exercise = ExerciseRecord(
            description=description, duration=minutes, date=exercise_date
        )
        self.repository.append_exercise(user.id, exercise)
        _logger.info(
            "Logged exercise: user_id=%s duration=%s date=%s",
            user.id,
            minutes,
            exercise_date.isoformat(),
        )
        return user, exercise

    def get_logs(
        self,
        user_id: str,
        from_: str | None = None,
        to: str | None = None,
        limit: str | int | None = None,
    ) -> ExerciseLog:
        """Return a user's log filtered by date range and truncated to limit."""
        user = self._require_user(user_id)
        start = parse_date(from_, "Invalid 'from' date format") if from_ else None
        end = parse_date(to, "Invalid 'to' date format") if to else None
        max_entries = _parse_limit(limit)

        entries = self.repository.list_exercises(user.id)
        if start is not None:
            entries = [entry for entry in entries if entry.date >= start]
        if end is not None:
            entries = [entry for entry in entries if entry.date <= end]
        if max_entries is not None:
            entries = entries[:max_entries]
        return ExerciseLog(user=user, entries=entries)

    def _require_user(self, user_id: str) -> UserRecord:
        user = self.repository.get(user_id)
        if user is None:
            _logger.warning("Unknown user requested: id=%s", user_id)
            raise NotFoundError("User not found")
        return user


def _parse_duration(raw: str | int) -> int:
    if isinstance(raw, bool):
        raise ValidationError("Duration must be a positive integer")
    try:
        minutes = raw if isinstance(raw, int) else int(raw.strip())
    except ValueError as exc:
        raise ValidationError("Duration must be a positive integer") from exc
    if minutes < 1:
        raise ValidationError("Duration must be a positive integer")
    return minutes


def _parse_limit(raw: str | int | None) -> int | None:
    if raw is None or raw == "":
        return None
    try:
        value = raw if isinstance(raw, int) else int(raw.strip())
    except ValueError as exc:
        raise ValidationError("Limit must be a non-negative integer") from exc
    if value < 0:
        raise ValidationError("Limit must be a non-negative integer")
    return value
