"""Pydantic models for request bodies and JSON responses."""

from pydantic import BaseModel, ConfigDict, Field

from exercise_tracker.domain.dates import format_date
from exercise_tracker.domain.models import ExerciseLog, ExerciseRecord, UserRecord


class CreateUserRequest(BaseModel):
    """Body of ``POST /api/users``."""

    model_config = ConfigDict(extra="ignore")

    username: str | None = None


class ExerciseRequest(BaseModel):
    """Body of ``POST /api/users/{_id}/exercises``."""

    model_config = ConfigDict(extra="ignore")

    description: str | None = None
    duration: int | str | None = None
    date: str | None = None


class UserResponse(BaseModel):
    """Public view of a user."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: str = Field(alias="_id")

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(username=user.username, id=user.id)


class ExerciseResponse(BaseModel):
    """Exercise just added, with its owner."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    description: str
    duration: int
    date: str

    @classmethod
    def from_records(
        cls, user: UserRecord, exercise: ExerciseRecord
    ) -> "ExerciseResponse":
        return cls(
            id=user.id,
            username=user.username,
            description=exercise.description,
            duration=exercise.duration,
            date=format_date(exercise.date),
        )


class LogEntry(BaseModel):
    """One rendered log entry."""

    description: str
    duration: int
    date: str


class LogResponse(BaseModel):
    """A user's filtered exercise log."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    count: int
    log: list[LogEntry]

    @classmethod
    def from_log(cls, exercise_log: ExerciseLog) -> "LogResponse":
        return cls(
            id=exercise_log.user.id,
            username=exercise_log.user.username,
            count=exercise_log.count,
            log=[
                LogEntry(
                    description=entry.description,
                    duration=entry.duration,
                    date=format_date(entry.date),
                )
                for entry in exercise_log.entries
            ],
        )
