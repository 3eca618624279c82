"""Process-local in-memory store for users and their exercise logs."""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from uuid import uuid4

from exercise_tracker.domain.models import ExerciseRecord, UserRecord
from exercise_tracker.services.exercises import ExerciseRepository
from exercise_tracker.services.users import UserRepository


def _new_user_id() -> str:
    return uuid4().hex


@dataclass
class InMemoryUserStore(UserRepository, ExerciseRepository):
    """Lock-guarded store; nothing survives a restart."""

    _users: dict[str, UserRecord]
    _ids_by_username: dict[str, str]
    _logs: dict[str, list[ExerciseRecord]]

    def __init__(self, id_factory: Callable[[], str] = _new_user_id) -> None:
        self._users = {}
        self._ids_by_username = {}
        self._logs = {}
        self._id_factory = id_factory
        self._lock = threading.Lock()

    def get_or_create(self, username: str) -> tuple[UserRecord, bool]:
        """Return the user for a username, creating it when absent."""
        with self._lock:
            existing_id = self._ids_by_username.get(username)
            if existing_id is not None:
                return self._users[existing_id], False
            user_id = self._id_factory()
            while user_id in self._users:
                user_id = self._id_factory()
            user = UserRecord(id=user_id, username=username)
            self._users[user_id] = user
            self._ids_by_username[username] = user_id
            self._logs[user_id] = []
            return user, True

    def list_users(self) -> list[UserRecord]:
        """Return all users in insertion order."""
        with self._lock:
            return list(self._users.values())

    def get(self, user_id: str) -> UserRecord | None:
        """Return the user for an id, if present."""
        with self._lock:
            return self._users.get(user_id)

    def append_exercise(self, user_id: str, exercise: ExerciseRecord) -> None:
        """Append an exercise to the end of a user's log."""
        with self._lock:
            self._logs[user_id].append(exercise)

    def list_exercises(self, user_id: str) -> list[ExerciseRecord]:
        """Return a copy of a user's log."""
        with self._lock:
            return list(self._logs.get(user_id, []))
