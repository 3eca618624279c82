"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from exercise_tracker.domain.errors import ValidationError
from exercise_tracker.domain.models import UserRecord

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Storage interface for user records."""

    def get_or_create(self, username: str) -> tuple[UserRecord, bool]:
        """Return the user for a username, creating it when absent."""

    def list_users(self) -> list[UserRecord]:
        """Return all users in insertion order."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def create_user(self, username: str | None) -> tuple[UserRecord, bool]:
        """Create a user, or return the existing one with the same username."""
        if not username:
            raise ValidationError("Username is required")
        user, created = self.repository.get_or_create(username)
        if created:
            _logger.info("Created user: id=%s username=%s", user.id, user.username)
        return user, created

    def list_users(self) -> list[UserRecord]:
        """Return every stored user."""
        return self.repository.list_users()
