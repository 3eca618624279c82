"""Dependency container wiring for the application."""

from dataclasses import dataclass

from exercise_tracker.adapters.memory_store import InMemoryUserStore
from exercise_tracker.config import Settings
from exercise_tracker.services.exercises import ExerciseService
from exercise_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: InMemoryUserStore
    user_service: UserService
    exercise_service: ExerciseService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = InMemoryUserStore()
    return AppContainer(
        settings=resolved_settings,
        store=store,
        user_service=UserService(store),
        exercise_service=ExerciseService(store),
    )
