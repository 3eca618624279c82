"""Shared test fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from exercise_tracker.adapters.memory_store import InMemoryUserStore
from exercise_tracker.api.app import create_app
from exercise_tracker.config import Settings
from exercise_tracker.containers import AppContainer
from exercise_tracker.services.exercises import ExerciseService
from exercise_tracker.services.users import UserService

FIXED_TODAY = date(2024, 3, 5)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def user_service(store: InMemoryUserStore) -> UserService:
    return UserService(store)


@pytest.fixture
def exercise_service(store: InMemoryUserStore) -> ExerciseService:
    return ExerciseService(store, today=lambda: FIXED_TODAY)


@pytest.fixture
def container(
    settings: Settings,
    store: InMemoryUserStore,
    user_service: UserService,
    exercise_service: ExerciseService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        store=store,
        user_service=user_service,
        exercise_service=exercise_service,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
