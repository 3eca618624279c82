"""Tests for container wiring."""

from exercise_tracker.containers import build_container


def test_build_container_shares_one_store(settings) -> None:
    container = build_container(settings)

    assert container.user_service.repository is container.store
    assert container.exercise_service.repository is container.store


def test_build_container_isolates_state(settings) -> None:
    first = build_container(settings)
    second = build_container(settings)

    first.user_service.create_user("alice")

    assert second.user_service.list_users() == []
