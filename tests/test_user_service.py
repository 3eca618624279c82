"""Tests for user service."""

import pytest

from exercise_tracker.domain.errors import ValidationError


def test_create_user_returns_new_unique_ids(user_service) -> None:
    alice, alice_created = user_service.create_user("alice")
    bob, bob_created = user_service.create_user("bob")

    assert alice_created
    assert bob_created
    assert alice.username == "alice"
    assert alice.id != bob.id


def test_create_user_is_idempotent_by_username(user_service) -> None:
    first, _ = user_service.create_user("alice")
    again, created = user_service.create_user("alice")

    assert not created
    assert again == first
    assert len(user_service.list_users()) == 1


@pytest.mark.parametrize("username", [None, ""])
def test_create_user_requires_username(user_service, username) -> None:
    with pytest.raises(ValidationError, match="Username is required"):
        user_service.create_user(username)

    assert user_service.list_users() == []


def test_list_users_counts_distinct_usernames_in_order(user_service) -> None:
    for name in ["carol", "alice", "carol", "bob", "alice"]:
        user_service.create_user(name)

    assert [user.username for user in user_service.list_users()] == [
        "carol",
        "alice",
        "bob",
    ]


def test_create_user_keeps_username_as_given(user_service) -> None:
    padded, _ = user_service.create_user(" bob ")
    plain, created = user_service.create_user("bob")
    blank, _ = user_service.create_user("   ")

    assert created
    assert padded.username == " bob "
    assert padded.id != plain.id
    assert blank.username == "   "
    assert len(user_service.list_users()) == 3
