"""Tests for users and the guest Null Object."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ddd_patterns.null_object.user import (
    GUEST_ID,
    NULL_USER,
    AuthenticatedUser,
    GuestUser,
    IUser,
)


class TestAuthenticatedUser:
    def test_can_edit_and_greets_by_name(self) -> None:
        user = AuthenticatedUser(id="123", name="Taro Yamada")

        assert user.can_edit("doc1") is True
        assert user.greet() == "hello Taro Yamada"
        assert user.is_guest is False

    def test_is_immutable(self) -> None:
        user = AuthenticatedUser(id="123", name="Taro")

        with pytest.raises(ValidationError):
            user.name = "Jiro"  # type: ignore[misc]


class TestGuestUser:
    def test_null_user_is_a_guest(self) -> None:
        assert isinstance(NULL_USER, GuestUser)
        assert NULL_USER.id == GUEST_ID
        assert NULL_USER.name == "Guest"
        assert NULL_USER.is_guest is True

    def test_never_edits(self) -> None:
        assert NULL_USER.can_edit("doc1") is False
        assert NULL_USER.can_edit("") is False

    def test_greeting(self) -> None:
        assert NULL_USER.greet() == "not logged in"

    def test_guests_compare_equal(self) -> None:
        assert GuestUser() == NULL_USER


@pytest.mark.parametrize("user", [NULL_USER, AuthenticatedUser(id="1", name="A")])
def test_both_satisfy_user_protocol(user: IUser) -> None:
    assert isinstance(user, IUser)
    # Call sites use either kind the same way.
    assert isinstance(user.greet(), str)
    assert isinstance(user.can_edit("doc1"), bool)
