"""
Tests for the in-memory user store.
"""

import asyncio

import pytest

from core.errors import BadRequestError, EmptyPasswordError, UsernameTakenError
from core.storage import UserStore


@pytest.fixture
def user_store():
    return UserStore()


@pytest.mark.asyncio
async def test_validate_credentials(user_store):
    assert await user_store.validate_credentials("user1", "pass1")
    assert not await user_store.validate_credentials("user2", "pass1")
    assert not await user_store.validate_credentials("user1", "")
    assert not await user_store.validate_credentials("", "pass1")
    assert not await user_store.validate_credentials("", "")


@pytest.mark.asyncio
async def test_validate_credentials_is_case_sensitive(user_store):
    assert await user_store.validate_credentials("user1", "pass1")
    assert not await user_store.validate_credentials("User1", "pass1")
    assert not await user_store.validate_credentials("user1", "PASS1")


@pytest.mark.asyncio
async def test_register_valid_user(user_store):
    user = await user_store.register_user("newuser", "newpass")

    assert user.username == "newuser"
    assert await user_store.validate_credentials("newuser", "newpass")


@pytest.mark.asyncio
async def test_register_taken_username(user_store):
    with pytest.raises(UsernameTakenError):
        await user_store.register_user("user1", "pass1")

    assert len(await user_store.list_users()) == 3


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["", " ", "\t\n "])
async def test_register_blank_password(user_store, password):
    with pytest.raises(EmptyPasswordError):
        await user_store.register_user("newuser", password)

    assert await user_store.is_username_available("newuser")


@pytest.mark.asyncio
async def test_empty_password_is_checked_before_availability(user_store):
    """A taken username with an empty password reports the password."""
    with pytest.raises(EmptyPasswordError):
        await user_store.register_user("user1", "")


@pytest.mark.asyncio
async def test_registration_errors_are_bad_requests(user_store):
    with pytest.raises(BadRequestError) as exc_info:
        await user_store.register_user("user2", "x")

    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_password_with_surrounding_spaces_is_kept_verbatim(user_store):
    await user_store.register_user("spacey", " secret ")

    assert await user_store.validate_credentials("spacey", " secret ")
    assert not await user_store.validate_credentials("spacey", "secret")


@pytest.mark.asyncio
async def test_username_availability(user_store):
    assert await user_store.is_username_available("newuser")
    assert not await user_store.is_username_available("user1")
    assert await user_store.is_username_available("USER1")

    await user_store.register_user("newuser", "newpass")

    assert not await user_store.is_username_available("newuser")


@pytest.mark.asyncio
async def test_concurrent_registration_of_one_name(user_store):
    """Only one of many simultaneous registrations of a name succeeds."""
    results = await asyncio.gather(
        *(user_store.register_user("racer", f"pw{i}") for i in range(20)),
        return_exceptions=True,
    )

    successes = [r for r in results if not isinstance(r, Exception)]
    failures = [r for r in results if isinstance(r, UsernameTakenError)]

    assert len(successes) == 1
    assert len(failures) == 19
    usernames = [u.username for u in await user_store.list_users()]
    assert usernames.count("racer") == 1


def test_user_serialization_omits_password():
    from core.storage import User

    assert User(username="a", password="b").to_dict() == {"username": "a"}
