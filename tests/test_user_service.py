"""Identity: registration, login, session pointer, profile updates."""

import pytest

from marketplace.domain.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotAuthenticatedError,
)
from marketplace.domain.schemas import ProfileUpdate
from marketplace.repos.user_repo import UserRepo


def test_register_creates_user_and_session(users, clock):
    user = users.register("a@example.com", "secret", "alice")

    assert user.email == "a@example.com"
    assert user.username == "alice"
    assert user.created_at == clock()
    assert users.get_current_user() == user


def test_register_duplicate_email_fails_and_leaves_collection(users, ctx):
    users.register("a@example.com", "secret", "alice")

    with pytest.raises(DuplicateEmailError):
        users.register("a@example.com", "other", "alice2")

    assert len(UserRepo(ctx).load_all()) == 1


def test_email_match_is_case_sensitive(users):
    users.register("a@example.com", "pw", "alice")
    other = users.register("A@example.com", "pw", "big-alice")
    assert other.email == "A@example.com"


def test_ids_are_unique(users):
    ids = {users.register(f"u{n}@example.com", "pw", f"u{n}").id for n in range(20)}
    assert len(ids) == 20


def test_login_sets_session(users, seller):
    assert users.get_current_user() is None

    user = users.login("seller@example.com", "anything")

    assert user.id == seller.id
    assert users.get_current_user().id == seller.id


def test_login_unknown_email(users):
    with pytest.raises(InvalidCredentialsError):
        users.login("ghost@example.com", "pw")


def test_logout_is_idempotent(users):
    users.register("a@example.com", "pw", "alice")

    assert users.logout() is True
    assert users.logout() is False
    assert users.get_current_user() is None


def test_update_profile_requires_session(users):
    with pytest.raises(NotAuthenticatedError):
        users.update_profile(ProfileUpdate(username="nobody"))


def test_update_profile_updates_session_and_collection(users, ctx):
    user = users.register("a@example.com", "pw", "alice")

    updated = users.update_profile(ProfileUpdate(username="alicia", avatar_url="http://img/a.png"))

    assert updated.id == user.id
    assert updated.created_at == user.created_at
    assert users.get_current_user().username == "alicia"
    stored = UserRepo(ctx).get_user(user.id)
    assert stored.username == "alicia"
    assert stored.avatar_url == "http://img/a.png"


def test_update_profile_ignores_null_username(users):
    users.register("a@example.com", "pw", "alice")
    updated = users.update_profile(ProfileUpdate(username=None, avatar_url="x"))
    assert updated.username == "alice"


def test_update_profile_rejects_taken_email(users, seller):
    users.register("a@example.com", "pw", "alice")

    with pytest.raises(DuplicateEmailError):
        users.update_profile(ProfileUpdate(email=seller.email))

    assert users.get_current_user().email == "a@example.com"


def test_update_profile_restores_user_missing_from_corrupt_collection(users, ctx, store):
    user = users.register("a@example.com", "pw", "alice")
    store.write(ctx.key("users"), "{corrupt")

    users.update_profile(ProfileUpdate(username="alicia"))

    assert users.get_current_user().username == "alicia"
    assert UserRepo(ctx).get_user(user.id).username == "alicia"


def test_register_writes_users_and_session_in_one_batch(ctx, users, monkeypatch):
    calls = []
    original = ctx.store.write_many
    monkeypatch.setattr(ctx.store, "write_many", lambda items: (calls.append(set(items)), original(items)))

    users.register("a@example.com", "pw", "alice")

    assert calls == [{"test:users", "test:session"}]


def test_context_close_clears_session(ctx, users):
    users.register("a@example.com", "pw", "alice")

    ctx.close()

    assert users.get_current_user() is None
