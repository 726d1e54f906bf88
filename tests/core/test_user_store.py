"""
Unit tests for UserStore and its interest index maintenance.
"""

import pytest

from devgraph.core.errors import DuplicateUser, InvalidInterest, UnknownUser
from devgraph.core.interest_index import InterestIndex
from devgraph.core.user_store import UserStore


@pytest.fixture
def index():
    return InterestIndex()


@pytest.fixture
def store(index):
    return UserStore(index)


class TestCreateUser:
    """Tests for registration."""

    def test_create_user(self, store):
        """Stored user keeps username and bio."""
        user = store.create_user("ferris", "Friendly crab", ["async", "wasm"])

        assert user.username == "ferris"
        assert user.bio == "Friendly crab"
        assert user.interests == frozenset({"async", "wasm"})
        assert store.get_user("ferris") is user

    def test_interests_normalized(self, store):
        """Interests are trimmed, lower-cased, deduped, and blanks dropped."""
        user = store.create_user("ferris", "", ["  Async ", "ASYNC", "", "   ", "Wasm"])

        assert user.interests == frozenset({"async", "wasm"})

    def test_bio_optional(self, store):
        """A missing bio is stored as an empty string."""
        user = store.create_user("ferris", None, ["async"])
        assert user.bio == ""

    def test_bare_string_interest(self, store):
        """A single string is one interest, not a set of characters."""
        user = store.create_user("ferris", "", " Rust ")
        assert user.interests == frozenset({"rust"})

    def test_no_interests_allowed(self, store):
        """An empty interest list is a valid profile."""
        user = store.create_user("ferris", "", [])
        assert user.interests == frozenset()

    def test_only_blank_interests_rejected(self, store, index):
        """Interests that all normalize away raise InvalidInterest and store nothing."""
        with pytest.raises(InvalidInterest):
            store.create_user("ferris", "", ["  ", ""])

        assert "ferris" not in store
        assert len(index) == 0

    def test_duplicate_username(self, store, index):
        """Second registration fails and leaves the first record unchanged."""
        first = store.create_user("ferris", "original", ["async"])

        with pytest.raises(DuplicateUser) as exc_info:
            store.create_user("ferris", "impostor", ["cli"])

        assert exc_info.value.username == "ferris"
        assert store.get_user("ferris") is first
        assert index.users_with_interest("async") == ["ferris"]
        assert index.users_with_interest("cli") == []

    def test_username_case_sensitive(self, store):
        """Usernames differing only by case are distinct users."""
        store.create_user("Ferris", "", ["async"])
        store.create_user("ferris", "", ["async"])

        assert store.user_count() == 2

    def test_registration_indexes_interests(self, store, index):
        """A new user appears in the index under every interest."""
        store.create_user("ferris", "", ["async", "wasm"])

        assert index.users_with_interest("async") == ["ferris"]
        assert index.users_with_interest("wasm") == ["ferris"]


class TestGetUser:
    """Tests for lookups."""

    def test_get_unknown_user(self, store):
        with pytest.raises(UnknownUser) as exc_info:
            store.get_user("nobody")
        assert "nobody" in str(exc_info.value)

    def test_list_users_alphabetical(self, store):
        for name in ["zed", "alice", "mike"]:
            store.create_user(name, "", ["rust"])

        assert [u.username for u in store.list_users()] == ["alice", "mike", "zed"]


class TestUpdateUser:
    """Tests for wholesale profile updates."""

    def test_replace_interests(self, store, index):
        """Old interests leave the index and new ones join it."""
        store.create_user("ferris", "crab", ["async", "wasm"])

        user = store.update_user("ferris", interests=["wasm", "CLI"])

        assert user.interests == frozenset({"wasm", "cli"})
        assert user.bio == "crab"
        assert index.users_with_interest("async") == []
        assert "async" not in index
        assert index.users_with_interest("wasm") == ["ferris"]
        assert index.users_with_interest("cli") == ["ferris"]

    def test_update_bio_keeps_interests(self, store, index):
        store.create_user("ferris", "crab", ["async"])

        user = store.update_user("ferris", bio="bigger crab")

        assert user.bio == "bigger crab"
        assert user.interests == frozenset({"async"})
        assert index.users_with_interest("async") == ["ferris"]

    def test_update_keeps_other_users_in_bucket(self, store, index):
        store.create_user("ferris", "", ["async"])
        store.create_user("rustacean", "", ["async"])

        store.update_user("ferris", interests=["cli"])

        assert index.users_with_interest("async") == ["rustacean"]

    def test_update_unknown_user(self, store):
        with pytest.raises(UnknownUser):
            store.update_user("nobody", bio="hi")

    def test_update_blank_interests_rejected(self, store, index):
        """A failed update leaves the record and index as they were."""
        store.create_user("ferris", "", ["async"])

        with pytest.raises(InvalidInterest):
            store.update_user("ferris", interests=["   "])

        assert store.get_user("ferris").interests == frozenset({"async"})
        assert index.users_with_interest("async") == ["ferris"]
