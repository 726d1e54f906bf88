"""
Canonical store of user profiles.

UserStore is the only write path for users, and it updates the
InterestIndex in the same call so the two never disagree.
Not thread-safe on its own; CommunityGraph serializes access.
"""

import logging
from typing import Dict, Iterable, List, Optional

from devgraph.core.errors import DuplicateUser, InvalidInterest, UnknownUser
from devgraph.core.interest_index import InterestIndex, normalize_interests
from devgraph.core.models import User

logger = logging.getLogger(__name__)


def _clean_interests(raw: Iterable[str]):
    """
    Normalize interests for storage. A bare string is one interest.

    Raises:
        InvalidInterest: if entries were supplied but none survive normalization
    """
    raw = [raw] if isinstance(raw, str) else list(raw)
    interests = normalize_interests(raw)
    if raw and not interests:
        raise InvalidInterest(raw)
    return interests


class UserStore:
    """Users keyed by case-sensitive username."""

    def __init__(self, index: InterestIndex):
        self.index = index
        self._users: Dict[str, User] = {}

    def create_user(
        self,
        username: str,
        bio: Optional[str] = None,
        interests: Iterable[str] = (),
    ) -> User:
        """
        Register a new user and index their interests.

        Args:
            username: Unique, case-sensitive identity key
            bio: Free text (optional)
            interests: Raw interest strings; trimmed, lower-cased and deduped

        Returns:
            The stored User

        Raises:
            DuplicateUser: if the username is taken (existing record untouched)
            InvalidInterest: if interests were given but all are blank
        """
        if username in self._users:
            raise DuplicateUser(username)
        user = User(username=username, bio=bio or "", interests=_clean_interests(interests))

        self._users[username] = user
        self.index._register(username, user.interests)
        logger.info(f"Registered user {username} with {len(user.interests)} interests")
        return user

    def update_user(
        self,
        username: str,
        bio: Optional[str] = None,
        interests: Optional[Iterable[str]] = None,
    ) -> User:
        """
        Replace a user's bio and/or interest set wholesale.

        Fields left as None keep their current value. The interest index is
        re-derived for this user in the same step.
        """
        current = self.get_user(username)
        new_interests = current.interests if interests is None else _clean_interests(interests)
        user = User(
            username=username,
            bio=current.bio if bio is None else bio,
            interests=new_interests,
        )

        self._users[username] = user
        self.index._replace(username, current.interests, user.interests)
        logger.info(f"Updated user {username}")
        return user

    def get_user(self, username: str) -> User:
        """Return the user or raise UnknownUser."""
        user = self._users.get(username)
        if user is None:
            raise UnknownUser(username)
        return user

    def list_users(self) -> List[User]:
        """All users, alphabetical by username."""
        return [self._users[name] for name in sorted(self._users)]

    def user_count(self) -> int:
        return len(self._users)

    def __contains__(self, username: str) -> bool:
        return username in self._users
