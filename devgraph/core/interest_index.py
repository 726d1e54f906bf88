"""
Secondary index from interest token to the usernames that declare it.

The index is derived from UserStore and only mutated through UserStore's
write path; callers get read access via users_with_interest().
"""

import logging
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

logger = logging.getLogger(__name__)


def normalize_interest(raw: str) -> str:
    """Trim and lower-case a single interest. May return an empty string."""
    return raw.strip().lower()


def normalize_interests(raw: Iterable[str]) -> FrozenSet[str]:
    """Normalize, drop empties and dedupe a collection of interests."""
    tokens = (normalize_interest(item) for item in raw)
    return frozenset(token for token in tokens if token)


class InterestIndex:
    """
    Inverse mapping of interest token -> set of usernames.

    Invariant: for every stored user U and token t, U.username is in
    self._buckets[t] iff t is in U.interests. Buckets never sit empty.
    """

    def __init__(self):
        self._buckets: Dict[str, Set[str]] = {}

    def _register(self, username: str, interests: Iterable[str]) -> None:
        for token in interests:
            self._buckets.setdefault(token, set()).add(username)

    def _unregister(self, username: str, interests: Iterable[str]) -> None:
        for token in interests:
            bucket = self._buckets.get(token)
            if bucket is None:
                continue
            bucket.discard(username)
            if not bucket:
                del self._buckets[token]

    def _replace(self, username: str, old: FrozenSet[str], new: FrozenSet[str]) -> None:
        self._unregister(username, old - new)
        self._register(username, new - old)

    def users_with_interest(self, token: str) -> List[str]:
        """
        Usernames declaring the given interest, alphabetical.

        The token is normalized before lookup. Unknown interests yield an
        empty list rather than an error.
        """
        key = normalize_interest(token)
        names = sorted(self._buckets.get(key, ()))
        logger.debug(f"Interest '{key}' -> {len(names)} users")
        return names

    def interests(self) -> List[Tuple[str, int]]:
        """Every indexed token with its user count, alphabetical."""
        return [(token, len(self._buckets[token])) for token in sorted(self._buckets)]

    def __contains__(self, token: str) -> bool:
        return normalize_interest(token) in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)
