"""
Thread-safe aggregate over the community graph stores.

Combines UserStore, InterestIndex, ConnectionGraph and Recommender behind a
single lock into the high-level interface used by the API.
"""

import logging
import threading
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple, Union

from devgraph.core.connection_graph import ConnectionGraph
from devgraph.core.errors import InvalidInterest
from devgraph.core.interest_index import InterestIndex, normalize_interest
from devgraph.core.models import Connection, ConnectionKind, Recommendation, User
from devgraph.core.recommender import DEFAULT_LIMIT, Recommender
from devgraph.core.user_store import UserStore

logger = logging.getLogger(__name__)


class CommunityGraph:
    """
    Shared in-memory community state.

    One coarse lock guards all three stores, so a reader never observes a
    user whose interests are not yet indexed, and a failed write leaves
    nothing behind. Build one instance at start-up and share it.

    Usage:
        community = CommunityGraph()
        community.create_user("ferris", "crab", ["async", "wasm"])
        community.create_user("rustacean", "", ["async", "cli"])
        community.recommend("ferris")
    """

    def __init__(self):
        self._lock = threading.RLock()
        self.index = InterestIndex()
        self.users = UserStore(self.index)
        self.graph = ConnectionGraph(self.users)
        self.recommender = Recommender(self.users, self.graph)
        logger.info("CommunityGraph initialized")

    # Users

    def create_user(
        self,
        username: str,
        bio: Optional[str] = None,
        interests: Iterable[str] = (),
    ) -> User:
        with self._lock:
            return self.users.create_user(username, bio, interests)

    def update_user(
        self,
        username: str,
        bio: Optional[str] = None,
        interests: Optional[Iterable[str]] = None,
    ) -> User:
        with self._lock:
            return self.users.update_user(username, bio, interests)

    def get_user(self, username: str) -> User:
        with self._lock:
            return self.users.get_user(username)

    def list_users(self) -> List[User]:
        with self._lock:
            return self.users.list_users()

    # Interests

    def users_with_interest(self, interest: str) -> List[str]:
        """
        Usernames declaring an interest, alphabetical.

        Raises:
            InvalidInterest: if the interest is blank after normalization
        """
        if not normalize_interest(interest):
            raise InvalidInterest(interest)
        with self._lock:
            return self.index.users_with_interest(interest)

    def find_users_by_interest(self, interest: str) -> List[User]:
        """Full profiles of the users declaring an interest, alphabetical."""
        if not normalize_interest(interest):
            raise InvalidInterest(interest)
        with self._lock:
            return [
                self.users.get_user(name)
                for name in self.index.users_with_interest(interest)
            ]

    def interests(self) -> List[Tuple[str, int]]:
        with self._lock:
            return self.index.interests()

    # Connections

    def add_connection(
        self,
        from_user: str,
        to_user: str,
        kind: ConnectionKind,
        tags: Iterable[str],
        since: Union[str, date],
    ) -> Connection:
        with self._lock:
            return self.graph.add_connection(from_user, to_user, kind, tags, since)

    def connections_of(self, username: str) -> Tuple[List[Connection], List[Connection]]:
        """Outgoing and incoming connections of a registered user."""
        with self._lock:
            self.users.get_user(username)
            return self.graph.connections_from(username), self.graph.connections_to(username)

    def direct_neighbors(self, username: str) -> List[str]:
        with self._lock:
            self.users.get_user(username)
            return sorted(self.graph.direct_neighbors(username))

    def mutual_connection_count(self, a: str, b: str) -> int:
        with self._lock:
            self.users.get_user(a)
            self.users.get_user(b)
            return self.graph.mutual_connection_count(a, b)

    # Recommendations

    def recommend(self, username: str, limit: int = DEFAULT_LIMIT) -> List[Recommendation]:
        with self._lock:
            return self.recommender.recommend(username, limit)

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {
                "users": self.users.user_count(),
                "connections": self.graph.connection_count(),
                "interests": len(self.index),
            }
