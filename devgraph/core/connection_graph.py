"""
Directed, typed connections between registered users.

Holds the authoritative edge map keyed by (from, to, kind) plus two derived
adjacency views (out-edges by source, in-edges by target) that are updated
together on every insertion. Connections are create-only.
Not thread-safe on its own; CommunityGraph serializes access.
"""

import logging
from collections import Counter
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from devgraph.core.errors import (
    DuplicateConnection,
    InvalidDate,
    SelfConnection,
    UnknownUser,
)
from devgraph.core.models import Connection, ConnectionKind
from devgraph.core.user_store import UserStore

logger = logging.getLogger(__name__)

EdgeKey = Tuple[str, str, ConnectionKind]


def parse_since(value: Union[str, date]) -> date:
    """
    Parse a connection start date.

    Accepts a date (datetimes are truncated) or an ISO 'YYYY-MM-DD' string.

    Raises:
        InvalidDate: for anything that is not a calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDate(value)
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise InvalidDate(value) from None


class ConnectionGraph:
    """Edge store with out/in adjacency for one- and two-hop traversal."""

    def __init__(self, users: UserStore):
        self.users = users
        self._edges: Dict[EdgeKey, Connection] = {}
        # username -> {neighbor: set of kinds}
        self._out: Dict[str, Dict[str, Set[ConnectionKind]]] = {}
        self._in: Dict[str, Dict[str, Set[ConnectionKind]]] = {}

    def add_connection(
        self,
        from_user: str,
        to_user: str,
        kind: ConnectionKind,
        tags: Iterable[str],
        since: Union[str, date],
    ) -> Connection:
        """
        Create a connection after validating it completely.

        Args:
            from_user: Source username
            to_user: Target username
            kind: ConnectionKind (or its wire string)
            tags: Free-form labels; a bare string is one tag
            since: Start date, a date or "YYYY-MM-DD"

        Returns:
            The stored Connection

        Raises:
            UnknownUser: if either endpoint is not registered
            SelfConnection: if from_user == to_user
            DuplicateConnection: if (from_user, to_user, kind) exists
            InvalidDate: if since is not a calendar date
            ValueError: if kind is not a ConnectionKind value; callers
                validate kinds at their boundary before reaching the graph
        """
        for username in (from_user, to_user):
            if username not in self.users:
                raise UnknownUser(username)
        if from_user == to_user:
            raise SelfConnection(from_user)
        kind = ConnectionKind(kind)
        if (from_user, to_user, kind) in self._edges:
            raise DuplicateConnection(from_user, to_user, kind)
        since_date = parse_since(since)

        connection = Connection(
            from_user=from_user,
            to_user=to_user,
            kind=kind,
            since=since_date,
            tags=frozenset([tags] if isinstance(tags, str) else tags),
        )
        self._edges[connection.key] = connection
        self._out.setdefault(from_user, {}).setdefault(to_user, set()).add(kind)
        self._in.setdefault(to_user, {}).setdefault(from_user, set()).add(kind)

        logger.info(f"Connected {from_user} -> {to_user} ({kind.value})")
        return connection

    def direct_neighbors(self, username: str) -> Set[str]:
        """Users linked to username by any connection, in either direction."""
        return set(self._out.get(username, ())) | set(self._in.get(username, ()))

    def mutual_connection_count(self, a: str, b: str) -> int:
        """Number of distinct users that are direct neighbors of both a and b."""
        return len(self.direct_neighbors(a) & self.direct_neighbors(b))

    def two_hop_counts(
        self, username: str, neighbors: Optional[Set[str]] = None
    ) -> Counter:
        """
        Mutual-connection count for every user two hops from username.

        One pass over the neighbors of username's neighbors, so the cost is
        bounded by the number of connections. Pass neighbors when the
        caller already holds direct_neighbors(username).
        """
        if neighbors is None:
            neighbors = self.direct_neighbors(username)
        counts: Counter = Counter()
        for neighbor in neighbors:
            for other in self.direct_neighbors(neighbor):
                if other != username:
                    counts[other] += 1
        return counts

    def connections_from(self, username: str) -> List[Connection]:
        """Outgoing connections, ordered by target then kind."""
        return sorted(
            (
                self._edges[(username, target, kind)]
                for target, kinds in self._out.get(username, {}).items()
                for kind in kinds
            ),
            key=lambda c: (c.to_user, c.kind.value),
        )

    def connections_to(self, username: str) -> List[Connection]:
        """Incoming connections, ordered by source then kind."""
        return sorted(
            (
                self._edges[(source, username, kind)]
                for source, kinds in self._in.get(username, {}).items()
                for kind in kinds
            ),
            key=lambda c: (c.from_user, c.kind.value),
        )

    def out_degree(self, username: str) -> int:
        """Number of outgoing connections, counting each kind separately."""
        return sum(len(kinds) for kinds in self._out.get(username, {}).values())

    def connection_count(self) -> int:
        return len(self._edges)
