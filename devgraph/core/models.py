"""
Domain records for the community graph.

User and Connection are immutable snapshots; stores replace them rather
than mutate them, so a record handed to a caller never changes underneath it.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import FrozenSet, List, Tuple


class ConnectionKind(str, Enum):
    """Closed set of relationship types between two developers."""

    MENTOR = "Mentor"
    COLLABORATOR = "Collaborator"
    FOLLOWER = "Follower"
    PROJECT_BUDDY = "ProjectBuddy"


@dataclass(frozen=True)
class User:
    """A registered developer profile."""

    username: str
    bio: str = ""
    interests: FrozenSet[str] = field(default_factory=frozenset)

    def sorted_interests(self) -> List[str]:
        return sorted(self.interests)

    def shared_interests(self, other: "User") -> List[str]:
        """Interests declared by both users, alphabetical."""
        return sorted(self.interests & other.interests)


@dataclass(frozen=True)
class Connection:
    """A directed, typed edge between two users."""

    from_user: str
    to_user: str
    kind: ConnectionKind
    since: date
    tags: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def key(self) -> Tuple[str, str, ConnectionKind]:
        return (self.from_user, self.to_user, self.kind)

    def sorted_tags(self) -> List[str]:
        return sorted(self.tags)


@dataclass(frozen=True)
class Recommendation:
    """A ranked candidate connection for a subject user."""

    username: str
    shared_interest_count: int
    mutual_connection_count: int
    shared_interests: Tuple[str, ...] = ()
    suggested_kind: ConnectionKind = ConnectionKind.COLLABORATOR

    def as_tuple(self) -> Tuple[str, int, int]:
        return (self.username, self.shared_interest_count, self.mutual_connection_count)
