"""
Interest-based connection recommendations.

Ranks every user the subject is not yet linked to by shared interests,
then by two-hop affinity (mutual connections), then by username.
"""

import logging
from typing import List

from devgraph.core.connection_graph import ConnectionGraph
from devgraph.core.models import ConnectionKind, Recommendation, User
from devgraph.core.user_store import UserStore

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


def suggest_kind(
    shared_interest_count: int,
    subject_degree: int,
    candidate_degree: int,
) -> ConnectionKind:
    """
    Pick a relationship type for a recommendation.

    Many shared interests suggest working together on a project; a large
    gap in outgoing connections suggests a mentor or follower relationship.
    """
    if shared_interest_count > 3:
        return ConnectionKind.PROJECT_BUDDY
    if candidate_degree > subject_degree * 2:
        return ConnectionKind.MENTOR
    if subject_degree > candidate_degree * 2:
        return ConnectionKind.FOLLOWER
    return ConnectionKind.COLLABORATOR


class Recommender:
    """
    Stateless scoring layer over UserStore and ConnectionGraph.

    This class handles:
    - Building the candidate set (everyone except the subject and its neighbors)
    - Scoring by shared interests and mutual connections
    - Dropping zero-affinity candidates
    - Deterministic ordering with a username tie-break
    """

    def __init__(self, users: UserStore, graph: ConnectionGraph):
        self.users = users
        self.graph = graph

    def recommend(self, username: str, limit: int = DEFAULT_LIMIT) -> List[Recommendation]:
        """
        Generate top-N connection recommendations for a user.

        Args:
            username: Subject user
            limit: Maximum number of results; 0 returns an empty list

        Returns:
            Recommendations sorted by (shared interests desc, mutual
            connections desc, username asc). May be shorter than limit since
            candidates with no shared interests and no mutual connections
            are never returned.

        Raises:
            UnknownUser: if the subject is not registered
            ValueError: if limit is negative
        """
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        subject = self.users.get_user(username)
        if limit == 0:
            return []

        neighbors = self.graph.direct_neighbors(username)
        mutual_counts = self.graph.two_hop_counts(username, neighbors)
        excluded = neighbors | {username}
        subject_degree = self.graph.out_degree(username)

        scored = []
        for candidate in self.users.list_users():
            if candidate.username in excluded:
                continue
            recommendation = self._score(
                subject, candidate, mutual_counts[candidate.username], subject_degree
            )
            if recommendation is not None:
                scored.append(recommendation)

        scored.sort(key=lambda r: (-r.shared_interest_count, -r.mutual_connection_count, r.username))
        logger.debug(
            f"Scored {len(scored)} candidates for {username} "
            f"({len(excluded) - 1} already connected)"
        )
        return scored[:limit]

    def _score(self, subject: User, candidate: User, mutual: int, subject_degree: int):
        shared = subject.shared_interests(candidate)
        if not shared and not mutual:
            return None
        return Recommendation(
            username=candidate.username,
            shared_interest_count=len(shared),
            mutual_connection_count=mutual,
            shared_interests=tuple(shared),
            suggested_kind=suggest_kind(
                len(shared), subject_degree, self.graph.out_degree(candidate.username)
            ),
        )
