"""
Community graph core.

This package contains:
- User and connection records
- The user store and its interest index
- The typed connection graph
- Recommendation scoring
- The thread-safe CommunityGraph aggregate
"""

from devgraph.core.community import CommunityGraph
from devgraph.core.connection_graph import ConnectionGraph
from devgraph.core.errors import (
    CommunityError,
    DuplicateConnection,
    DuplicateUser,
    InvalidDate,
    InvalidInterest,
    SelfConnection,
    UnknownUser,
)
from devgraph.core.interest_index import InterestIndex
from devgraph.core.models import Connection, ConnectionKind, Recommendation, User
from devgraph.core.recommender import Recommender
from devgraph.core.user_store import UserStore

__all__ = [
    'CommunityGraph',
    'ConnectionGraph',
    'InterestIndex',
    'Recommender',
    'UserStore',
    # Records
    'User',
    'Connection',
    'ConnectionKind',
    'Recommendation',
    # Errors
    'CommunityError',
    'UnknownUser',
    'DuplicateUser',
    'SelfConnection',
    'DuplicateConnection',
    'InvalidDate',
    'InvalidInterest',
]
