"""
Pydantic schemas for API request/response validation.
"""

from devgraph.api.models.user import UserCreate, UserUpdate, UserResponse, UserList
from devgraph.api.models.connection import (
    ConnectionCreate,
    ConnectionResponse,
    UserConnectionsResponse,
)
from devgraph.api.models.recommendation import RecommendationResponse, RecommendationItem
from devgraph.api.models.interest import InterestCount, InterestList, InterestUsersResponse

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserList",
    "ConnectionCreate",
    "ConnectionResponse",
    "UserConnectionsResponse",
    "RecommendationResponse",
    "RecommendationItem",
    "InterestCount",
    "InterestList",
    "InterestUsersResponse",
]
