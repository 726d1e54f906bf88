"""
Pydantic schemas for Interest API.
"""

from pydantic import BaseModel

from devgraph.api.models.user import UserResponse


class InterestUsersResponse(BaseModel):
    """Users declaring one interest, alphabetical."""

    interest: str
    usernames: list[str]
    users: list[UserResponse]
    total: int


class InterestCount(BaseModel):
    interest: str
    users: int


class InterestList(BaseModel):
    """Every known interest with its user count."""

    interests: list[InterestCount]
    total: int
