"""
Pydantic schemas for User API.
"""

from pydantic import BaseModel, Field

from devgraph.core.models import User


class UserCreate(BaseModel):
    """Request body for registering a user."""

    username: str = Field(..., min_length=1, max_length=64)
    bio: str | None = Field(None, max_length=1000)
    interests: list[str] = Field(default_factory=list)


class UserUpdate(BaseModel):
    """Request body for updating a user. Interests are replaced, not merged."""

    bio: str | None = Field(None, max_length=1000)
    interests: list[str] | None = None


class UserResponse(BaseModel):
    """Response model for user."""

    username: str
    bio: str
    interests: list[str]

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(username=user.username, bio=user.bio, interests=user.sorted_interests())


class UserList(BaseModel):
    """Response model for list of users with total count."""

    users: list[UserResponse]
    total: int
