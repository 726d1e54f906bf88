"""
User management API endpoints.
"""

from fastapi import APIRouter, Depends

from devgraph.api.dependencies import get_community
from devgraph.api.models.connection import ConnectionResponse, UserConnectionsResponse
from devgraph.api.models.user import UserCreate, UserList, UserResponse, UserUpdate
from devgraph.core.community import CommunityGraph

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
def create_user(user_in: UserCreate, community: CommunityGraph = Depends(get_community)):
    """Register a new user; interests are normalized and indexed."""
    user = community.create_user(user_in.username, user_in.bio, user_in.interests)
    return UserResponse.from_user(user)


@router.get("", response_model=UserList)
def list_users(community: CommunityGraph = Depends(get_community)):
    """List every registered user, alphabetical."""
    users = [UserResponse.from_user(u) for u in community.list_users()]
    return UserList(users=users, total=len(users))


@router.get("/{username}", response_model=UserResponse)
def get_user(username: str, community: CommunityGraph = Depends(get_community)):
    """Get user profile by username."""
    return UserResponse.from_user(community.get_user(username))


@router.put("/{username}", response_model=UserResponse)
def update_user(
    username: str,
    user_in: UserUpdate,
    community: CommunityGraph = Depends(get_community),
):
    """Update bio and/or replace the interest set."""
    user = community.update_user(username, user_in.bio, user_in.interests)
    return UserResponse.from_user(user)


@router.get("/{username}/connections", response_model=UserConnectionsResponse)
def get_user_connections(username: str, community: CommunityGraph = Depends(get_community)):
    """Outgoing and incoming connections for a user."""
    outgoing, incoming = community.connections_of(username)
    return UserConnectionsResponse(
        username=username,
        outgoing=[ConnectionResponse.from_connection(c) for c in outgoing],
        incoming=[ConnectionResponse.from_connection(c) for c in incoming],
    )
