"""
Interest lookup API endpoints.
"""

from fastapi import APIRouter, Depends

from devgraph.api.dependencies import get_community
from devgraph.api.models.interest import InterestCount, InterestList, InterestUsersResponse
from devgraph.api.models.user import UserResponse
from devgraph.core.community import CommunityGraph
from devgraph.core.interest_index import normalize_interest

router = APIRouter(prefix="/api/interests", tags=["interests"])


@router.get("", response_model=InterestList)
def list_interests(community: CommunityGraph = Depends(get_community)):
    """Every declared interest with the number of users declaring it."""
    interests = [InterestCount(interest=t, users=n) for t, n in community.interests()]
    return InterestList(interests=interests, total=len(interests))


@router.get("/{interest}/users", response_model=InterestUsersResponse)
def find_users_by_interest(interest: str, community: CommunityGraph = Depends(get_community)):
    """Users declaring an interest. Unknown interests return an empty list."""
    users = community.find_users_by_interest(interest)
    return InterestUsersResponse(
        interest=normalize_interest(interest),
        usernames=[u.username for u in users],
        users=[UserResponse.from_user(u) for u in users],
        total=len(users),
    )
