"""
Recommendation API endpoints.
"""

from fastapi import APIRouter, Depends, Query

from devgraph.api.config import get_default_recommendation_limit
from devgraph.api.dependencies import get_community
from devgraph.api.models.recommendation import RecommendationItem, RecommendationResponse
from devgraph.core.community import CommunityGraph

router = APIRouter(prefix="/api/users", tags=["recommendations"])


@router.get("/{username}/recommendations", response_model=RecommendationResponse)
def get_recommendations(
    username: str,
    limit: int | None = Query(None, ge=0, le=100),
    community: CommunityGraph = Depends(get_community),
):
    """Get connection recommendations ranked by shared interests, then mutual connections."""
    if limit is None:
        limit = get_default_recommendation_limit()
    recs = community.recommend(username, limit)
    items = [RecommendationItem.from_recommendation(r) for r in recs]
    return RecommendationResponse(username=username, recommendations=items, n=len(items))
