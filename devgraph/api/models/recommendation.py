"""
Pydantic schemas for Recommendation API.
"""

from pydantic import BaseModel

from devgraph.core.models import ConnectionKind, Recommendation


class RecommendationItem(BaseModel):
    """Single recommended user with both ranking scores."""

    username: str
    shared_interest_count: int
    mutual_connection_count: int
    shared_interests: list[str]
    suggested_kind: ConnectionKind

    @classmethod
    def from_recommendation(cls, rec: Recommendation) -> "RecommendationItem":
        return cls(
            username=rec.username,
            shared_interest_count=rec.shared_interest_count,
            mutual_connection_count=rec.mutual_connection_count,
            shared_interests=list(rec.shared_interests),
            suggested_kind=rec.suggested_kind,
        )


class RecommendationResponse(BaseModel):
    """Response model for recommendations list."""

    username: str
    recommendations: list[RecommendationItem]
    n: int
