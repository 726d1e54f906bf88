"""
Connection API endpoints.
"""

from fastapi import APIRouter, Depends

from devgraph.api.dependencies import get_community
from devgraph.api.models.connection import ConnectionCreate, ConnectionResponse
from devgraph.core.community import CommunityGraph

router = APIRouter(prefix="/api/connections", tags=["connections"])


@router.post("", response_model=ConnectionResponse, status_code=201)
def create_connection(
    connection_in: ConnectionCreate,
    community: CommunityGraph = Depends(get_community),
):
    """Create a directed, typed connection between two registered users."""
    connection = community.add_connection(
        connection_in.from_user,
        connection_in.to,
        connection_in.kind,
        connection_in.tags,
        connection_in.since,
    )
    return ConnectionResponse.from_connection(connection)
