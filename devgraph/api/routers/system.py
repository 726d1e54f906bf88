"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from devgraph import __version__
from devgraph.api.dependencies import get_community
from devgraph.core.community import CommunityGraph

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(community: CommunityGraph = Depends(get_community)):
    """Health check with graph size."""
    return {"status": "healthy", "version": __version__, **community.stats()}
