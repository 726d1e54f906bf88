"""
FastAPI dependency injection for the shared community graph.
"""

from fastapi import Request

from devgraph.core.community import CommunityGraph


def get_community(request: Request) -> CommunityGraph:
    """Return the CommunityGraph built for this application at start-up."""
    return request.app.state.community
