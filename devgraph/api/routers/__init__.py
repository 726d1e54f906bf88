"""
API route handlers.
"""

from devgraph.api.routers import connections, interests, recommendations, system, users

__all__ = ["users", "connections", "recommendations", "interests", "system"]
