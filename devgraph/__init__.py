"""
Developer community graph service.

This package contains the in-memory community graph (users, interest index,
typed connections), the recommendation engine, and the HTTP API around them.
"""

__version__ = "1.0.0"
