"""
HTTP API for the community graph.
"""
