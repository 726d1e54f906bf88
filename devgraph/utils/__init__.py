"""
Shared utilities package.
"""

from devgraph.utils.logging_config import configure_api_logging, setup_logging

__all__ = ['setup_logging', 'configure_api_logging']
