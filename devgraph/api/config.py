"""
API configuration loaded from environment or defaults.
"""

import os


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "127.0.0.1")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "3000"))


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name; unset means console only."""
    return os.getenv("LOG_FILE") or None


def get_log_dir() -> str:
    """Get directory for log files."""
    return os.getenv("LOG_DIR", "logs")


def get_default_recommendation_limit() -> int:
    """Get the number of recommendations returned when no limit is given."""
    return int(os.getenv("DEFAULT_RECOMMENDATION_LIMIT", "10"))
