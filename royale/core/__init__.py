"""Core utilities for the RoyaleAPI client."""

from royale.core.config import Settings, settings
from royale.core.logging import get_log_context, get_logger, setup_logging

__all__ = [
    "Settings",
    "settings",
    "get_logger",
    "get_log_context",
    "setup_logging",
]
