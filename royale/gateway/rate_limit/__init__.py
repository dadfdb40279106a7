"""Rate-limit tracking for the gateway.

Re-exports the tracker and its data models.
"""

from royale.gateway.rate_limit.models import (
    RateLimitDecision,
    RateLimitHeaders,
    RateLimitState,
)
from royale.gateway.rate_limit.tracker import RateLimitTracker

__all__ = [
    # Models
    "RateLimitDecision",
    "RateLimitHeaders",
    "RateLimitState",
    # Tracker
    "RateLimitTracker",
]
