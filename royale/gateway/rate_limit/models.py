"""Rate limiting data models.

This module contains dataclasses for rate limit state and admission results.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RateLimitState:
    """Snapshot of what the server last said about the rate-limit window.

    ``remaining`` is None until a response carrying the remaining header has
    been seen; ``reset_at`` is an epoch timestamp in seconds.
    """
    remaining: Optional[int] = None
    reset_at: Optional[float] = None


@dataclass(frozen=True)
class RateLimitDecision:
    """Result of an admission check."""
    allowed: bool
    remaining: Optional[int] = None
    retry_after: Optional[float] = None


@dataclass(frozen=True)
class RateLimitHeaders:
    """Names of the response headers carrying the rate-limit contract."""
    remaining: str = "x-ratelimit-remaining"
    retry_after: str = "x-ratelimit-retry-after"
    # Absolute reset time in epoch milliseconds; ignored when empty
    reset: str = ""
