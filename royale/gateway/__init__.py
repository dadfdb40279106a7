"""Request gateway package for the RoyaleAPI client.

This package provides:
- The gateway all requests go through (Gateway)
- Rate-limit tracking (RateLimitTracker and its models)
- Query parameter encoding (QueryParams, encode_query)
- Opt-in caller-side retries (RetryPolicy, with_retry)
"""

from royale.gateway.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Gateway
from royale.gateway.params import QueryParams, encode_query
from royale.gateway.rate_limit import (
    RateLimitDecision,
    RateLimitHeaders,
    RateLimitState,
    RateLimitTracker,
)
from royale.gateway.retry import RetryPolicy, with_retry

__all__ = [
    # Gateway
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "Gateway",
    # Params
    "QueryParams",
    "encode_query",
    # Rate limit
    "RateLimitDecision",
    "RateLimitHeaders",
    "RateLimitState",
    "RateLimitTracker",
    # Retry
    "RetryPolicy",
    "with_retry",
]
