"""Async client for the RoyaleAPI (https://royaleapi.com).

Example:
    >>> from royale import RoyaleClient
    >>> async with RoyaleClient("my-token") as client:
    ...     clan = await client.clan("2CCCP")
"""

from royale.client import RoyaleClient, normalize_tag
from royale.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    RateLimitError,
    RoyaleError,
    TransportError,
)
from royale.gateway import Gateway, QueryParams, RetryPolicy, with_retry

__version__ = "0.1.0"

__all__ = [
    "RoyaleClient",
    "normalize_tag",
    "Gateway",
    "QueryParams",
    "RetryPolicy",
    "with_retry",
    # Errors
    "RoyaleError",
    "ConfigurationError",
    "RateLimitError",
    "TransportError",
    "APIError",
    "DecodeError",
]
