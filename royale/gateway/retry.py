"""Opt-in retry helper for code calling the RoyaleAPI client.

The gateway never retries on its own. Callers that want retries wrap their
coroutines with ``with_retry``: transport failures and 5xx API errors back off
exponentially, and local rate-limit refusals wait out the indicated window.
"""

import asyncio
import functools
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Type, TypeVar

from royale.core.logging import get_logger
from royale.exceptions import APIError, RateLimitError, TransportError

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class RetryPolicy:
    """Configuration for retry behavior with exponential backoff.

    Attributes:
        max_retries: Maximum number of retry attempts (default: 3)
        base_delay: Initial delay between retries in seconds (default: 0.5)
        max_delay: Maximum backoff delay in seconds (default: 10.0)
        exponential_base: Base for exponential calculation (default: 2.0)
        respect_rate_limit: Wait out RateLimitError.retry_after and retry
        max_rate_limit_wait: Longest rate-limit wait accepted, in seconds
        retryable_exceptions: Tuple of exception types that trigger a backoff retry

    Example:
        >>> policy = RetryPolicy(max_retries=5, base_delay=1.0)
        >>> delay = policy.calculate_delay(attempt=2)  # Returns 4.0
    """

    max_retries: int = 3
    base_delay: float = 0.5
    max_delay: float = 10.0
    exponential_base: float = 2.0
    respect_rate_limit: bool = True
    max_rate_limit_wait: float = 60.0
    retryable_exceptions: Tuple[Type[Exception], ...] = (
        TransportError,
        APIError,
    )

    def calculate_delay(self, attempt: int) -> float:
        """Calculate the backoff delay for a given retry attempt.

        Uses exponential backoff: delay = min(base_delay * (exponential_base ^ attempt), max_delay)

        Args:
            attempt: The current retry attempt number (0-indexed)

        Returns:
            Delay in seconds
        """
        delay = self.base_delay * (self.exponential_base**attempt)
        return min(delay, self.max_delay)

    def is_retryable(self, exception: Exception) -> bool:
        """Check if an exception should trigger a retry.

        For APIError, only 5xx status codes are considered retryable.
        RateLimitError is retryable when its wait fits ``max_rate_limit_wait``.
        """
        if isinstance(exception, RateLimitError):
            return self.respect_rate_limit and exception.retry_after <= self.max_rate_limit_wait

        if isinstance(exception, APIError):
            return exception.status_code >= 500

        return isinstance(exception, self.retryable_exceptions)

    def delay_for(self, exception: Exception, attempt: int) -> float:
        """Seconds to wait before retrying after ``exception``."""
        if isinstance(exception, RateLimitError):
            return max(exception.retry_after, 0.0)
        return self.calculate_delay(attempt)


def with_retry(policy: Optional[RetryPolicy] = None) -> Callable[[F], F]:
    """Decorator that adds retry logic to a coroutine function.

    Args:
        policy: RetryPolicy configuration. Uses defaults if not provided.

    Returns:
        Decorated function with retry logic

    Example:
        >>> @with_retry(RetryPolicy(max_retries=2))
        ... async def load_player(client, tag):
        ...     return await client.player(tag)
    """
    retry_policy = policy or RetryPolicy()

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt in range(retry_policy.max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    if not retry_policy.is_retryable(e):
                        logger.debug(
                            f"Non-retryable exception in {func.__name__}: {type(e).__name__}: {e}"
                        )
                        raise

                    if attempt >= retry_policy.max_retries:
                        logger.warning(
                            f"Max retries ({retry_policy.max_retries}) exceeded for {func.__name__}: "
                            f"{type(e).__name__}: {e}"
                        )
                        raise

                    delay = retry_policy.delay_for(e, attempt)
                    logger.warning(
                        f"Retry {attempt + 1}/{retry_policy.max_retries} for {func.__name__} "
                        f"after {type(e).__name__}: {e}. Waiting {delay:.2f}s..."
                    )
                    await asyncio.sleep(delay)

        return wrapper  # type: ignore

    return decorator
