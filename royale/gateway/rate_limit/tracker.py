"""Client-side tracking of the RoyaleAPI rate-limit window.

The server is authoritative for quota. The tracker only remembers what the
last response said so that a request known to be rejected is never sent.
"""

import re
import threading
import time
from typing import Callable, Mapping, Optional

from royale.exceptions import DecodeError
from royale.gateway.rate_limit.models import (
    RateLimitDecision,
    RateLimitHeaders,
    RateLimitState,
)


_INTEGER = re.compile(r"-?[0-9]+")


def _parse_int_header(name: str, value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise DecodeError(f"Invalid {name} header: {value!r}")
    return int(value)


class RateLimitTracker:
    """Admission control driven by the remaining and retry-after headers.

    States:
        - unknown: no response seen yet, requests pass
        - has quota: remaining > 0, requests pass
        - exhausted: remaining == 0 and the reset time is in the future,
          requests are refused with the wait until reset
        - expired: remaining == 0 but the reset time has passed or is
          unknown, requests pass and the next response corrects the state

    Check and update each hold the lock, but are not atomic with each other.
    """

    def __init__(
        self,
        headers: Optional[RateLimitHeaders] = None,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize the tracker.

        Args:
            headers: Response header names to read
            clock: Returns the current wall-clock time in epoch seconds
        """
        self.headers = headers or RateLimitHeaders()
        self._clock = clock
        self._lock = threading.Lock()
        self._remaining: Optional[int] = None
        self._reset_at: Optional[float] = None

    @property
    def state(self) -> RateLimitState:
        """Immutable snapshot of the current state."""
        with self._lock:
            return RateLimitState(remaining=self._remaining, reset_at=self._reset_at)

    def check(self) -> RateLimitDecision:
        """Decide whether a request may be sent now."""
        with self._lock:
            if self._remaining is None or self._remaining > 0:
                return RateLimitDecision(allowed=True, remaining=self._remaining)

            if self._reset_at is None:
                return RateLimitDecision(allowed=True, remaining=0)

            wait = self._reset_at - self._clock()
            if wait <= 0:
                return RateLimitDecision(allowed=True, remaining=0)
            return RateLimitDecision(allowed=False, remaining=0, retry_after=wait)

    def update(self, headers: Mapping[str, str]) -> None:
        """Record the rate-limit headers of a response.

        Absent headers leave the corresponding field unchanged.

        Raises:
            DecodeError: If a header is present but not an integer. Fields
                parsed before the failing header stay updated.
        """
        headers = {k.lower(): v for k, v in headers.items()}

        with self._lock:
            remaining = headers.get(self.headers.remaining.lower())
            if remaining is not None:
                self._remaining = _parse_int_header(self.headers.remaining, remaining)

            retry_after = headers.get(self.headers.retry_after.lower())
            if retry_after is not None:
                seconds = _parse_int_header(self.headers.retry_after, retry_after)
                self._reset_at = self._clock() + seconds

            if self.headers.reset:
                reset = headers.get(self.headers.reset.lower())
                if reset is not None:
                    self._reset_at = _parse_int_header(self.headers.reset, reset) / 1000.0
