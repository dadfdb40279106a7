"""Exceptions raised by the RoyaleAPI client."""


class RoyaleError(Exception):
    """Base class for every error the client raises.

    Callers that only care whether a call failed can catch this; the
    subclasses below form the complete set of failure kinds.
    """

    def __init__(self, message: str = "RoyaleAPI client error"):
        self.message = message
        super().__init__(message)


class ConfigurationError(RoyaleError):
    """Raised when the client is constructed with invalid input."""

    def __init__(self, message: str = "Invalid client configuration"):
        super().__init__(message)


class RateLimitError(RoyaleError):
    """Raised before a request when the rate-limit window is known to be exhausted.

    No request is sent. ``retry_after`` is the number of seconds until the
    server said the window resets.
    """

    def __init__(self, retry_after: float, detail: str | None = None):
        self.retry_after = retry_after
        message = detail or f"Rate limit exhausted. Retry in {retry_after:.1f}s."
        super().__init__(message)


class TransportError(RoyaleError):
    """Raised when no response was received (timeout, DNS, refused connection).

    The underlying ``httpx`` exception is available as ``__cause__``.
    """

    def __init__(self, message: str = "Request to RoyaleAPI failed"):
        super().__init__(message)


class APIError(RoyaleError):
    """Raised when the service answers with a non-success status.

    See https://docs.royaleapi.com/#/errors
    """

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(message or f"RoyaleAPI returned HTTP {status_code}")

    def __str__(self) -> str:
        return self.message


class DecodeError(RoyaleError):
    """Raised when a response body or rate-limit header cannot be decoded."""

    def __init__(self, message: str = "Could not decode RoyaleAPI response"):
        super().__init__(message)
