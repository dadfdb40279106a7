"""The request gateway every RoyaleAPI call goes through.

The gateway injects the ``auth`` header, encodes query parameters, sends the
request, classifies the response and keeps the rate-limit tracker current.
"""

import json
import time
from typing import Optional

import httpx

from royale.core.config import Settings, settings
from royale.core.logging import get_log_context, get_logger
from royale.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    RateLimitError,
    TransportError,
)
from royale.gateway.params import Query, encode_query
from royale.gateway.rate_limit import RateLimitHeaders, RateLimitState, RateLimitTracker

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.royaleapi.com"
DEFAULT_TIMEOUT = 10.0


class Gateway:
    """Authenticated, rate-limit aware access to the RoyaleAPI.

    The gateway can accept an external httpx.AsyncClient for connection
    pooling, or create and own one. An owned client is closed by ``aclose()``
    or when leaving ``async with``.

    Example:
        >>> async with Gateway(token) as gateway:
        ...     body = await gateway.fetch("/player/2PP", {"keys": ["name"]})
    """

    def __init__(
        self,
        token: str,
        timeout: Optional[float] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
        tracker: Optional[RateLimitTracker] = None,
    ):
        """Initialize the gateway.

        Args:
            token: RoyaleAPI developer key sent in the ``auth`` header
            timeout: Request timeout in seconds; None or 0 selects 10 seconds
            base_url: The API base URL
            http_client: Optional shared HTTP client
            tracker: Rate-limit tracker; a fresh one is created if omitted

        Raises:
            ConfigurationError: If token is empty
        """
        if not token:
            raise ConfigurationError("client requires token for authorization with the API")
        self._token = token
        self.timeout = timeout or DEFAULT_TIMEOUT
        self.base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._owns_client = http_client is None
        self._rate_limit = tracker or RateLimitTracker()
        self.headers = self._build_headers()

    @classmethod
    def from_settings(
        cls,
        config: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        *,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "Gateway":
        """Create a gateway from ``ROYALE_*`` settings.

        Args:
            config: Settings to use (defaults to the global settings)
            http_client: Optional shared HTTP client
            token: Overrides ``config.api_token``
            timeout: Overrides ``config.timeout``
        """
        config = config or settings
        headers = RateLimitHeaders(
            remaining=config.ratelimit_remaining_header,
            retry_after=config.ratelimit_retry_after_header,
            reset=config.ratelimit_reset_header,
        )
        return cls(
            token or config.api_token,
            timeout or config.timeout,
            base_url=config.base_url,
            http_client=http_client,
            tracker=RateLimitTracker(headers=headers),
        )

    @property
    def token(self) -> str:
        return self._token

    @property
    def rate_limit_state(self) -> RateLimitState:
        """Snapshot of the last server-reported rate-limit state."""
        return self._rate_limit.state

    def _build_headers(self) -> dict[str, str]:
        return {"auth": self._token}

    def _get_client(self) -> httpx.AsyncClient:
        """Get the HTTP client, creating the owned one on first use."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._http_client

    def _get_endpoint_url(self, path: str, query: Optional[Query] = None) -> str:
        """Build the full URL for a service-relative path.

        Args:
            path: API path (e.g., "/player/2PP")
            query: Optional query mapping

        Returns:
            Full URL, without a "?" when the query is empty
        """
        if not path.startswith("/"):
            path = "/" + path
        url = f"{self.base_url}{path}"
        query_string = encode_query(query)
        if query_string:
            url = f"{url}?{query_string}"
        return url

    async def fetch(self, path: str, query: Optional[Query] = None) -> bytes:
        """Send an authenticated GET request and return the raw body.

        Args:
            path: Service-relative path (e.g., "/clan/2CCCP")
            query: Optional filter/pagination parameters

        Returns:
            The response body of a 200 response

        Raises:
            RateLimitError: The window is known to be exhausted; nothing was sent
            TransportError: No response was received
            DecodeError: A rate-limit header could not be parsed
            APIError: The service answered with a non-200 status
        """
        decision = self._rate_limit.check()
        if not decision.allowed:
            logger.warning(
                f"Rate limit exhausted, refusing GET {path} for {decision.retry_after:.1f}s",
                extra=get_log_context(method="GET", path=path, remaining=0,
                                      retry_after=decision.retry_after),
            )
            raise RateLimitError(decision.retry_after)

        url = self._get_endpoint_url(path, query)
        client = self._get_client()
        started = time.perf_counter()
        try:
            resp = await client.get(url, headers=self.headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.debug(f"GET {path} failed: {type(e).__name__}: {e}")
            raise TransportError(f"GET {path} failed: {e}") from e

        body = resp.content
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        api_error = None
        if resp.status_code != 200:
            api_error = _decode_api_error(resp.status_code, body)

        try:
            self._rate_limit.update(resp.headers)
        except DecodeError as e:
            if api_error is None:
                raise
            # Keep the service's status and message reachable
            raise e from api_error

        logger.debug(
            f"GET {path} -> {resp.status_code}",
            extra=get_log_context(
                method="GET",
                path=path,
                status_code=resp.status_code,
                duration_ms=duration_ms,
                remaining=self._rate_limit.state.remaining,
            ),
        )

        if api_error is not None:
            raise api_error
        return body

    async def aclose(self) -> None:
        """Close the HTTP client if the gateway created it."""
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "Gateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _decode_api_error(status_code: int, body: bytes) -> APIError:
    """Build an APIError from a ``{"status": ..., "message": ...}`` body.

    Bodies that are not such an object keep the HTTP status and use the raw
    text as the message.
    """
    try:
        payload = json.loads(body)
    except ValueError:
        payload = None

    if not isinstance(payload, dict):
        return APIError(status_code, body.decode("utf-8", errors="replace").strip())

    status = payload.get("status")
    if not isinstance(status, int) or isinstance(status, bool):
        status = status_code
    message = payload.get("message")
    if not isinstance(message, str):
        message = ""
    return APIError(status, message)
