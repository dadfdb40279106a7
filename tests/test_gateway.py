"""Tests for the request gateway."""

import httpx
import pytest
import respx

from royale.core.config import Settings
from royale.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    RateLimitError,
    RoyaleError,
    TransportError,
)
from royale.gateway import Gateway, QueryParams, RateLimitState, RateLimitTracker

BASE_URL = "https://api.royaleapi.com"
API_HOST = "api.royaleapi.com"


@pytest.fixture
def tracker(clock):
    return RateLimitTracker(clock=clock)


@pytest.fixture
def gateway(token, tracker):
    return Gateway(token, tracker=tracker)


class TestConstruction:
    """Test gateway construction."""

    def test_empty_token_rejected(self):
        with pytest.raises(ConfigurationError, match="token"):
            Gateway("")

    def test_configuration_error_is_royale_error(self):
        with pytest.raises(RoyaleError):
            Gateway("")

    def test_default_timeout(self, token):
        assert Gateway(token).timeout == 10.0
        assert Gateway(token, 0).timeout == 10.0

    def test_custom_timeout(self, token):
        assert Gateway(token, 2.5).timeout == 2.5

    def test_auth_header(self, token):
        assert Gateway(token).headers == {"auth": token}

    def test_base_url_trailing_slash_removed(self, token):
        gateway = Gateway(token, base_url="https://example.test/")
        assert gateway.base_url == "https://example.test"

    def test_fresh_state_is_unknown(self, token):
        assert Gateway(token).rate_limit_state == RateLimitState()

    def test_from_settings(self):
        config = Settings(
            api_token="from-env",
            timeout=3.0,
            base_url="https://proxy.test",
            ratelimit_remaining_header="X-Left",
        )
        gateway = Gateway.from_settings(config)

        assert gateway.token == "from-env"
        assert gateway.timeout == 3.0
        assert gateway.base_url == "https://proxy.test"
        assert gateway._rate_limit.headers.remaining == "x-left"

    def test_from_settings_overrides(self):
        config = Settings(api_token="from-env")
        gateway = Gateway.from_settings(config, token="explicit", timeout=4.0)

        assert gateway.token == "explicit"
        assert gateway.timeout == 4.0

    def test_from_settings_without_token(self):
        with pytest.raises(ConfigurationError):
            Gateway.from_settings(Settings(api_token=""))


class TestFetch:
    """Test a single exchange through the gateway."""

    @pytest.mark.asyncio
    async def test_returns_body_and_sends_auth_header(self, gateway, token):
        with respx.mock:
            route = respx.get(host=API_HOST, path="/player/2PP").mock(
                return_value=httpx.Response(200, content=b'{"tag":"2PP"}')
            )

            body = await gateway.fetch("/player/2PP")

        assert body == b'{"tag":"2PP"}'
        assert route.call_count == 1
        assert route.calls.last.request.headers["auth"] == token
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_first_fetch_always_hits_network(self, gateway):
        with respx.mock:
            route = respx.get(host=API_HOST, path="/version").mock(
                return_value=httpx.Response(200, text="5.0.0")
            )

            await gateway.fetch("/version")

        assert route.called
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_empty_query_sends_no_query_string(self, gateway):
        with respx.mock:
            route = respx.get(host=API_HOST, path="/clan/2CCCP").mock(
                return_value=httpx.Response(200, json={})
            )

            await gateway.fetch("/clan/2CCCP", QueryParams().to_query())
            await gateway.fetch("/clan/2CCCP")

        first, second = route.calls
        assert str(first.request.url) == f"{BASE_URL}/clan/2CCCP"
        assert first.request.url == second.request.url
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_query_is_encoded(self, gateway):
        with respx.mock:
            route = respx.get(host=API_HOST, path="/player/2PP").mock(
                return_value=httpx.Response(200, json={})
            )

            await gateway.fetch("/player/2PP", QueryParams(exclude=["name"]).to_query())

        assert route.calls.last.request.url.query == b"exclude=name"
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_relative_path_without_slash(self, gateway):
        with respx.mock:
            route = respx.get(host=API_HOST, path="/clan/search").mock(
                return_value=httpx.Response(200, json=[])
            )

            await gateway.fetch("clan/search")

        assert route.called
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_uses_shared_client_and_leaves_it_open(self, token):
        client = httpx.AsyncClient()
        gateway = Gateway(token, http_client=client)

        with respx.mock:
            respx.get(host=API_HOST, path="/version").mock(
                return_value=httpx.Response(200, text="5.0.0")
            )
            await gateway.fetch("/version")

        await gateway.aclose()
        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_async_context_manager_closes_owned_client(self, token):
        with respx.mock:
            respx.get(host=API_HOST, path="/version").mock(
                return_value=httpx.Response(200, text="5.0.0")
            )
            async with Gateway(token) as gateway:
                await gateway.fetch("/version")
                client = gateway._http_client

        assert client.is_closed


class TestRateLimitAdmission:
    """Test that the gateway honors the server-reported window."""

    @pytest.mark.asyncio
    async def test_exhausted_window_blocks_without_request(self, gateway, tracker):
        tracker.update({"x-ratelimit-remaining": "0", "x-ratelimit-retry-after": "5"})

        with respx.mock(assert_all_called=False) as router:
            route = router.get(host=API_HOST, path="/player/2PP").mock(
                return_value=httpx.Response(200, json={})
            )

            with pytest.raises(RateLimitError) as exc_info:
                await gateway.fetch("/player/2PP")

        assert exc_info.value.retry_after == pytest.approx(5.0)
        assert not route.called

    @pytest.mark.asyncio
    async def test_expired_window_releases(self, gateway, tracker, clock):
        tracker.update({"x-ratelimit-remaining": "0", "x-ratelimit-retry-after": "5"})
        clock.advance(6)

        with respx.mock:
            route = respx.get(host=API_HOST, path="/player/2PP").mock(
                return_value=httpx.Response(200, json={})
            )

            await gateway.fetch("/player/2PP")

        assert route.called
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_response_headers_update_state(self, gateway, clock):
        with respx.mock:
            route = respx.get(host=API_HOST, path="/player/2PP").mock(
                return_value=httpx.Response(
                    200,
                    json={},
                    headers={"x-ratelimit-remaining": "0", "x-ratelimit-retry-after": "2"},
                )
            )

            await gateway.fetch("/player/2PP")
            with pytest.raises(RateLimitError):
                await gateway.fetch("/player/2PP")

        assert route.call_count == 1
        assert gateway.rate_limit_state == RateLimitState(remaining=0, reset_at=clock.now + 2)
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_error_responses_update_state(self, gateway):
        with respx.mock:
            respx.get(host=API_HOST, path="/player/BAD").mock(
                return_value=httpx.Response(
                    404,
                    json={"status": 404, "message": "Player not found"},
                    headers={"x-ratelimit-remaining": "3"},
                )
            )

            with pytest.raises(APIError):
                await gateway.fetch("/player/BAD")

        assert gateway.rate_limit_state.remaining == 3
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_malformed_header_raises_decode_error(self, gateway):
        with respx.mock:
            respx.get(host=API_HOST, path="/version").mock(
                return_value=httpx.Response(
                    200, text="5.0.0", headers={"x-ratelimit-remaining": "many"}
                )
            )

            with pytest.raises(DecodeError):
                await gateway.fetch("/version")

        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_malformed_header_on_error_response_keeps_api_error(self, gateway):
        with respx.mock:
            respx.get(host=API_HOST, path="/player/2PP").mock(
                return_value=httpx.Response(
                    503,
                    json={"status": 503, "message": "maintenance"},
                    headers={"x-ratelimit-remaining": "5_0"},
                )
            )

            with pytest.raises(DecodeError) as exc_info:
                await gateway.fetch("/player/2PP")

        cause = exc_info.value.__cause__
        assert isinstance(cause, APIError)
        assert cause.status_code == 503
        assert cause.message == "maintenance"
        await gateway.aclose()


class TestErrors:
    """Test error classification."""

    @pytest.mark.asyncio
    async def test_api_error_from_body(self, gateway):
        with respx.mock:
            respx.get(host=API_HOST, path="/player/2PP").mock(
                return_value=httpx.Response(429, json={"status": 429, "message": "slow down"})
            )

            with pytest.raises(APIError) as exc_info:
                await gateway.fetch("/player/2PP")

        assert exc_info.value.status_code == 429
        assert exc_info.value.message == "slow down"
        assert str(exc_info.value) == "slow down"
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_api_error_with_non_json_body(self, gateway):
        with respx.mock:
            respx.get(host=API_HOST, path="/player/2PP").mock(
                return_value=httpx.Response(502, text="Bad Gateway")
            )

            with pytest.raises(APIError) as exc_info:
                await gateway.fetch("/player/2PP")

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_api_error_without_message(self, gateway):
        with respx.mock:
            respx.get(host=API_HOST, path="/auth/stats").mock(
                return_value=httpx.Response(403, json={"status": 403})
            )

            with pytest.raises(APIError) as exc_info:
                await gateway.fetch("/auth/stats")

        assert exc_info.value.status_code == 403
        assert "403" in exc_info.value.message
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_transport_error_does_not_touch_state(self, gateway, tracker):
        tracker.update({"x-ratelimit-remaining": "9"})

        with respx.mock:
            respx.get(host=API_HOST, path="/player/2PP").mock(
                side_effect=httpx.ConnectError("connection refused")
            )

            with pytest.raises(TransportError) as exc_info:
                await gateway.fetch("/player/2PP")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert gateway.rate_limit_state.remaining == 9
        await gateway.aclose()

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self, gateway):
        with respx.mock:
            respx.get(host=API_HOST, path="/player/2PP").mock(
                side_effect=httpx.ReadTimeout("timed out")
            )

            with pytest.raises(TransportError):
                await gateway.fetch("/player/2PP")

        await gateway.aclose()
