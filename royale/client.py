"""High level RoyaleAPI client.

Each method builds a path, calls the gateway and decodes the body into a
response model. Every method takes optional ``QueryParams`` for field
filtering and pagination.
https://docs.royaleapi.com/#/endpoints
"""

from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from royale.exceptions import DecodeError
from royale.gateway import Gateway, QueryParams
from royale.models import (
    APIKeyStats,
    Battle,
    Clan,
    ClanHistoryEntry,
    ClanSearchResult,
    ClanTracking,
    ClanWar,
    ClanWarLogEntry,
    Constants,
    OpenTournament,
    Player,
    PlayerChests,
    PopularClan,
    PopularDeck,
    PopularPlayer,
    PopularTournament,
    TopClan,
    TopPlayer,
    Tournament,
    TournamentSearchEntry,
)


T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def decode(tp: Type[T], body: bytes) -> T:
    """Decode a JSON body into ``tp``.

    Raises:
        DecodeError: If the body is not valid JSON or does not match ``tp``
    """
    try:
        return _adapter(tp).validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Could not decode response as {tp}: {e}") from e


def normalize_tag(tag: str) -> str:
    """Upper-case a player/clan/tournament tag and drop a leading '#'."""
    return tag.strip().lstrip("#").upper()


def _join_tags(tags: Sequence[str]) -> str:
    return ",".join(normalize_tag(tag) for tag in tags)


class RoyaleClient:
    """Typed access to every RoyaleAPI endpoint.

    Example:
        >>> async with RoyaleClient(token) as client:
        ...     player = await client.player("#2PP")
        ...     print(player.name, player.trophies)
    """

    def __init__(
        self,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        *,
        gateway: Optional[Gateway] = None,
    ):
        """Initialize the client.

        Args:
            token: Developer key; defaults to ``ROYALE_API_TOKEN``
            timeout: Request timeout in seconds (defaults to settings)
            gateway: Use this gateway instead of building one

        Raises:
            ConfigurationError: If no token is available
        """
        self.gateway = gateway or Gateway.from_settings(token=token, timeout=timeout)

    async def aclose(self) -> None:
        await self.gateway.aclose()

    async def __aenter__(self) -> "RoyaleClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _get(self, tp: Type[T], path: str, params: Optional[QueryParams]) -> T:
        query = params.to_query() if params else None
        body = await self.gateway.fetch(path, query)
        return decode(tp, body)

    async def version(self) -> str:
        """Current version of the API."""
        body = await self.gateway.fetch("/version")
        try:
            return body.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            raise DecodeError(f"Version response is not UTF-8 text: {e}") from e

    async def constants(self, params: Optional[QueryParams] = None) -> Constants:
        return await self._get(Constants, "/constants", params)

    async def endpoints(self, params: Optional[QueryParams] = None) -> List[str]:
        """All endpoints the API offers."""
        return await self._get(List[str], "/endpoints", params)

    async def api_key_stats(self, params: Optional[QueryParams] = None) -> APIKeyStats:
        """Information about the authenticated developer key."""
        return await self._get(APIKeyStats, "/auth/stats", params)

    # Players

    async def player(self, tag: str, params: Optional[QueryParams] = None) -> Player:
        return await self._get(Player, f"/player/{normalize_tag(tag)}", params)

    async def players(
        self, tags: Sequence[str], params: Optional[QueryParams] = None
    ) -> List[Player]:
        """Like ``player`` for several tags. The API asks for at most 7 per call."""
        return await self._get(List[Player], f"/player/{_join_tags(tags)}", params)

    async def player_battles(
        self, tag: str, params: Optional[QueryParams] = None
    ) -> List[Battle]:
        return await self._get(
            List[Battle], f"/player/{normalize_tag(tag)}/battles", params
        )

    async def players_battles(
        self, tags: Sequence[str], params: Optional[QueryParams] = None
    ) -> List[List[Battle]]:
        return await self._get(
            List[List[Battle]], f"/player/{_join_tags(tags)}/battles", params
        )

    async def player_chests(
        self, tag: str, params: Optional[QueryParams] = None
    ) -> PlayerChests:
        return await self._get(
            PlayerChests, f"/player/{normalize_tag(tag)}/chests", params
        )

    async def players_chests(
        self, tags: Sequence[str], params: Optional[QueryParams] = None
    ) -> List[PlayerChests]:
        return await self._get(
            List[PlayerChests], f"/player/{_join_tags(tags)}/chests", params
        )

    # Clans

    async def clan_search(
        self, params: Optional[QueryParams] = None
    ) -> List[ClanSearchResult]:
        """Search clans by name, score, member count or location."""
        return await self._get(List[ClanSearchResult], "/clan/search", params)

    async def clan(self, tag: str, params: Optional[QueryParams] = None) -> Clan:
        return await self._get(Clan, f"/clan/{normalize_tag(tag)}", params)

    async def clans(
        self, tags: Sequence[str], params: Optional[QueryParams] = None
    ) -> List[Clan]:
        return await self._get(List[Clan], f"/clan/{_join_tags(tags)}", params)

    async def clan_battles(
        self, tag: str, params: Optional[QueryParams] = None
    ) -> List[Battle]:
        """Battles played by members of a clan."""
        return await self._get(
            List[Battle], f"/clan/{normalize_tag(tag)}/battles", params
        )

    async def clan_war(self, tag: str, params: Optional[QueryParams] = None) -> ClanWar:
        return await self._get(ClanWar, f"/clan/{normalize_tag(tag)}/war", params)

    async def clan_war_log(
        self, tag: str, params: Optional[QueryParams] = None
    ) -> List[ClanWarLogEntry]:
        return await self._get(
            List[ClanWarLogEntry], f"/clan/{normalize_tag(tag)}/warlog", params
        )

    async def clan_history(
        self, tag: str, params: Optional[QueryParams] = None
    ) -> Dict[str, ClanHistoryEntry]:
        """Daily member stats keyed by date. Only for tracked clans."""
        return await self._get(
            Dict[str, ClanHistoryEntry], f"/clan/{normalize_tag(tag)}/history", params
        )

    async def clan_weekly_history(
        self, tag: str, params: Optional[QueryParams] = None
    ) -> Dict[str, ClanHistoryEntry]:
        return await self._get(
            Dict[str, ClanHistoryEntry],
            f"/clan/{normalize_tag(tag)}/history/weekly",
            params,
        )

    async def clan_tracking(
        self, tag: str, params: Optional[QueryParams] = None
    ) -> ClanTracking:
        return await self._get(
            ClanTracking, f"/clan/{normalize_tag(tag)}/tracking", params
        )

    # Tournaments

    async def open_tournaments(
        self, params: Optional[QueryParams] = None
    ) -> List[OpenTournament]:
        return await self._get(List[OpenTournament], "/tournaments/open", params)

    async def known_tournaments(
        self, params: Optional[QueryParams] = None
    ) -> List[OpenTournament]:
        """Tournaments someone has already looked up."""
        return await self._get(List[OpenTournament], "/tournaments/known", params)

    async def tournaments_1k(
        self, params: Optional[QueryParams] = None
    ) -> List[OpenTournament]:
        """Open tournaments with a capacity of 1000 players."""
        return await self._get(List[OpenTournament], "/tournaments/1k", params)

    async def prep_tournaments(
        self, params: Optional[QueryParams] = None
    ) -> List[OpenTournament]:
        """Tournaments still in preparation."""
        return await self._get(List[OpenTournament], "/tournaments/prep", params)

    async def tournament_search(
        self, params: Optional[QueryParams] = None
    ) -> List[TournamentSearchEntry]:
        return await self._get(
            List[TournamentSearchEntry], "/tournaments/search", params
        )

    async def tournament(
        self, tag: str, params: Optional[QueryParams] = None
    ) -> Tournament:
        return await self._get(Tournament, f"/tournaments/{normalize_tag(tag)}", params)

    async def tournaments(
        self, tags: Sequence[str], params: Optional[QueryParams] = None
    ) -> List[Tournament]:
        return await self._get(
            List[Tournament], f"/tournaments/{_join_tags(tags)}", params
        )

    # Leaderboards

    async def top_clans(
        self, location: str = "", params: Optional[QueryParams] = None
    ) -> List[TopClan]:
        """Top 200 clans, globally or for a location key such as "US"."""
        path = f"/top/clans/{location}" if location else "/top/clans"
        return await self._get(List[TopClan], path, params)

    async def top_players(
        self, location: str = "", params: Optional[QueryParams] = None
    ) -> List[TopPlayer]:
        """Top 200 players, globally or for a location key such as "US"."""
        path = f"/top/players/{location}" if location else "/top/players"
        return await self._get(List[TopPlayer], path, params)

    # Popularity

    async def popular_clans(
        self, params: Optional[QueryParams] = None
    ) -> List[PopularClan]:
        return await self._get(List[PopularClan], "/popular/clans", params)

    async def popular_players(
        self, params: Optional[QueryParams] = None
    ) -> List[PopularPlayer]:
        return await self._get(List[PopularPlayer], "/popular/players", params)

    async def popular_tournaments(
        self, params: Optional[QueryParams] = None
    ) -> List[PopularTournament]:
        return await self._get(List[PopularTournament], "/popular/tournaments", params)

    async def popular_decks(
        self, params: Optional[QueryParams] = None
    ) -> List[PopularDeck]:
        return await self._get(List[PopularDeck], "/popular/decks", params)
