"""Popularity models: how often items have been requested from the API."""

from typing import Dict, List

from pydantic import Field

from royale.models.base import RoyaleModel
from royale.models.clan import ClanChest, ClanMember, Tracking
from royale.models.common import Achievement, Arena, Badge, Card, Location, Popularity
from royale.models.player import PlayerClan, PlayerGames, PlayerStats
from royale.models.tournament import TournamentMember


class PopularClan(RoyaleModel):
    popularity: Popularity = Field(default_factory=Popularity)
    tag: str = ""
    name: str = ""
    description: str = ""
    type: str = ""
    score: int = 0
    member_count: int = 0
    required_score: int = 0
    donations: int = 0
    clan_chest: ClanChest = Field(default_factory=ClanChest)
    badge: Badge = Field(default_factory=Badge)
    location: Location = Field(default_factory=Location)
    members: List[ClanMember] = Field(default_factory=list)
    tracking: Tracking = Field(default_factory=Tracking)


class PopularPlayer(RoyaleModel):
    popularity: Popularity = Field(default_factory=Popularity)
    tag: str = ""
    name: str = ""
    trophies: int = 0
    rank: int = 0
    arena: Arena = Field(default_factory=Arena)
    clan: PlayerClan = Field(default_factory=PlayerClan)
    stats: PlayerStats = Field(default_factory=PlayerStats)
    games: PlayerGames = Field(default_factory=PlayerGames)
    deck_link: str = ""
    current_deck: List[Card] = Field(default_factory=list)
    cards: List[Card] = Field(default_factory=list)
    achievements: List[Achievement] = Field(default_factory=list)


class PopularTournament(RoyaleModel):
    popularity: Popularity = Field(default_factory=Popularity)
    tag: str = ""
    type: str = ""
    status: str = ""
    name: str = ""
    description: str = ""
    max_capacity: int = 0
    preparation_duration: int = 0
    duration: int = 0
    create_time: int = 0
    start_time: int = 0
    end_time: int = 0
    player_count: int = 0
    creator: TournamentMember = Field(default_factory=TournamentMember)
    members: List[TournamentMember] = Field(default_factory=list)


class PopularDeckCard(RoyaleModel):
    arena: int = 0
    description: str = ""
    elixir: int = 0
    icon: str = ""
    id: int = 0
    key: str = ""
    max_level: int = 0
    name: str = ""
    rarity: str = ""
    type: str = ""


class PopularDeck(RoyaleModel):
    """A deck and how many times it was requested."""

    popularity: int = 0
    cards: List[PopularDeckCard] = Field(default_factory=list)
    deck_link: str = ""


class APIKeyStats(RoyaleModel):
    """Usage information on the authenticated developer key.

    https://docs.royaleapi.com/#/endpoints/auth_stats
    """

    id: str = ""
    last_request: int = 0
    request_count: Dict[str, int] = Field(default_factory=dict)
