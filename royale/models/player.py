"""Player profile models.

https://docs.royaleapi.com/#/endpoints/player
"""

from typing import List

from pydantic import Field

from royale.models.base import RoyaleModel
from royale.models.common import Achievement, Arena, Badge, Card


class PlayerClan(RoyaleModel):
    """A player's standing within their clan."""

    tag: str = ""
    name: str = ""
    role: str = ""
    donations: int = 0
    donations_received: int = 0
    donations_delta: int = 0
    badge: Badge = Field(default_factory=Badge)


class FavoriteCard(RoyaleModel):
    name: str = ""
    id: int = 0
    max_level: int = 0
    icon: str = ""
    key: str = ""
    elixir: int = 0
    type: str = ""
    rarity: str = ""
    arena: int = 0
    description: str = ""


class PlayerStats(RoyaleModel):
    tournament_cards_won: int = 0
    max_trophies: int = 0
    three_crown_wins: int = 0
    cards_found: int = 0
    favorite_card: FavoriteCard = Field(default_factory=FavoriteCard)
    total_donations: int = 0
    challenge_max_wins: int = 0
    challenge_cards_won: int = 0
    level: int = 0


class PlayerGames(RoyaleModel):
    total: int = 0
    tournament_games: int = 0
    wins: int = 0
    wins_percent: float = 0.0
    losses: int = 0
    losses_percent: float = 0.0
    draws: int = 0
    draws_percent: float = 0.0


class CurrentSeason(RoyaleModel):
    rank: int = 0
    trophies: int = 0
    best_trophies: int = 0


class PreviousSeason(RoyaleModel):
    id: str = ""
    trophies: int = 0
    best_trophies: int = 0


class BestSeason(RoyaleModel):
    id: str = ""
    rank: int = 0
    trophies: int = 0


class LeagueStatistics(RoyaleModel):
    """A player's season results."""

    current_season: CurrentSeason = Field(default_factory=CurrentSeason)
    previous_season: PreviousSeason = Field(default_factory=PreviousSeason)
    best_season: BestSeason = Field(default_factory=BestSeason)


class Player(RoyaleModel):
    """A player's profile with basic stats and card collection."""

    tag: str = ""
    name: str = ""
    trophies: int = 0
    rank: int = 0  # Global ranking
    arena: Arena = Field(default_factory=Arena)
    clan: PlayerClan = Field(default_factory=PlayerClan)
    stats: PlayerStats = Field(default_factory=PlayerStats)
    games: PlayerGames = Field(default_factory=PlayerGames)
    league_statistics: LeagueStatistics = Field(default_factory=LeagueStatistics)
    deck_link: str = ""  # Link to copy the player's deck
    current_deck: List[Card] = Field(default_factory=list)
    cards: List[Card] = Field(default_factory=list)
    achievements: List[Achievement] = Field(default_factory=list)


class PlayerChests(RoyaleModel):
    """Upcoming chests for a player.

    The named counts are how many chests remain until that chest type.
    https://docs.royaleapi.com/#/endpoints/player_chests
    """

    upcoming: List[str] = Field(default_factory=list)
    super_magical: int = 0
    magical: int = 0
    legendary: int = 0
    epic: int = 0
    giant: int = 0
