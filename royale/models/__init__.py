"""Response models for RoyaleAPI endpoints."""

from royale.models.base import RoyaleModel
from royale.models.battle import Battle, BattleMode, TeamClan, TeamMember
from royale.models.clan import (
    Clan,
    ClanChest,
    ClanHistoryEntry,
    ClanHistoryMember,
    ClanMember,
    ClanSearchResult,
    ClanTracking,
    ClanWar,
    ClanWarClan,
    ClanWarLogClan,
    ClanWarLogEntry,
    ClanWarParticipant,
    Tracking,
)
from royale.models.common import MAXED, Achievement, Arena, Badge, Card, Location, Popularity
from royale.models.constants import Constants
from royale.models.leaderboard import TopClan, TopPlayer
from royale.models.player import (
    BestSeason,
    CurrentSeason,
    FavoriteCard,
    LeagueStatistics,
    Player,
    PlayerChests,
    PlayerClan,
    PlayerGames,
    PlayerStats,
    PreviousSeason,
)
from royale.models.popular import (
    APIKeyStats,
    PopularClan,
    PopularDeck,
    PopularDeckCard,
    PopularPlayer,
    PopularTournament,
)
from royale.models.tournament import (
    OpenTournament,
    Tournament,
    TournamentMember,
    TournamentSearchEntry,
)

__all__ = [
    "RoyaleModel",
    # Common
    "MAXED",
    "Achievement",
    "Arena",
    "Badge",
    "Card",
    "Location",
    "Popularity",
    # Players
    "BestSeason",
    "CurrentSeason",
    "FavoriteCard",
    "LeagueStatistics",
    "Player",
    "PlayerChests",
    "PlayerClan",
    "PlayerGames",
    "PlayerStats",
    "PreviousSeason",
    # Battles
    "Battle",
    "BattleMode",
    "TeamClan",
    "TeamMember",
    # Clans
    "Clan",
    "ClanChest",
    "ClanHistoryEntry",
    "ClanHistoryMember",
    "ClanMember",
    "ClanSearchResult",
    "ClanTracking",
    "ClanWar",
    "ClanWarClan",
    "ClanWarLogClan",
    "ClanWarLogEntry",
    "ClanWarParticipant",
    "Tracking",
    # Tournaments
    "OpenTournament",
    "Tournament",
    "TournamentMember",
    "TournamentSearchEntry",
    # Leaderboards
    "TopClan",
    "TopPlayer",
    # Popularity
    "APIKeyStats",
    "PopularClan",
    "PopularDeck",
    "PopularDeckCard",
    "PopularPlayer",
    "PopularTournament",
    # Constants
    "Constants",
]
