"""Clan models.

https://docs.royaleapi.com/#/endpoints/clan
"""

from typing import List

from pydantic import Field

from royale.models.base import RoyaleModel
from royale.models.common import Arena, Badge, Location


class ClanSearchResult(RoyaleModel):
    """A clan returned by the clan search endpoint."""

    tag: str = ""
    name: str = ""
    type: str = ""
    score: int = 0
    member_count: int = 0
    required_score: int = 0
    donations: int = 0
    badge: Badge = Field(default_factory=Badge)
    location: Location = Field(default_factory=Location)


class ClanChest(RoyaleModel):
    """Clan chest progress. No longer in the game but still reported."""

    status: str = ""
    crowns: int = 0
    level: int = 0
    max_level: int = 0


class ClanMember(RoyaleModel):
    name: str = ""
    tag: str = ""
    rank: int = 0  # Ranking within the clan
    previous_rank: int = 0
    role: str = ""
    exp_level: int = 0
    trophies: int = 0
    clan_chest_crowns: int = 0
    donations: int = 0
    donations_received: int = 0
    donations_delta: int = 0
    donations_percent: float = 0.0
    arena: Arena = Field(default_factory=Arena)


class Clan(RoyaleModel):
    """A clan as returned by the clan endpoint."""

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


class ClanWarClan(RoyaleModel):
    tag: str = ""
    name: str = ""
    participants: int = 0
    battles_played: int = 0
    wins: int = 0
    crowns: int = 0
    war_trophies: int = 0
    badge: Badge = Field(default_factory=Badge)


class ClanWarParticipant(RoyaleModel):
    tag: str = ""
    name: str = ""
    cards_earned: int = 0
    battles_played: int = 0
    wins: int = 0


class ClanWar(RoyaleModel):
    """The current war of a clan.

    https://docs.royaleapi.com/#/endpoints/clan_war
    """

    state: str = ""
    war_end_time: int = 0
    collection_end_time: int = 0
    clan: ClanWarClan = Field(default_factory=ClanWarClan)
    participants: List[ClanWarParticipant] = Field(default_factory=list)
    standings: List[ClanWarClan] = Field(default_factory=list)


class ClanWarLogClan(ClanWarClan):
    war_trophies_change: int = 0


class ClanWarLogEntry(RoyaleModel):
    """A finished clan war from the war log.

    https://docs.royaleapi.com/#/endpoints/clan_warlog
    """

    created_date: int = 0
    participants: List[ClanWarParticipant] = Field(default_factory=list)
    standings: List[ClanWarLogClan] = Field(default_factory=list)
    season_number: int = 0


class ClanHistoryMember(RoyaleModel):
    clan_rank: int = 0
    crowns: int = 0
    donations: int = 0
    name: str = ""
    tag: str = ""
    trophies: int = 0


class ClanHistoryEntry(RoyaleModel):
    """One snapshot of the clan history, keyed by date in the response.

    https://docs.royaleapi.com/#/endpoints/clan_history
    """

    donations: int = 0
    member_count: int = 0
    members: List[ClanHistoryMember] = Field(default_factory=list)


class Tracking(RoyaleModel):
    active: bool = False
    available: bool = False
    snapshot_count: int = 0


class ClanTracking(Tracking):
    """Whether a clan's history is tracked by the API.

    https://docs.royaleapi.com/#/endpoints/clan_tracking
    """

    tag: str = ""
