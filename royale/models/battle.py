"""Battle models.

https://docs.royaleapi.com/#/endpoints/player_battles
"""

from typing import List

from pydantic import Field

from royale.models.base import RoyaleModel
from royale.models.common import Arena, Badge, Card


class BattleMode(RoyaleModel):
    name: str = ""
    deck: str = ""
    card_levels: str = ""
    overtime_seconds: int = 0
    players: str = ""
    same_deck: bool = False


class TeamClan(RoyaleModel):
    """Basic info on a clan."""

    tag: str = ""
    name: str = ""
    badge: Badge = Field(default_factory=Badge)


class TeamMember(RoyaleModel):
    """One player on a side of a battle."""

    tag: str = ""
    name: str = ""
    crowns_earned: int = 0
    trophy_change: int = 0
    start_trophies: int = 0
    clan: TeamClan = Field(default_factory=TeamClan)
    deck_link: str = ""
    deck: List[Card] = Field(default_factory=list)


class Battle(RoyaleModel):
    """A match played.

    ``winner`` is team crowns minus opponent crowns: 0 is a tie, positive
    means the queried side won.
    """

    type: str = ""
    challenge_type: str = ""
    mode: BattleMode = Field(default_factory=BattleMode)
    win_count_before: int = 0
    utc_time: int = 0
    deck_type: str = ""
    team_size: int = 0
    winner: int = 0
    team_crowns: int = 0
    opponent_crowns: int = 0
    team: List[TeamMember] = Field(default_factory=list)
    opponent: List[TeamMember] = Field(default_factory=list)
    arena: Arena = Field(default_factory=Arena)
