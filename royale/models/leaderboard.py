"""Leaderboard models for the top clans and top players endpoints."""

from pydantic import Field

from royale.models.base import RoyaleModel
from royale.models.battle import TeamClan
from royale.models.common import Arena, Badge, Location


class TopClan(RoyaleModel):
    tag: str = ""
    name: str = ""
    score: int = 0
    member_count: int = 0
    rank: int = 0
    previous_rank: int = 0
    badge: Badge = Field(default_factory=Badge)
    location: Location = Field(default_factory=Location)


class TopPlayer(RoyaleModel):
    name: str = ""
    tag: str = ""
    rank: int = 0
    previous_rank: int = 0
    exp_level: int = 0
    trophies: int = 0
    donations_delta: int = 0
    clan: TeamClan = Field(default_factory=TeamClan)
    arena: Arena = Field(default_factory=Arena)
