"""Tournament models.

https://docs.royaleapi.com/#/endpoints/tournaments
"""

from typing import List

from pydantic import Field

from royale.models.base import RoyaleModel


class TournamentMember(RoyaleModel):
    tag: str = ""
    name: str = ""
    score: int = 0


class OpenTournament(RoyaleModel):
    """A tournament as listed by the open, known, 1k and prep endpoints.

    Times are epoch seconds; durations are seconds.
    """

    tag: str = ""
    type: str = ""
    status: str = ""
    name: str = ""
    capacity: int = 0
    player_count: int = 0
    max_capacity: int = 0
    preparation_duration: int = 0
    duration: int = 0
    create_time: int = 0
    start_time: int = 0
    end_time: int = 0


class Tournament(OpenTournament):
    """A single tournament with its creator and members."""

    description: str = ""
    creator: TournamentMember = Field(default_factory=TournamentMember)
    members: List[TournamentMember] = Field(default_factory=list)


class TournamentSearchEntry(RoyaleModel):
    """A tournament returned by the tournament search endpoint.

    https://docs.royaleapi.com/#/endpoints/tournaments_search
    """

    tag: str = ""
    type: str = ""
    status: str = ""
    creator_tag: str = ""
    name: str = ""
    max_capacity: int = 0
    preparation_duration: int = 0
    duration: int = 0
    create_time: int = 0
    start_time: int = 0
    end_time: int = 0
    player_count: int = 0
    members: List[TournamentMember] = Field(default_factory=list)
