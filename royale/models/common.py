"""Shapes shared by several endpoints."""

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from royale.models.base import RoyaleModel

MAXED = -1


class Arena(RoyaleModel):
    """A trophy range."""

    name: str = ""
    arena: str = ""  # Level within a league, e.g. "League 3"
    arena_id: int = Field(0, validation_alias=AliasChoices("arenaID", "arenaId", "arena_id"))
    trophy_limit: int = 0  # Upper boundary of the arena's trophy range


class Badge(RoyaleModel):
    """A clan's badge."""

    name: str = ""
    category: str = ""
    id: int = 0
    image: str = ""


class Location(RoyaleModel):
    name: str = ""
    is_country: bool = False
    code: str = ""


class Popularity(RoyaleModel):
    """How often an item has been requested from the API."""

    hits: str = ""
    hits_per_day_avg: float = 0.0


class Card(RoyaleModel):
    """A card from the game.

    ``required_for_upgrade`` is MAXED (-1) when the card is at max level.
    """

    name: str = ""
    level: int = 0
    max_level: int = 0
    count: int = 0
    rarity: str = ""
    required_for_upgrade: int = 0
    icon: str = ""
    key: str = ""
    elixir: int = 0
    type: str = ""
    arena: int = 0
    description: str = ""
    id: int = 0

    @field_validator("required_for_upgrade", mode="before")
    @classmethod
    def decode_required_for_upgrade(cls, v: Any) -> Any:
        """The API sends the string "Maxed" instead of a count for maxed cards."""
        if isinstance(v, str):
            return MAXED
        return v


class Achievement(RoyaleModel):
    name: str = ""
    stars: int = 0
    value: int = 0
    target: int = 0  # Value needed to complete the achievement
    info: str = ""
