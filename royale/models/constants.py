"""Game constants returned by the /constants endpoint.

Most keys in this document are snake_case. Card statistics carry dozens of
engine tuning flags; only the commonly used ones are modelled and the rest
are kept as extra fields.
https://docs.royaleapi.com/#/endpoints/constants
"""

from typing import Any, Dict, List

from pydantic import AliasChoices, ConfigDict, Field

from royale.models.base import RoyaleModel
from royale.models.common import Badge


class ConstantsArena(RoyaleModel):
    name: str = ""
    arena: int = 0
    chest_arena: str = ""
    tv_arena: bool = False
    is_in_use: bool = False
    training_camp: bool = False
    trophy_limit: int = 0
    demote_trophy_limit: int = 0
    season_trophy_reset: int = 0
    chest_reward_multiplier: int = 0
    shop_chest_reward_multiplier: int = 0
    request_size: int = 0
    max_donation_count_common: int = 0
    max_donation_count_rare: int = 0
    max_donation_count_epic: int = 0
    matchmaking_min_trophy_delta: int = 0
    matchmaking_max_trophy_delta: int = 0
    matchmaking_max_seconds: int = 0
    daily_donation_capacity_limit: int = 0
    battle_reward_gold: int = 0
    season_reward_chest: str = ""
    quest_cycle: str = ""
    force_quest_chest_cycle: str = ""
    key: str = ""
    title: str = ""
    subtitle: str = ""
    arena_id: int = Field(0, validation_alias=AliasChoices("arenaID", "arenaId", "arena_id"))
    league_id: int = Field(0, validation_alias=AliasChoices("leagueID", "leagueId", "league_id"))
    id: int = 0


class ConstantsCard(RoyaleModel):
    key: str = ""
    name: str = ""
    elixir: int = 0
    type: str = ""
    rarity: str = ""
    arena: int = 0
    description: str = ""
    id: int = 0


class _CardStats(RoyaleModel):
    model_config = ConfigDict(extra="allow")

    name: str = ""
    rarity: str = ""
    name_en: str = ""
    key: str = ""
    elixir: int = 0
    type: str = ""
    arena: int = 0
    description: str = ""
    id: int = 0


class ConstantsTroop(_CardStats):
    sight_range: int = 0
    deploy_time: int = 0
    speed: int = 0
    speed_en: str = ""
    hitpoints: int = 0
    hit_speed: int = 0
    damage: int = 0
    range: int = 0
    attacks_ground: bool = False
    attacks_air: bool = False
    target_only_buildings: bool = False
    dps: float = 0.0


class ConstantsBuilding(_CardStats):
    sight_range: int = 0
    hitpoints: int = 0
    hit_speed: int = 0
    projectile: str = ""
    range: int = 0
    attacks_ground: bool = False
    attacks_air: bool = False
    target_only_buildings: bool = False


class ConstantsSpell(_CardStats):
    life_duration: int = 0
    radius: int = 0
    hit_speed: int = 0
    damage: int = 0
    crown_tower_damage_percent: int = 0
    buff: str = ""
    buff_time: int = 0
    projectile: str = ""
    spawn_character: str = ""
    hits_ground: bool = False
    hits_air: bool = False


class ConstantsCardsStats(RoyaleModel):
    troop: List[ConstantsTroop] = Field(default_factory=list)
    building: List[ConstantsBuilding] = Field(default_factory=list)
    spell: List[ConstantsSpell] = Field(default_factory=list)


class ConstantsChallenge(RoyaleModel):
    name: str = ""
    game_mode: str = ""
    enabled: bool = False
    join_cost: int = 0
    join_cost_resource: str = ""
    max_wins: int = 0
    max_loss: int = 0
    reward_cards: List[int] = Field(default_factory=list)
    reward_gold: List[int] = Field(default_factory=list)
    reward_spell: str = ""
    reward_spell_max_count: int = 0
    name_en: str = ""
    key: str = ""
    id: int = 0


class ConstantsClanChestEntry(RoyaleModel):
    thresholds: List[int] = Field(default_factory=list)
    gold: List[int] = Field(default_factory=list)
    cards: List[int] = Field(default_factory=list)


class ConstantsClanChest(RoyaleModel):
    one_v_one: ConstantsClanChestEntry = Field(
        default_factory=ConstantsClanChestEntry, validation_alias="1v1"
    )
    two_v_two: ConstantsClanChestEntry = Field(
        default_factory=ConstantsClanChestEntry, validation_alias="2v2"
    )


class ConstantsGameMode(RoyaleModel):
    name: str = ""
    card_level_adjustment: str = ""
    deck_selection: str = ""
    overtime_seconds: int = 0
    predefined_decks: str = ""
    same_deck_on_both: bool = False
    separate_team_decks: bool = False
    swapping_towers: bool = False
    use_starting_elixir: bool = False
    heroes: bool = False
    players: str = ""
    gives_clan_score: bool = False
    fixed_deck_order: bool = False
    battle_start_cooldown: int = 0
    id: int = 0
    name_en: str = ""


class ConstantsRarity(RoyaleModel):
    name: str = ""
    level_count: int = 0
    relative_level: int = 0
    mirror_relative_level: int = 0
    clone_relative_level: int = 0
    donate_capacity: int = 0
    sort_capacity: int = 0
    donate_reward: int = 0
    donate_xp: int = 0
    gold_conversion_value: int = 0
    chance_weight: int = 0
    balance_multiplier: int = 0
    upgrade_exp: List[int] = Field(default_factory=list)
    upgrade_material_count: List[int] = Field(default_factory=list)
    upgrade_cost: List[int] = Field(default_factory=list)
    power_level_multiplier: List[int] = Field(default_factory=list)
    refund_gems: int = 0


class ConstantsRegion(RoyaleModel):
    id: int = 0
    key: str = ""
    name: str = ""
    is_country: bool = False


class ConstantsTournamentPrize(RoyaleModel):
    rank: int = 0
    cards: int = 0
    tier: int = 0


class ConstantsTournament(RoyaleModel):
    create_cost: int = 0
    max_players: int = 0
    key: str = ""
    prizes: List[ConstantsTournamentPrize] = Field(default_factory=list)
    cards: List[int] = Field(default_factory=list)


class Constants(RoyaleModel):
    """The full constants document.

    ``chest_order`` and ``treasure_chests`` are kept as plain JSON, and
    sections not listed here end up in ``model_extra``.
    """

    model_config = ConfigDict(extra="allow")

    alliance_badges: List[Badge] = Field(default_factory=list)
    arenas: List[ConstantsArena] = Field(default_factory=list)
    cards: List[ConstantsCard] = Field(default_factory=list)
    cards_stats: ConstantsCardsStats = Field(default_factory=ConstantsCardsStats)
    challenges: List[ConstantsChallenge] = Field(default_factory=list)
    chest_order: Dict[str, Any] = Field(default_factory=dict)
    clan_chest: ConstantsClanChest = Field(default_factory=ConstantsClanChest)
    game_modes: List[ConstantsGameMode] = Field(default_factory=list)
    rarities: List[ConstantsRarity] = Field(default_factory=list)
    regions: List[ConstantsRegion] = Field(default_factory=list)
    tournaments: List[ConstantsTournament] = Field(default_factory=list)
    treasure_chests: Dict[str, Any] = Field(default_factory=dict)
