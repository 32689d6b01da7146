"""Unicorn Ranch: pure need/level simulation engine."""

from unicorn_ranch.core.enums import GameStatus, NeedType, Zone
from unicorn_ranch.core.models import GameState, Monster, Needs, Position
from unicorn_ranch.engine.needs import (
    apply_drain,
    apply_recharge,
    clamp,
    drain_multiplier,
    net_need_change,
    recharge_multiplier,
    update_needs,
)
from unicorn_ranch.engine.positions import clamp_position, is_valid_position, zone_display
from unicorn_ranch.engine.rules import (
    check_game_over,
    check_level_complete,
    create_initial_state,
    monster_chase_state,
    next_level_state,
    update_level_timer,
)

__version__ = "0.1.0"

__all__ = [
    "GameState",
    "GameStatus",
    "Monster",
    "NeedType",
    "Needs",
    "Position",
    "Zone",
    "apply_drain",
    "apply_recharge",
    "check_game_over",
    "check_level_complete",
    "clamp",
    "clamp_position",
    "create_initial_state",
    "drain_multiplier",
    "is_valid_position",
    "monster_chase_state",
    "net_need_change",
    "next_level_state",
    "recharge_multiplier",
    "update_level_timer",
    "update_needs",
    "zone_display",
]
