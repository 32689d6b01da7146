"""Core data models and enumerations."""

from unicorn_ranch.core.enums import Domain, GameStatus, NeedType, TickOutcome, Zone
from unicorn_ranch.core.models import GameState, Monster, Needs, Position

__all__ = [
    "Domain",
    "GameState",
    "GameStatus",
    "Monster",
    "NeedType",
    "Needs",
    "Position",
    "TickOutcome",
    "Zone",
]
