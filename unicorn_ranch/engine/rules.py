"""Terminal conditions, level timer and whole-state transitions."""

from __future__ import annotations

from unicorn_ranch.core.models import GameState, Monster, Needs, Position
from unicorn_ranch.engine.constants import LEVEL_TIME

START_X = 15.0
START_Y = 25.0


def create_initial_state() -> GameState:
    return GameState(
        position=Position(START_X, START_Y),
        needs=Needs.full(),
        level=1,
        level_time=LEVEL_TIME,
        status=None,
        eaten=False,
        monster=Monster.at_start(),
    )


def check_game_over(needs: Needs) -> bool:
    """True as soon as any single need is at or below zero."""
    return any(v <= 0 for v in needs.values())


def check_level_complete(level_time: float) -> bool:
    return level_time <= 0


def update_level_timer(level_time: float, dt: float) -> float:
    """Count the level timer down. May go negative."""
    return level_time - dt


def next_level_state(state: GameState) -> GameState:
    """Fresh needs, timer, status and monster for the next level.

    The unicorn keeps its position.
    """
    return state.evolve(
        level=state.level + 1,
        needs=Needs.full(),
        level_time=LEVEL_TIME,
        status=None,
        eaten=False,
        monster=Monster.at_start(),
    )


def monster_chase_state(state: GameState) -> GameState:
    """Start the monster chase at the unicorn's current height.

    Does not re-check the game-over condition; callers confirm it first
    with :func:`check_game_over`.
    """
    return state.evolve(eaten=True, monster=Monster.at_start(state.y))
