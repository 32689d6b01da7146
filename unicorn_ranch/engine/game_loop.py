"""GameLoop, the reference caller that advances a GameState one tick at a time.

Tick cycle:
  1. Needs: drain, then recharge from the current zone
  2. Timer: count the level timer down
  3. Terminal checks: game over dominates level complete
  4. Transition: monster chase or next level
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from unicorn_ranch.core.enums import GameStatus, TickOutcome, Zone
from unicorn_ranch.engine.needs import update_needs
from unicorn_ranch.engine.rules import (
    check_game_over,
    check_level_complete,
    monster_chase_state,
    next_level_state,
    update_level_timer,
)

if TYPE_CHECKING:
    from unicorn_ranch.config import RanchConfig
    from unicorn_ranch.core.models import GameState
    from unicorn_ranch.systems.route import ZoneRoute

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TickEvent:
    """A single notable thing that happened during a tick."""

    tick: int
    category: str
    message: str


@dataclass(frozen=True, slots=True)
class TickResult:
    """Outcome of one :meth:`GameLoop.step`."""

    state: GameState
    outcome: TickOutcome
    game_over: bool = False
    level_complete: bool = False
    events: tuple[TickEvent, ...] = field(default_factory=tuple)


class GameLoop:
    """Drives the pure engine functions with a fixed precedence policy.

    When a need bottoms out in the same tick the level timer expires, the
    game-over branch wins and the level is not completed.
    """

    __slots__ = ("_tick",)

    def __init__(self) -> None:
        self._tick = 0

    @property
    def tick(self) -> int:
        """Number of ticks stepped so far."""
        return self._tick

    def step(self, state: GameState, zone: Zone | str | None, dt: float) -> TickResult:
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt!r}")
        tick = self._tick
        self._tick += 1

        if state.eaten:
            return TickResult(state=state, outcome=TickOutcome.CHASING)

        zone = Zone.parse(zone)
        needs = update_needs(state.needs, zone, state.level, dt)
        level_time = update_level_timer(state.level_time, dt)
        advanced = state.evolve(needs=needs, level_time=level_time)

        game_over = check_game_over(needs)
        level_complete = check_level_complete(level_time)

        if game_over:
            empty = [n for n, v in needs.as_dict().items() if v <= 0]
            logger.warning(
                "Tick %d: Level %d lost, %s ran out. Monster incoming at y=%.1f",
                tick, state.level, "/".join(empty), state.y,
            )
            chased = monster_chase_state(advanced).evolve(status=GameStatus.CHASE)
            return TickResult(
                state=chased,
                outcome=TickOutcome.GAME_OVER,
                game_over=True,
                level_complete=level_complete,
                events=(TickEvent(tick, "game_over", f"{'/'.join(empty)} ran out on level {state.level}"),),
            )

        if level_complete:
            logger.info("Tick %d: Level %d complete", tick, state.level)
            promoted = next_level_state(advanced)
            return TickResult(
                state=promoted,
                outcome=TickOutcome.LEVEL_COMPLETE,
                level_complete=True,
                events=(TickEvent(tick, "level_complete", f"Reached level {promoted.level}"),),
            )

        logger.debug(
            "Tick %d: zone=%s needs=%s time=%.2f",
            tick, zone.name, needs.as_dict(), level_time,
        )
        return TickResult(state=advanced, outcome=TickOutcome.RUNNING)

    def run(
        self,
        state: GameState,
        route: ZoneRoute,
        config: RanchConfig,
    ) -> TickResult:
        """Step along *route* until the unicorn is eaten or ``max_ticks`` is hit."""
        logger.info("=== Run started (level %d, route %s) ===", state.level, route)
        result = TickResult(state=state, outcome=TickOutcome.RUNNING)
        events: list[TickEvent] = []
        for i in range(config.max_ticks):
            # elapsed time comes from the tick index
            result = self.step(result.state, route.zone_at(i * config.dt), config.dt)
            events.extend(result.events)
            if result.outcome in (TickOutcome.GAME_OVER, TickOutcome.CHASING):
                break
        else:
            logger.info("Tick %d: Max ticks reached.", self._tick)
        logger.info("=== Run finished at tick %d on level %d ===", self._tick, result.state.level)
        return TickResult(
            state=result.state,
            outcome=result.outcome,
            game_over=result.game_over,
            level_complete=result.level_complete,
            events=tuple(events),
        )
