"""Core data models: Needs, Position, Monster, GameState.

Every model is a frozen, slotted dataclass. Engine functions never mutate
their inputs; they build new instances (usually via ``dataclasses.replace``).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from unicorn_ranch.core.enums import GameStatus, NeedType

NEED_MIN = 0.0
NEED_MAX = 100.0

MONSTER_START_X = -20.0
MONSTER_START_Y = 50.0


@dataclass(frozen=True, slots=True)
class Needs:
    """Immutable vector of the four needs, each in [0, 100]."""

    hunger: float = NEED_MAX
    thirst: float = NEED_MAX
    energy: float = NEED_MAX
    fun: float = NEED_MAX

    @classmethod
    def full(cls) -> Needs:
        return cls(NEED_MAX, NEED_MAX, NEED_MAX, NEED_MAX)

    def get(self, need: NeedType) -> float:
        return getattr(self, need.field)

    def with_value(self, need: NeedType, value: float) -> Needs:
        """Return a copy with one need replaced."""
        return replace(self, **{need.field: value})

    def values(self) -> tuple[float, float, float, float]:
        return (self.hunger, self.thirst, self.energy, self.fun)

    def as_dict(self) -> dict[str, float]:
        return {n.field: self.get(n) for n in NeedType}


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable 2D coordinate, both axes as a percentage of the play area."""

    x: float = 0.0
    y: float = 0.0

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Monster:
    """The pursuer that appears after a game over."""

    x: float = MONSTER_START_X
    y: float = MONSTER_START_Y
    chomp: bool = False

    @classmethod
    def at_start(cls, y: float = MONSTER_START_Y) -> Monster:
        """Off-screen left, at height *y*, not chomping."""
        return cls(x=MONSTER_START_X, y=y, chomp=False)


@dataclass(frozen=True, slots=True)
class GameState:
    """Whole-game snapshot passed into and returned from the engine."""

    position: Position
    needs: Needs = field(default_factory=Needs.full)
    level: int = 1
    level_time: float = 30.0
    status: GameStatus | None = None
    eaten: bool = False
    monster: Monster = field(default_factory=Monster.at_start)

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def evolve(self, **changes) -> GameState:
        """Return a copy with *changes* applied."""
        return replace(self, **changes)
