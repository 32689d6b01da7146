"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class NeedType(IntEnum):
    """The four depleting needs of the unicorn."""

    HUNGER = 0
    THIRST = 1
    ENERGY = 2
    FUN = 3

    @property
    def field(self) -> str:
        """Attribute name on :class:`~unicorn_ranch.core.models.Needs`."""
        return self.name.lower()


@unique
class Zone(IntEnum):
    """Themed areas of the ranch. NONE = not standing in any zone."""

    NONE = 0
    LAKE = 1
    FIELD = 2
    BARN = 3
    PLAY = 4

    @property
    def tag(self) -> str | None:
        """Lower-case string tag used by the collision layer."""
        return None if self is Zone.NONE else self.name.lower()

    @classmethod
    def parse(cls, tag: Zone | str | None) -> Zone:
        """Convert a collision-layer tag to a Zone.

        Only the exact lower-case tags match; anything else, including
        other casings or padded strings, degrades to ``Zone.NONE``.
        """
        if isinstance(tag, Zone):
            return tag
        return _ZONES_BY_TAG.get(tag, cls.NONE) if isinstance(tag, str) else cls.NONE


_ZONES_BY_TAG: dict[str, Zone] = {z.tag: z for z in Zone if z.tag is not None}


@unique
class GameStatus(IntEnum):
    """Optional caller-level status tag carried on GameState."""

    NEXT_LEVEL = 0   # level timer expired, transition pending
    CHASE = 1        # a need hit zero, monster is coming


@unique
class TickOutcome(IntEnum):
    """What happened during one GameLoop step."""

    RUNNING = 0
    LEVEL_COMPLETE = 1
    GAME_OVER = 2
    CHASING = 3      # state was already eaten; nothing advanced


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    ROUTE_ZONE = 0
    ROUTE_DURATION = 1
