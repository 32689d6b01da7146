"""Pydantic read-only models of GameState for the rendering layer."""

from __future__ import annotations

from pydantic import BaseModel

from unicorn_ranch.core.enums import NeedType, Zone
from unicorn_ranch.core.models import GameState, Monster, Needs
from unicorn_ranch.engine.needs import net_need_change
from unicorn_ranch.engine.positions import zone_display


class NeedsSchema(BaseModel):
    hunger: float
    thirst: float
    energy: float
    fun: float

    @classmethod
    def from_needs(cls, needs: Needs) -> NeedsSchema:
        return cls(**needs.as_dict())


class MonsterSchema(BaseModel):
    x: float
    y: float
    chomp: bool = False

    @classmethod
    def from_monster(cls, monster: Monster) -> MonsterSchema:
        return cls(x=monster.x, y=monster.y, chomp=monster.chomp)


class GameStateSchema(BaseModel):
    x: float
    y: float
    level: int
    level_time: float
    status: str | None = None
    eaten: bool = False
    needs: NeedsSchema
    monster: MonsterSchema
    zone: str | None = None
    zone_label: str | None = None
    # Net change per second for each need in the current zone (+ gaining, - losing)
    trend: dict[str, float] = {}

    @classmethod
    def from_state(cls, state: GameState, zone: Zone | str | None = None) -> GameStateSchema:
        zone = Zone.parse(zone)
        return cls(
            x=state.x,
            y=state.y,
            level=state.level,
            level_time=state.level_time,
            status=state.status.name if state.status is not None else None,
            eaten=state.eaten,
            needs=NeedsSchema.from_needs(state.needs),
            monster=MonsterSchema.from_monster(state.monster),
            zone=zone.tag,
            zone_label=zone_display(zone),
            trend={n.field: net_need_change(n, zone, state.level, 1.0) for n in NeedType},
        )
