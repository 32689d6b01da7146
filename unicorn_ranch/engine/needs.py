"""Need drain and zone recharge.

Per tick every need drains by ``BASE_DRAIN * drain_multiplier(level) * dt``,
then the need matching the occupied zone is refilled by
``base_rate * recharge_multiplier(level) * dt``. Results are clamped to
[0, 100] field by field.
"""

from __future__ import annotations

from unicorn_ranch.core.enums import NeedType, Zone
from unicorn_ranch.core.models import NEED_MAX, NEED_MIN, Needs
from unicorn_ranch.engine.constants import (
    BASE_DRAIN,
    DRAIN_GROWTH,
    RECHARGE_GROWTH,
    ZONE_RECHARGE,
)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def drain_multiplier(level: int) -> float:
    """1.0 at level 1, +0.80 per level after that."""
    return 1 + (level - 1) * DRAIN_GROWTH


def recharge_multiplier(level: int) -> float:
    """1.0 at level 1, +0.30 per level after that."""
    return 1 + (level - 1) * RECHARGE_GROWTH


def apply_drain(needs: Needs, level: int, dt: float) -> Needs:
    """Drain all four needs regardless of zone."""
    mult = drain_multiplier(level)
    return Needs(*(
        clamp(needs.get(n) - BASE_DRAIN[n] * mult * dt, NEED_MIN, NEED_MAX)
        for n in NeedType
    ))


def apply_recharge(needs: Needs, zone: Zone | str | None, level: int, dt: float) -> Needs:
    """Refill the one need mapped to *zone*; other needs pass through.

    ``Zone.NONE`` and unrecognized tags leave *needs* untouched.
    """
    entry = ZONE_RECHARGE.get(Zone.parse(zone))
    if entry is None:
        return needs
    gained = needs.get(entry.need) + entry.base_rate * recharge_multiplier(level) * dt
    return needs.with_value(entry.need, clamp(gained, NEED_MIN, NEED_MAX))


def update_needs(needs: Needs, zone: Zone | str | None, level: int, dt: float) -> Needs:
    """One tick: drain first, then recharge from the current zone."""
    return apply_recharge(apply_drain(needs, level, dt), zone, level, dt)


def net_need_change(need: NeedType, zone: Zone | str | None, level: int, dt: float) -> float:
    """Signed change of *need* over *dt*, ignoring clamping.

    Positive means the unicorn is gaining that need in *zone*. Matches
    ``update_needs`` whenever no bound is hit.
    """
    change = -BASE_DRAIN[need] * drain_multiplier(level) * dt
    entry = ZONE_RECHARGE.get(Zone.parse(zone))
    if entry is not None and entry.need is need:
        change += entry.base_rate * recharge_multiplier(level) * dt
    return change
