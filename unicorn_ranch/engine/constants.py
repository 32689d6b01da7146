"""Balance constants for need drain, zone recharge and level pacing.

These are fixed tuning values exposed for introspection and tests; nothing
reconfigures them at runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

from unicorn_ranch.core.enums import NeedType, Zone

# Per-second drain of every need at level 1
BASE_DRAIN: Mapping[NeedType, float] = MappingProxyType({
    NeedType.HUNGER: 1.0,
    NeedType.THIRST: 1.0,
    NeedType.ENERGY: 1.0,
    NeedType.FUN: 1.0,
})


class ZoneRecharge(NamedTuple):
    """The single need a zone refills and its per-second rate at level 1."""

    need: NeedType
    base_rate: float


ZONE_RECHARGE: Mapping[Zone, ZoneRecharge] = MappingProxyType({
    Zone.LAKE: ZoneRecharge(NeedType.THIRST, 6.0),
    Zone.FIELD: ZoneRecharge(NeedType.HUNGER, 6.0),
    Zone.BARN: ZoneRecharge(NeedType.ENERGY, 8.0),
    Zone.PLAY: ZoneRecharge(NeedType.FUN, 6.0),
})

# Convenience view: zone -> base rate
BASE_RECHARGE: Mapping[Zone, float] = MappingProxyType(
    {zone: entry.base_rate for zone, entry in ZONE_RECHARGE.items()}
)

DRAIN_GROWTH = 0.80      # drain +80% per level
RECHARGE_GROWTH = 0.30   # recharge +30% per level
LEVEL_TIME = 30.0        # seconds per level

ZONE_LABELS: Mapping[Zone, str] = MappingProxyType({
    Zone.LAKE: "Lake \U0001F4A7",
    Zone.FIELD: "Field \U0001F34E",
    Zone.BARN: "Barn \U0001F4A4",
    Zone.PLAY: "Play \U0001F388",
})


def _check_tables() -> None:
    zones = set(Zone) - {Zone.NONE}
    missing = zones - set(ZONE_RECHARGE)
    if missing:
        raise RuntimeError(f"ZONE_RECHARGE has no entry for {sorted(z.name for z in missing)}")
    missing = zones - set(ZONE_LABELS)
    if missing:
        raise RuntimeError(f"ZONE_LABELS has no entry for {sorted(z.name for z in missing)}")
    refilled = [entry.need for entry in ZONE_RECHARGE.values()]
    if len(set(refilled)) != len(refilled):
        raise RuntimeError("A need is refilled by more than one zone")
    if set(BASE_DRAIN) != set(NeedType):
        raise RuntimeError("BASE_DRAIN must cover every need")


_check_tables()
