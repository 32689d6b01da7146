"""Zone labels and play-area position helpers."""

from __future__ import annotations

from unicorn_ranch.core.enums import Zone
from unicorn_ranch.core.models import Position
from unicorn_ranch.engine.constants import ZONE_LABELS
from unicorn_ranch.engine.needs import clamp

AREA_MIN = 0.0
AREA_MAX = 100.0


def zone_display(zone: Zone | str | None) -> str | None:
    """Human-readable label for *zone*, or None when there is nothing to show."""
    return ZONE_LABELS.get(Zone.parse(zone))


def is_valid_position(x: float, y: float) -> bool:
    return AREA_MIN <= x <= AREA_MAX and AREA_MIN <= y <= AREA_MAX


def clamp_position(x: float, y: float) -> Position:
    """Pull each coordinate back into the play area. Never rejects."""
    return Position(clamp(x, AREA_MIN, AREA_MAX), clamp(y, AREA_MIN, AREA_MAX))
