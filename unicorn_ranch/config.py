"""Headless run configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RanchConfig:
    """Immutable configuration for a headless run.

    Balance numbers (drain/recharge rates, growth, level length) live in
    :mod:`unicorn_ranch.engine.constants`; this only covers how the driver
    feeds the engine.
    """

    # Timing
    dt: float = 0.1                 # seconds per tick
    max_ticks: int = 3000

    # Route: explicit "zone:seconds,..." string, or generated from the seed
    route: str | None = "lake:4,field:4,barn:3,play:4"
    route_seed: int = 42
    route_legs: int = 8

    # Logging
    log_level: str = "INFO"
