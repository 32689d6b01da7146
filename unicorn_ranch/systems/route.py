"""ZoneRoute, a scripted, cyclic zone schedule for headless runs.

Stands in for the collision layer: instead of working out which zone the
unicorn is standing in, the driver asks the route which zone is active at a
given elapsed time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import accumulate

from unicorn_ranch.core.enums import Domain, Zone
from unicorn_ranch.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RouteLeg:
    """Stay in *zone* for *seconds*."""

    zone: Zone
    seconds: float


@dataclass(frozen=True, slots=True)
class ZoneRoute:
    """Ordered legs repeated forever."""

    legs: tuple[RouteLeg, ...]

    def __post_init__(self) -> None:
        if not self.legs:
            raise ValueError("A route needs at least one leg")
        for leg in self.legs:
            if leg.seconds <= 0:
                raise ValueError(f"Leg duration must be positive, got {leg.seconds!r}")

    @property
    def period(self) -> float:
        """Seconds for one full pass over the legs."""
        return sum(leg.seconds for leg in self.legs)

    def zone_at(self, elapsed: float) -> Zone:
        """Zone active after *elapsed* seconds, cycling through the legs."""
        t = elapsed % self.period
        for end, leg in zip(accumulate(leg.seconds for leg in self.legs), self.legs):
            if t < end:
                return leg.zone
        return self.legs[-1].zone

    @classmethod
    def parse(cls, text: str) -> ZoneRoute:
        """Build a route from ``"lake:5,field:5,none:2"``.

        Zone names go through :meth:`Zone.parse` so anything unrecognized
        means "no zone". Malformed legs raise ``ValueError``.
        """
        legs: list[RouteLeg] = []
        for chunk in text.split(","):
            chunk = chunk.strip()
            if not chunk:
                continue
            name, sep, seconds = chunk.partition(":")
            if not sep:
                raise ValueError(f"Route leg {chunk!r} is not of the form zone:seconds")
            try:
                duration = float(seconds)
            except ValueError:
                raise ValueError(f"Route leg {chunk!r} has a non-numeric duration") from None
            legs.append(RouteLeg(Zone.parse(name.strip()), duration))
        return cls(tuple(legs))

    @classmethod
    def generate(
        cls,
        rng: DeterministicRNG,
        num_legs: int = 8,
        min_seconds: float = 1.0,
        max_seconds: float = 6.0,
    ) -> ZoneRoute:
        """Deterministic wandering route derived from *rng*'s seed."""
        if num_legs < 1:
            raise ValueError("num_legs must be at least 1")
        zones = list(Zone)
        legs = tuple(
            RouteLeg(
                zones[rng.next_int(Domain.ROUTE_ZONE, i, 0, len(zones) - 1)],
                rng.next_uniform(Domain.ROUTE_DURATION, i, min_seconds, max_seconds),
            )
            for i in range(num_legs)
        )
        logger.debug("Generated route (seed=%d): %s", rng.seed, ", ".join(
            f"{leg.zone.name.lower()}:{leg.seconds:.2f}" for leg in legs
        ))
        return cls(legs)

    def __str__(self) -> str:
        return ",".join(f"{leg.zone.name.lower()}:{leg.seconds:g}" for leg in self.legs)
