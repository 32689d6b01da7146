"""Driver systems: deterministic RNG and zone routes."""

from unicorn_ranch.systems.rng import DeterministicRNG
from unicorn_ranch.systems.route import RouteLeg, ZoneRoute

__all__ = ["DeterministicRNG", "RouteLeg", "ZoneRoute"]
