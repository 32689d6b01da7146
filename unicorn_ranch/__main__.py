"""Entry point: ``python -m unicorn_ranch``.

Runs a headless game from the initial state, moving the unicorn between
zones along a scripted (or seed-generated) route:

  - ``python -m unicorn_ranch``                         → default route
  - ``python -m unicorn_ranch --route lake:5,none:3``   → custom route
  - ``python -m unicorn_ranch --random --seed 7``       → generated route
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Unicorn Ranch headless simulation")
    parser.add_argument("--route", type=str, default=None,
                        help='Zone schedule, e.g. "lake:4,field:4,barn:3,play:4"')
    parser.add_argument("--random", action="store_true", help="Generate the route from --seed")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--legs", type=int, default=8, help="Legs in a generated route")
    parser.add_argument("--dt", type=float, default=0.1)
    parser.add_argument("--ticks", type=int, default=3000)
    parser.add_argument("--json", action="store_true", help="Print the final state as JSON")
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])
    return parser


def main(argv: list[str] | None = None) -> int:
    from unicorn_ranch.config import RanchConfig
    from unicorn_ranch.engine.game_loop import GameLoop
    from unicorn_ranch.engine.rules import create_initial_state
    from unicorn_ranch.schemas import GameStateSchema
    from unicorn_ranch.systems.rng import DeterministicRNG
    from unicorn_ranch.systems.route import ZoneRoute
    from unicorn_ranch.utils.logging import setup_logging

    parser = _build_parser()
    args = parser.parse_args(argv)

    defaults = RanchConfig()
    config = RanchConfig(
        dt=args.dt,
        max_ticks=args.ticks,
        route=None if args.random else (args.route or defaults.route),
        route_seed=args.seed,
        route_legs=args.legs,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    if config.dt < 0:
        parser.error("--dt must be non-negative")
    try:
        if config.route is None:
            route = ZoneRoute.generate(DeterministicRNG(config.route_seed), config.route_legs)
        else:
            route = ZoneRoute.parse(config.route)
    except ValueError as exc:
        parser.error(str(exc))

    logger.info("Route: %s (period %.1fs)", route, route.period)
    loop = GameLoop()
    result = loop.run(create_initial_state(), route, config)
    final = result.state

    if args.json:
        last_zone = route.zone_at(max(loop.tick - 1, 0) * config.dt)
        print(GameStateSchema.from_state(final, last_zone).model_dump_json(indent=2))
    else:
        print(f"Ticks:  {loop.tick}")
        print(f"Level:  {final.level}")
        print(f"Eaten:  {final.eaten}")
        print("Needs:  " + ", ".join(f"{k}={v:.1f}" for k, v in final.needs.as_dict().items()))
        for event in result.events:
            print(f"  [{event.tick:>5}] {event.category}: {event.message}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
