"""Engine layer: need drain/recharge, level rules, position helpers, game loop."""

from unicorn_ranch.engine.game_loop import GameLoop, TickEvent, TickResult

__all__ = ["GameLoop", "TickEvent", "TickResult"]
