from __future__ import annotations

import logging
import os
from typing import Optional

from .dungeon.config import GenerationConfig
from .engine.loop import EngineConfig, GameEngine
from .engine.session import DungeonSession
from .input.providers import ScriptedInput, parse_script
from .rng import Seed
from .settings import Settings

logger = logging.getLogger(__name__)

HEADLESS_DT = 1.0 / 60.0


def _arcade_available() -> bool:
    try:
        import arcade  # noqa: F401
        return True
    except ImportError:
        return False


def build_session(
    settings: Optional[Settings] = None,
    generation: Optional[GenerationConfig] = None,
    seed: Optional[Seed] = None,
) -> DungeonSession:
    session = DungeonSession(settings=settings, generation=generation, seed=seed)
    session.new_dungeon()
    return session


def run_gui(
    settings: Optional[Settings] = None,
    generation: Optional[GenerationConfig] = None,
    seed: Optional[Seed] = None,
    script: str = "",
    max_steps: Optional[int] = None,
) -> int:
    """Run with an Arcade window if available, otherwise fall back to headless.

    Returns:
        Process exit code (0 on success).
    """
    if not _arcade_available():
        logger.warning("Arcade not available; falling back to headless mode")
        return run_headless(settings, generation, seed, script=script, max_steps=max_steps)

    import arcade

    from .window import create_window

    session = build_session(settings, generation, seed)
    create_window(session)
    try:
        logger.info("Launching Arcade window")
        arcade.run()
        logger.info("Arcade loop finished")
        return 0
    except Exception:
        logger.exception("Unhandled exception in GUI loop; exiting with code 1")
        return 1


def run_headless(
    settings: Optional[Settings] = None,
    generation: Optional[GenerationConfig] = None,
    seed: Optional[Seed] = None,
    script: str = "",
    max_steps: Optional[int] = None,
) -> int:
    """Generate a dungeon, replay an input script at 1/tick_rate steps, print the result.

    A ``settings.tick_rate`` of 0 runs unthrottled with a 1/60 s step.

    Args:
        script: Input segments such as ``"right:0.5,down:0.25"``.
        max_steps: Stop after N updates; defaults to however long the script lasts.
    """
    settings = settings or Settings()
    dt = 1.0 / settings.tick_rate if settings.tick_rate > 0 else HEADLESS_DT
    try:
        segments = parse_script(script)
    except ValueError as exc:
        logger.error("Invalid input script %r: %s", script, exc)
        return 2

    if max_steps is None:
        # Run the whole script plus enough ticks to finish the last step.
        total = sum(seconds for _, seconds in segments)
        max_steps = int(total / dt) + int(1.0 / (settings.move_speed * dt)) + 2

    try:
        session = build_session(settings, generation, seed)
        logger.info("Dungeon layout:\n%s", "\n".join(session.grid.to_str_lines()))
        engine = GameEngine(
            session,
            ScriptedInput(segments),
            EngineConfig(tick_rate=settings.tick_rate, max_steps=max_steps, fixed_dt=dt),
        )
        engine.run()
    except KeyboardInterrupt:
        print("Interrupted by user")
        return 130
    except Exception:
        logger.exception("Unhandled exception in headless loop")
        return 1

    print("\n".join(session.grid.to_str_lines(marker=session.player.grid_pos)))
    print(
        f"rooms={len(session.grid.rooms)} player={session.player.grid_pos} "
        f"steps={engine.step} seed={session.seeds.seed}"
    )
    return 0


def run_auto(**kwargs) -> int:
    """Run GUI if available and not explicitly overridden, else headless.

    Honors GRIDCRAWL_HEADLESS=1 to force headless mode.
    """
    if os.getenv("GRIDCRAWL_HEADLESS") == "1":
        return run_headless(**kwargs)
    return run_gui(**kwargs)
