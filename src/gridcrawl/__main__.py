from __future__ import annotations

import argparse
import logging
import os
import sys

from . import __version__
from .app import run_auto, run_gui, run_headless
from .dungeon.config import load_generation_config
from .exceptions import ConfigError
from .settings import Settings


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gridcrawl",
        description="gridcrawl - random dungeon with smooth grid movement",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Force GUI mode (Arcade)")
    mode.add_argument("--headless", action="store_true", help="Force headless mode (console)")
    parser.add_argument("--seed", default=None, help="Session seed (any integer or string)")
    parser.add_argument("--max-steps", type=int, default=None, help="Stop after N ticks")
    parser.add_argument(
        "--tick-rate",
        type=float,
        default=None,
        help="Updates per second (overrides settings; 0 runs headless unthrottled)",
    )
    parser.add_argument(
        "--script",
        default="",
        help="Headless input script, e.g. 'right:0.5,up+left:0.25'",
    )
    parser.add_argument("--settings", default=None, help="Path to a settings TOML file")
    parser.add_argument("--generation", default=None, help="Path to a generation YAML file")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    settings = Settings.from_sources(file_path=args.settings)
    if args.tick_rate is not None:
        settings.tick_rate = args.tick_rate
        settings.validate()
    try:
        generation = load_generation_config(args.generation)
    except (ConfigError, OSError) as exc:
        logging.getLogger(__name__).error("Could not load generation config: %s", exc)
        return 2

    kwargs = dict(
        settings=settings,
        generation=generation,
        seed=args.seed,
        script=args.script,
        max_steps=args.max_steps,
    )
    # Honor CLI over env vars
    if args.gui:
        os.environ.pop("GRIDCRAWL_HEADLESS", None)
        return run_gui(**kwargs)
    if args.headless:
        return run_headless(**kwargs)
    return run_auto(**kwargs)


if __name__ == "__main__":
    sys.exit(main())
