from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from importlib.resources import files as resource_files
from typing import Any, Dict, Optional

import yaml

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationConfig:
    """Tunables for the room-and-corridor generator.

    Rooms are placed at x in [1, width - w - 2], so the largest room must leave
    at least three cells of the grid unused on each axis.
    """

    width: int = 40
    height: int = 30
    min_rooms: int = 8
    max_rooms: int = 12
    room_min_size: int = 4
    room_max_size: int = 9
    max_attempts: int = 100
    padding: int = 2

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ConfigError(f"Grid must be at least 3x3, got {self.width}x{self.height}")
        if self.room_min_size < 1:
            raise ConfigError(f"room_min_size must be >= 1, got {self.room_min_size}")
        if self.room_min_size > self.room_max_size:
            raise ConfigError(
                f"room_min_size ({self.room_min_size}) exceeds room_max_size ({self.room_max_size})"
            )
        if self.room_max_size > min(self.width, self.height) - 3:
            raise ConfigError(
                f"room_max_size {self.room_max_size} does not fit a {self.width}x{self.height} grid"
            )
        if self.min_rooms < 0 or self.min_rooms > self.max_rooms:
            raise ConfigError(f"Invalid room count range {self.min_rooms}..{self.max_rooms}")
        if self.max_attempts < 0:
            raise ConfigError(f"max_attempts must be >= 0, got {self.max_attempts}")
        if self.padding < 0:
            raise ConfigError(f"padding must be >= 0, got {self.padding}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationConfig":
        allowed = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - allowed)
        if unknown:
            logger.warning("Ignoring unknown generation keys: %s", ", ".join(unknown))
        try:
            values = {k: int(v) for k, v in data.items() if k in allowed}
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Generation values must be integers: {exc}") from exc
        return cls(**values)


def load_generation_config(path: Optional[str] = None) -> GenerationConfig:
    """Load generation parameters from YAML.

    If path is None, loads the embedded default resource at
    gridcrawl/dungeon/generation.yaml.
    """
    if path is None:
        data = resource_files("gridcrawl.dungeon").joinpath("generation.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded generation config resource")
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
        logger.debug("Loaded generation config from path: %s", path)

    raw = yaml.safe_load(data) or {}
    if not isinstance(raw, dict):
        raise ConfigError("Generation config must be a mapping")
    cfg = GenerationConfig.from_dict(raw)
    logger.info(
        "Generation config: %dx%d rooms=%d..%d size=%d..%d attempts=%d",
        cfg.width,
        cfg.height,
        cfg.min_rooms,
        cfg.max_rooms,
        cfg.room_min_size,
        cfg.room_max_size,
        cfg.max_attempts,
    )
    return cfg
