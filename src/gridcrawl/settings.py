from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import tomllib

logger = logging.getLogger(__name__)

ENV_PREFIX = "GRIDCRAWL_"
SETTINGS_FILE_ENV = "GRIDCRAWL_SETTINGS_FILE"


@dataclass
class Settings:
    """Runtime settings for the window, rendering scale and movement feel.

    The settings can be constructed/overridden from:
    - Environment variables (prefix: GRIDCRAWL_), e.g. GRIDCRAWL_MOVE_SPEED=10
    - A TOML config file (env GRIDCRAWL_SETTINGS_FILE or configs/settings.toml if present)

    Precedence (lowest to highest): defaults < file < env.
    """

    # Window/display
    screen_width: int = 800
    screen_height: int = 600
    tick_rate: float = 60.0

    # Rendering scale
    tile_size: int = 40
    player_size: int = 30

    # Movement feel
    move_speed: float = 8.0  # cells per second
    input_buffer_time: float = 0.15  # seconds before a held key repeats

    def _coerce(self, name: str, caster: Callable[[Any], Any], default: Any) -> Any:
        raw = getattr(self, name)
        try:
            value = caster(raw)
        except (TypeError, ValueError):
            logger.warning("Non-numeric %s=%r; resetting to %r", name, raw, default)
            value = default
        setattr(self, name, value)
        return value

    def validate(self) -> None:
        """Validate and normalize settings to safe values."""
        defaults = Settings()
        for name in ("screen_width", "screen_height", "tile_size", "player_size"):
            default = getattr(defaults, name)
            if self._coerce(name, int, default) <= 0:
                logger.warning("Invalid %s=%r; resetting to %r", name, getattr(self, name), default)
                setattr(self, name, default)
        if self.player_size > self.tile_size:
            logger.warning(
                "player_size %d exceeds tile_size %d; clamping to tile size", self.player_size, self.tile_size
            )
            self.player_size = self.tile_size
        if self._coerce("move_speed", float, defaults.move_speed) <= 0.0:
            logger.warning("Invalid move_speed=%r; resetting to %r", self.move_speed, defaults.move_speed)
            self.move_speed = defaults.move_speed
        if self._coerce("input_buffer_time", float, defaults.input_buffer_time) < 0.0:
            logger.warning("Negative input_buffer_time=%r; using 0.0", self.input_buffer_time)
            self.input_buffer_time = 0.0
        if self._coerce("tick_rate", float, defaults.tick_rate) < 0.0:
            logger.warning("Negative tick_rate=%r; resetting to %r", self.tick_rate, defaults.tick_rate)
            self.tick_rate = defaults.tick_rate

    # ------------------------ Loading & Overrides ------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        allowed = {f.name for f in dataclasses.fields(cls)}
        filtered = {k: v for k, v in data.items() if k in allowed}
        obj = cls(**filtered)
        obj.validate()
        return obj

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        env = os.environ if env is None else env
        casters: Dict[str, Callable[[str], Any]] = {
            f.name: (int if f.type in ("int", int) else float) for f in dataclasses.fields(cls)
        }
        out: Dict[str, Any] = {}
        for field_name, caster in casters.items():
            env_key = ENV_PREFIX + field_name.upper()
            if env.get(env_key, "") != "":
                try:
                    out[field_name] = caster(env[env_key])
                except ValueError as exc:
                    logger.error("Invalid env for %s=%r: %s", env_key, env[env_key], exc)
        return out

    @classmethod
    def from_toml_file(cls, path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.debug("Settings file not found: %s", path)
            return {}
        try:
            with path.open("rb") as f:
                doc = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.error("Failed to read settings TOML %s: %s", path, exc)
            return {}
        # Flatten either top-level keys or the [window]/[movement] sections
        flat: Dict[str, Any] = {}
        for section in ("window", "movement"):
            if isinstance(doc.get(section), dict):
                flat.update(doc[section])
        for k, v in doc.items():
            if not isinstance(v, dict):
                flat[k] = v
        return flat

    @classmethod
    def discover_config_path(cls, env: Optional[Mapping[str, str]] = None) -> Optional[Path]:
        env = os.environ if env is None else env
        env_path = env.get(SETTINGS_FILE_ENV)
        if env_path:
            return Path(env_path).expanduser().resolve()
        # <repo>/src/gridcrawl/settings.py -> <repo>/configs/settings.toml
        default_path = Path(__file__).resolve().parents[2] / "configs" / "settings.toml"
        if default_path.exists():
            return default_path
        return None

    @classmethod
    def from_sources(
        cls,
        *,
        env: Optional[Mapping[str, str]] = None,
        file_path: Optional[Path | str] = None,
    ) -> "Settings":
        data: Dict[str, Any] = {}
        if file_path is not None:
            chosen_path: Optional[Path] = Path(file_path).expanduser().resolve()
        else:
            chosen_path = cls.discover_config_path(env)
        if chosen_path is not None:
            data.update(cls.from_toml_file(chosen_path))
        data.update(cls.from_env(env))
        return cls.from_dict(data)

    @property
    def viewport(self) -> Tuple[int, int]:
        return self.screen_width, self.screen_height
