from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from ..movement.direction import Direction

logger = logging.getLogger(__name__)


class DirectionMapper:
    """Rebindable mapping from physical key names to Direction bits.

    The mapper is agnostic to the window backend. Keys are strings normalized
    to uppercase, so integrations only need to translate their key constants
    to names (or register aliases) before calling :meth:`direction_for`.

    Example usage:
        mapper = DirectionMapper.default()
        mapper.direction_for({"w", "LEFT"})   # -> Direction.UP_LEFT
    """

    def __init__(self, bindings: Optional[Dict[str, Direction]] = None) -> None:
        self._bindings: Dict[str, Direction] = {}
        self._aliases: Dict[str, str] = {}
        if bindings:
            for key, direction in bindings.items():
                self.bind(key, direction)

    # ---------- Canonicalization ----------
    @staticmethod
    def _normalize(key: str | int) -> Optional[str]:
        if key is None:
            return None
        if isinstance(key, int):
            return str(key)
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    # ---------- Binding API ----------
    def bind(self, key: str | int, direction: Direction) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = direction

    def bind_many(self, keys: Iterable[str | int], direction: Direction) -> None:
        for k in keys:
            self.bind(k, direction)

    def unbind(self, key: str | int) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def set_alias(self, physical: str | int, canonical_name: str) -> None:
        """Map a backend-specific key (e.g. an Arcade key code) to a bound name."""
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    # ---------- Translation ----------
    def translate_key(self, key: str | int) -> Direction:
        nk = self._normalize(key)
        if nk is None:
            return Direction.NONE
        return self._bindings.get(self._aliases.get(nk, nk), Direction.NONE)

    def direction_for(self, pressed: Iterable[str | int]) -> Direction:
        """OR together the directions of every pressed key."""
        result = Direction.NONE
        for key in pressed:
            result |= self.translate_key(key)
        return result

    # ---------- Defaults ----------
    @classmethod
    def default(cls) -> "DirectionMapper":
        """Arrow keys and WASD."""
        mapper = cls()
        mapper.bind_many(["UP", "W"], Direction.UP)
        mapper.bind_many(["DOWN", "S"], Direction.DOWN)
        mapper.bind_many(["LEFT", "A"], Direction.LEFT)
        mapper.bind_many(["RIGHT", "D"], Direction.RIGHT)
        return mapper


__all__ = ["DirectionMapper"]
