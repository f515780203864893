from __future__ import annotations

from enum import IntFlag
from typing import Tuple


class Direction(IntFlag):
    """Raw directional input as OR-able bits; diagonals are two bits set."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 4
    RIGHT = 8
    UP_LEFT = UP | LEFT
    UP_RIGHT = UP | RIGHT
    DOWN_LEFT = DOWN | LEFT
    DOWN_RIGHT = DOWN | RIGHT

    def offset(self) -> Tuple[int, int]:
        """Cell offset (dx, dy) for this bit combination.

        Each set bit contributes its own unit step, so opposing keys on one
        axis (UP and DOWN together) cancel on that axis only.
        """
        dx = dy = 0
        if self & Direction.UP:
            dy -= 1
        if self & Direction.DOWN:
            dy += 1
        if self & Direction.LEFT:
            dx -= 1
        if self & Direction.RIGHT:
            dx += 1
        return dx, dy

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Parse names such as ``"right"`` or ``"up+left"`` into a Direction."""
        result = cls.NONE
        for part in text.replace("|", "+").split("+"):
            name = part.strip().upper()
            if not name:
                continue
            try:
                result |= cls[name]
            except KeyError:
                raise ValueError(f"Unknown direction: {part!r}") from None
        return result
