from __future__ import annotations

import abc
import logging
from typing import List, Optional, Set, Tuple

from ..movement.direction import Direction
from .mapping import DirectionMapper

logger = logging.getLogger(__name__)

Segment = Tuple[Direction, float]


class InputProvider(abc.ABC):
    """Source of one raw Direction per frame.

    Implementations are thin adapters between a backend (window key events,
    a replay script) and :meth:`DungeonSession.tick`.
    """

    @abc.abstractmethod
    def poll(self, dt: float) -> Direction:
        """Return the raw direction for a frame lasting dt seconds."""


class KeyStateInput(InputProvider):
    """Tracks which keys are held, fed from window press/release callbacks."""

    def __init__(self, mapper: Optional[DirectionMapper] = None) -> None:
        self.mapper = mapper or DirectionMapper.default()
        self._pressed: Set[str | int] = set()

    def press(self, key: str | int) -> None:
        self._pressed.add(key)

    def release(self, key: str | int) -> None:
        self._pressed.discard(key)

    def clear(self) -> None:
        self._pressed.clear()

    def poll(self, dt: float) -> Direction:
        return self.mapper.direction_for(self._pressed)


class ScriptedInput(InputProvider):
    """Replays (direction, seconds) segments, then reports NONE forever."""

    def __init__(self, segments: List[Segment]) -> None:
        self._segments = list(segments)
        self._index = 0
        self._elapsed = 0.0

    @property
    def finished(self) -> bool:
        return self._index >= len(self._segments)

    def poll(self, dt: float) -> Direction:
        while not self.finished and self._elapsed >= self._segments[self._index][1]:
            self._elapsed -= self._segments[self._index][1]
            self._index += 1
        if self.finished:
            return Direction.NONE
        self._elapsed += dt
        return self._segments[self._index][0]


def parse_script(text: str) -> List[Segment]:
    """Parse ``"right:0.5,up+left:0.2"`` into replay segments.

    A segment without a duration holds for 0.125 seconds. Use ``none:<secs>``
    to release all keys for a while.
    """
    segments: List[Segment] = []
    for chunk in text.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        name, _, duration = chunk.partition(":")
        seconds = float(duration) if duration.strip() else 0.125
        if seconds < 0:
            raise ValueError(f"Negative duration in script segment: {chunk!r}")
        segments.append((Direction.parse(name), seconds))
    logger.debug("Parsed %d input script segments", len(segments))
    return segments


__all__ = ["InputProvider", "KeyStateInput", "ScriptedInput", "parse_script"]
