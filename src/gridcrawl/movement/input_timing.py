from __future__ import annotations

import logging

from .direction import Direction

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_TIME = 0.15


class InputTimingTracker:
    """Turns per-frame raw direction into tap vs. hold decisions.

    A direction held for at least ``buffer_time`` seconds latches
    ``continuous_enabled``, which lets the player keep stepping every tile.
    The latch only clears when the direction changes or input stops.
    """

    def __init__(self, buffer_time: float = DEFAULT_BUFFER_TIME) -> None:
        self.buffer_time = buffer_time
        self.last_direction: Direction = Direction.NONE
        self.hold_time: float = 0.0
        self.continuous_enabled: bool = False

    def reset(self) -> None:
        self.last_direction = Direction.NONE
        self.hold_time = 0.0
        self.continuous_enabled = False

    def update(self, direction: Direction, dt: float) -> None:
        if direction == Direction.NONE:
            self.reset()
        elif direction == self.last_direction:
            self.hold_time += dt
            if not self.continuous_enabled and self.hold_time >= self.buffer_time:
                self.continuous_enabled = True
                logger.debug("Continuous movement enabled for %s after %.3fs", direction, self.hold_time)
        else:
            self.last_direction = direction
            self.hold_time = 0.0
            self.continuous_enabled = False

    def should_accept_input(self, is_moving: bool) -> bool:
        return not is_moving or self.continuous_enabled
