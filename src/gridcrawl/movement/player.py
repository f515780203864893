from __future__ import annotations

import logging
from typing import Tuple

from .direction import Direction
from .easing import Easing, ease_out_cubic, lerp

logger = logging.getLogger(__name__)

DEFAULT_TILE_SIZE = 40
DEFAULT_PLAYER_SIZE = 30
DEFAULT_MOVE_SPEED = 8.0  # cells per second


class Player:
    """Grid-locked player with smooth pixel interpolation between cells.

    The player is either Idle (``moving`` is False and the pixel position is
    the canonical position of the current cell) or Transitioning toward
    ``(target_x, target_y)``. While Transitioning, ``progress`` grows by
    ``move_speed * dt`` each update and the pixel position follows the eased
    interpolation between the two cells' canonical positions. The grid cell
    only changes once progress reaches 1.0, at which point the pixel position
    snaps exactly onto the new cell so no drift accumulates.

    Out-of-bounds or wall checks are not done here; callers consult the grid
    before calling :meth:`start_move`.
    """

    def __init__(
        self,
        tile_size: int = DEFAULT_TILE_SIZE,
        size: int = DEFAULT_PLAYER_SIZE,
        move_speed: float = DEFAULT_MOVE_SPEED,
        easing: Easing = ease_out_cubic,
    ) -> None:
        self.tile_size = tile_size
        self.size = size
        self.move_speed = move_speed
        self.easing = easing

        self.grid_x = 0
        self.grid_y = 0
        self.target_x = 0
        self.target_y = 0
        self.pixel_x = 0.0
        self.pixel_y = 0.0
        self.moving = False
        self.direction: Direction = Direction.NONE
        self.progress = 0.0
        self.set_grid_position(0, 0)

    @property
    def is_moving(self) -> bool:
        return self.moving

    @property
    def grid_pos(self) -> Tuple[int, int]:
        return self.grid_x, self.grid_y

    @property
    def pixel_pos(self) -> Tuple[float, float]:
        return self.pixel_x, self.pixel_y

    def canonical_position(self, x: int, y: int) -> Tuple[float, float]:
        """Pixel origin of the player when centered on cell (x, y)."""
        offset = (self.tile_size - self.size) / 2
        return x * self.tile_size + offset, y * self.tile_size + offset

    def target_for(self, direction: Direction) -> Tuple[int, int]:
        dx, dy = direction.offset()
        return self.grid_x + dx, self.grid_y + dy

    def set_grid_position(self, x: int, y: int) -> None:
        """Snap to cell (x, y), discarding any movement in progress."""
        self.grid_x = self.target_x = x
        self.grid_y = self.target_y = y
        self.pixel_x, self.pixel_y = self.canonical_position(x, y)
        self.moving = False
        self.direction = Direction.NONE
        self.progress = 0.0

    def start_move(self, direction: Direction, dest_x: int, dest_y: int) -> None:
        self.moving = True
        self.direction = direction
        self.progress = 0.0
        self.target_x = dest_x
        self.target_y = dest_y
        logger.debug(
            "Move %s from (%d,%d) to (%d,%d)", direction, self.grid_x, self.grid_y, dest_x, dest_y
        )

    def update_movement(self, dt: float) -> bool:
        """Advance the current transition by dt seconds.

        Returns True on the update that completes a move.
        """
        if not self.moving:
            return False

        self.progress += self.move_speed * dt
        if self.progress >= 1.0:
            self.progress = 1.0
            self.grid_x = self.target_x
            self.grid_y = self.target_y
            self.pixel_x, self.pixel_y = self.canonical_position(self.grid_x, self.grid_y)
            self.moving = False
            self.direction = Direction.NONE
            return True

        start_x, start_y = self.canonical_position(self.grid_x, self.grid_y)
        end_x, end_y = self.canonical_position(self.target_x, self.target_y)
        t = self.easing(self.progress)
        self.pixel_x = lerp(start_x, end_x, t)
        self.pixel_y = lerp(start_y, end_y, t)
        return False
