from __future__ import annotations

import logging
import random
from typing import Optional

from .config import GenerationConfig
from .grid import DungeonGrid, Room

logger = logging.getLogger(__name__)


class RoomsGenerator:
    """Rooms + corridors generator.

    Places randomly sized rooms at random positions, discarding any that crowd
    an existing room, and links each newly placed room to the one placed
    before it with an L-shaped corridor. Since every room joins the chain as
    it is placed, all rooms end up in one connected layout.

    Running out of attempts before the target room count is reached is not an
    error; the grid simply holds fewer rooms.
    """

    def __init__(self, config: Optional[GenerationConfig] = None) -> None:
        self.config = config or GenerationConfig()

    def new_grid(self) -> DungeonGrid:
        return DungeonGrid(self.config.width, self.config.height)

    def generate(self, grid: DungeonGrid, rng: random.Random) -> DungeonGrid:
        """Overwrite grid in place with a fresh layout drawn from rng."""
        cfg = self.config
        grid.reset()

        target = rng.randint(cfg.min_rooms, cfg.max_rooms)
        attempts = 0
        while len(grid.rooms) < target and attempts < cfg.max_attempts:
            attempts += 1
            w = rng.randint(cfg.room_min_size, cfg.room_max_size)
            h = rng.randint(cfg.room_min_size, cfg.room_max_size)
            x = rng.randint(1, grid.width - w - 2)
            y = rng.randint(1, grid.height - h - 2)
            room = Room(x, y, w, h)

            if any(room.overlaps(other, padding=cfg.padding) for other in grid.rooms):
                continue

            grid.carve_room(room)
            if grid.rooms:
                self._connect(grid, grid.rooms[-1], room, rng)
            grid.rooms.append(room)

        if len(grid.rooms) < target:
            logger.debug(
                "RoomsGenerator: placed %d/%d rooms before exhausting %d attempts",
                len(grid.rooms),
                target,
                cfg.max_attempts,
            )
        else:
            logger.debug("RoomsGenerator: placed %d rooms in %d attempts", len(grid.rooms), attempts)
        return grid

    @staticmethod
    def _connect(grid: DungeonGrid, a: Room, b: Room, rng: random.Random) -> None:
        ax, ay = a.center()
        bx, by = b.center()
        if rng.random() < 0.5:
            # horizontal then vertical
            grid.carve_h_corridor(ax, bx, ay)
            grid.carve_v_corridor(ay, by, bx)
        else:
            # vertical then horizontal
            grid.carve_v_corridor(ay, by, ax)
            grid.carve_h_corridor(ax, bx, by)
