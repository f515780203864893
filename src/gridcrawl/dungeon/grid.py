from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .tiles import Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Room:
    x: int
    y: int
    w: int
    h: int

    def right(self) -> int:
        return self.x + self.w

    def bottom(self) -> int:
        return self.y + self.h

    def center(self) -> Tuple[int, int]:
        return (self.x + self.w // 2, self.y + self.h // 2)

    def contains(self, x: int, y: int) -> bool:
        return (self.x <= x < self.right()) and (self.y <= y < self.bottom())

    def overlaps(self, other: "Room", padding: int = 2) -> bool:
        """True if the rooms intersect once each far edge is pushed out by padding."""
        return (
            self.x < other.x + other.w + padding
            and self.x + self.w + padding > other.x
            and self.y < other.y + other.h + padding
            and self.y + self.h + padding > other.y
        )


class DungeonGrid:
    """
    Fixed-size tile store plus the rooms placed by the last generation pass.

    Coordinates are (x, y) with (0, 0) at top-left; tiles are stored as
    tiles[y][x]. Reads outside the grid behave like WALL and writes outside the
    grid are ignored, so callers never hit an IndexError.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 3 or height < 3:
            raise ValueError("Grid must be at least 3x3 to maintain wall borders")
        self.width = width
        self.height = height
        self.tiles: List[List[Tile]] = [[Tile.WALL for _ in range(width)] for _ in range(height)]
        self.rooms: List[Room] = []

    def reset(self) -> None:
        for row in self.tiles:
            for x in range(self.width):
                row[x] = Tile.WALL
        self.rooms.clear()

    # ---- Bounds / access -------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            return Tile.WALL
        return self.tiles[y][x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        if not self.in_bounds(x, y):
            logger.error("Attempt to write out-of-bounds tile at (%d,%d)", x, y)
            return
        self.tiles[y][x] = tile

    def is_walkable(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.tiles[y][x].is_walkable

    def pixel_size(self, tile_size: int) -> Tuple[int, int]:
        return self.width * tile_size, self.height * tile_size

    # ---- Carving ---------------------------------------------------------
    def carve_room(self, room: Room) -> None:
        for yy in range(room.y, room.bottom()):
            for xx in range(room.x, room.right()):
                if self.in_bounds(xx, yy):
                    self.tiles[yy][xx] = Tile.FLOOR

    def carve_h_corridor(self, x1: int, x2: int, y: int) -> None:
        if x2 < x1:
            x1, x2 = x2, x1
        self._carve_corridor((xx, y) for xx in range(x1, x2 + 1))

    def carve_v_corridor(self, y1: int, y2: int, x: int) -> None:
        if y2 < y1:
            y1, y2 = y2, y1
        self._carve_corridor((x, yy) for yy in range(y1, y2 + 1))

    def _carve_corridor(self, cells: Iterable[Tuple[int, int]]) -> None:
        # Corridors only cut through rock; room floors keep their kind.
        for xx, yy in cells:
            if self.in_bounds(xx, yy) and self.tiles[yy][xx] is Tile.WALL:
                self.tiles[yy][xx] = Tile.CORRIDOR

    # ---- Export / Compare -----------------------------------------------
    def to_str_lines(self, marker: Optional[Tuple[int, int]] = None) -> List[str]:
        lines: List[str] = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if marker is not None and marker == (x, y):
                    row.append('@')
                else:
                    row.append(self.tiles[y][x].glyph)
            lines.append(''.join(row))
        return lines

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        """
        Deterministic, hashable snapshot of the tiles for equality tests.
        """
        return tuple(tuple(int(t) for t in row) for row in self.tiles)

    def count(self, tile: Tile) -> int:
        return sum(1 for row in self.tiles for t in row if t is tile)
