from enum import IntEnum
from typing import Tuple


class Tile(IntEnum):
    """Dungeon tile kinds.

    - WALL: Non-walkable solid rock (also what out-of-range queries see)
    - FLOOR: Walkable room interior
    - CORRIDOR: Walkable carved passage between rooms
    """

    FLOOR = 0
    WALL = 1
    CORRIDOR = 2

    @property
    def is_walkable(self) -> bool:
        return self is not Tile.WALL

    @property
    def glyph(self) -> str:
        """A single-character visualization used by logs and the headless runner."""
        return {Tile.WALL: '#', Tile.FLOOR: '.', Tile.CORRIDOR: ','}[self]

    @property
    def color(self) -> Tuple[int, int, int]:
        """Default RGB color for 2D rendering (Arcade)."""
        return {
            Tile.WALL: (60, 60, 80),
            Tile.FLOOR: (30, 35, 40),
            Tile.CORRIDOR: (35, 40, 45),
        }[self]
