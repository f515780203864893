from __future__ import annotations

from dataclasses import dataclass

from .utils.math import clamp


@dataclass
class Camera:
    """Scroll offset of a fixed-size viewport over the dungeon, in pixels."""

    width: int = 800
    height: int = 600
    x: float = 0.0
    y: float = 0.0

    def follow_player(
        self,
        player_x: float,
        player_y: float,
        dungeon_width: int,
        dungeon_height: int,
        player_size: int,
    ) -> None:
        """Center on the player's pixel center, then keep the view inside the dungeon.

        On an axis where the dungeon is smaller than the viewport the offset
        stays at 0 and the viewport extends past the far edge.
        """
        x = player_x + player_size / 2 - self.width / 2
        y = player_y + player_size / 2 - self.height / 2
        self.x = clamp(x, 0.0, max(0.0, float(dungeon_width - self.width)))
        self.y = clamp(y, 0.0, max(0.0, float(dungeon_height - self.height)))
