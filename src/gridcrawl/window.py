from __future__ import annotations

import logging
from typing import Tuple

try:
    import arcade  # type: ignore
except ImportError:  # pragma: no cover - optional for test envs
    arcade = None

from .dungeon.tiles import Tile
from .engine.session import DungeonSession
from .input.providers import KeyStateInput

logger = logging.getLogger(__name__)

PLAYER_FILL: Tuple[int, int, int] = (255, 200, 50)
PLAYER_OUTLINE: Tuple[int, int, int] = (255, 230, 100)
FLOOR_OUTLINE: Tuple[int, int, int] = (45, 50, 55)
PAUSE_SHADE: Tuple[int, int, int, int] = (0, 0, 0, 160)
PAUSE_TEXT: Tuple[int, int, int] = (230, 230, 230)
MOVEMENT_KEYS = ("UP", "DOWN", "LEFT", "RIGHT", "W", "A", "S", "D")


def _window_base():
    if arcade is None:
        raise RuntimeError("Arcade is not installed. Please install 'arcade' to run the GUI.")
    return arcade.Window


def create_window(session: DungeonSession, title: str = "gridcrawl"):
    """Build an Arcade window that renders and drives session.

    Only the camera-visible tiles are drawn. Arrow keys/WASD move, ESC
    pauses and resumes, N rolls a new dungeon (and resumes) and Q closes the
    window. The update rate follows ``settings.tick_rate``.
    """
    base = _window_base()

    class DungeonWindow(base):  # type: ignore[misc, valid-type]
        def __init__(self) -> None:
            settings = session.settings
            kwargs = {}
            if settings.tick_rate > 0:
                kwargs["update_rate"] = 1.0 / settings.tick_rate
            super().__init__(settings.screen_width, settings.screen_height, title=title, **kwargs)
            self.background_color = (10, 10, 10)
            self.session = session
            self.keys = KeyStateInput()
            for name in MOVEMENT_KEYS:
                self.keys.mapper.set_alias(getattr(arcade.key, name), name)

        def on_update(self, delta_time: float) -> None:
            self.session.tick(self.keys.poll(delta_time), delta_time)

        def on_key_press(self, symbol: int, modifiers: int) -> None:
            if symbol == arcade.key.ESCAPE:
                self.keys.clear()
                self.session.toggle_pause()
            elif symbol == arcade.key.Q:
                self.close()
            elif symbol == arcade.key.N:
                self.keys.clear()
                self.session.new_dungeon()
            else:
                self.keys.press(symbol)

        def on_key_release(self, symbol: int, modifiers: int) -> None:
            self.keys.release(symbol)

        def _to_screen(self, px: float, py: float, size: float) -> Tuple[float, float]:
            # Dungeon pixels grow downward; Arcade's origin is bottom-left.
            cam = self.session.camera
            return px - cam.x, self.height - (py - cam.y) - size

        def on_draw(self) -> None:
            self.clear()
            grid = self.session.grid
            cam = self.session.camera
            tile = self.session.settings.tile_size

            start_col = max(0, int(cam.x) // tile)
            end_col = min(grid.width, int(cam.x + cam.width) // tile + 1)
            start_row = max(0, int(cam.y) // tile)
            end_row = min(grid.height, int(cam.y + cam.height) // tile + 1)

            for row in range(start_row, end_row):
                for col in range(start_col, end_col):
                    kind = grid.tiles[row][col]
                    left, bottom = self._to_screen(col * tile, row * tile, tile)
                    arcade.draw_lbwh_rectangle_filled(left, bottom, tile, tile, kind.color)
                    if kind is Tile.FLOOR:
                        arcade.draw_lrbt_rectangle_outline(left, left + tile, bottom, bottom + tile, FLOOR_OUTLINE)

            player = self.session.player
            left, bottom = self._to_screen(player.pixel_x, player.pixel_y, player.size)
            arcade.draw_lbwh_rectangle_filled(left, bottom, player.size, player.size, PLAYER_FILL)
            arcade.draw_lrbt_rectangle_outline(
                left, left + player.size, bottom, bottom + player.size, PLAYER_OUTLINE
            )

            if self.session.paused:
                arcade.draw_lbwh_rectangle_filled(0, 0, self.width, self.height, PAUSE_SHADE)
                arcade.draw_text(
                    "Paused - ESC resume, N new dungeon, Q quit",
                    self.width / 2,
                    self.height / 2,
                    PAUSE_TEXT,
                    18,
                    anchor_x="center",
                )

    return DungeonWindow()
