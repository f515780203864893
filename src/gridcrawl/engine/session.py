from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..camera import Camera
from ..dungeon.config import GenerationConfig
from ..dungeon.generator import RoomsGenerator
from ..movement.direction import Direction
from ..movement.input_timing import InputTimingTracker
from ..movement.player import Player
from ..rng import DungeonSeeds, Seed
from ..settings import Settings
from .events import GameEvent

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent, "DungeonSession"], None]


class DungeonSession:
    """Holds the current dungeon, player, input timing and camera.

    The host (window or headless loop) calls :meth:`tick` once per frame with
    the raw direction and elapsed seconds, then reads ``grid``, ``player`` and
    ``camera`` back for rendering. :meth:`new_dungeon` regenerates the grid in
    place and respawns the player at the first room's center.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        generation: Optional[GenerationConfig] = None,
        seed: Optional[Seed] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.generator = RoomsGenerator(generation)
        self.seeds = DungeonSeeds(seed)
        self.generation_index = 0
        self.grid = self.generator.new_grid()
        self.player = Player(
            tile_size=self.settings.tile_size,
            size=self.settings.player_size,
            move_speed=self.settings.move_speed,
        )
        self.input = InputTimingTracker(self.settings.input_buffer_time)
        self.camera = Camera(self.settings.screen_width, self.settings.screen_height)
        self.paused = False
        self._listeners: List[Listener] = []

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to session events (generation, placement, moves)."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception as ex:  # pragma: no cover - listeners shouldn't crash the tick
                logger.exception("Listener errored on %s: %s", event, ex)

    # ---- Commands --------------------------------------------------------
    def new_dungeon(self) -> None:
        """Replace the grid with a fresh layout and respawn the player."""
        rng = self.seeds.layout_rng(self.generation_index)
        self.generator.generate(self.grid, rng)
        logger.info(
            "Generated dungeon #%d with %d rooms", self.generation_index, len(self.grid.rooms)
        )
        self.generation_index += 1

        if self.grid.rooms:
            self.place_player(*self.grid.rooms[0].center())
        else:
            logger.warning("Dungeon has no rooms; player left at %s", self.player.grid_pos)
            self.place_player(*self.player.grid_pos)
        self.follow_camera()
        self._emit(GameEvent.DUNGEON_GENERATED)
        if self.paused:
            self.toggle_pause()

    def toggle_pause(self) -> bool:
        """Flip between playing and paused; returns the new paused state.

        While paused, :meth:`tick` returns at once and the session state is
        frozen, so a move in flight resumes where it stopped.
        """
        self.paused = not self.paused
        logger.info("Session %s", "paused" if self.paused else "resumed")
        self._emit(GameEvent.PAUSED if self.paused else GameEvent.RESUMED)
        return self.paused

    def place_player(self, x: int, y: int) -> None:
        """Snap the player onto cell (x, y) and clear all movement/input state."""
        self.player.set_grid_position(x, y)
        self.input.reset()
        logger.debug("Player placed at (%d,%d)", x, y)
        self._emit(GameEvent.PLAYER_PLACED)

    def try_step(self, direction: Direction) -> bool:
        """Start a one-cell move in direction if the destination is walkable."""
        tx, ty = self.player.target_for(direction)
        if (tx, ty) == self.player.grid_pos:
            return False
        if not self.grid.is_walkable(tx, ty):
            logger.debug("Blocked move %s from %s into (%d,%d)", direction, self.player.grid_pos, tx, ty)
            return False
        self.player.start_move(direction, tx, ty)
        self._emit(GameEvent.MOVE_STARTED)
        return True

    # ---- Frame update ----------------------------------------------------
    def tick(self, direction: Direction, dt: float) -> None:
        """Advance one frame: input timing, move start, interpolation, camera."""
        if self.paused:
            return
        if dt < 0:
            logger.debug("Negative dt %.4f clamped to 0", dt)
            dt = 0.0

        self.input.update(direction, dt)
        pending = Direction.NONE
        if direction != Direction.NONE and self.input.should_accept_input(self.player.is_moving):
            if self.player.is_moving:
                # Held past the buffer: queue the next step for arrival, never redirect mid-flight.
                pending = direction
            else:
                self.try_step(direction)

        if self.player.update_movement(dt):
            self._emit(GameEvent.MOVE_FINISHED)
            if pending != Direction.NONE:
                self.try_step(pending)

        self.follow_camera()

    def follow_camera(self) -> None:
        width, height = self.grid.pixel_size(self.settings.tile_size)
        self.camera.follow_player(
            self.player.pixel_x,
            self.player.pixel_y,
            width,
            height,
            self.player.size,
        )
