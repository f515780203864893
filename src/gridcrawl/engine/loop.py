from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from ..input.providers import InputProvider
from .session import DungeonSession

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Configuration for the headless game loop.

    Attributes:
        tick_rate: Target updates per second for the loop. If 0, updates as fast as possible.
        max_steps: If provided, the loop will automatically stop after this many updates.
        fixed_dt: If provided, every update uses this delta instead of wall-clock time.
    """

    tick_rate: float = 60.0
    max_steps: Optional[int] = None
    fixed_dt: Optional[float] = None


class GameEngine:
    """A headless-friendly loop feeding one input sample per tick into a session.

    The loop logic is isolated from any rendering backend so it can be tested;
    a GUI framework (Arcade) can instead call :meth:`update` from its own
    update callback.
    """

    def __init__(
        self,
        session: DungeonSession,
        input_provider: InputProvider,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self.session = session
        self.input_provider = input_provider
        self.config = config or EngineConfig()
        self._running: bool = False
        self._step: int = 0
        self._last_time: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def step(self) -> int:
        return self._step

    def start(self) -> None:
        """Start the engine loop state.

        Safe to call multiple times; subsequent calls are no-ops.
        """
        if self._running:
            logger.debug("GameEngine.start() called while already running")
            return
        self._running = True
        self._step = 0
        self._last_time = time.perf_counter()
        logger.info("GameEngine started (tick_rate=%s, max_steps=%s)", self.config.tick_rate, self.config.max_steps)

    def stop(self) -> None:
        """Stop the loop gracefully."""
        if not self._running:
            return
        self._running = False
        logger.info("GameEngine stopped at step=%s", self._step)

    def update(self, dt: float) -> None:
        """Perform a single update tick.

        Args:
            dt: Delta time in seconds since last update.
        """
        if not self._running:
            logger.debug("update() called while not running; ignored")
            return
        direction = self.input_provider.poll(dt)
        self.session.tick(direction, dt)
        self._step += 1
        logger.debug("Tick #%d (dt=%.4f, input=%s)", self._step, dt, direction)

        if self.config.max_steps is not None and self._step >= self.config.max_steps:
            self.stop()

    def run(self) -> None:
        """Run a blocking loop until stopped or max_steps reached.

        Throttles to tick_rate if configured.
        """
        self.start()
        target_dt = 0.0
        if self.config.tick_rate and self.config.tick_rate > 0:
            target_dt = 1.0 / float(self.config.tick_rate)

        while self._running:
            now = time.perf_counter()
            if self.config.fixed_dt is not None:
                dt = self.config.fixed_dt
            elif self._last_time is None:
                dt = 0.0
            else:
                dt = now - self._last_time
            self._last_time = now

            self.update(dt)

            if target_dt > 0:
                remaining = target_dt - (time.perf_counter() - now)
                if remaining > 0:
                    time.sleep(remaining)

        logger.info("Loop complete (steps=%d)", self._step)
