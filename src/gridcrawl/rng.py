from __future__ import annotations

import hashlib
import logging
import random
import secrets
from typing import Optional, Union

logger = logging.getLogger(__name__)

Seed = Union[int, str]


class DungeonSeeds:
    """Per-dungeon random sources for one play session.

    The n-th call to "new dungeon" always gets the layout RNG for index n, so
    replaying a session seed rebuilds the same sequence of dungeons. Seeds are
    compared by their text, so ``7`` and ``"7"`` (as typed on the CLI) match.
    """

    def __init__(self, seed: Optional[Seed] = None) -> None:
        if seed is None:
            seed = secrets.randbits(63)
            logger.info("No seed provided; using %d", seed)
        self.seed: Seed = seed

    def layout_seed(self, index: int) -> int:
        digest = hashlib.sha256(f"gridcrawl:{self.seed}:layout:{index}".encode("utf-8")).digest()
        return int.from_bytes(digest[:8], "big")

    def layout_rng(self, index: int) -> random.Random:
        """RNG for the layout of dungeon number index (0-based)."""
        if index < 0:
            raise ValueError(f"Dungeon index must be >= 0, got {index}")
        return random.Random(self.layout_seed(index))
