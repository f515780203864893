import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from gridcrawl.dungeon.grid import Room  # noqa: E402
from gridcrawl.engine.session import DungeonSession  # noqa: E402


@pytest.fixture
def one_room_session():
    """Session whose grid holds a single 7x5 room at (10, 10), player at its center."""
    session = DungeonSession(seed=1)
    room = Room(10, 10, 7, 5)
    session.grid.reset()
    session.grid.carve_room(room)
    session.grid.rooms.append(room)
    session.place_player(*room.center())
    return session
