from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by DungeonSession to notify UI or systems."""

    DUNGEON_GENERATED = auto()
    PLAYER_PLACED = auto()
    MOVE_STARTED = auto()
    MOVE_FINISHED = auto()
    PAUSED = auto()
    RESUMED = auto()
