from .events import GameEvent
from .loop import EngineConfig, GameEngine
from .session import DungeonSession

__all__ = ["DungeonSession", "EngineConfig", "GameEngine", "GameEvent"]
