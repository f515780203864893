"""
Dungeon systems for gridcrawl.

Contains the tile grid store, the room-and-corridor generator and its YAML
configuration.
"""
from .config import GenerationConfig, load_generation_config
from .generator import RoomsGenerator
from .grid import DungeonGrid, Room
from .tiles import Tile

__all__ = [
    "DungeonGrid",
    "GenerationConfig",
    "Room",
    "RoomsGenerator",
    "Tile",
    "load_generation_config",
]
