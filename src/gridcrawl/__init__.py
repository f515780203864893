"""
gridcrawl package root.

Procedural room-and-corridor dungeons with grid-locked, smoothly interpolated
player movement. Rendering backends (Arcade) stay outside of the pure domain
modules in ``dungeon``, ``movement`` and ``engine``.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
