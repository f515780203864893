"""
Grid movement for gridcrawl.

Exposes:
- Direction: OR-able directional input bits.
- InputTimingTracker: Tap vs. hold buffering of raw direction input.
- Player: Discrete grid stepping with eased pixel interpolation.
"""
from .direction import Direction
from .easing import ease_out_cubic, linear
from .input_timing import InputTimingTracker
from .player import Player

__all__ = [
    "Direction",
    "InputTimingTracker",
    "Player",
    "ease_out_cubic",
    "linear",
]
