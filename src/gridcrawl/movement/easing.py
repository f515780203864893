"""Easing curves mapping raw progress t in [0, 1] to eased progress."""
from typing import Callable

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_out_cubic(t: float) -> float:
    """Fast start, gentle stop: 1 - (1 - t)^3."""
    return 1.0 - (1.0 - t) ** 3


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t
