"""
Input abstraction layer for gridcrawl.

Exposes:
- DirectionMapper: Rebindable mapping from physical keys to Direction bits.
- InputProvider: Per-frame raw direction source.
- KeyStateInput / ScriptedInput: Window-driven and replay providers.
"""
from .mapping import DirectionMapper
from .providers import InputProvider, KeyStateInput, ScriptedInput, parse_script

__all__ = [
    "DirectionMapper",
    "InputProvider",
    "KeyStateInput",
    "ScriptedInput",
    "parse_script",
]
