"""Component value objects.

All components are frozen dataclasses; a change of state is expressed by
building a new instance (``dataclasses.replace``), never by mutation.
"""

from .cell import Cell, EMPTY, HOLE, TARGET, WALL, portal
from .player import PlayerState
from .position import Position

__all__ = [
    "Cell",
    "EMPTY",
    "HOLE",
    "TARGET",
    "WALL",
    "portal",
    "PlayerState",
    "Position",
]
