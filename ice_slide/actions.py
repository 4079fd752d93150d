"""Direction enumeration and input signal mapping.

``DIRECTIONS`` is the canonical ordered list of moves. Hosts translate raw
input (key names, button ids) with :func:`parse_direction`; unknown signals
map to ``None`` and are ignored.
"""

from enum import StrEnum, auto
from typing import Dict, Optional, Tuple


class Direction(StrEnum):
    """Cardinal movement directions."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}
"""(row, col) offsets per direction; rows grow downward."""

KEY_MAP: Dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def parse_direction(signal: object) -> Optional[Direction]:
    """Map an input signal to a ``Direction``.

    Accepts ``Direction`` members, their string values (``"up"``) and the key
    names in ``KEY_MAP``. Anything else returns ``None``.
    """
    if isinstance(signal, Direction):
        return signal
    if not isinstance(signal, str):
        return None
    if signal in KEY_MAP:
        return KEY_MAP[signal]
    try:
        return Direction(signal.lower())
    except ValueError:
        return None
