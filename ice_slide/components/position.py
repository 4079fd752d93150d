"""Position component.

Immutable integer grid coordinates, stored on :class:`PlayerState` and used as
keys of the board's precomputed lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def offset(self, drow: int, dcol: int) -> "Position":
        return Position(self.row + drow, self.col + dcol)
