from dataclasses import dataclass

from ice_slide.components.position import Position
from ice_slide.types import PlayerId


@dataclass(frozen=True)
class PlayerState:
    """A player's piece.

    Attributes:
        id: Player identifier (1-based, matches the ``P<n>`` spawn marker).
        position: Current cell.
        start_position: Spawn cell, used when the player falls into a hole.
    """

    id: PlayerId
    position: Position
    start_position: Position
