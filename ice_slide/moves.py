"""Slide resolution.

A piece moving in a direction keeps going over empty ice and stops either in
front of a wall (or the board edge, which counts as a wall) or *on* a target,
hole or portal cell. These functions only read the :class:`Board`; they never
look at the other player's position, pieces do not collide.
"""

from typing import List, Sequence

from ice_slide.actions import DIRECTION_DELTAS, Direction
from ice_slide.board import Board
from ice_slide.components import Position
from ice_slide.types import STOPPING_TILES


def slide_path(board: Board, start: Position, direction: Direction) -> Sequence[Position]:
    """Cells entered while sliding from ``start`` in ``direction``.

    Returns an empty sequence when the neighbouring cell is a wall (zero
    distance slide). The walk never exceeds the grid diameter because every
    off-board cell is a wall.
    """
    drow, dcol = DIRECTION_DELTAS[direction]
    path: List[Position] = []
    probe = start.offset(drow, dcol)
    while not board.is_wall(probe):
        path.append(probe)
        if board.cell_at(probe).kind in STOPPING_TILES:
            break
        probe = probe.offset(drow, dcol)
    return path


def resolve_slide(board: Board, start: Position, direction: Direction) -> Position:
    """Resting cell of a slide; ``start`` itself if the piece cannot move."""
    path = slide_path(board, start, direction)
    return path[-1] if path else start
