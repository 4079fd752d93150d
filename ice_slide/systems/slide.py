from dataclasses import replace

from ice_slide.actions import Direction
from ice_slide.board import Board
from ice_slide.moves import resolve_slide
from ice_slide.state import GameState
from ice_slide.types import Phase, PlayerId


def slide_system(
    board: Board, state: GameState, player_id: PlayerId, direction: Direction
) -> GameState:
    """Move ``player_id`` to its resting cell and enter the SLIDING phase."""
    start = state.player(player_id).position
    target = resolve_slide(board, start, direction)
    return replace(state.with_position(player_id, target), phase=Phase.SLIDING)
