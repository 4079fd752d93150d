"""Win and turn systems.

``win_system`` sets the terminal ``winner_id`` marker; ``turn_system`` is the
only place the turn cursor moves. Both leave the engine in the IDLE phase.
"""

from dataclasses import replace

from ice_slide.board import Board
from ice_slide.state import GameState
from ice_slide.types import Phase, PlayerId, TileKind


def win_system(board: Board, state: GameState, player_id: PlayerId) -> GameState:
    """Declare ``player_id`` the winner if it stands on the target.

    Skips evaluation if a winner already exists. The turn does not advance.
    """
    if state.winner_id is not None:
        return state
    position = state.player(player_id).position
    if board.cell_at(position).kind != TileKind.TARGET:
        return state
    return replace(state, winner_id=player_id, phase=Phase.IDLE)


def turn_system(state: GameState) -> GameState:
    """Hand the move to the next player in turn order and unlock input."""
    next_index = (state.turn_index + 1) % len(state.players)
    return replace(state, turn_index=next_index, phase=Phase.IDLE)
