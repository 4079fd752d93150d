"""Hole system.

A piece that lands on a hole falls through and reappears on its own spawn
cell. The reset never chains: spawn cells are always empty ice.
"""

from dataclasses import replace

from ice_slide.board import Board
from ice_slide.state import GameState
from ice_slide.types import Phase, PlayerId, TileKind


def hole_system(board: Board, state: GameState, player_id: PlayerId) -> GameState:
    player = state.player(player_id)
    if board.cell_at(player.position).kind != TileKind.HOLE:
        return state
    state = state.with_position(player_id, player.start_position)
    return replace(state, phase=Phase.RESOLVING_TILE)
