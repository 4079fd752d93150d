from dataclasses import replace

from ice_slide.board import Board
from ice_slide.state import GameState
from ice_slide.types import Phase, PlayerId


def portal_system(board: Board, state: GameState, player_id: PlayerId) -> GameState:
    """Teleport ``player_id`` to the partner entrance of the portal it is on.

    The partner is itself a portal, but the effect is one-shot per landing:
    the piece is not sent back until it slides onto a portal again.
    """
    partner = board.portal_partner(state.player(player_id).position)
    if partner is None:
        return state
    state = state.with_position(player_id, partner)
    return replace(state, phase=Phase.RESOLVING_TILE)
