"""Move reducer and sub-step sequencing.

:func:`step` resolves one directional move for the current player and returns
every intermediate snapshot as a :class:`Transition`, in the order a host must
play them. It is pure: the input ``GameState`` is never modified and the
result depends only on its arguments.

Ordering:

1. ``slide_system`` moves the mover to its resting cell (phase SLIDING).
2. Landing policy, evaluated on the resting cell after every slide (a
   zero-distance slide included):

   a. target: ``win_system`` sets the winner; the sequence ends there and the
      turn does not advance.
   b. hole / portal: a PAUSE snapshot (phase RESOLVING_TILE, mover still on
      the tile) followed by the effect snapshot (RESET / TELEPORT).

3. ``turn_system`` passes the move to the next player (phase IDLE).

A hole and a portal can never both apply because a cell carries one tile
kind, and effects do not chain.
"""

from dataclasses import replace
from typing import Callable, Dict, List, Tuple

from ice_slide.actions import Direction
from ice_slide.board import Board
from ice_slide.config import DEFAULT_TIMING, TimingConfig
from ice_slide.state import GameState
from ice_slide.systems import (
    hole_system,
    portal_system,
    slide_system,
    turn_system,
    win_system,
)
from ice_slide.transition import Transition
from ice_slide.types import Phase, PlayerId, TileKind, TransitionKind

LandingSystem = Callable[[Board, GameState, PlayerId], GameState]

LANDING_EFFECTS: Dict[TileKind, Tuple[TransitionKind, LandingSystem]] = {
    TileKind.HOLE: (TransitionKind.RESET, hole_system),
    TileKind.PORTAL: (TransitionKind.TELEPORT, portal_system),
}
"""Tile kinds whose landing plays a pause followed by a second movement."""


def step(
    board: Board,
    state: GameState,
    direction: Direction,
    timing: TimingConfig = DEFAULT_TIMING,
) -> Tuple[Transition, ...]:
    """Resolve a move of the current player.

    Args:
        board (Board): Static board.
        state (GameState): Snapshot the move starts from.
        direction (Direction): Slide direction.
        timing (TimingConfig): Hold durations attached to each transition.

    Returns:
        Tuple[Transition, ...]: Ordered sub-steps. Empty if ``state`` does not
        accept input (a move in flight or a winner already set). The last
        transition always leaves the phase at IDLE.
    """
    if not state.accepts_input:
        return ()

    player_id = state.current_player_id

    state = slide_system(board, state, player_id, direction)
    transitions: List[Transition] = [
        Transition(TransitionKind.SLIDE, state, timing.slide_ms)
    ]

    landed = state.player(player_id).position
    tile = board.cell_at(landed).kind
    if tile == TileKind.TARGET:
        won = win_system(board, state, player_id)
        transitions.append(Transition(TransitionKind.WIN, won))
        return tuple(transitions)
    if tile in LANDING_EFFECTS:
        state, effect_transitions = _step_effect(
            board, state, player_id, tile, timing
        )
        transitions.extend(effect_transitions)

    transitions.append(Transition(TransitionKind.TURN, turn_system(state)))
    return tuple(transitions)


def _step_effect(
    board: Board,
    state: GameState,
    player_id: PlayerId,
    tile: TileKind,
    timing: TimingConfig,
) -> Tuple[GameState, List[Transition]]:
    """Pause on the landed tile, then apply its effect."""
    kind, system = LANDING_EFFECTS[tile]
    paused = replace(state, phase=Phase.RESOLVING_TILE)
    resolved = system(board, paused, player_id)
    return resolved, [
        Transition(TransitionKind.PAUSE, paused, timing.effect_pause_ms),
        Transition(kind, resolved, timing.settle_ms),
    ]
