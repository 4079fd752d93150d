"""JSON-friendly observation payloads for hosts.

Mirrors the snapshot shape renderers subscribe to::

    {"phase": "sliding",
     "players": [{"id": 1, "position": {"r": 0, "c": 3}}, ...],
     "currentPlayerId": 1,
     "winnerId": None}
"""

from typing import Any, Dict

from ice_slide.components import PlayerState, Position
from ice_slide.state import GameState
from ice_slide.transition import Transition


def position_dict(pos: Position) -> Dict[str, int]:
    return {"r": int(pos.row), "c": int(pos.col)}


def player_observation_dict(player: PlayerState) -> Dict[str, Any]:
    return {"id": int(player.id), "position": position_dict(player.position)}


def state_observation_dict(state: GameState) -> Dict[str, Any]:
    """Serialize a snapshot for renderers."""
    return {
        "phase": str(state.phase),
        "players": [player_observation_dict(p) for p in state.players],
        "currentPlayerId": int(state.current_player_id),
        "winnerId": state.winner_id,
    }


def transition_observation_dict(transition: Transition) -> Dict[str, Any]:
    """Serialize a transition: its kind, hold duration and snapshot."""
    return {
        "kind": str(transition.kind),
        "durationMs": int(transition.duration_ms),
        "state": state_observation_dict(transition.state),
    }
