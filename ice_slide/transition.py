"""Timed state transitions.

The engine never sleeps or calls back into UI code. Resolving a move yields an
ordered tuple of :class:`Transition` objects instead; a host renders each
``state`` and waits ``duration_ms`` before asking for the next one.
"""

from dataclasses import dataclass

from ice_slide.state import GameState
from ice_slide.types import TransitionKind


@dataclass(frozen=True)
class Transition:
    """One sub-step of a move.

    Attributes:
        kind: What happened in this sub-step.
        state: Snapshot after the sub-step.
        duration_ms: Recommended hold / animation time before the next one.
    """

    kind: TransitionKind
    state: GameState
    duration_ms: int = 0
