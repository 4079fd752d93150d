"""Pure landing and turn systems.

Each system takes the board and a :class:`ice_slide.state.GameState` and
returns a new state; a system whose precondition does not hold returns the
input unchanged. :mod:`ice_slide.step` orders them and attaches durations.
"""

from .hole import hole_system
from .portal import portal_system
from .slide import slide_system
from .terminal import turn_system, win_system

__all__ = [
    "hole_system",
    "portal_system",
    "slide_system",
    "turn_system",
    "win_system",
]
