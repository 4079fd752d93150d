"""Game configuration dataclasses.

Durations are in milliseconds and describe how long a host should hold each
emitted snapshot before requesting the next one. Two classes are used: the
short slide / settle time and the slightly longer pause before a hole or
portal effect.
"""

from dataclasses import dataclass, field
from typing import Tuple

from ice_slide.board import Layout
from ice_slide.levels import DEFAULT_LAYOUT
from ice_slide.types import PlayerId

SLIDE_MS = 300
EFFECT_PAUSE_MS = 400


@dataclass(frozen=True)
class TimingConfig:
    """Hold durations per sub-step.

    Attributes:
        slide_ms: Slide animation from the start cell to the resting cell.
        effect_pause_ms: Pause on a hole / portal before its effect plays.
        settle_ms: Reset or teleport animation after the pause.
    """

    slide_ms: int = SLIDE_MS
    effect_pause_ms: int = EFFECT_PAUSE_MS
    settle_ms: int = SLIDE_MS

    def __post_init__(self) -> None:
        for name in ("slide_ms", "effect_pause_ms", "settle_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")


DEFAULT_TIMING = TimingConfig()


@dataclass(frozen=True)
class GameConfig:
    """Everything needed to start a session.

    Attributes:
        layout: Tile code table, see :mod:`ice_slide.board`.
        timing: Hold durations.
        player_ids: Turn order; each id needs a ``P<n>`` marker in ``layout``.
    """

    layout: Layout = field(
        default_factory=lambda: [list(row) for row in DEFAULT_LAYOUT]
    )
    timing: TimingConfig = DEFAULT_TIMING
    player_ids: Tuple[PlayerId, ...] = (1, 2)

    def __post_init__(self) -> None:
        if len(self.player_ids) < 2:
            raise ValueError("At least two players are required")
        if len(set(self.player_ids)) != len(self.player_ids):
            raise ValueError(f"Duplicate player ids: {self.player_ids}")
