"""Common type aliases and enumerations."""

from enum import StrEnum, auto

PlayerId = int
PortalId = str


class TileKind(StrEnum):
    """Tile categories a board cell can carry."""

    EMPTY = auto()
    WALL = auto()
    TARGET = auto()
    HOLE = auto()
    PORTAL = auto()


STOPPING_TILES = frozenset({TileKind.TARGET, TileKind.HOLE, TileKind.PORTAL})
"""Tiles a slide stops *on* (rather than in front of)."""


class Phase(StrEnum):
    """Engine phase exposed to renderers.

    Members:
        IDLE: Accepting input (or terminal when a winner is set).
        SLIDING: Slide animation in flight.
        RESOLVING_TILE: Post-landing effect (hole / portal) in flight.
    """

    IDLE = auto()
    SLIDING = auto()
    RESOLVING_TILE = auto()


class TransitionKind(StrEnum):
    """Sub-step categories emitted while resolving a move."""

    SLIDE = auto()
    PAUSE = auto()
    RESET = auto()
    TELEPORT = auto()
    WIN = auto()
    TURN = auto()
    RESTART = auto()
