from dataclasses import dataclass
from typing import Optional

from ice_slide.types import PortalId, TileKind


@dataclass(frozen=True)
class Cell:
    """Single board tile.

    Attributes:
        kind: Tile category.
        portal_id: Pair identifier, set only when ``kind`` is ``PORTAL``. Two
            cells of a board share each id.
    """

    kind: TileKind
    portal_id: Optional[PortalId] = None

    @property
    def is_portal(self) -> bool:
        return self.kind == TileKind.PORTAL


EMPTY = Cell(TileKind.EMPTY)
WALL = Cell(TileKind.WALL)
TARGET = Cell(TileKind.TARGET)
HOLE = Cell(TileKind.HOLE)


def portal(portal_id: PortalId) -> Cell:
    """Create a portal entrance tagged with ``portal_id``."""
    return Cell(TileKind.PORTAL, portal_id)
