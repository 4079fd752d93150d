"""Immutable board model.

A :class:`Board` is built once from a layout table of tile codes and never
mutated. Derived lookups (spawn positions, portal pairing) are computed in
:meth:`Board.from_layout` and stored as persistent maps, so queries during
play are plain dictionary reads.

Tile codes:

* ``E`` empty ice, ``W`` wall, ``T`` target, ``H`` hole.
* ``P<n>`` spawn marker of player ``n`` (the cell itself is empty ice).
* ``O<id>`` portal entrance; every ``id`` must appear exactly twice.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from ice_slide.components import EMPTY, HOLE, TARGET, WALL, Cell, Position, portal
from ice_slide.errors import InvalidBoard, OutOfBounds
from ice_slide.types import PlayerId, PortalId, TileKind

Layout = Sequence[Sequence[str]]

_SIMPLE_CODES: Dict[str, Cell] = {
    "E": EMPTY,
    "W": WALL,
    "T": TARGET,
    "H": HOLE,
}


def parse_tile_code(code: str) -> Tuple[Cell, Optional[PlayerId]]:
    """Decode one layout code.

    Returns:
        Tuple[Cell, Optional[PlayerId]]: The cell and, for spawn markers, the
        player id whose start position it records.

    Raises:
        InvalidBoard: If the code is not recognized.
    """
    code = code.strip()
    if code in _SIMPLE_CODES:
        return _SIMPLE_CODES[code], None
    if code.startswith("P") and code[1:].isdigit():
        return EMPTY, int(code[1:])
    if code.startswith("O") and len(code) > 1:
        return portal(code[1:]), None
    raise InvalidBoard(f"Unknown tile code: {code!r}")


@dataclass(frozen=True)
class Board:
    """Static grid geometry and tile queries.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        rows (PVector[PVector[Cell]]): Cells indexed ``rows[row][col]``.
        spawns (PMap[PlayerId, Position]): Start cell of each player marker.
        portal_pairs (PMap[Position, Position]): Each portal cell mapped to its
            partner.
    """

    width: int
    height: int
    rows: PVector[PVector[Cell]]
    spawns: PMap[PlayerId, Position] = pmap()
    portal_pairs: PMap[Position, Position] = pmap()

    @classmethod
    def from_layout(
        cls, layout: Layout, player_ids: Sequence[PlayerId] = (1, 2)
    ) -> "Board":
        """Build a board from a table of tile codes.

        Args:
            layout: Rows of tile codes (see module docstring).
            player_ids: Players that must have exactly one spawn marker.

        Raises:
            InvalidBoard: On an empty layout, ragged rows, unknown codes,
                duplicate or missing spawn markers, or a portal id that does
                not appear exactly twice.
        """
        if len(layout) == 0 or len(layout[0]) == 0:
            raise InvalidBoard("Layout must contain at least one cell")

        width = len(layout[0])
        rows: List[PVector[Cell]] = []
        spawns: Dict[PlayerId, Position] = {}
        portal_cells: Dict[PortalId, List[Position]] = {}

        for r, codes in enumerate(layout):
            if len(codes) != width:
                raise InvalidBoard(
                    f"Row {r} has {len(codes)} cells, expected {width}"
                )
            row: List[Cell] = []
            for c, code in enumerate(codes):
                cell, spawn_of = parse_tile_code(code)
                pos = Position(r, c)
                if spawn_of is not None:
                    if spawn_of in spawns:
                        raise InvalidBoard(f"Duplicate spawn marker P{spawn_of}")
                    spawns[spawn_of] = pos
                if cell.is_portal and cell.portal_id is not None:
                    portal_cells.setdefault(cell.portal_id, []).append(pos)
                row.append(cell)
            rows.append(pvector(row))

        for player_id in player_ids:
            if player_id not in spawns:
                raise InvalidBoard(f"Missing spawn marker P{player_id}")

        portal_pairs: Dict[Position, Position] = {}
        for portal_id, cells in portal_cells.items():
            if len(cells) != 2:
                raise InvalidBoard(
                    f"Portal O{portal_id} appears {len(cells)} times, expected 2"
                )
            a, b = cells
            portal_pairs[a] = b
            portal_pairs[b] = a

        return cls(
            width=width,
            height=len(rows),
            rows=pvector(rows),
            spawns=pmap(spawns),
            portal_pairs=pmap(portal_pairs),
        )

    def is_in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the grid rectangle."""
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def cell_at(self, pos: Position) -> Cell:
        """Return the cell at an in-bounds ``pos``.

        Raises:
            OutOfBounds: If ``pos`` is outside the grid. Callers in the engine
                bounds-check through :meth:`is_wall` first.
        """
        if not self.is_in_bounds(pos):
            raise OutOfBounds(
                f"Out of bounds: {(pos.row, pos.col)} for grid "
                f"{self.height}x{self.width}"
            )
        return self.rows[pos.row][pos.col]

    def is_wall(self, pos: Position) -> bool:
        """Return True for wall cells and for anything off the board."""
        if not self.is_in_bounds(pos):
            return True
        return self.rows[pos.row][pos.col].kind == TileKind.WALL

    def portal_partner(self, pos: Position) -> Optional[Position]:
        """Return the paired entrance if ``pos`` is a portal, else ``None``."""
        return self.portal_pairs.get(pos)

    def spawn_position(self, player_id: PlayerId) -> Position:
        """Return the start cell recorded by the ``P<n>`` marker of ``player_id``.

        Raises:
            KeyError: If the layout has no spawn marker for ``player_id``.
        """
        return self.spawns[player_id]

    def positions(self) -> Iterator[Position]:
        """Iterate every coordinate in row-major order."""
        for r in range(self.height):
            for c in range(self.width):
                yield Position(r, c)
