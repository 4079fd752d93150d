"""Plain-text board rendering.

Used by the Streamlit host and handy in test failure output. Each cell is a
single glyph; players are drawn over the tile they stand on, the player to
move last so it stays visible when both share a cell.
"""

from typing import Dict, List

from ice_slide.board import Board
from ice_slide.components import Cell
from ice_slide.state import GameState
from ice_slide.types import TileKind

TILE_GLYPHS: Dict[TileKind, str] = {
    TileKind.EMPTY: "·",
    TileKind.WALL: "█",
    TileKind.TARGET: "⚑",
    TileKind.HOLE: "○",
    TileKind.PORTAL: "◎",
}

PLAYER_GLYPHS: Dict[int, str] = {1: "1", 2: "2"}


def tile_glyph(cell: Cell) -> str:
    return TILE_GLYPHS[cell.kind]


def render_rows(board: Board, state: GameState) -> List[str]:
    """Return one string per board row."""
    grid: List[List[str]] = [
        [tile_glyph(cell) for cell in row] for row in board.rows
    ]
    players = sorted(
        state.players, key=lambda p: p.id == state.current_player_id
    )
    for player in players:
        glyph = PLAYER_GLYPHS.get(player.id, str(player.id)[-1])
        grid[player.position.row][player.position.col] = glyph
    return ["".join(row) for row in grid]


def render_text(board: Board, state: GameState) -> str:
    return "\n".join(render_rows(board, state))
