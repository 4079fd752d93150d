"""Immutable ``GameState`` snapshot.

Every transition builds a new ``GameState``; nothing mutates in place. The
engine keeps the current snapshot and hands the same objects to observers,
which therefore can only read them.

Design notes:

* ``players`` is ordered by turn order and ``turn_index`` is the cursor into
  it, so the phase machine does not depend on there being exactly two
  players.
* ``winner_id`` is the terminal marker; once set, input is ignored until a
  restart.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional, Sequence

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from ice_slide.board import Board
from ice_slide.components import PlayerState, Position
from ice_slide.types import Phase, PlayerId


@dataclass(frozen=True)
class GameState:
    """Game snapshot.

    Attributes:
        players (PVector[PlayerState]): Player pieces in turn order.
        turn_index (int): Index into ``players`` of the player to move.
        phase (Phase): Current engine phase.
        winner_id (PlayerId | None): Set once a player reaches the target.
    """

    players: PVector[PlayerState]
    turn_index: int = 0
    phase: Phase = Phase.IDLE
    winner_id: Optional[PlayerId] = None

    @property
    def current_player(self) -> PlayerState:
        return self.players[self.turn_index]

    @property
    def current_player_id(self) -> PlayerId:
        return self.current_player.id

    @property
    def accepts_input(self) -> bool:
        """True when a new move may start."""
        return self.phase == Phase.IDLE and self.winner_id is None

    def player(self, player_id: PlayerId) -> PlayerState:
        for player in self.players:
            if player.id == player_id:
                return player
        raise KeyError(f"Unknown player: {player_id}")

    def with_position(self, player_id: PlayerId, position: Position) -> "GameState":
        """Return a copy with ``player_id`` moved to ``position``."""
        players = pvector(
            replace(p, position=position) if p.id == player_id else p
            for p in self.players
        )
        return replace(self, players=players)

    @property
    def description(self) -> PMap[str, Any]:
        """Compact summary for logging and debugging."""
        return pmap(
            {
                "phase": self.phase,
                "current_player_id": self.current_player_id,
                "winner_id": self.winner_id,
                "positions": pmap(
                    {p.id: (p.position.row, p.position.col) for p in self.players}
                ),
            }
        )


def initial_state(board: Board, player_ids: Sequence[PlayerId] = (1, 2)) -> GameState:
    """All players on their spawns, first player to move, phase IDLE."""
    players = pvector(
        PlayerState(
            id=player_id,
            position=board.spawn_position(player_id),
            start_position=board.spawn_position(player_id),
        )
        for player_id in player_ids
    )
    return GameState(players=players)
