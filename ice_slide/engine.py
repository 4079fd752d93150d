"""Turn engine: the single owner of the live ``GameState``.

The engine wraps the pure :func:`ice_slide.step.step` reducer with the
bookkeeping a host needs:

* phase gating: moves arriving while a sequence is in flight, or after a
  winner is declared, are dropped (never queued);
* a pending queue of the current move's transitions, handed out one at a
  time through :meth:`TurnEngine.advance` so the host controls timing;
* listener notification for every applied transition.

Typical host loop::

    transition = engine.submit_move(Direction.RIGHT)
    while transition is not None:
        render(transition.state)
        sleep(transition.duration_ms / 1000)
        transition = engine.advance()
"""

import logging
from collections import deque
from typing import Callable, Deque, Iterator, List, Optional, Tuple

from ice_slide.actions import parse_direction
from ice_slide.board import Board
from ice_slide.config import DEFAULT_TIMING, GameConfig, TimingConfig
from ice_slide.state import GameState, initial_state
from ice_slide.step import step
from ice_slide.transition import Transition
from ice_slide.types import PlayerId, TransitionKind

logger = logging.getLogger(__name__)

Listener = Callable[[Transition], None]


class TurnEngine:
    """Stateful move sequencer for one game session."""

    def __init__(
        self,
        board: Board,
        player_ids: Tuple[PlayerId, ...] = (1, 2),
        timing: TimingConfig = DEFAULT_TIMING,
    ) -> None:
        self.board = board
        self.timing = timing
        self._initial = initial_state(board, player_ids)
        self._state = self._initial
        self._pending: Deque[Transition] = deque()
        self._listeners: List[Listener] = []

    @classmethod
    def from_config(cls, config: GameConfig) -> "TurnEngine":
        """Build the board from ``config.layout`` and start a session.

        Raises:
            InvalidBoard: If the layout is malformed.
        """
        board = Board.from_layout(config.layout, config.player_ids)
        return cls(board, player_ids=config.player_ids, timing=config.timing)

    # -- queries --------------------------------------------------------------

    @property
    def state(self) -> GameState:
        """Snapshot of the most recently applied transition."""
        return self._state

    @property
    def initial(self) -> GameState:
        return self._initial

    @property
    def busy(self) -> bool:
        """True while transitions of a submitted move are still pending."""
        return len(self._pending) > 0

    @property
    def accepts_input(self) -> bool:
        return not self.busy and self._state.accepts_input

    # -- commands -------------------------------------------------------------

    def submit_move(self, direction: object) -> Optional[Transition]:
        """Start resolving a move for the current player.

        ``direction`` may be a :class:`Direction` or any signal understood by
        :func:`parse_direction`. Unrecognized signals, and moves submitted
        while another is in flight or after the game is won, are discarded.

        Returns:
            Optional[Transition]: The first (SLIDE) transition, already
            applied, or ``None`` if the move was discarded.
        """
        parsed = parse_direction(direction)
        if parsed is None:
            logger.debug("Ignoring non-directional input %r", direction)
            return None
        if not self.accepts_input:
            logger.debug(
                "Discarding %s: phase=%s winner=%s pending=%d",
                parsed,
                self._state.phase,
                self._state.winner_id,
                len(self._pending),
            )
            return None

        mover = self._state.current_player
        transitions = step(self.board, self._state, parsed, self.timing)
        logger.info(
            "Player %d moves %s from (%d, %d): %s",
            mover.id,
            parsed,
            mover.position.row,
            mover.position.col,
            ", ".join(t.kind for t in transitions),
        )
        self._pending.extend(transitions)
        return self.advance()

    def advance(self) -> Optional[Transition]:
        """Apply and return the next pending transition.

        Returns ``None`` once the current move is fully resolved.
        """
        if not self._pending:
            return None
        transition = self._pending.popleft()
        self._apply(transition)
        if transition.kind == TransitionKind.WIN:
            logger.info("Player %d wins", transition.state.winner_id)
        return transition

    def play(self, direction: object) -> Iterator[Transition]:
        """Submit a move and yield each of its transitions in order.

        Yields nothing if the move is discarded.
        """
        transition = self.submit_move(direction)
        while transition is not None:
            yield transition
            transition = self.advance()

    def restart(self) -> Transition:
        """Return to the initial snapshot from any phase. Always succeeds."""
        dropped = len(self._pending)
        self._pending.clear()
        transition = Transition(TransitionKind.RESTART, self._initial)
        self._apply(transition)
        logger.info("Game restarted (%d pending transitions dropped)", dropped)
        return transition

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for every applied transition.

        Returns:
            Callable[[], None]: Call to unsubscribe.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- internals ------------------------------------------------------------

    def _apply(self, transition: Transition) -> None:
        self._state = transition.state
        logger.debug(
            "Applied %s: %s", transition.kind, dict(transition.state.description)
        )
        for listener in list(self._listeners):
            listener(transition)
