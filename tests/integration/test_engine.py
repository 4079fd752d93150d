import logging
from typing import List

import pytest

from ice_slide.actions import DIRECTIONS, Direction
from ice_slide.config import GameConfig, TimingConfig
from ice_slide.engine import TurnEngine
from ice_slide.errors import InvalidBoard
from ice_slide.levels import DEFAULT_LAYOUT
from ice_slide.transition import Transition
from ice_slide.types import Phase, TransitionKind
from tests.test_utils import assert_player_positions, make_engine


def play_all(engine: TurnEngine, direction) -> List[Transition]:
    return list(engine.play(direction))


def test_initial_state() -> None:
    engine = make_engine()
    state = engine.state
    assert state.phase == Phase.IDLE
    assert state.winner_id is None
    assert state.current_player_id == 1
    assert_player_positions(state, {1: (0, 0), 2: (0, 9)})
    assert engine.accepts_input


def test_submit_move_applies_first_transition_only() -> None:
    engine = make_engine()
    first = engine.submit_move(Direction.RIGHT)
    assert first is not None
    assert first.kind == TransitionKind.SLIDE
    assert engine.state is first.state
    assert engine.state.phase == Phase.SLIDING
    assert engine.busy
    assert not engine.accepts_input

    last = engine.advance()
    assert last is not None and last.kind == TransitionKind.TURN
    assert engine.advance() is None
    assert not engine.busy
    assert engine.state.current_player_id == 2
    assert engine.state.phase == Phase.IDLE


def test_input_during_sequence_is_discarded() -> None:
    engine = make_engine()
    engine.submit_move(Direction.DOWN)  # P1 slides to (3, 0)
    snapshot = engine.state
    for direction in DIRECTIONS * 3:
        assert engine.submit_move(direction) is None
    assert engine.state is snapshot

    remaining = []
    transition = engine.advance()
    while transition is not None:
        remaining.append(transition.kind)
        transition = engine.advance()
    # nothing was queued by the discarded input
    assert remaining == [TransitionKind.TURN]
    assert_player_positions(engine.state, {1: (3, 0), 2: (0, 9)})


def test_discarded_input_notifies_nobody() -> None:
    engine = make_engine()
    engine.submit_move(Direction.RIGHT)
    seen: List[Transition] = []
    engine.subscribe(seen.append)
    engine.submit_move(Direction.LEFT)
    engine.submit_move(Direction.LEFT)
    assert seen == []


@pytest.mark.parametrize("signal", ["Enter", " ", "x", None, 42])
def test_non_directional_signals_are_ignored(signal) -> None:
    engine = make_engine()
    assert engine.submit_move(signal) is None
    assert engine.state is engine.initial


def test_key_names_are_accepted() -> None:
    engine = make_engine()
    transitions = play_all(engine, "ArrowRight")
    assert transitions[0].kind == TransitionKind.SLIDE
    assert_player_positions(engine.state, {1: (0, 3)})


def test_blocked_move_advances_turn() -> None:
    engine = make_engine()
    transitions = play_all(engine, Direction.UP)
    assert [t.kind for t in transitions] == [TransitionKind.SLIDE, TransitionKind.TURN]
    assert_player_positions(engine.state, {1: (0, 0)})
    assert engine.state.current_player_id == 2


def test_player_parked_on_portal_bounces_back_against_wall() -> None:
    engine = make_engine(
        layout=[
            ["P1", "E", "O1"],
            ["W", "W", "E"],
            ["P2", "E", "O1"],
        ]
    )
    play_all(engine, Direction.RIGHT)
    assert_player_positions(engine.state, {1: (2, 2)})
    play_all(engine, Direction.UP)
    assert_player_positions(engine.state, {2: (2, 0)})

    transitions = play_all(engine, Direction.DOWN)
    assert [t.kind for t in transitions] == [
        TransitionKind.SLIDE,
        TransitionKind.PAUSE,
        TransitionKind.TELEPORT,
        TransitionKind.TURN,
    ]
    assert_player_positions(engine.state, {1: (0, 2), 2: (2, 0)})
    assert engine.state.current_player_id == 2


def test_players_alternate() -> None:
    engine = make_engine()
    play_all(engine, Direction.RIGHT)
    assert engine.state.current_player_id == 2
    play_all(engine, Direction.DOWN)
    assert engine.state.current_player_id == 1
    assert_player_positions(engine.state, {1: (0, 3), 2: (3, 9)})


def test_full_game_on_default_board() -> None:
    engine = make_engine()
    moves = [
        (1, Direction.RIGHT, {1: (0, 3)}),
        (2, Direction.DOWN, {2: (3, 9)}),
        (1, Direction.DOWN, {1: (8, 3)}),  # portal (1, 3) -> (8, 3)
        (2, Direction.LEFT, {2: (0, 9)}),  # hole (3, 8) -> spawn
        (1, Direction.UP, {1: (7, 3)}),
        (2, Direction.LEFT, {2: (0, 5)}),
        (1, Direction.RIGHT, {1: (7, 4)}),
        (2, Direction.DOWN, {2: (1, 5)}),
    ]
    for mover, direction, expected in moves:
        assert engine.state.current_player_id == mover
        play_all(engine, direction)
        assert_player_positions(engine.state, expected)
        assert engine.state.winner_id is None

    transitions = play_all(engine, Direction.UP)
    assert [t.kind for t in transitions] == [TransitionKind.SLIDE, TransitionKind.WIN]
    assert engine.state.winner_id == 1
    assert engine.state.current_player_id == 1
    assert engine.state.phase == Phase.IDLE
    assert_player_positions(engine.state, {1: (4, 4), 2: (1, 5)})


def test_no_moves_after_win() -> None:
    engine = make_engine(
        layout=[
            ["P1", "E", "T"],
            ["P2", "E", "E"],
        ]
    )
    play_all(engine, Direction.RIGHT)
    assert engine.state.winner_id == 1
    won = engine.state
    for direction in DIRECTIONS:
        assert engine.submit_move(direction) is None
        assert engine.state is won
    assert not engine.accepts_input


def test_restart_from_terminal_state() -> None:
    engine = make_engine(
        layout=[
            ["P1", "E", "T"],
            ["P2", "E", "E"],
        ]
    )
    play_all(engine, Direction.RIGHT)
    transition = engine.restart()
    assert transition.kind == TransitionKind.RESTART
    assert engine.state == engine.initial
    assert engine.state.winner_id is None
    assert engine.state.current_player_id == 1
    assert engine.accepts_input


def test_restart_mid_sequence_drops_pending() -> None:
    engine = make_engine()
    play_all(engine, Direction.RIGHT)
    engine.submit_move(Direction.DOWN)  # P2 mid-slide
    assert engine.busy
    engine.restart()
    assert not engine.busy
    assert engine.advance() is None
    assert engine.state == engine.initial
    assert_player_positions(engine.state, {1: (0, 0), 2: (0, 9)})
    assert engine.state.phase == Phase.IDLE


def test_restart_is_repeatable() -> None:
    engine = make_engine()
    engine.restart()
    engine.restart()
    assert engine.state == engine.initial


def test_listeners_receive_every_transition() -> None:
    engine = make_engine()
    seen: List[Transition] = []
    unsubscribe = engine.subscribe(seen.append)
    engine.submit_move(Direction.DOWN)
    engine.advance()
    assert [t.kind for t in seen] == [TransitionKind.SLIDE, TransitionKind.TURN]

    engine.restart()
    assert seen[-1].kind == TransitionKind.RESTART

    unsubscribe()
    unsubscribe()
    play_all(engine, Direction.RIGHT)
    assert len(seen) == 3


def test_custom_timing_is_used() -> None:
    engine = make_engine(timing=TimingConfig(slide_ms=10, effect_pause_ms=20, settle_ms=5))
    play_all(engine, Direction.RIGHT)
    play_all(engine, Direction.DOWN)
    transitions = play_all(engine, Direction.DOWN)  # P1 onto the portal
    assert [t.duration_ms for t in transitions] == [10, 20, 5, 0]


def test_from_config_rejects_invalid_layout() -> None:
    with pytest.raises(InvalidBoard):
        TurnEngine.from_config(GameConfig(layout=[["P1", "E"], ["E"]]))


def test_three_player_turn_order() -> None:
    engine = TurnEngine.from_config(
        GameConfig(layout=[["P1", "P2", "P3"], ["E", "E", "E"]], player_ids=(1, 2, 3))
    )
    order = []
    for _ in range(4):
        order.append(engine.state.current_player_id)
        play_all(engine, Direction.UP)
    assert order == [1, 2, 3, 1]


def test_engine_logs_moves(caplog: pytest.LogCaptureFixture) -> None:
    engine = make_engine()
    with caplog.at_level(logging.DEBUG, logger="ice_slide.engine"):
        play_all(engine, Direction.RIGHT)
        engine.submit_move(Direction.RIGHT)
        engine.submit_move("Enter")
    messages = [r.getMessage() for r in caplog.records]
    assert any("Player 1 moves right" in m for m in messages)
    assert any("Ignoring non-directional input" in m for m in messages)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"player_ids": (1,)},
        {"player_ids": (1, 1)},
    ],
)
def test_game_config_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_timing_config_validation() -> None:
    with pytest.raises(ValueError):
        TimingConfig(slide_ms=-1)


def test_default_layout_is_copied_per_config() -> None:
    config = GameConfig()
    assert config.layout == DEFAULT_LAYOUT
    assert config.layout is not DEFAULT_LAYOUT

    config.layout[0][1] = "W"
    assert DEFAULT_LAYOUT[0][1] == "E"
    assert GameConfig().layout[0][1] == "E"
