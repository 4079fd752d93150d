import logging
import time
from collections import Counter
from typing import List, Optional

import streamlit as st
from st_keyup import st_keyup  # type: ignore

from ice_slide.actions import Direction, parse_direction
from ice_slide.config import GameConfig
from ice_slide.engine import TurnEngine
from ice_slide.observation import state_observation_dict
from ice_slide.state import GameState
from ice_slide.types import Phase
from ice_slide.utils.render import render_text

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s"
)

PHASE_LABELS = {
    Phase.IDLE: "Waiting for input",
    Phase.SLIDING: "Sliding…",
    Phase.RESOLVING_TILE: "Resolving tile…",
}

st.set_page_config(layout="wide", page_title="Ice Slide")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def get_engine() -> TurnEngine:
    if "engine" not in st.session_state:
        st.session_state["engine"] = TurnEngine.from_config(GameConfig())
    return st.session_state["engine"]


def get_keyboard_direction() -> Optional[Direction]:
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="ice_key_input",
            placeholder="Type: WASD to slide",
        )
        or ""
    )
    prev_value: str = st.session_state.get("ice_key_input_prev", "")
    st.session_state["ice_key_input_prev"] = value
    if value != prev_value:
        new_values: List[str] = list((Counter(value) - Counter(prev_value)).elements())
        if not new_values:
            return None
        return parse_direction(new_values[-1].lower())
    return None


def display_state(board_slot, status_slot, engine: TurnEngine, state: GameState) -> None:
    board_slot.code(render_text(engine.board, state), language=None)
    if state.winner_id is not None:
        status_slot.success(f"Player {state.winner_id} wins!", icon="🏁")
    else:
        status_slot.info(
            f"**Player {state.current_player_id}'s turn** · {PHASE_LABELS[state.phase]}",
            icon="🧊",
        )


def play_move(board_slot, status_slot, engine: TurnEngine, direction: Direction) -> None:
    """Render every sub-step of the move, holding each for its duration."""
    for transition in engine.play(direction):
        display_state(board_slot, status_slot, engine, transition.state)
        time.sleep(transition.duration_ms / 1000)


# --------- Main App ---------
engine = get_engine()
tab_game, tab_state = st.tabs(["Game", "State"])

with tab_game:
    left_col, right_col = st.columns([0.6, 0.4])

    with left_col:
        status_slot = st.empty()
        board_slot = st.empty()
        display_state(board_slot, status_slot, engine, engine.state)

    with right_col:
        direction: Optional[Direction] = get_keyboard_direction()

        _, up_col, _ = st.columns([1, 1, 1])
        with up_col:
            if st.button("⬆️", key="up_btn", use_container_width=True):
                direction = Direction.UP
        left_btn, down_btn, right_btn = st.columns([1, 1, 1])
        with left_btn:
            if st.button("⬅️", key="left_btn", use_container_width=True):
                direction = Direction.LEFT
        with down_btn:
            if st.button("⬇️", key="down_btn", use_container_width=True):
                direction = Direction.DOWN
        with right_btn:
            if st.button("➡️", key="right_btn", use_container_width=True):
                direction = Direction.RIGHT

        st.divider()
        if st.button("🔁 Play Again", key="restart_btn", use_container_width=True):
            engine.restart()
            display_state(board_slot, status_slot, engine, engine.state)

    if direction is not None:
        play_move(board_slot, status_slot, engine, direction)

with tab_state:
    st.json(state_observation_dict(engine.state))
