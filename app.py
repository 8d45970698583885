import time
from typing import Optional

import streamlit as st

from sprite_world.clock import TickClock, advance
from sprite_world.config import DESIRED_FPS, GRID_CELL_SIZE, WorldConfig
from sprite_world.errors import SpriteWorldError
from sprite_world.renderer import render
from sprite_world.state import State
from sprite_world.step import run
from sprite_world.types import OffsetPolicy
from sprite_world.utils.logging import setup_logging
from sprite_world.world import load_world

setup_logging()

st.set_page_config(layout="wide", page_title="Sprite World")
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


def set_default_config() -> None:
    if "world_config" not in st.session_state:
        st.session_state["world_config"] = WorldConfig()


def get_config_from_widgets() -> WorldConfig:
    config: WorldConfig = st.session_state["world_config"]

    st.subheader("Grid")
    width: int = st.slider("Grid width", 10, 120, config.width, key="width")
    height: int = st.slider("Grid height", 10, 80, config.height, key="height")
    offset_policy = OffsetPolicy(
        st.selectbox(
            "Out-of-grid sprite cells",
            [policy.value for policy in OffsetPolicy],
            index=[policy.value for policy in OffsetPolicy].index(config.offset_policy.value),
            key="offset_policy",
        )
    )

    st.subheader("Spawning")
    resource_dir: str = st.text_input("Sprite resources", config.resource_dir, key="resource_dir")
    spawn_sprite: str = st.text_input("Spawn sprite", config.spawn_sprite, key="spawn_sprite")
    initial_entities: int = st.number_input(
        "Initial entities", min_value=0, max_value=50, value=config.initial_entities, key="initial"
    )
    seed_text: str = st.text_input(
        "Seed (blank for random)", "" if config.seed is None else str(config.seed), key="seed"
    )
    seed: Optional[int] = int(seed_text) if seed_text.strip().lstrip("-").isdigit() else None

    return WorldConfig(
        width=width,
        height=height,
        spawn_sprite=spawn_sprite,
        resource_dir=resource_dir,
        initial_entities=int(initial_entities),
        offset_policy=offset_policy,
        seed=seed,
    )


def make_world(config: WorldConfig) -> None:
    try:
        state = load_world(config)
    except SpriteWorldError as exc:
        st.error(str(exc))
        return
    st.session_state["world_config"] = config
    st.session_state["state"] = state
    st.session_state["clock"] = TickClock.from_fps(DESIRED_FPS, max_ticks_per_frame=10)
    st.session_state["last_frame"] = time.monotonic()


set_default_config()

left_col, right_col = st.columns([0.3, 0.7])

with left_col:
    config = get_config_from_widgets()
    if st.button("Create world", use_container_width=True) or "state" not in st.session_state:
        make_world(config)

    st.subheader("Simulation")
    ticks: int = st.number_input("Ticks per run", min_value=1, max_value=1000, value=1)
    step_col, run_col = st.columns(2)
    with step_col:
        if st.button("Step", use_container_width=True) and "state" in st.session_state:
            st.session_state["state"] = run(st.session_state["state"], 1)
    with run_col:
        if st.button("Run", use_container_width=True) and "state" in st.session_state:
            st.session_state["state"] = run(st.session_state["state"], int(ticks))
    realtime: bool = st.toggle("Real time", value=False)

with right_col:
    if "state" in st.session_state:
        if realtime:
            now = time.monotonic()
            state, clock, _ = advance(
                st.session_state["state"],
                st.session_state["clock"],
                now - st.session_state["last_frame"],
            )
            st.session_state["state"] = state
            st.session_state["clock"] = clock
            st.session_state["last_frame"] = now
        else:
            st.session_state["last_frame"] = time.monotonic()

        state: State = st.session_state["state"]
        st.image(render(state, GRID_CELL_SIZE), use_container_width=True)
        st.caption(
            f"Tick {state.tick} | Entities {len(state.entities)} | "
            f"Collisions last tick {len(state.collisions)} | Seed {state.seed}"
        )

        if realtime:
            time.sleep(1.0 / DESIRED_FPS)
            st.rerun()
