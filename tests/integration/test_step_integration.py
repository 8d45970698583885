from typing import List, Tuple

import pytest

from sprite_world.errors import MissingCatalogEntry
from sprite_world.state import CollisionPair, State
from sprite_world.step import run, step
from sprite_world.world import create_world, is_valid_state
from tests.test_utils import DEFAULT_CATALOG, FixedRng, ids, make_entity, make_state


def _script_spawns(monkeypatch: pytest.MonkeyPatch, positions: List[Tuple[int, int]]) -> None:
    values = [v for xy in positions for v in xy]
    rng = FixedRng(values)
    monkeypatch.setattr("sprite_world.step.tick_rng", lambda state: rng)


def test_spawned_entity_on_occupied_cell_kills_both(monkeypatch: pytest.MonkeyPatch) -> None:
    # 60x40 grid, A at (10, 10); the tick spawns B at (10, 10).
    a = make_entity(0, (10, 10))
    state = make_state([a], width=60, height=40, spawn_sprite="Dot")
    _script_spawns(monkeypatch, [(10, 10)])

    new_state = step(state)

    assert list(new_state.collisions) == [CollisionPair(claimant=0, challenger=1)]
    assert not new_state.has_entity(0)
    assert not new_state.has_entity(1)
    assert ids(new_state) == []
    assert new_state.next_entity_id == 2


def test_tick_without_overlap_adds_exactly_one_entity(monkeypatch: pytest.MonkeyPatch) -> None:
    entities = [make_entity(0, (1, 1)), make_entity(1, (3, 3), [(0, 0), (1, 0)])]
    state = make_state(entities, spawn_sprite="Dot")
    _script_spawns(monkeypatch, [(30, 30)])

    new_state = step(state)

    assert list(new_state.entities[:-1]) == list(state.entities)
    assert new_state.entities[-1].id == 2
    assert new_state.entities[-1].position.as_tuple() == (30, 30)
    assert list(new_state.collisions) == []
    assert new_state.tick == state.tick + 1


def test_empty_spawn_sprite_never_collides() -> None:
    state = make_state([make_entity(i, (i * 2, 0)) for i in range(10)], spawn_sprite="Empty")
    before = list(state.entities)
    for n in range(1, 21):
        state = step(state)
        assert len(state.entities) == len(before) + n
        assert list(state.entities[: len(before)]) == before


def test_spawn_then_collide_with_survivor_elsewhere(monkeypatch: pytest.MonkeyPatch) -> None:
    state = make_state(
        [make_entity(0, (5, 5), [(0, 0), (1, 0)]), make_entity(1, (20, 20))],
        spawn_sprite="Square",
    )
    # Square spawned at (4, 4) covers (5, 5).
    _script_spawns(monkeypatch, [(4, 4)])
    new_state = step(state)
    assert ids(new_state) == [1]


def test_step_does_not_mutate_input() -> None:
    state = make_state([make_entity(0, (1, 1))])
    snapshot = (list(state.entities), state.tick, state.next_entity_id)
    step(state)
    assert (list(state.entities), state.tick, state.next_entity_id) == snapshot


def test_seeded_runs_are_reproducible() -> None:
    def make() -> State:
        return create_world(
            DEFAULT_CATALOG, width=12, height=8, spawn_sprite="Square", seed=99
        )

    a = run(make(), 40)
    b = run(make(), 40)
    assert a == b
    assert a.tick == 40


def test_ids_stay_unique_under_heavy_collision() -> None:
    state = create_world(DEFAULT_CATALOG, width=5, height=5, spawn_sprite="Square", seed=1)
    start_counter = state.next_entity_id
    for _ in range(200):
        state = step(state)
        assert is_valid_state(state)
    assert state.next_entity_id == start_counter + 200


def test_population_shrinks_by_distinct_colliders(monkeypatch: pytest.MonkeyPatch) -> None:
    hub = make_entity(0, (5, 5), [(0, 0), (1, 0), (2, 0)])
    state = make_state(
        [hub, make_entity(1, (7, 5)), make_entity(2, (40, 30))], spawn_sprite="Dot"
    )
    # Newcomer lands on (6, 5): pairs (0, 1) and (0, 3), three distinct entities.
    _script_spawns(monkeypatch, [(6, 5)])
    new_state = step(state)
    assert len(new_state.collisions) == 2
    assert ids(new_state) == [2]


def test_run_zero_ticks_is_identity() -> None:
    state = make_state()
    assert run(state, 0) is state


def test_run_rejects_negative_ticks() -> None:
    with pytest.raises(ValueError):
        run(make_state(), -1)


def test_step_with_missing_spawn_sprite_is_fatal() -> None:
    state = make_state(spawn_sprite="Nope")
    with pytest.raises(MissingCatalogEntry):
        step(state)
