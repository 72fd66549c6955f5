# skylane/tests/test_simulation.py
import random

import pytest

from skylane.game.config import (
    CRAFT_X, MIN_LIVE_OBSTACLES, NARROW_WIDTH, WIDE_WIDTH, BASE_SCROLL_SPEED,
)
from skylane.game.controls import Intents, IDLE
from skylane.game.obstacles import Obstacle
from skylane.game.simulation import LifecycleError, RunState, Simulation


def started(seed=123, width=NARROW_WIDTH):
    sim = Simulation(playfield_width=width)
    sim.start(seed=seed)
    return sim


def force_crash(sim: Simulation):
    """Drop a wall across the whole playfield right on top of the craft."""
    sim.field.obstacles.append(
        Obstacle(id=998, x=0, y=sim.craft.y - 10, width=sim.playfield_width, height=100))
    sim.tick()


def test_new_simulation_waits_for_start():
    sim = Simulation()
    assert sim.run_state is RunState.NOT_STARTED
    assert sim.tick(Intents(False, True)) is False
    assert sim.tick_count == 0
    assert sim.craft.x == CRAFT_X


def test_start_seeds_opening_pairs():
    sim = started()
    assert sim.running
    assert len(sim.field) == MIN_LIVE_OBSTACLES
    assert (sim.score, sim.level, sim.terminal) == (0, 1, False)
    assert sim.scroll_speed == pytest.approx(BASE_SCROLL_SPEED)


def test_illegal_lifecycle_calls_raise():
    sim = Simulation()
    with pytest.raises(LifecycleError):
        sim.restart()
    sim.start(seed=1)
    with pytest.raises(LifecycleError):
        sim.start()
    with pytest.raises(LifecycleError):
        sim.restart()
    sim.restart(force=True)
    assert sim.running


def test_crash_terminates_and_suspends_ticks():
    sim = started()
    force_crash(sim)
    assert sim.terminal
    assert sim.run_state is RunState.TERMINATED
    assert sim.crashed_into is not None and sim.crashed_into.id == 998

    ticks = sim.tick_count
    ys = [o.y for o in sim.field.obstacles]
    x = sim.craft.x
    assert sim.tick(Intents(True, False)) is False
    assert sim.tick_count == ticks
    assert [o.y for o in sim.field.obstacles] == ys
    assert sim.craft.x == x


def test_terminal_hook_fires_once_per_run():
    sim = started()
    seen = []
    sim.on_terminal(seen.append)
    force_crash(sim)
    sim.tick()
    sim.tick()
    assert len(seen) == 1
    assert seen[0].terminal and seen[0].run_state is RunState.TERMINATED

    sim.restart()
    force_crash(sim)
    assert len(seen) == 2


def test_crash_tick_does_not_score():
    sim = started()
    for ob in list(sim.field.obstacles)[:2]:
        ob.y = sim.craft.y + sim.craft.height + 25
    force_crash(sim)
    assert sim.terminal
    assert sim.score == 0


def test_restart_resets_everything():
    sim = started(seed=5)
    for _ in range(40):
        sim.tick(Intents(False, True))
    sim.score = 12
    sim._apply_difficulty()
    assert sim.level == 3
    force_crash(sim)

    sim.restart()
    assert sim.running and not sim.terminal
    assert (sim.score, sim.level, sim.tick_count) == (0, 1, 0)
    assert sim.scroll_speed == pytest.approx(BASE_SCROLL_SPEED)
    assert sim.craft.x == CRAFT_X
    assert sim.crashed_into is None
    assert sorted({o.pair_id for o in sim.field.obstacles}) == [1, 2, 3]
    assert not any(o.passed for o in sim.field.obstacles)


def test_same_seed_same_layout():
    a = started(seed=77).snapshot()
    b = started(seed=77).snapshot()
    assert a.obstacles == b.obstacles
    c = started(seed=78).snapshot()
    assert a.obstacles != c.obstacles


def test_restart_with_same_seed_replays_the_run():
    sim = started(seed=42)
    first = sim.snapshot().obstacles
    sim.restart(force=True, seed=sim.seed)
    assert sim.snapshot().obstacles == first


def test_clearing_a_pair_scores_one_point():
    sim = started(seed=3)
    sim.field.obstacles = [
        Obstacle(id=0, x=0, y=575, width=60, height=80),
        Obstacle(id=1, x=260, y=575, width=100, height=80),
    ]
    for _ in range(10):
        sim.tick()
    assert not sim.terminal
    assert sim.score == 1
    assert sim.scroll_speed > BASE_SCROLL_SPEED


def test_width_change_waits_for_restart():
    sim = started(width=NARROW_WIDTH)
    sim.set_playfield_width(WIDE_WIDTH)
    assert sim.playfield_width == NARROW_WIDTH
    sim.restart(force=True)
    assert sim.playfield_width == WIDE_WIDTH


def test_width_too_narrow_for_a_gap_is_rejected():
    with pytest.raises(ValueError):
        Simulation(playfield_width=150)


def test_invariants_hold_over_random_play():
    rng = random.Random(2024)
    sim = started(seed=9)
    last_score = 0
    runs = 0
    for _ in range(20_000):
        intents = Intents(rng.random() < 0.4, rng.random() < 0.4)
        applied = sim.tick(intents)
        if applied:
            assert 0.0 <= sim.craft.x <= sim.playfield_width - sim.craft.width
            assert len(sim.field) >= MIN_LIVE_OBSTACLES
            assert sim.score >= last_score
            last_score = sim.score
        if sim.terminal:
            runs += 1
            sim.restart()
            assert sim.score == 0
            last_score = 0
    assert runs >= 1


def test_snapshot_is_a_copy():
    sim = started()
    snap = sim.snapshot()
    sim.tick(IDLE)
    assert snap.tick_count == 0
    assert snap.obstacles != sim.snapshot().obstacles
