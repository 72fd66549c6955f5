# skylane/tests/test_scheduler.py
import pytest

from skylane.game.controls import Intents, ScriptedInput
from skylane.game.obstacles import Obstacle
from skylane.game.scheduler import FixedStepScheduler
from skylane.game.simulation import Simulation


def make(tick_hz=10, script=()):
    sim = Simulation(playfield_width=360)
    source = ScriptedInput(script)
    return sim, source, FixedStepScheduler(sim, source, tick_hz=tick_hz, max_catchup_ticks=5)


def test_no_ticks_before_start():
    sim, source, sched = make()
    assert sched.advance(1.0) == 0
    assert sim.tick_count == 0
    assert source.cursor == 0
    assert sched.accumulator == 0.0


def test_whole_steps_only_and_one_poll_per_tick():
    sim, source, sched = make(script=[Intents(False, True)] * 10)
    sim.start(seed=1)
    assert sched.advance(0.25) == 2
    assert sim.tick_count == 2
    assert source.cursor == 2
    assert sched.advance(0.06) == 1     # 0.05 left over + 0.06
    assert sim.tick_count == 3


def test_stall_is_capped_and_backlog_dropped():
    sim, _, sched = make()
    sim.start(seed=1)
    assert sched.advance(10.0) == 5
    assert sched.accumulator == 0.0


def test_no_tick_fires_after_a_crash():
    sim, _, sched = make()
    sim.start(seed=1)
    sim.field.obstacles.append(
        Obstacle(id=998, x=0, y=sim.craft.y - 10, width=360, height=100))
    assert sched.advance(0.45) == 1
    assert sim.terminal
    assert sched.accumulator == 0.0
    assert sched.advance(1.0) == 0
    assert sim.tick_count == 1

    sim.restart()
    assert sched.advance(0.1) == 1


def test_tick_rate_must_be_positive():
    sim = Simulation()
    with pytest.raises(ValueError):
        FixedStepScheduler(sim, ScriptedInput([]), tick_hz=0)
