# skylane/game/scheduler.py
from __future__ import annotations
from .config import TICK_HZ, MAX_CATCHUP_TICKS
from .controls import InputSource
from .simulation import Simulation


class FixedStepScheduler:
    """
    Turns variable frame times into whole simulation ticks.

    Frame time is accumulated and spent in steps of 1/tick_hz; the input source
    is polled once per tick. Once the run stops, leftover time is thrown away
    so no tick can fire until the next start/restart.
    """
    def __init__(self, sim: Simulation, source: InputSource,
                 tick_hz: int = TICK_HZ, max_catchup_ticks: int = MAX_CATCHUP_TICKS):
        if tick_hz <= 0:
            raise ValueError(f"tick_hz must be > 0, got {tick_hz}")
        self.sim = sim
        self.source = source
        self.step_s = 1.0 / tick_hz
        self.max_catchup_ticks = max_catchup_ticks
        self.accumulator = 0.0

    def cancel(self):
        self.accumulator = 0.0

    def advance(self, dt: float) -> int:
        """Feed `dt` seconds of wall time; returns the number of ticks run."""
        if not self.sim.running:
            self.cancel()
            return 0

        self.accumulator += dt
        ticks = 0
        while self.accumulator >= self.step_s and ticks < self.max_catchup_ticks:
            self.accumulator -= self.step_s
            self.sim.tick(self.source.poll())
            ticks += 1
            if not self.sim.running:
                self.cancel()
                break

        # Stall: drop the backlog rather than fast-forwarding.
        if self.accumulator >= self.step_s:
            self.accumulator = 0.0
        return ticks
