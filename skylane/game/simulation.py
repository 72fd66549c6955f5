# skylane/game/simulation.py
"""
The whole run in one object.

`Simulation.tick()` is the single per-frame update and always runs its phases
in the same order:

    1. steer the craft from the polled intents
    2. scroll / drop / respawn obstacles
    3. collision test (a hit ends the run, nothing else is scored)
    4. pass detection and scoring
    5. re-derive difficulty from the new score

Renderers, the HUD and agents only read the state (or a `snapshot()`).
"""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple
from .config import NARROW_WIDTH, HEIGHT, GAP_GROWTH_MAX_LEVEL
from .controls import Intents, IDLE
from .craft import Craft
from .collision import check_collision, detect_passes
from .difficulty import DifficultyParams, derive, gap_bounds_for_level
from .obstacles import Obstacle, ObstacleField, fit_gap_bounds

logger = logging.getLogger(__name__)


class RunState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    TERMINATED = "terminated"


class LifecycleError(RuntimeError):
    """Raised for start/restart calls that the run state does not allow."""


@dataclass(frozen=True)
class SimSnapshot:
    run_state: RunState
    terminal: bool
    score: int
    level: int
    scroll_speed: float
    tick_count: int
    seed: Optional[int]
    playfield_width: int
    playfield_height: int
    craft: Tuple[float, float, int, int]                           # x, y, w, h
    obstacles: Tuple[Tuple[int, float, float, int, int, bool], ...]  # id, x, y, w, h, passed


TerminalHook = Callable[[SimSnapshot], None]


def random_seed() -> int:
    return random.randrange(0, 2**32 - 1)


def check_playfield_width(width: int) -> int:
    """Reject widths where the widest late-game gap could not be placed."""
    fit_gap_bounds(*gap_bounds_for_level(GAP_GROWTH_MAX_LEVEL), width)
    return width


class Simulation:
    def __init__(self, playfield_width: int = NARROW_WIDTH,
                 playfield_height: int = HEIGHT,
                 seed: Optional[int] = None):
        self.playfield_width = check_playfield_width(playfield_width)
        self.playfield_height = playfield_height
        self._pending_width = self.playfield_width
        self.seed_spec = seed                # None -> new random seed per run
        self.run_state = RunState.NOT_STARTED
        self._terminal_hooks: List[TerminalHook] = []
        self._reset()

    # -------------------- Lifecycle --------------------

    def _reset(self):
        """Rebuild every per-run field from scratch."""
        self.playfield_width = self._pending_width
        self.score = 0
        self.terminal = False
        self.tick_count = 0
        self.crashed_into: Optional[Obstacle] = None
        self.params: DifficultyParams = derive(0)
        self.level = self.params.level
        self.scroll_speed = self.params.scroll_speed
        self.craft = Craft.default(self.playfield_width)
        self.seed: Optional[int] = None
        self.field = ObstacleField(self.playfield_width, self.playfield_height, random.Random())

    def _begin(self, seed: Optional[int]):
        self._reset()
        if seed is None:
            seed = self.seed_spec if self.seed_spec is not None else random_seed()
        self.seed = seed
        self.field.rng.seed(seed)
        self.field.seed_initial(self.params)
        self.run_state = RunState.RUNNING
        logger.info("run started (seed=%s, width=%d)", seed, self.playfield_width)

    def start(self, seed: Optional[int] = None):
        if self.run_state is not RunState.NOT_STARTED:
            raise LifecycleError(f"start() is only valid before the first run (state={self.run_state.value})")
        self._begin(seed)

    def restart(self, force: bool = False, seed: Optional[int] = None):
        """
        Start a fresh run after a crash. With force=True it also resets a run
        that is still going (or was never started).
        """
        if self.run_state is not RunState.TERMINATED and not force:
            raise LifecycleError(f"restart() needs a finished run or force=True (state={self.run_state.value})")
        logger.info("restart (previous score=%d)", self.score)
        self._begin(seed)

    def on_terminal(self, hook: TerminalHook):
        """Register a callback fired once when a run crashes."""
        self._terminal_hooks.append(hook)

    def set_playfield_width(self, width: int):
        """Takes effect at the next start/restart; the current run keeps its width."""
        self._pending_width = check_playfield_width(width)

    @property
    def running(self) -> bool:
        return self.run_state is RunState.RUNNING

    # -------------------- Tick --------------------

    def tick(self, intents: Intents = IDLE) -> bool:
        """Advance one fixed step. Returns False (and changes nothing) unless running."""
        if self.run_state is not RunState.RUNNING:
            return False

        params = self.params
        self.craft.steer(intents.move_left, intents.move_right,
                         params.move_speed, self.playfield_width)
        self.field.update_and_recycle(self.scroll_speed, params)
        self.tick_count += 1

        hit = check_collision(self.craft, self.field.obstacles)
        if hit is not None:
            self._terminate(hit)
            return True

        delta = detect_passes(self.craft, self.field.obstacles)
        if delta:
            self.score += delta
        self._apply_difficulty()
        return True

    def _apply_difficulty(self):
        if self.params.score == self.score:
            return
        previous_level = self.level
        self.params = derive(self.score)
        self.level = self.params.level
        self.scroll_speed = self.params.scroll_speed
        if self.level != previous_level:
            logger.info("level %d reached (score=%d, speed=%.2f)",
                        self.level, self.score, self.scroll_speed)

    def _terminate(self, hit: Obstacle):
        self.terminal = True
        self.crashed_into = hit
        self.run_state = RunState.TERMINATED
        logger.info("crashed into obstacle %d after %d ticks: score=%d level=%d",
                    hit.id, self.tick_count, self.score, self.level)
        snap = self.snapshot()
        for hook in self._terminal_hooks:
            hook(snap)

    # -------------------- Read-only view --------------------

    def snapshot(self) -> SimSnapshot:
        c = self.craft
        return SimSnapshot(
            run_state=self.run_state,
            terminal=self.terminal,
            score=self.score,
            level=self.level,
            scroll_speed=self.scroll_speed,
            tick_count=self.tick_count,
            seed=self.seed,
            playfield_width=self.playfield_width,
            playfield_height=self.playfield_height,
            craft=(c.x, c.y, c.width, c.height),
            obstacles=tuple((o.id, o.x, o.y, o.width, o.height, o.passed)
                            for o in self.field.obstacles),
        )
