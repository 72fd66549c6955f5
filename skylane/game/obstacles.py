# skylane/game/obstacles.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import pygame
from .config import (
    HEIGHT, MIN_LIVE_OBSTACLES, OFFSCREEN_MARGIN, INITIAL_OFFSET_Y,
    INITIAL_PAIRS, INITIAL_PAIR_STEP, GAP_MARGIN, OBSTACLE_MAX_W,
    COLOR_OBSTACLE, COLOR_OBSTACLE_TOWER,
)
from .difficulty import DifficultyParams

logger = logging.getLogger(__name__)


class ObstacleArchetype(Enum):
    """Size families for obstacles: (width range, height range) in px."""
    LOW_RISE = ((110, OBSTACLE_MAX_W), (50, 70))
    MID_RISE = ((90, 130), (70, 90))
    TOWER = ((60, 100), (90, 120))

    @property
    def width_range(self) -> Tuple[int, int]:
        return self.value[0]

    @property
    def height_range(self) -> Tuple[int, int]:
        return self.value[1]


@dataclass
class Obstacle:
    id: int                 # even = left member, odd = right member
    x: float
    y: float                # top edge; grows as the obstacle scrolls toward the craft
    width: int
    height: int
    passed: bool = False
    archetype: ObstacleArchetype = ObstacleArchetype.MID_RISE

    @property
    def pair_id(self) -> int:
        return self.id // 2

    @property
    def is_left(self) -> bool:
        return self.id % 2 == 0

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)


def fit_gap_bounds(gap_min: int, gap_max: int, playfield_width: int) -> Tuple[int, int]:
    """Clamp gap bounds so a gap always fits between the wall margins."""
    room = playfield_width - 2 * GAP_MARGIN
    if gap_min > room:
        raise ValueError(
            f"gap of at least {gap_min}px cannot fit a {playfield_width}px playfield "
            f"with {GAP_MARGIN}px margins"
        )
    return gap_min, min(gap_max, room)


def _rand_int(rng: random.Random, lo: int, hi: int) -> int:
    return int(rng.uniform(lo, hi))


def _sample_size(rng: random.Random) -> Tuple[ObstacleArchetype, int, int]:
    archetype = rng.choice(list(ObstacleArchetype))
    w = _rand_int(rng, *archetype.width_range)
    h = _rand_int(rng, *archetype.height_range)
    return archetype, w, h


def generate_pair(pair_seed: int,
                  y: float,
                  params: DifficultyParams,
                  playfield_width: int,
                  rng: random.Random) -> Tuple[Obstacle, Obstacle]:
    """
    Build the left/right obstacles of one pair around a random gap.

    The left member hugs the gap from the left and the right member from the
    right; both are trimmed to stay inside [0, playfield_width], so the inner
    edges are always exactly `gap` apart.
    """
    gap_min, gap_max = fit_gap_bounds(params.gap_min, params.gap_max, playfield_width)
    gap = _rand_int(rng, gap_min, gap_max)
    gap_x = _rand_int(rng, GAP_MARGIN, playfield_width - gap - GAP_MARGIN)

    arch_l, w_l, h_l = _sample_size(rng)
    x_l = gap_x - w_l
    if x_l < 0:
        w_l += x_l
        x_l = 0

    arch_r, w_r, h_r = _sample_size(rng)
    x_r = gap_x + gap
    w_r = min(w_r, playfield_width - x_r)

    left = Obstacle(id=2 * pair_seed, x=float(x_l), y=float(y), width=w_l, height=h_l,
                    archetype=arch_l)
    right = Obstacle(id=2 * pair_seed + 1, x=float(x_r), y=float(y), width=w_r, height=h_r,
                     archetype=arch_r)
    return left, right


def gap_of(left: Obstacle, right: Obstacle) -> Tuple[float, float]:
    """(gap left edge, gap width) between the inner edges of a pair."""
    inner_l = left.x + left.width
    return inner_l, right.x - inner_l


class ObstacleField:
    """
    Live obstacle collection: scrolls pairs toward the craft, drops the ones
    that left the playfield and tops the field back up with fresh pairs.
    """
    def __init__(self, playfield_width: int, playfield_height: int = HEIGHT,
                 rng: Optional[random.Random] = None):
        self.playfield_width = playfield_width
        self.playfield_height = playfield_height
        self.rng = rng if rng is not None else random.Random()
        self.obstacles: List[Obstacle] = []
        self.next_pair_seed = 1

    def __len__(self) -> int:
        return len(self.obstacles)

    def _spawn_pair(self, y: float, params: DifficultyParams) -> Tuple[Obstacle, Obstacle]:
        pair = generate_pair(self.next_pair_seed, y, params, self.playfield_width, self.rng)
        self.next_pair_seed += 1
        self.obstacles.extend(pair)
        left, right = pair
        gx, gw = gap_of(left, right)
        logger.debug("spawned pair %d at y=%.1f gap=[%.0f, %.0f)",
                     left.pair_id, y, gx, gx + gw)
        return pair

    def seed_initial(self, params: DifficultyParams):
        """Opening pairs, stacked above the visible area."""
        for i in range(INITIAL_PAIRS):
            self._spawn_pair(INITIAL_OFFSET_Y - i * INITIAL_PAIR_STEP, params)

    def top_y(self) -> Optional[float]:
        """Smallest y among live obstacles (the one furthest from the craft)."""
        return min((o.y for o in self.obstacles), default=None)

    def update_and_recycle(self, scroll_speed: float,
                           params: DifficultyParams) -> List[Tuple[Obstacle, Obstacle]]:
        """
        One tick of scrolling. Returns the pairs spawned this tick.
        """
        for ob in self.obstacles:
            ob.y += scroll_speed

        limit = self.playfield_height + OFFSCREEN_MARGIN
        self.obstacles = [o for o in self.obstacles if o.y <= limit]

        spawned = []
        while len(self.obstacles) < MIN_LIVE_OBSTACLES:
            top = self.top_y()
            new_y = INITIAL_OFFSET_Y if top is None else top - params.spacing
            spawned.append(self._spawn_pair(new_y, params))
        return spawned

    def pair_members(self, pair_id: int) -> List[Obstacle]:
        return [o for o in self.obstacles if o.pair_id == pair_id]

    def draw(self, surf: pygame.Surface):
        for ob in self.obstacles:
            color = COLOR_OBSTACLE_TOWER if ob.archetype is ObstacleArchetype.TOWER else COLOR_OBSTACLE
            pygame.draw.rect(surf, color, ob.rect)
