# skylane/env/observations.py
from __future__ import annotations
from typing import Dict, List, Tuple
import numpy as np

from skylane.game.config import MAX_SCROLL_SPEED
from skylane.game.obstacles import Obstacle
from skylane.game.simulation import Simulation

# Number of upcoming (not yet passed) pairs described in the observation
LOOKAHEAD_PAIRS = 2
OBS_SIZE = 2 + 3 * LOOKAHEAD_PAIRS


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def upcoming_pairs(obstacles: List[Obstacle]) -> List[Tuple[Obstacle, Obstacle]]:
    """Unpassed pairs, closest to the craft (largest y) first."""
    by_pair: Dict[int, Dict[bool, Obstacle]] = {}
    for ob in obstacles:
        if not ob.passed:
            by_pair.setdefault(ob.pair_id, {})[ob.is_left] = ob
    pairs = [(m[True], m[False]) for m in by_pair.values() if len(m) == 2]
    pairs.sort(key=lambda p: p[0].y, reverse=True)
    return pairs


def build_observation(sim: Simulation) -> np.ndarray:
    """
    Returns a fixed (8,) float32 vector:
      [ craft_x_norm, speed_norm,
        gapL@1, gapR@1, dy@1,
        gapL@2, gapR@2, dy@2 ]
    - craft_x_norm: x / (playfield_width - craft_width), in [0,1]
    - speed_norm  : scroll_speed / MAX_SCROLL_SPEED, in [0,1]
    - gapL/gapR   : inner edges of the pair's gap / playfield_width
    - dy          : vertical distance from the pair's bottom to the craft's top
                    / playfield_height, clipped to [0,1] (0 = level with the craft)
    Missing pairs use the sentinel gap [0,1] with dy=1.
    """
    craft = sim.craft
    width = float(sim.playfield_width)
    height = float(sim.playfield_height)

    x_norm = _clamp01(craft.x / max(1.0, craft.max_x(sim.playfield_width)))
    speed_norm = _clamp01(sim.scroll_speed / MAX_SCROLL_SPEED)
    feats: List[float] = [x_norm, speed_norm]

    pairs = upcoming_pairs(sim.field.obstacles)[:LOOKAHEAD_PAIRS]
    for left, right in pairs:
        gap_l = _clamp01((left.x + left.width) / width)
        gap_r = _clamp01(right.x / width)
        bottom = max(left.y + left.height, right.y + right.height)
        dy = _clamp01((craft.y - bottom) / height)
        feats.extend([gap_l, gap_r, dy])
    for _ in range(LOOKAHEAD_PAIRS - len(pairs)):
        feats.extend([0.0, 1.0, 1.0])

    return np.asarray(feats, dtype=np.float32)
