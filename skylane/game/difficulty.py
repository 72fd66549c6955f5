# skylane/game/difficulty.py
"""
Difficulty is a pure function of the score.

Everything the generator and the craft controller need to scale with progress
(level, scroll speed, move speed, gap bounds, pair spacing) is derived here so
that it can be recomputed every tick without drift.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
from .config import (
    LEVEL_THRESHOLD, BASE_SCROLL_SPEED, SPEED_GROWTH_RATE, MAX_SCROLL_SPEED,
    MOVE_SPEED_BASE, MOVE_SPEED_PER_LEVEL, MOVE_SPEED_MAX,
    GAP_MIN_BASE, GAP_MAX_BASE, GAP_GROWTH_PER_LEVEL, GAP_GROWTH_MAX_LEVEL,
    SPACING_BASE, SPACING_SHRINK_PER_LEVEL, SPACING_MIN,
)


@dataclass(frozen=True)
class DifficultyParams:
    score: int
    level: int
    scroll_speed: float   # px / tick
    move_speed: float     # craft px / tick
    gap_min: int
    gap_max: int
    spacing: int          # vertical distance between consecutive pairs


def _check_score(score: int) -> None:
    if score < 0:
        raise ValueError(f"score must be >= 0, got {score}")


def level_for_score(score: int) -> int:
    _check_score(score)
    return score // LEVEL_THRESHOLD + 1


def scroll_speed_for_score(score: int) -> float:
    _check_score(score)
    return min(BASE_SCROLL_SPEED * (1.0 + score * SPEED_GROWTH_RATE), MAX_SCROLL_SPEED)


def move_speed_for_level(level: int) -> float:
    return min(MOVE_SPEED_BASE + (level - 1) * MOVE_SPEED_PER_LEVEL, MOVE_SPEED_MAX)


def gap_bounds_for_level(level: int) -> Tuple[int, int]:
    """Both bounds widen a little per level to offset the faster scroll."""
    steps = min(level, GAP_GROWTH_MAX_LEVEL) - 1
    grow = GAP_GROWTH_PER_LEVEL * steps
    return GAP_MIN_BASE + grow, GAP_MAX_BASE + grow


def spacing_for_level(level: int) -> int:
    return max(SPACING_BASE - SPACING_SHRINK_PER_LEVEL * (level - 1), SPACING_MIN)


def derive(score: int) -> DifficultyParams:
    level = level_for_score(score)
    gap_min, gap_max = gap_bounds_for_level(level)
    return DifficultyParams(
        score=score,
        level=level,
        scroll_speed=scroll_speed_for_score(score),
        move_speed=move_speed_for_level(level),
        gap_min=gap_min,
        gap_max=gap_max,
        spacing=spacing_for_level(level),
    )
