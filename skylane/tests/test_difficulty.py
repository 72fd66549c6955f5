# skylane/tests/test_difficulty.py
import pytest

from skylane.game.config import (
    LEVEL_THRESHOLD, BASE_SCROLL_SPEED, MAX_SCROLL_SPEED, MOVE_SPEED_BASE,
    MOVE_SPEED_MAX, SPACING_BASE, SPACING_MIN, GAP_MIN_BASE, GAP_MAX_BASE,
)
from skylane.game.difficulty import (
    derive, level_for_score, scroll_speed_for_score, move_speed_for_level,
    gap_bounds_for_level, spacing_for_level,
)


def test_level_steps_every_threshold():
    assert level_for_score(0) == 1
    assert level_for_score(LEVEL_THRESHOLD - 1) == 1
    assert level_for_score(LEVEL_THRESHOLD) == 2
    assert level_for_score(3 * LEVEL_THRESHOLD + 2) == 4


def test_speed_starts_at_base_and_is_capped():
    assert scroll_speed_for_score(0) == pytest.approx(BASE_SCROLL_SPEED)
    assert scroll_speed_for_score(10_000) == pytest.approx(MAX_SCROLL_SPEED)


def test_level_and_speed_never_decrease():
    prev = derive(0)
    for score in range(1, 300):
        cur = derive(score)
        assert cur.level >= prev.level
        assert cur.scroll_speed >= prev.scroll_speed
        assert cur.scroll_speed <= MAX_SCROLL_SPEED
        assert cur.move_speed >= prev.move_speed
        assert cur.spacing <= prev.spacing
        prev = cur


def test_level_scaled_parameters_stay_bounded():
    assert move_speed_for_level(1) == pytest.approx(MOVE_SPEED_BASE)
    assert move_speed_for_level(500) == pytest.approx(MOVE_SPEED_MAX)
    assert spacing_for_level(1) == SPACING_BASE
    assert spacing_for_level(500) == SPACING_MIN
    assert gap_bounds_for_level(1) == (GAP_MIN_BASE, GAP_MAX_BASE)
    lo, hi = gap_bounds_for_level(500)
    assert GAP_MIN_BASE < lo <= hi
    assert gap_bounds_for_level(500) == gap_bounds_for_level(1000)


def test_derive_is_idempotent():
    assert derive(17) == derive(17)


def test_negative_score_rejected():
    with pytest.raises(ValueError):
        derive(-1)
