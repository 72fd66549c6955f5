# skylane/tests/test_craft.py
import random

from skylane.game.config import CRAFT_X, CRAFT_Y, CRAFT_W
from skylane.game.craft import Craft

WIDTH = 360


def test_holding_right_moves_until_the_wall():
    craft = Craft(x=120.0, y=500.0, width=80, height=60)
    for _ in range(20):
        craft.steer(False, True, 5, WIDTH)
    assert craft.x == min(WIDTH - 80, 120 + 100) == 220

    for _ in range(50):
        craft.steer(False, True, 5, WIDTH)
    assert craft.x == WIDTH - 80


def test_left_clamps_at_zero():
    craft = Craft(x=3.0, y=500.0)
    craft.steer(True, False, 5, WIDTH)
    assert craft.x == 0.0
    craft.steer(True, False, 5, WIDTH)
    assert craft.x == 0.0


def test_both_held_cancels_away_from_walls():
    craft = Craft(x=150.0, y=500.0)
    craft.steer(True, True, 5, WIDTH)
    assert craft.x == 150.0


def test_both_held_at_left_wall_applies_left_then_right():
    craft = Craft(x=2.0, y=500.0)
    craft.steer(True, True, 5, WIDTH)
    # left clamps to 0, then right moves a full step
    assert craft.x == 5.0


def test_x_stays_inside_playfield_for_random_intents():
    rng = random.Random(7)
    for width in (360, 800):
        craft = Craft.default(width)
        for _ in range(5000):
            craft.steer(rng.random() < 0.5, rng.random() < 0.5, rng.choice([1, 5, 7.5, 40]), width)
            assert 0.0 <= craft.x <= width - craft.width


def test_default_pose():
    craft = Craft.default(WIDTH)
    assert (craft.x, craft.y, craft.width) == (CRAFT_X, CRAFT_Y, CRAFT_W)
    assert Craft.default(150).x == 150 - CRAFT_W


def test_y_never_changes():
    craft = Craft.default(WIDTH)
    for _ in range(10):
        craft.steer(False, True, 5, WIDTH)
    assert craft.y == CRAFT_Y
