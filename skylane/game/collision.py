# skylane/game/collision.py
"""
Craft vs obstacle tests and pair-pass scoring.

Hitboxes are the drawn rects shrunk by HITBOX_MARGIN on every side, so grazing
a corner is forgiven. Overlap is strict (touching edges do not collide), which
is what pygame.Rect.colliderect does.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional
import pygame
from .config import HITBOX_MARGIN, PASS_THRESHOLD
from .craft import Craft
from .obstacles import Obstacle

logger = logging.getLogger(__name__)


def hitbox(rect: pygame.Rect, margin: int = HITBOX_MARGIN) -> pygame.Rect:
    return rect.inflate(-2 * margin, -2 * margin)


def collides(craft: Craft, obstacle: Obstacle, margin: int = HITBOX_MARGIN) -> bool:
    return hitbox(craft.rect, margin).colliderect(hitbox(obstacle.rect, margin))


def check_collision(craft: Craft, obstacles: Iterable[Obstacle],
                    margin: int = HITBOX_MARGIN) -> Optional[Obstacle]:
    """First obstacle the craft hits, or None."""
    me = hitbox(craft.rect, margin)
    for ob in obstacles:
        if me.colliderect(hitbox(ob.rect, margin)):
            return ob
    return None


def has_cleared(craft: Craft, obstacle: Obstacle) -> bool:
    return obstacle.y > craft.y + craft.height + PASS_THRESHOLD


def detect_passes(craft: Craft, obstacles: List[Obstacle]) -> int:
    """
    Mark every newly cleared pair as passed and return the score delta.

    The even (left) member is the trigger: when it clears, both members of its
    pair flip to passed together and the pair is worth one point, however many
    ticks the condition keeps holding.
    """
    delta = 0
    for ob in obstacles:
        if ob.passed or not ob.is_left or not has_cleared(craft, ob):
            continue
        pair_id = ob.pair_id
        for other in obstacles:
            if other.pair_id == pair_id:
                other.passed = True
        delta += 1
        logger.debug("pair %d cleared", pair_id)
    return delta
