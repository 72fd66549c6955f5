# skylane/game/viewport.py
from __future__ import annotations
from typing import Optional
import pygame
from .config import NARROW_WIDTH, WIDE_WIDTH, NARROW_BREAKPOINT

NARROW = "narrow"
WIDE = "wide"
SIZE_CLASSES = (NARROW, WIDE)


def size_class_for(screen_width: int) -> str:
    return NARROW if screen_width < NARROW_BREAKPOINT else WIDE


def width_for_class(size_class: str) -> int:
    if size_class == NARROW:
        return NARROW_WIDTH
    if size_class == WIDE:
        return WIDE_WIDTH
    raise ValueError(f"Unknown size class {size_class!r}")


def playfield_width_for(screen_width: int) -> int:
    return width_for_class(size_class_for(screen_width))


def detect_playfield_width(requested: Optional[str] = None) -> int:
    """
    Resolve the playfield width for a new run. `requested` is "narrow", "wide"
    or None/"auto" to look at the desktop size (pygame.display must be init'd).
    """
    if requested in SIZE_CLASSES:
        return width_for_class(requested)
    info = pygame.display.Info()
    screen_w = info.current_w if info.current_w > 0 else WIDE_WIDTH
    return playfield_width_for(screen_w)
