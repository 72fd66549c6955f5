# skylane/game/craft.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from .config import CRAFT_X, CRAFT_Y, CRAFT_W, CRAFT_H


@dataclass
class Craft:
    """
    Player craft. Only x is controlled; y stays where the run put it.
    Invariant: 0 <= x <= playfield_width - width.
    """
    x: float
    y: float
    width: int = CRAFT_W
    height: int = CRAFT_H

    @classmethod
    def default(cls, playfield_width: int) -> "Craft":
        craft = cls(x=float(CRAFT_X), y=float(CRAFT_Y))
        craft.x = craft.clamp_x(craft.x, playfield_width)
        return craft

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)

    def max_x(self, playfield_width: int) -> float:
        return float(max(0, playfield_width - self.width))

    def clamp_x(self, x: float, playfield_width: int) -> float:
        return max(0.0, min(x, self.max_x(playfield_width)))

    def steer(self, move_left: bool, move_right: bool,
              move_speed: float, playfield_width: int) -> float:
        """Apply left then right intent, each clamped on its own. Returns new x."""
        if move_left:
            self.x = self.clamp_x(self.x - move_speed, playfield_width)
        if move_right:
            self.x = self.clamp_x(self.x + move_speed, playfield_width)
        return self.x
