# skylane/game/controls.py
"""
Input sources. The simulation polls one of these exactly once per tick and
never looks at raw key events.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Protocol
import pygame


@dataclass(frozen=True)
class Intents:
    move_left: bool = False
    move_right: bool = False


IDLE = Intents()

# Discrete agent actions: 0 = NOOP, 1 = LEFT, 2 = RIGHT, 3 = BOTH
ACTION_INTENTS = (
    Intents(False, False),
    Intents(True, False),
    Intents(False, True),
    Intents(True, True),
)


class InputSource(Protocol):
    def poll(self) -> Intents: ...


class KeyboardInput:
    """Currently held arrow / A-D keys (pygame must be initialised)."""
    LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
    RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)

    def poll(self) -> Intents:
        pressed = pygame.key.get_pressed()
        return Intents(
            move_left=any(pressed[k] for k in self.LEFT_KEYS),
            move_right=any(pressed[k] for k in self.RIGHT_KEYS),
        )


class ScriptedInput:
    """Replays a fixed list of intents, then idles."""
    def __init__(self, script: Iterable[Intents]):
        self.script: List[Intents] = list(script)
        self.cursor = 0

    def poll(self) -> Intents:
        if self.cursor >= len(self.script):
            return IDLE
        intents = self.script[self.cursor]
        self.cursor += 1
        return intents


class ActionInput:
    """Holds the last discrete agent action until it is replaced."""
    def __init__(self, action: int = 0):
        self.action = action

    def set(self, action: int):
        if not 0 <= action < len(ACTION_INTENTS):
            raise ValueError(f"Invalid action {action}")
        self.action = action

    def poll(self) -> Intents:
        return ACTION_INTENTS[self.action]
