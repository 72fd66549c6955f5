# skylane/env/skylane_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from skylane.game.config import (
    NARROW_WIDTH, HEIGHT,
    COLOR_BG, COLOR_CRAFT, COLOR_CRASH,
)
from skylane.game.controls import ACTION_INTENTS, ActionInput
from skylane.game.simulation import Simulation
from skylane.env.observations import build_observation, OBS_SIZE


class SkylaneEnv(gym.Env):
    """
    Skylane Gymnasium environment (vector observations).
    - Simulation at 60 ticks/s (internal).
    - Agent acts every `frame_skip` ticks (default 4) -> 15 decisions/sec.
    - Observation: shape (8,), float32 (see observations.build_observation).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    ALIVE_REWARD = 0.01
    PASS_REWARD = 1.0
    CRASH_REWARD = -1.0

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 playfield_width: int = NARROW_WIDTH):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.sim_fps = 60

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            # decisions per second = sim_fps / frame_skip
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = LEFT, 2 = RIGHT, 3 = BOTH
        self.action_space = gym.spaces.Discrete(len(ACTION_INTENTS))
        self.observation_space = gym.spaces.Box(
            low=np.zeros(OBS_SIZE, dtype=np.float32),
            high=np.ones(OBS_SIZE, dtype=np.float32),
            dtype=np.float32,
        )

        self.sim = Simulation(playfield_width=playfield_width)
        self.controls = ActionInput()
        self.timestep: int = 0

        self.screen = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # A given seed pins the obstacle layout; otherwise draw one from np_random
        run_seed = int(seed) if seed is not None else int(self.np_random.integers(0, 2**31 - 1))
        self.sim.restart(force=True, seed=run_seed)
        self.controls.set(0)
        self.timestep = 0

        obs = build_observation(self.sim)
        info = {"seed": self.sim.seed, "score": self.sim.score}
        return obs, info

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.sim.running, "step() called on a finished episode; call reset()"

        self.controls.set(int(action))
        score_before = self.sim.score

        for _ in range(self.frame_skip):
            self.sim.tick(self.controls.poll())
            if self.sim.terminal:
                break

        passed = self.sim.score - score_before
        if self.sim.terminal:
            reward = self.CRASH_REWARD
        else:
            reward = self.ALIVE_REWARD + self.PASS_REWARD * passed

        self.timestep += 1
        terminated = self.sim.terminal
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions) and not terminated:
            truncated = True

        obs = build_observation(self.sim)
        info = {
            "score": self.sim.score,
            "level": self.sim.level,
            "ticks": self.sim.tick_count,
            "timestep": self.timestep,
            "seed": self.sim.seed,
        }

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None:
            return

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((self.sim.playfield_width, HEIGHT))
                pygame.display.set_caption("Skylane — Gym Env")
            else:
                self.screen = pygame.Surface((self.sim.playfield_width, HEIGHT))
            self.clock = pygame.time.Clock()

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()

        self.screen.fill(COLOR_BG)
        self.sim.field.draw(self.screen)
        color = COLOR_CRASH if self.sim.terminal else COLOR_CRAFT
        pygame.draw.rect(self.screen, color, self.sim.craft.rect)

        if self.render_mode == "human":
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", 60))
            return None

        # (H, W, 3) uint8 array
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
