"""Drifting, spinning asteroids that wrap around the screen."""

from __future__ import annotations

import random
from enum import Enum

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480


class AsteroidSize(Enum):
    """The three asteroid sizes, with their radii."""

    BIG = 0
    MEDIUM = 1
    SMALL = 2

    @property
    def radius(self) -> float:
        return {0: 40.0, 1: 20.0, 2: 10.0}[self.value]


class Astro:
    """One asteroid with a random velocity and spin."""

    def __init__(
        self,
        size: AsteroidSize,
        position: tuple[float, float],
        rng: random.Random | None = None,
        screen_width: float = SCREEN_WIDTH,
        screen_height: float = SCREEN_HEIGHT,
    ) -> None:
        rng = rng or random.Random()
        self.size = size
        self.r = size.radius
        self.origin = (self.r / 2, self.r / 2)
        self.position = (float(position[0]), float(position[1]))
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.velocity = (rng.uniform(50, 200), rng.uniform(50, 200))
        self.rot = rng.uniform(50, 200)
        self.angle = 0.0

    def update(self, delta: float) -> None:
        """Wrap around the screen edges, then move and spin by delta seconds."""
        x0, y0 = self.position
        x, y = x0, y0
        if x0 < 0:
            x = self.screen_width
        if x0 > self.screen_width:
            x = 0.0
        if y0 < 0:
            y = self.screen_height
        if y0 > self.screen_height:
            y = 0.0
        vx, vy = self.velocity
        self.position = (x + vx * delta, y + vy * delta)
        self.angle = (self.angle + self.rot * delta) % 360.0