"""Arcade games on pygame: Arkanoid and Asteroids, plus maze-ghost and platformer game logic."""

__version__ = "0.1.0"