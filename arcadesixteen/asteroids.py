"""Ship, bullets and splitting asteroids, with a persisted high score."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from pathlib import Path

from arcadesixteen.astro import Astro, AsteroidSize
from arcadesixteen.button import Button

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480

_POINTS = {AsteroidSize.BIG: 10, AsteroidSize.MEDIUM: 20, AsteroidSize.SMALL: 30}


def load_highscore(path: str | Path) -> int:
    """Read the high score from the first line of a file."""
    with open(path, encoding="utf-8") as handle:
        first = handle.readline().strip()
    return int(first)


def save_highscore(path: str | Path, score: int) -> None:
    """Overwrite the file with the given high score."""
    Path(path).write_text(str(score), encoding="utf-8")


@dataclass
class Controls:
    """Which ship controls are held this frame."""

    left: bool = False
    right: bool = False
    shoot: bool = False
    move: bool = False


@dataclass
class Bullet:
    """A round projectile moving a fixed distance each frame."""

    position: tuple[float, float]
    velocity: tuple[float, float]
    radius: float = 2.0
    screen_width: float = SCREEN_WIDTH
    screen_height: float = SCREEN_HEIGHT

    def step(self) -> None:
        """Move the bullet by its velocity."""
        self.position = (
            self.position[0] + self.velocity[0],
            self.position[1] + self.velocity[1],
        )

    def is_off_screen(self) -> bool:
        x, y = self.position
        return (
            x < 0
            or x + self.radius > self.screen_width
            or y < 0
            or y + self.radius > self.screen_height
        )


class AsteroidsGame:
    """Game state of the asteroid shooter."""

    def __init__(
        self,
        *,
        highscore: int = 0,
        highscore_path: str | Path | None = None,
        rng: random.Random | None = None,
        screen_width: float = SCREEN_WIDTH,
        screen_height: float = SCREEN_HEIGHT,
        ship_size: float = 32.0,
        ship_scale: float = 1.0,
        rotation_speed: float = 180.0,
        thrust: float = 5.0,
        drag: float = 0.99,
        max_speed: float = 5.0,
        shot_delay: float = 0.25,
        bullet_speed: float = 8.0,
        bullet_radius: float = 2.0,
        max_big: int = 4,
        max_medium: int = 8,
        max_small: int = 16,
        spawn_delay: float = 3.0,
        big_texture_size: float = 80.0,
    ) -> None:
        self.rng = rng or random.Random()
        self.highscore = highscore
        self.highscore_path = highscore_path
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.ship_size = ship_size
        self.ship_scale = ship_scale
        self.ship_radius = ship_size * ship_scale / 2
        self.rotation_speed = rotation_speed
        self.thrust = thrust
        self.drag = drag
        self.max_speed = max_speed
        self.shot_delay = shot_delay
        self.bullet_speed = bullet_speed
        self.bullet_radius = bullet_radius
        self.max_big = max_big
        self.max_medium = max_medium
        self.max_small = max_small
        self.spawn_delay = spawn_delay
        self.big_texture_size = big_texture_size
        self.back_button = Button("Back", (580.0, 20.0), (50.0, 30.0))

        self.score = 0
        self.game_over = False
        self.ship_position = (screen_width / 2, screen_height / 2)
        self.ship_velocity = (0.0, 0.0)
        self.ship_angle = 0.0
        self.bullets: list[Bullet] = []
        self.big: list[Astro] = []
        self.medium: list[Astro] = []
        self.small: list[Astro] = []
        self._shot_timer = 0.0
        self._spawn_timer = 0.0
        self.big = [self._new_asteroid(AsteroidSize.BIG, self.spawn_position())
                    for _ in range(max_big)]

    def _new_asteroid(self, size: AsteroidSize, position: tuple[float, float]) -> Astro:
        return Astro(size, position, self.rng, self.screen_width, self.screen_height)

    def spawn_position(self) -> tuple[float, float]:
        """A random point on the left or top edge of the screen."""
        limit_x = int(self.screen_width - self.big_texture_size)
        limit_y = int(self.screen_height - self.big_texture_size)
        if self.rng.randint(0, 1) == 0:
            return (0.0, float(self.rng.randint(0, limit_y)))
        return (float(self.rng.randint(0, limit_x)), 0.0)

    def _direction(self) -> tuple[float, float]:
        angle = math.radians(self.ship_angle)
        return (math.cos(angle), math.sin(angle))

    def update(self, delta: float, controls: Controls) -> None:
        """Advance the game by delta seconds with the given controls held."""
        if self.score > self.highscore:
            self.highscore = self.score
            if self.highscore_path is not None:
                save_highscore(self.highscore_path, self.highscore)

        if self.game_over:
            return

        self._steer(delta, controls)
        self._fire(delta, controls)

        for asteroid in (*self.big, *self.medium, *self.small):
            asteroid.update(delta)

        sx, sy = self.ship_position
        for asteroid in (*self.big, *self.medium, *self.small):
            ax, ay = asteroid.position
            if math.hypot(ax - sx, ay - sy) < asteroid.r + self.ship_radius:
                self.game_over = True

        for bullet in self.bullets:
            bullet.step()
        self.bullets = [b for b in self.bullets if not b.is_off_screen()]
        self._resolve_hits()

        if (
            len(self.big) < self.max_big
            and len(self.medium) < self.max_medium
            and len(self.small) < self.max_small
        ):
            self._spawn_timer += delta
            if self._spawn_timer > self.spawn_delay:
                self.big.append(self._new_asteroid(AsteroidSize.BIG, self.spawn_position()))
                self._spawn_timer = 0.0

    def _steer(self, delta: float, controls: Controls) -> None:
        if controls.left:
            rot = -self.rotation_speed
        elif controls.right:
            rot = self.rotation_speed
        else:
            rot = 0.0
        self.ship_angle = (self.ship_angle + rot * delta) % 360.0

        vx, vy = self.ship_velocity
        if controls.move:
            dx, dy = self._direction()
            vx += dx * self.thrust * delta
            vy += dy * self.thrust * delta
        else:
            vx *= self.drag * delta
            vy *= self.drag * delta
        speed = math.hypot(vx, vy)
        if speed > self.max_speed:
            vx *= self.max_speed / speed
            vy *= self.max_speed / speed
        self.ship_velocity = (vx, vy)

        x, y = self.ship_position
        x += vx
        y += vy
        if x < 0:
            x = self.screen_width
        if x > self.screen_width:
            x = 0.0
        if y < 0:
            y = self.screen_height
        if y > self.screen_height:
            y = 0.0
        self.ship_position = (x, y)

    def _fire(self, delta: float, controls: Controls) -> None:
        self._shot_timer += delta
        if controls.shoot and self._shot_timer > self.shot_delay:
            self._shot_timer = 0.0
            dx, dy = self._direction()
            x, y = self.ship_position
            reach = self.ship_size * self.ship_scale
            self.bullets.append(
                Bullet(
                    (x + dx * reach, y + dy * reach),
                    (dx * self.bullet_speed, dy * self.bullet_speed),
                    self.bullet_radius,
                    self.screen_width,
                    self.screen_height,
                )
            )

    def _resolve_hits(self) -> None:
        """Handle the first bullet that hits an asteroid, if any."""
        for bullet in self.bullets:
            bx, by = bullet.position
            for group in (self.big, self.medium, self.small):
                for asteroid in group:
                    ax, ay = asteroid.position
                    if math.hypot(bx - ax, by - ay) < bullet.radius + asteroid.r:
                        self.score += _POINTS[asteroid.size]
                        self._split(asteroid)
                        self.bullets.remove(bullet)
                        group.remove(asteroid)
                        return

    def _split(self, asteroid: Astro) -> None:
        if asteroid.size is AsteroidSize.BIG:
            size, target = AsteroidSize.MEDIUM, self.medium
        elif asteroid.size is AsteroidSize.MEDIUM:
            size, target = AsteroidSize.SMALL, self.small
        else:
            return
        vx, vy = asteroid.velocity
        for sign in (1.0, -1.0):
            piece = self._new_asteroid(size, asteroid.position)
            piece.velocity = (sign * vx, sign * vy)
            piece.rot = sign * asteroid.rot
            target.append(piece)

    def reset(self) -> None:
        """Start a new game with a fresh wave of big asteroids."""
        self.game_over = False
        self.ship_position = (self.screen_width / 2, self.screen_height / 2)
        self.medium = []
        self.small = []
        self.big = [self._new_asteroid(AsteroidSize.BIG, self.spawn_position())
                    for _ in range(self.max_big)]
        self.score = 0