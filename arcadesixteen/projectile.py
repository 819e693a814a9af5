"""Bouncing fireballs thrown by the player."""

from __future__ import annotations

from collections.abc import Sequence

from arcadesixteen.animation import SpriteAnimation
from arcadesixteen.button import Rect
from arcadesixteen.enemy import _edge_rects

Point = tuple[float, float]

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480


class Projectile:
    """A fireball that bounces off the ground and dies at walls or screen edges."""

    def __init__(
        self,
        position: Point,
        sprite_size: Point,
        display_size: Point,
        *,
        speed_x: float = 4.0,
        speed_y: float = 4.0,
        delay: float = 0.2,
        screen_width: float = SCREEN_WIDTH,
        screen_height: float = SCREEN_HEIGHT,
    ) -> None:
        self.animation = SpriteAnimation(sprite_size, display_size)
        self.position: Point = (float(position[0]), float(position[1]))
        self.prev_position: Point = self.position
        self.display_position: Point = self.position
        self.speed_x = speed_x
        self.speed_y = speed_y
        self.delay = delay
        self.timer = 0.0
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.off_x = 0.0
        self.odd_x = 0.0
        w, h = display_size
        self._hitbox_sizes: list[Point] = [(w - 2, 1.0), (w - 2, 1.0), (1.0, h - 2), (1.0, h - 2)]

    def update(self, contacts: Sequence[int], elapsed: float) -> bool:
        """Advance one frame; return True when the projectile should be removed."""
        x, y = self.position
        if x < 0 or x > self.screen_width or y < 0 or y > self.screen_height:
            return True
        if contacts[1] == 1:
            y = self.prev_position[1]
            self.speed_y = -self.speed_y
            self.animation.row = 1
        if contacts[2] == 1 or contacts[3] == 1:
            return True

        y += self.speed_y
        x += self.speed_x

        if self.speed_y < 0:
            self.timer += elapsed
            if self.timer > self.delay:
                self.animation.row = 0
                self.speed_y = -self.speed_y
                self.timer = 0.0

        self.position = (x, y)
        self.prev_position = self.position
        self.display_position = (x + self.off_x + self.odd_x, y)
        return False

    def set_offset(self, off_x: float) -> None:
        """Set the horizontal scroll offset."""
        self.off_x = off_x

    def hitboxes(self) -> list[Rect]:
        """Sensor boxes for the top, bottom, left and right edges."""
        return _edge_rects(self.display_position, self.animation.display_size, self._hitbox_sizes)