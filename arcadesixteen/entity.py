"""Items that pop out of boxes: coins and mushrooms."""

from __future__ import annotations

from collections.abc import Sequence

from arcadesixteen.animation import SpriteAnimation
from arcadesixteen.button import Rect
from arcadesixteen.enemy import _edge_rects

Point = tuple[float, float]

COIN = 1
MUSHROOM = 2


class Entity:
    """A coin that jumps and vanishes, or a mushroom that rises and wanders."""

    def __init__(
        self,
        position: Point,
        sprite_size: Point,
        display_size: Point,
        entity_type: int,
        max_swap: int = 1,
        big_mario: bool = False,
        *,
        speed: float = 2.0,
        gravity: float = 2.0,
    ) -> None:
        self.animation = SpriteAnimation(sprite_size, display_size, max_swap, delay=0.1)
        if big_mario:
            self.animation.cycle = True
            self.animation.max_swap = 3
            self.animation.set_start(1, 0)
        self.type = entity_type
        self.big_mario = big_mario
        self.position: Point = (float(position[0]), float(position[1]))
        self.old_position: Point = self.position
        self.prev_position: Point = self.position
        self.display_position: Point = self.position
        self.speed = speed
        self.gravity = gravity
        self.wiggling = 1
        self.out = False
        self.ground_touch = False
        self.show_hitbox = False
        self.off_x = 0.0
        self.odd_x = 0.0
        w, h = display_size
        self._hitbox_sizes: list[Point] = [(w - 5, 1.0), (w - 5, 1.0), (1.0, h - 5), (1.0, h - 5)]

    def update(self, until: Point, contacts: Sequence[int]) -> None:
        """Advance one frame; until is the size of the box the item came from."""
        x, y = self.position
        old_y = self.old_position[1]

        if self.type == COIN:
            y = y - self.speed if self.wiggling == 1 else y + self.speed
            if self.wiggling == 1 and old_y - y > until[1] * 2.5:
                self.wiggling = 2
            if old_y < y:
                self.wiggling = 0
                self.out = True

        if self.type == MUSHROOM:
            if old_y - y < until[1] and not self.out:
                y -= self.speed / 3
            else:
                self.out = True
            if self.out and not self.big_mario:
                self.ground_touch = False
                if contacts[1] == 1:
                    self.ground_touch = True
                    y = self.prev_position[1]
                if contacts[2] == 1 or contacts[3] == 1:
                    self.speed = -self.speed
                    x = self.prev_position[0]
                if not self.ground_touch:
                    y += self.gravity
                x += self.speed / 2

        self.position = (x, y)
        self.prev_position = self.position
        self.display_position = (x + self.off_x + self.odd_x, y)

    def set_offset(self, off_x: float) -> None:
        """Set the horizontal scroll offset."""
        self.off_x = off_x

    def hitboxes(self) -> list[Rect]:
        """Sensor boxes for the top, bottom, left and right edges."""
        return _edge_rects(self.display_position, self.animation.display_size, self._hitbox_sizes)