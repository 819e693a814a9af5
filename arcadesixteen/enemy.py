"""Walking enemies that fall, turn at walls and die in two ways."""

from __future__ import annotations

from collections.abc import Sequence

from arcadesixteen.animation import SpriteAnimation
from arcadesixteen.button import Rect

Point = tuple[float, float]


def _edge_rects(position: Point, display: Point, sizes: list[Point]) -> list[Rect]:
    """Top, bottom, left and right sensor boxes around a sprite."""
    x, y = position
    w, h = display
    corners = ((x + 1, y), (x + 1, y + h), (x, y + 1), (x + w, y + 1))
    return [Rect(cx, cy, sw, sh) for (cx, cy), (sw, sh) in zip(corners, sizes)]


class Enemy:
    """A walker; type 0 is squashed and removed, type 1 shrinks into a shell."""

    def __init__(
        self,
        position: Point,
        sprite_size: Point,
        display_size: Point,
        enemy_type: int = 0,
        *,
        speed: float = 50.0,
        gravity: float = 200.0,
        death_delay: float = 0.5,
        max_swap: int = 1,
    ) -> None:
        self.animation = SpriteAnimation(sprite_size, display_size, max_swap)
        self.type = enemy_type
        self.position: Point = (float(position[0]), float(position[1]))
        self.prev_position: Point = self.position
        self.display_position: Point = self.position
        self.speed = speed
        self.gravity = gravity
        self.death_delay = death_delay
        self.alive = True
        self.on_screen = False
        self.ground_touch = False
        self.death_set = False
        self.death_timer = 0.0
        self.spin = 0
        self.spinning = False
        self.show_hitbox = False
        self.off_x = 0.0
        w, h = display_size
        self._hitbox_sizes: list[Point] = [(w - 5, 1.0), (w - 5, 1.0), (1.0, h - 5), (1.0, h - 5)]

    def update(self, contacts: Sequence[int], on_screen: bool, delta: float) -> bool:
        """Advance by delta seconds; return True when the enemy should be removed."""
        self.on_screen = on_screen
        x, y = self.position

        self.ground_touch = False
        if contacts[1] == 1:
            self.ground_touch = True
            y = self.prev_position[1]
        if contacts[2] == 1 or contacts[3] == 1:
            self.speed = -self.speed
            x = self.prev_position[0]
        if not self.ground_touch:
            y += self.gravity * delta

        anim = self.animation
        if self.alive:
            if self.on_screen:
                x -= self.speed * delta
            self.death_timer = 0.0
        elif self.type == 0:
            self.death_timer += delta
            if self.death_timer > self.death_delay:
                self.position = (x, y)
                return True
        elif self.type == 1 and not self.death_set:
            w, h = anim.display_size
            h = h / 3 * 2
            anim.display_size = (w, h)
            self._hitbox_sizes = [(w, 1.0), (w, 1.0), (1.0, h - 5), (1.0, h - 5)]
            self.death_set = True

        if not self.alive and self.spin == 0:
            anim.cycle = False
            anim.swap = 2

        if self.spinning:
            anim.cycle = True
            anim.swap = 0
            anim.set_start(3, 0)
            anim.max_swap = 3
            anim.delay = 0.1
            self.spinning = False

        if self.spin != 0:
            x += 4 * self.speed if self.spin == 1 else -4 * self.speed

        self.position = (x, y)
        if self.type == 1 and self.alive:
            self.display_position = (x + self.off_x, y - anim.display_size[1] / 3)
        else:
            self.display_position = (x + self.off_x, y)
        self.prev_position = self.position
        return False

    def set_offset(self, off_x: float) -> None:
        """Set the horizontal scroll offset."""
        self.off_x = off_x

    def hitboxes(self) -> list[Rect]:
        """Sensor boxes for the top, bottom, left and right edges."""
        return _edge_rects(self.display_position, self.animation.display_size, self._hitbox_sizes)