"""Level blocks: ground, bricks, mystery boxes, pipes and scenery."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from arcadesixteen.animation import SpriteAnimation
from arcadesixteen.button import Rect

Point = tuple[float, float]


class BlockType(Enum):
    """Every kind of tile a level can hold."""

    GROUND = auto()
    BRICK = auto()
    MYSTERY = auto()
    SHINE = auto()
    COIN = auto()
    PIPE_TOP_LEFT = auto()
    PIPE_TOP_RIGHT = auto()
    PIPE_LEFT = auto()
    PIPE_RIGHT = auto()
    CLOUD1 = auto()
    GRASS1 = auto()
    CLOUD2 = auto()
    HILL1 = auto()
    GRASS2 = auto()
    CLOUD3 = auto()
    GRASS3 = auto()
    HILL2 = auto()


@dataclass(frozen=True)
class _Look:
    cell: tuple[int, int] = (0, 0)
    max_swap: int = 0
    row: int = 0
    cycle: bool = True
    swap: int = 0
    wiggle: bool = False
    delay: float | None = None


_LOOKS = {
    BlockType.GROUND: _Look(),
    BlockType.BRICK: _Look(cell=(1, 0), wiggle=True),
    BlockType.MYSTERY: _Look(cell=(2, 0), max_swap=2, wiggle=True, delay=0.25),
    BlockType.SHINE: _Look(cell=(6, 0)),
    BlockType.COIN: _Look(cell=(0, 1), max_swap=2, delay=0.25),
    BlockType.PIPE_TOP_LEFT: _Look(cell=(3, 1)),
    BlockType.PIPE_TOP_RIGHT: _Look(cell=(4, 1)),
    BlockType.PIPE_LEFT: _Look(cell=(5, 1)),
    BlockType.PIPE_RIGHT: _Look(cell=(6, 1)),
    BlockType.CLOUD1: _Look(),
    BlockType.GRASS1: _Look(cycle=False, swap=1),
    BlockType.CLOUD2: _Look(row=1),
    BlockType.HILL1: _Look(row=1, cycle=False, swap=1),
    BlockType.GRASS2: _Look(row=1, cycle=False, swap=2),
    BlockType.CLOUD3: _Look(row=2, cycle=False),
    BlockType.GRASS3: _Look(row=2, cycle=False, swap=1),
    BlockType.HILL2: _Look(),
}


class Box:
    """A block that may bounce when hit from below and may hold items."""

    def __init__(
        self,
        position: Point,
        size: Point,
        block_type: BlockType,
        sprite_size: Point,
        entity: int = 0,
        *,
        speed: float = 2.0,
    ) -> None:
        look = _LOOKS[block_type]
        start = (look.cell[0] * sprite_size[0], look.cell[1] * sprite_size[1])
        self.animation = SpriteAnimation(sprite_size, size, look.max_swap, start)
        self.animation.row = look.row
        self.animation.cycle = look.cycle
        self.animation.swap = look.swap
        if look.delay is not None:
            self.animation.delay = look.delay
        self.animation.texture_rect = Rect(start[0], start[1], sprite_size[0], sprite_size[1])

        self.type = block_type
        self.entity = entity
        self.had_entity = bool(entity)
        self.can_wiggle = look.wiggle
        self.speed = speed
        self.position: Point = (float(position[0]), float(position[1]))
        self.old_position: Point = self.position
        self.display_position: Point = self.position
        self.off_x = 0.0
        self.wiggling = 0

    def update(self, wiggle: bool = False) -> None:
        """Place the sprite and run the bump: up a third of its height, then back."""
        x, y = self.position
        self.display_position = (x + self.off_x, y)
        if wiggle:
            self.wiggling = 1
        if not (self.wiggling and self.can_wiggle):
            return

        y = y - self.speed if self.wiggling == 1 else y + self.speed
        old_y = self.old_position[1]
        if self.wiggling == 1 and old_y - y > self.animation.display_size[1] / 3:
            self.wiggling = 2
        if old_y < y:
            y = old_y
            self.wiggling = 0
            if self.had_entity and not self.entity:
                self.animation.max_swap = 0
                self.animation.swap = 3
                self.animation.cycle = False
                self.can_wiggle = False
        self.position = (x, y)

    def set_offset(self, off_x: float) -> None:
        """Set the horizontal scroll offset applied when the box is placed."""
        self.off_x = off_x