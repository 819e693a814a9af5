"""Maze ghosts that chase the player tile by tile."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import IntEnum

Point = tuple[float, float]
Tile = tuple[int, int]

_CORNERS: tuple[Tile, ...] = ((1, 1), (18, 1), (1, 21), (18, 21))
_HOME: Tile = (9, 8)
_LEFT_TUNNEL: Tile = (1, 10)
_RIGHT_TUNNEL: Tile = (18, 10)
_BLOCKED = 99999.0
_WALL = 1


class Direction(IntEnum):
    """Movement instruction; the value is also the neighbour search order."""

    RIGHT = 0
    LEFT = 1
    DOWN = 2
    UP = 3


# Column of the sprite-sheet frame used for each direction.
_FRAME_COLUMN = {Direction.RIGHT: 6, Direction.LEFT: 4, Direction.DOWN: 2, Direction.UP: 0}

_BEGINNINGS = {
    1: [Direction.UP],
    2: [Direction.UP, Direction.RIGHT],
    3: [Direction.UP, Direction.LEFT],
}


def _round(value: float) -> int:
    """Round half away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


class Ghost:
    """One ghost: 0 chases directly, 1 aims ahead, 2 flanks, 3 keeps its distance."""

    def __init__(
        self,
        ghost_type: int,
        tile: Tile,
        tile_size: Point,
        start: Point,
        field: Sequence[Sequence[int]],
        *,
        speed: float = 60.0,
        sprite_size: Point = (16.0, 16.0),
        dead_sprite_size: Point = (16.0, 16.0),
    ) -> None:
        self.type = ghost_type
        self.tile_size = tile_size
        self.start = start
        self.field = [list(column) for column in field]
        self.position: Point = (
            tile[0] * tile_size[0] + start[0],
            tile[1] * tile_size[1] + start[1],
        )
        self.speed = speed
        self.sprite_size = sprite_size
        self.dead_sprite_size = dead_sprite_size
        self.beginning: list[Direction] = list(_BEGINNINGS.get(ghost_type, []))
        self.st = 0 if ghost_type == 1 else 1
        self.beg = True
        self.alive = True
        self.instruction: Direction | None = None
        self.prev_pos: Tile | None = None
        self.dist_traveled = 0.0
        self.frame_size: Point = sprite_size
        self.frame_start: Point = (0.0, ghost_type * sprite_size[1])

    def _tile_of(self, point: Point) -> Tile:
        return (
            _round((point[0] - self.start[0]) / self.tile_size[0]),
            _round((point[1] - self.start[1]) / self.tile_size[1]),
        )

    def _follow_beginning(self, delta: float) -> None:
        if self.st != -1:
            self.instruction = self.beginning[self.st]
        else:
            self.beg = False
        if self.step(delta):
            self.st -= 1

    def _ahead(self, player: Point, rot: float, tiles: int) -> Tile:
        px, py = self._tile_of(player)
        dx, dy = {0: (tiles, 0), 180: (-tiles, 0), 90: (0, tiles), 270: (0, -tiles)}.get(
            int(rot), (0, 0)
        )
        return (px + dx, py + dy)

    def update(self, player: Point, fright: bool = False, delta: float = 1 / 60) -> None:
        """Advance a direct chaser (type 0) or a distance-keeping ghost (type 3)."""
        target = self._tile_of(player)
        pos = self._tile_of(self.position)

        if not self.alive:
            self.die(delta)
            return
        if fright:
            if self.step(delta, fright):
                self.scatter(pos)
            return

        if self.beg and self.type == 0:
            self.find_path(target, pos)
            self.beg = False
        elif self.beg and self.type == 3:
            self._follow_beginning(delta)

        if self.beg:
            return
        self.st = 1
        if self.type == 0:
            if self.step(delta):
                self.find_path(target, pos)
        elif self.type == 3:
            if math.hypot(pos[0] - target[0], pos[1] - target[1]) <= 4:
                target = min(
                    _CORNERS, key=lambda c: math.hypot(pos[0] - c[0], pos[1] - c[1])
                )
            if self.step(delta, fright):
                self.find_path(target, pos)

    def update_pinky(
        self, player: Point, rot: float, fright: bool = False, delta: float = 1 / 60
    ) -> None:
        """Advance a ghost that aims two tiles ahead of the player."""
        pos = self._tile_of(self.position)
        if not self.alive:
            self.die(delta)
        elif fright:
            if self.step(delta, fright):
                self.scatter(pos)
        elif self.beg:
            self._follow_beginning(delta)
        else:
            self.st = 1
            target = self._ahead(player, rot, 2)
            if self.step(delta, fright):
                self.find_path(target, pos)

    def update_inky(
        self,
        player: Point,
        rot: float,
        blinky: Point,
        fright: bool = False,
        delta: float = 1 / 60,
    ) -> None:
        """Advance a ghost that aims at the point opposite the chaser."""
        pos = self._tile_of(self.position)
        if not self.alive:
            self.die(delta)
        elif fright:
            if self.step(delta, fright):
                self.scatter(pos)
        elif self.beg:
            self._follow_beginning(delta)
        else:
            self.st = 2
            ox, oy = self._ahead(player, rot, 1)
            bx, by = self._tile_of(blinky)
            angle = 180.0
            target = (
                int((bx - ox) * math.cos(angle) - (oy - by) * math.sin(angle) + ox),
                int((oy - by) * math.cos(angle) - (bx - ox) * math.sin(angle) + oy),
            )
            if self.step(delta, fright):
                self.find_path(target, pos)

    def find_path(self, target: Tile, cur_pos: Tile) -> None:
        """Pick the open neighbour closest to target, never stepping straight back."""
        cur_pos = (int(cur_pos[0]), int(cur_pos[1]))
        if cur_pos == _LEFT_TUNNEL:
            self.instruction = Direction.RIGHT
        elif cur_pos == _RIGHT_TUNNEL:
            self.instruction = Direction.LEFT
        else:
            cx, cy = cur_pos
            tx, ty = target
            neighbours = (
                (Direction.RIGHT, (cx + 1, cy)),
                (Direction.LEFT, (cx - 1, cy)),
                (Direction.DOWN, (cx, cy + 1)),
                (Direction.UP, (cx, cy - 1)),
            )
            lowest = 99999999.0
            for direction, (nx, ny) in neighbours:
                if self.field[nx][ny] != _WALL and (nx, ny) != self.prev_pos:
                    cost = math.hypot(tx - nx, ty - ny)
                else:
                    cost = _BLOCKED
                if cost < lowest:
                    lowest = cost
                    self.instruction = direction
        self.prev_pos = cur_pos

    def scatter(self, cur_pos: Tile) -> None:
        """Head for this ghost's own corner of the maze."""
        if 0 <= self.type < len(_CORNERS):
            self.find_path(_CORNERS[self.type], cur_pos)

    def step(self, delta: float, fright: bool = False) -> bool:
        """Move along the instruction; return True once a whole tile is covered."""
        x, y = self.position
        move = self.speed * delta
        if self.dist_traveled > self.tile_size[0]:
            if self.instruction is Direction.RIGHT:
                x -= move
            elif self.instruction is Direction.LEFT:
                x += move
            elif self.instruction is Direction.DOWN:
                y -= move
            elif self.instruction is Direction.UP:
                y += move
            self.position = (x, y)
            self.dist_traveled = 0.0
            return True
        self.dist_traveled += move

        w, h = self.sprite_size
        if self.instruction is None:
            self.frame_size, self.frame_start = self.sprite_size, (0.0, self.type * h)
            return False
        column = _FRAME_COLUMN[self.instruction]
        if fright:
            self.frame_size, self.frame_start = self.sprite_size, (0.0, h * 4)
        elif not self.alive:
            dw = self.dead_sprite_size[0]
            self.frame_size, self.frame_start = self.dead_sprite_size, (dw * column, h * 5)
        else:
            self.frame_size, self.frame_start = self.sprite_size, (w * column, self.type * h)

        if self.instruction is Direction.RIGHT:
            x += move
        elif self.instruction is Direction.LEFT:
            x -= move
        elif self.instruction is Direction.DOWN:
            y += move
        else:
            y -= move
        self.position = (x, y)
        return False

    def die(self, delta: float) -> None:
        """Return to the ghost house; come alive on reaching it."""
        pos = self._tile_of(self.position)
        if self.step(delta):
            self.find_path(_HOME, pos)
        self.alive = pos == _HOME

    def reset(self) -> None:
        """Restart the leave-the-house sequence."""
        self.dist_traveled = 0.0
        self.beg = True
        self.st = 0 if self.type == 1 else 1
        self.alive = True