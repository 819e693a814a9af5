"""Brick-breaking game: ball, paddle and a field of blocks."""

from __future__ import annotations

from arcadesixteen.button import Button, Rect

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480

_START_SPEED = (0.6, 0.5)
_START_BALL = (230.0, 380.0)
_RESET_BALL = (250.0, 380.0)
_START_PADDLE = (250.0, 420.0)


class ArkanoidGame:
    """Game state of one round of the brick-breaking game."""

    def __init__(
        self,
        *,
        columns: int = 10,
        rows: int = 5,
        block_size: tuple[float, float] = (58.0, 20.0),
        spacing: float = 4.0,
        offset: tuple[float, float] = (12.0, 30.0),
        ball_size: tuple[float, float] = (16.0, 16.0),
        paddle_size: tuple[float, float] = (90.0, 20.0),
        paddle_speed: float = 1.0,
        screen_width: float = SCREEN_WIDTH,
        screen_height: float = SCREEN_HEIGHT,
    ) -> None:
        self.columns = columns
        self.rows = rows
        self.block_size = block_size
        self.spacing = spacing
        self.offset = offset
        self.ball_size = ball_size
        self.paddle_size = paddle_size
        self.paddle_speed = paddle_speed
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.back_button = Button("Back", (580.0, 450.0), (50.0, 30.0))

        self.blocks: list[Rect] = self._build_blocks()
        self.speed_x, self.speed_y = _START_SPEED
        self.position = _START_BALL
        self.prev_position = self.position
        self.paddle_position = _START_PADDLE
        self.game_over = False
        self._turned_x = False
        self._turned_y = False
        self._sensors: list[tuple[Rect, bool]] = []
        self._place_sensors()

    def _build_blocks(self) -> list[Rect]:
        w, h = self.block_size
        ox, oy = self.offset
        return [
            Rect(x * (w + self.spacing) + ox, y * (h + self.spacing) + oy, w, h)
            for x in range(self.columns)
            for y in range(self.rows)
        ]

    def _place_sensors(self) -> None:
        """Thin boxes along the ball's edges; the flag marks top/bottom ones."""
        x, y = self.position
        bw, bh = self.ball_size
        self._sensors = [
            (Rect(x + 1, y, bw, 2.0), True),
            (Rect(x, y + bh, bw, 2.0), True),
            (Rect(x, y + 1, 2.0, bh - 2.0), False),
            (Rect(x + bw, y + 1, 2.0, bh - 2.0), False),
        ]

    @property
    def ball_rect(self) -> Rect:
        return Rect(self.position[0], self.position[1], *self.ball_size)

    @property
    def paddle_rect(self) -> Rect:
        return Rect(self.paddle_position[0], self.paddle_position[1], *self.paddle_size)

    def update(self, delta: float, left: bool = False, right: bool = False) -> None:
        """Advance the round by delta seconds with the given paddle keys held."""
        if self.game_over:
            return

        px, py = self.paddle_position
        pw = self.paddle_size[0]
        if px < 0:
            px = 0.0
        if px > self.screen_width - pw:
            px = self.screen_width - pw

        self.prev_position = self.position
        self._turned_x = self._turned_y = False

        x, y = self.position
        bw, bh = self.ball_size
        if y + bh >= self.screen_height:
            self.game_over = True
        if y <= 0:
            y = 0.0
            self.speed_y = -self.speed_y
        if x <= 0:
            x = 0.0
            self.speed_x = -self.speed_x
        if x >= self.screen_width - bw:
            x = self.screen_width - bw
            self.speed_x = -self.speed_x

        self.position = (x + self.speed_x * delta, y + self.speed_y * delta)
        self._place_sensors()

        for index, block in enumerate(self.blocks):
            if self.collide(block):
                del self.blocks[index]
                self.position = self.prev_position
                break

        if left:
            px -= self.paddle_speed * delta
        elif right:
            px += self.paddle_speed * delta
        self.paddle_position = (px, py)
        self.collide(self.paddle_rect)

    def collide(self, rect: Rect) -> bool:
        """Bounce the ball off rect if a sensor touches it; report any contact."""
        hit_x = hit_y = False
        for sensor, vertical in self._sensors:
            probe = Rect(int(sensor.x), int(sensor.y), sensor.width, sensor.height)
            if probe.intersects(rect):
                if vertical:
                    hit_y = True
                else:
                    hit_x = True
        if hit_y and not self._turned_y:
            self.speed_y = -self.speed_y
            self._turned_y = True
        if hit_x and not self._turned_x:
            self.speed_x = -self.speed_x
            self._turned_x = True
        return hit_x or hit_y

    def reset(self) -> None:
        """Start a new round with a full field of blocks."""
        self.blocks = self._build_blocks()
        self.speed_x, self.speed_y = _START_SPEED
        self.position = _RESET_BALL
        self.prev_position = self.position
        self.paddle_position = _START_PADDLE
        self.game_over = False
        self._place_sensors()