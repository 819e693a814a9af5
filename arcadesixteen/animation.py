"""Frame-stepping logic for sprite-sheet animations."""

from __future__ import annotations

from arcadesixteen.button import Rect


class TwoFrameAnimation:
    """Alternates between two frames of a row on a sprite sheet."""

    def __init__(
        self,
        size: tuple[float, float],
        start: tuple[float, float] = (0.0, 0.0),
        delay: float = 0.2,
    ) -> None:
        self.size = size
        self.start = start
        self.delay = delay
        self.timer = 0.0
        self.swap = 0
        self.texture_rect = Rect(start[0], start[1], size[0], size[1])

    def advance(self, elapsed: float) -> Rect:
        """Add elapsed seconds; switch frame once the delay is exceeded."""
        self.timer += elapsed
        if self.timer > self.delay:
            w, h = self.size
            self.texture_rect = Rect(self.swap * w, self.start[1], w, h)
            self.swap = 1 - self.swap
            self.timer = 0.0
        return self.texture_rect


class SpriteAnimation:
    """Cycles through frames 0..max_swap of a row on a sprite sheet."""

    def __init__(
        self,
        size: tuple[float, float],
        display_size: tuple[float, float],
        max_swap: int = 1,
        start: tuple[float, float] = (0.0, 0.0),
        delay: float = 0.2,
    ) -> None:
        self.size = size
        self.display_size = display_size
        self.max_swap = max_swap
        self.start = start
        self.delay = delay
        self.row = 0
        self.swap = 0
        self.cycle = True
        self.timer = 0.0
        self.texture_rect = Rect(start[0], start[1], size[0], size[1])

    def advance(self, elapsed: float) -> Rect:
        """Add elapsed seconds; show the next frame once the delay is exceeded."""
        self.timer += elapsed
        if self.timer > self.delay:
            if self.swap > self.max_swap and self.cycle:
                self.swap = 0
            w, h = self.size
            self.texture_rect = Rect(
                self.swap * w + self.start[0],
                self.row * h + self.start[1],
                w,
                h,
            )
            if self.cycle:
                self.swap += 1
            self.timer = 0.0
        return self.texture_rect

    def set_start(self, x: int, y: int) -> None:
        """Start the frame sequence at cell (x, y) of the sheet."""
        self.start = (self.size[0] * x, self.size[1] * y)