"""Axis-aligned rectangles and clickable menu buttons."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int]


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: Rect) -> bool:
        """Return True if the interiors of the two rectangles overlap."""
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )

    def contains(self, x: float, y: float) -> bool:
        """Return True if the point lies strictly inside the rectangle."""
        return self.x < x < self.right and self.y < y < self.bottom


@dataclass
class Button:
    """A labelled rectangle that reports clicks by the left mouse button."""

    label: str
    position: tuple[float, float]
    size: tuple[float, float]
    color: Color = (0, 0, 255)
    char_size: int = 14
    text_color: Color = (0, 0, 0)
    outline_thickness: float = 0.0
    outline_color: Color | None = None

    @property
    def rect(self) -> Rect:
        return Rect(self.position[0], self.position[1], self.size[0], self.size[1])

    @property
    def text_position(self) -> tuple[float, float]:
        """Where the label is drawn, inset from the button's corner."""
        x, y = self.position
        w, h = self.size
        return (x + w / 32, y + h / 4)

    def is_clicked(self, mouse_x: float, mouse_y: float, pressed: bool) -> bool:
        """Return True if the button is pressed while the cursor is over it."""
        return pressed and self.rect.contains(mouse_x, mouse_y)