"""Two-dimensional points and axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO


@dataclass
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def write(self, stream: TextIO) -> None:
        """Write the coordinates to a text stream, one per line."""
        stream.write(f"{self.x:g}\n")
        stream.write(f"{self.y:g}\n")


def _read_token(stream: TextIO) -> str:
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    if not char:
        raise ValueError("unexpected end of stream")
    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def read_point(stream: TextIO) -> Point:
    """Read two whitespace-separated numbers from a text stream as a point."""
    x = float(_read_token(stream))
    y = float(_read_token(stream))
    return Point(x, y)


def smaller_x(first: Point, second: Point) -> bool:
    """True when the first point lies strictly left of the second."""
    return first.x < second.x


def larger_x(first: Point, second: Point) -> bool:
    """True when the first point lies strictly right of the second."""
    return first.x > second.x


class Rect:
    """An axis-aligned rectangle given by its edges."""

    def __init__(
        self, left: float = 0.0, right: float = 0.0, bottom: float = 0.0, top: float = 0.0
    ) -> None:
        self.left = left
        self.right = right
        self.bottom = bottom
        self.top = top
        self.validate()

    def __repr__(self) -> str:
        return (
            f"Rect(left={self.left!r}, right={self.right!r}, "
            f"bottom={self.bottom!r}, top={self.top!r})"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.left, self.right, self.bottom, self.top) == (
            other.left,
            other.right,
            other.bottom,
            other.top,
        )

    __hash__ = None  # type: ignore[assignment]

    def bottom_left(self, x: float, y: float) -> None:
        self.left = x
        self.bottom = y

    def top_right(self, x: float, y: float) -> None:
        self.right = x
        self.top = y

    def width(self) -> float:
        return self.right - self.left

    def height(self) -> float:
        return self.top - self.bottom

    def validate(self) -> None:
        """Swap edges so that left <= right and bottom <= top."""
        if self.left > self.right:
            self.left, self.right = self.right, self.left
        if self.bottom > self.top:
            self.bottom, self.top = self.top, self.bottom