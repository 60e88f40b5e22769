"""Plane geometry helpers: vectors, axis-aligned bounds and a 2D grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Vector2:
    """A 2D vector ordered by x first, then y."""

    x: float = 0
    y: float = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, value: float) -> Vector2:
        return Vector2(self.x * value, self.y * value)

    __rmul__ = __mul__

    def sqr_distance(self, other: Vector2) -> float:
        """Squared euclidean distance to another vector."""
        dx = float(self.x) - other.x
        dy = float(self.y) - other.y
        return dx * dx + dy * dy

    def square(self) -> float:
        """Area of the rectangle spanned by the vector (x * y)."""
        return self.x * self.y

    def __str__(self) -> str:
        return f"Vector2({self.x}; {self.y})"


@dataclass(frozen=True)
class Bounds:
    """An inclusive axis-aligned rectangle; corners are normalised on creation."""

    left: float
    down: float
    right: float
    up: float

    def __post_init__(self) -> None:
        left, right = sorted((self.left, self.right))
        down, up = sorted((self.down, self.up))
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)
        object.__setattr__(self, "down", down)
        object.__setattr__(self, "up", up)

    @classmethod
    def from_points(cls, first: Vector2, second: Vector2) -> Bounds:
        """Bounds spanned by two opposite corners."""
        return cls(first.x, first.y, second.x, second.y)

    def contains(self, position: Vector2) -> bool:
        """Whether the position lies inside or on the edge."""
        return self.left <= position.x <= self.right and self.down <= position.y <= self.up

    __contains__ = contains


def _format_cell(value: object) -> str:
    if isinstance(value, bool):
        return str(int(value))
    return str(value)


class Grid(Generic[T]):
    """A fixed-size 2D grid of values addressed by Vector2 positions."""

    def __init__(self, size: Vector2, fill: T | None = None) -> None:
        if size.x < 0 or size.y < 0:
            raise ValueError("grid size must not be negative")
        self._size = Vector2(int(size.x), int(size.y))
        self._rows: list[list[T | None]] = [
            [fill] * self._size.x for _ in range(self._size.y)
        ]

    @property
    def size(self) -> Vector2:
        return self._size

    def _check(self, position: Vector2) -> None:
        if not (0 <= position.x < self._size.x and 0 <= position.y < self._size.y):
            raise IndexError(f"position {position} outside grid of size {self._size}")

    def get(self, position: Vector2) -> T | None:
        self._check(position)
        return self._rows[int(position.y)][int(position.x)]

    def set(self, position: Vector2, value: T) -> None:
        self._check(position)
        self._rows[int(position.y)][int(position.x)] = value

    __getitem__ = get
    __setitem__ = set

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._size == other._size and self._rows == other._rows

    def __str__(self) -> str:
        return "".join(
            "".join(f"{_format_cell(value)}, " for value in row) + "\n"
            for row in self._rows
        )