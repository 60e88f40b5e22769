"""Abstract LED pixels, strips and matrices, plus serpentine and stacked layouts."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

from ledmatrix.colors import ColorHSV, ColorRGB
from ledmatrix.geometry import Vector2


class LedPixel(ABC):
    """A single addressable LED."""

    @property
    @abstractmethod
    def color(self) -> ColorRGB:
        """The colour currently held by the pixel."""

    @abstractmethod
    def set_color(self, color: ColorRGB | ColorHSV) -> None:
        """Set the pixel to an RGB or HSV colour."""

    def __str__(self) -> str:
        return str(self.color.to_hsv())


class LedStrip(ABC):
    """A linear run of pixels addressed by index."""

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError("strip length must not be negative")
        self._length = int(length)

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    @abstractmethod
    def pixel(self, index: int) -> LedPixel:
        """The pixel at the given index."""

    def __iter__(self) -> Iterator[LedPixel]:
        return (self.pixel(index) for index in range(self._length))

    def clear(self) -> None:
        """Turn every pixel black."""
        black = ColorRGB(0, 0, 0)
        for pixel in self:
            pixel.set_color(black)

    def to_bytes(self) -> bytes:
        """All pixel colours as consecutive RGB triples."""
        return b"".join(pixel.color.to_bytes() for pixel in self)

    def from_bytes(self, data: bytes) -> None:
        """Load pixel colours from consecutive RGB triples."""
        data = bytes(data)
        if len(data) < 3 * self._length:
            raise ValueError(
                f"need {3 * self._length} bytes for {self._length} pixels, got {len(data)}"
            )
        for index, pixel in enumerate(self):
            pixel.set_color(ColorRGB.from_bytes(data[3 * index : 3 * index + 3]))


class LedMatrix(LedStrip):
    """A strip whose pixels are also laid out on a 2D grid."""

    def __init__(self, size: Vector2) -> None:
        self._size = Vector2(int(size.x), int(size.y))
        super().__init__(self._size.square())

    @property
    def size(self) -> Vector2:
        return self._size

    @abstractmethod
    def pixel_at(self, position: Vector2) -> LedPixel:
        """The pixel at a 2D position."""

    def render(self) -> str:
        """A text dump of every pixel's HSV colour, one row per line."""
        return "".join(
            "".join(f"{self.pixel_at(Vector2(x, y))} " for x in range(self._size.x)) + "\n"
            for y in range(self._size.y)
        )


class LedSnakeMatrix(LedMatrix):
    """A matrix wired column by column, alternating direction (serpentine)."""

    def pixel_at(self, position: Vector2) -> LedPixel:
        x, y = int(position.x), int(position.y)
        width, height = self._size.x, self._size.y
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(f"position {position} outside matrix of size {self._size}")
        index = x * height + (y if x % 2 == 0 else height - y - 1)
        return self.pixel(index)


class StackDirection(enum.Enum):
    """How matrices in a set are placed next to each other."""

    RIGHT = "right"
    DOWN = "down"


class LedMatrixSet(LedMatrix):
    """Several matrices joined side by side or one above another."""

    def __init__(self, matrices: Sequence[LedMatrix], direction: StackDirection) -> None:
        self._matrices = tuple(matrices)
        self._direction = direction
        width = height = 0
        for matrix in self._matrices:
            first = self._matrices[0].size
            if direction is StackDirection.RIGHT:
                if matrix.size.y != first.y:
                    raise ValueError("matrices heights must be equal")
                width += matrix.size.x
                height = matrix.size.y
            else:
                if matrix.size.x != first.x:
                    raise ValueError("matrices widths must be equal")
                width = matrix.size.x
                height += matrix.size.y
        super().__init__(Vector2(width, height))

    @property
    def direction(self) -> StackDirection:
        return self._direction

    @property
    def matrices(self) -> tuple[LedMatrix, ...]:
        return self._matrices

    def pixel(self, index: int) -> LedPixel:
        if index < 0:
            raise IndexError(f"pixel index {index} out of range")
        remaining = index
        for matrix in self._matrices:
            if remaining < matrix.length:
                return matrix.pixel(remaining)
            remaining -= matrix.length
        raise IndexError(f"pixel index {index} out of range")

    def pixel_at(self, position: Vector2) -> LedPixel:
        x, y = int(position.x), int(position.y)
        if x < 0 or y < 0:
            raise IndexError(f"position {position} out of range")
        for matrix in self._matrices:
            if self._direction is StackDirection.RIGHT:
                if x < matrix.size.x:
                    return matrix.pixel_at(Vector2(x, y))
                x -= matrix.size.x
            else:
                if y < matrix.size.y:
                    return matrix.pixel_at(Vector2(x, y))
                y -= matrix.size.y
        raise IndexError(f"position {position} out of range")