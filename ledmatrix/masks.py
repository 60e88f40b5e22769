"""Brightness masks that dim the pixels of an underlying LED matrix."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable

from ledmatrix.colors import ColorHSV, ColorRGB
from ledmatrix.geometry import Bounds, Vector2
from ledmatrix.led import LedMatrix, LedPixel


def _check_brightness(value: int) -> int:
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError("Brightness out of range[0-255].")
    return value


class BrightnessLedPixel(LedPixel):
    """A pixel proxy that scales the value of every colour written through it."""

    def __init__(self, pixel: LedPixel, brightness: int) -> None:
        self._pixel = pixel
        self._factor = _check_brightness(brightness) / 255.0

    @property
    def color(self) -> ColorRGB:
        return self._pixel.color

    def set_color(self, color: ColorRGB | ColorHSV) -> None:
        hsv = color.to_hsv() if isinstance(color, ColorRGB) else color
        self._pixel.set_color(hsv.with_value(hsv.v * self._factor))


class LedMatrixMask(LedMatrix):
    """A view of a matrix whose positional pixels are dimmed per position."""

    def __init__(self, matrix: LedMatrix) -> None:
        super().__init__(matrix.size)
        self._matrix = matrix

    @property
    def matrix(self) -> LedMatrix:
        return self._matrix

    @abstractmethod
    def brightness(self, position: Vector2) -> int:
        """Brightness in [0-255] applied at the position."""

    def pixel(self, index: int) -> LedPixel:
        """The underlying pixel, unmasked."""
        return self._matrix.pixel(index)

    def pixel_at(self, position: Vector2) -> LedPixel:
        return BrightnessLedPixel(self._matrix.pixel_at(position), self.brightness(position))

    def invert(self) -> LedMatrixMask:
        """A mask whose brightness is 255 minus this one's."""
        return SimpleMask(self._matrix, lambda position: 255 - self.brightness(position))

    def maximum(self, mask: LedMatrixMask) -> LedMatrixMask:
        """A mask taking the brighter of this mask and another."""
        return SimpleMask(
            self._matrix,
            lambda position: max(self.brightness(position), mask.brightness(position)),
        )

    def minimum(self, mask: LedMatrixMask) -> LedMatrixMask:
        """A mask taking the darker of this mask and another."""
        return SimpleMask(
            self._matrix,
            lambda position: min(self.brightness(position), mask.brightness(position)),
        )


class BinaryLedMatrixMask(LedMatrixMask):
    """A mask that is either fully on or fully off at each position."""

    def brightness(self, position: Vector2) -> int:
        return 255 if self.has_pixel(position) else 0

    @abstractmethod
    def has_pixel(self, position: Vector2) -> bool:
        """Whether the position is let through."""


class SimpleMask(LedMatrixMask):
    """A mask whose brightness comes from a function of the position."""

    def __init__(self, matrix: LedMatrix, brightness: Callable[[Vector2], int]) -> None:
        super().__init__(matrix)
        self._brightness = brightness

    def brightness(self, position: Vector2) -> int:
        return _check_brightness(self._brightness(position))


class SimpleBinaryMask(BinaryLedMatrixMask):
    """A binary mask driven by a predicate on the position."""

    def __init__(self, matrix: LedMatrix, has_pixel: Callable[[Vector2], bool]) -> None:
        super().__init__(matrix)
        self._has_pixel = has_pixel

    def has_pixel(self, position: Vector2) -> bool:
        return bool(self._has_pixel(position))


class BrightnessGradient(LedMatrixMask):
    """A horizontal saw-tooth fade repeating every ``length`` columns."""

    def __init__(self, matrix: LedMatrix, length: int) -> None:
        super().__init__(matrix)
        length = int(length)
        if not 1 <= length <= 255:
            raise ValueError("Gradient length out of range[1-255].")
        self._length = length

    @property
    def length(self) -> int:
        return self._length

    def brightness(self, position: Vector2) -> int:
        column = int(position.x) % self._length
        return int(255.0 - 255.0 * column / self._length)


class Circle(LedMatrixMask):
    """Full brightness inside the inner radius, fading out to the outer radius."""

    def __init__(
        self,
        matrix: LedMatrix,
        center: Vector2,
        radius1: float,
        radius2: float | None = None,
    ) -> None:
        super().__init__(matrix)
        if radius2 is None:
            radius2 = radius1
        self._center = center
        first, second = radius1 * radius1, radius2 * radius2
        self._sqr_min = min(first, second)
        self._sqr_max = max(first, second)

    @property
    def center(self) -> Vector2:
        return self._center

    def brightness(self, position: Vector2) -> int:
        distance = self._center.sqr_distance(position)
        if distance <= self._sqr_min:
            return 255
        if distance <= self._sqr_max:
            span = self._sqr_max - self._sqr_min
            return int(255.0 - 255.0 * (distance - self._sqr_min) / span)
        return 0


class Square(BinaryLedMatrixMask):
    """Lets through only the positions inside a rectangle."""

    def __init__(self, matrix: LedMatrix, bounds: Bounds) -> None:
        super().__init__(matrix)
        self._bounds = bounds

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def has_pixel(self, position: Vector2) -> bool:
        return self._bounds.contains(position)