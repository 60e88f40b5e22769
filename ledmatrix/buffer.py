"""LED strips and matrices backed by an in-memory byte buffer of wire-order pixels."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator

from ledmatrix.colors import ColorHSV, ColorRGB
from ledmatrix.geometry import Vector2
from ledmatrix.led import LedPixel, LedSnakeMatrix, LedStrip


class ColorOrder(enum.Enum):
    """Byte offsets of the red, green, blue and white channels within a pixel.

    Orders without a white channel give it the red offset.
    """

    RGB = (0, 1, 2, 0)
    RBG = (0, 2, 1, 0)
    GRB = (1, 0, 2, 1)
    GBR = (2, 0, 1, 2)
    BRG = (1, 2, 0, 1)
    BGR = (2, 1, 0, 2)
    RGBW = (0, 1, 2, 3)
    GRBW = (1, 0, 2, 3)

    @property
    def r(self) -> int:
        return self.value[0]

    @property
    def g(self) -> int:
        return self.value[1]

    @property
    def b(self) -> int:
        return self.value[2]

    @property
    def w(self) -> int:
        return self.value[3]

    @property
    def has_white(self) -> bool:
        return self.w != self.r

    @property
    def bytes_per_pixel(self) -> int:
        return 4 if self.has_white else 3


def _scale(channel: int, scale: int) -> int:
    return (channel * scale) >> 8 if scale else channel


class BufferLedPixel(LedPixel):
    """One pixel's bytes inside a shared buffer."""

    def __init__(self, buffer: bytearray, offset: int, order: ColorOrder, scale: int = 0) -> None:
        self._buffer = buffer
        self._offset = offset
        self._order = order
        self._scale = scale

    @property
    def color(self) -> ColorRGB:
        base, order = self._offset, self._order
        return ColorRGB(
            self._buffer[base + order.r],
            self._buffer[base + order.g],
            self._buffer[base + order.b],
        )

    def set_color(self, color: ColorRGB | ColorHSV | int) -> None:
        """Set from an RGB colour, an HSV colour or a packed 0xRRGGBB integer."""
        if isinstance(color, ColorHSV):
            color = color.to_rgb()
        elif isinstance(color, int):
            color = ColorRGB((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
        self._write_rgb(color.r, color.g, color.b)

    def set_rgbw(self, r: int, g: int, b: int, w: int) -> None:
        """Set all four channels of a pixel that has a white channel."""
        if not self._order.has_white:
            raise ValueError(f"colour order {self._order.name} has no white channel")
        ColorRGB(r, g, b)
        if not 0 <= w <= 255:
            raise ValueError("Channel w out of range[0-255].")
        self._write_rgb(r, g, b)
        self._buffer[self._offset + self._order.w] = _scale(w, self._scale)

    def _write_rgb(self, r: int, g: int, b: int) -> None:
        base, order = self._offset, self._order
        self._buffer[base + order.r] = _scale(r, self._scale)
        self._buffer[base + order.g] = _scale(g, self._scale)
        self._buffer[base + order.b] = _scale(b, self._scale)


class _PixelBuffer:
    """Shared buffer handling for strips and matrices."""

    length: int

    def _init_buffer(self, count: int, pin: int, order: ColorOrder) -> None:
        self.pin = pin
        self._order = order
        self._buffer = bytearray(count * order.bytes_per_pixel)
        self._brightness = 255

    @property
    def order(self) -> ColorOrder:
        return self._order

    @property
    def buffer(self) -> bytes:
        """The raw pixel bytes in wire order."""
        return bytes(self._buffer)

    @property
    def brightness(self) -> int:
        return self._brightness

    @brightness.setter
    def brightness(self, value: int) -> None:
        if not 0 <= value <= 255:
            raise ValueError("Brightness out of range[0-255].")
        self._brightness = int(value)

    def _make_pixel(self, index: int) -> BufferLedPixel:
        if not 0 <= index < self.length:
            raise IndexError(f"pixel index {index} out of range")
        scale = (self._brightness + 1) & 0xFF
        return BufferLedPixel(self._buffer, index * self._order.bytes_per_pixel, self._order, scale)

    def _zero(self) -> None:
        self._buffer[:] = bytes(len(self._buffer))


class BufferLedStrip(_PixelBuffer, LedStrip):
    """A strip of pixels stored in a byte buffer."""

    def __init__(self, length: int, pin: int = 6, order: ColorOrder = ColorOrder.GRB) -> None:
        LedStrip.__init__(self, length)
        self._init_buffer(self.length, pin, order)

    def pixel(self, index: int) -> BufferLedPixel:
        return self._make_pixel(index)

    def clear_buffer(self) -> None:
        """Zero every byte of the buffer."""
        self._zero()


class BufferLedSnakeMatrix(_PixelBuffer, LedSnakeMatrix):
    """A serpentine matrix of pixels stored in a byte buffer."""

    def __init__(self, size: Vector2, pin: int = 6, order: ColorOrder = ColorOrder.GRB) -> None:
        LedSnakeMatrix.__init__(self, size)
        self._init_buffer(self.length, pin, order)

    def pixel(self, index: int) -> BufferLedPixel:
        return self._make_pixel(index)

    def clear_buffer(self) -> None:
        """Zero every byte of the buffer."""
        self._zero()


Strip = BufferLedStrip | BufferLedSnakeMatrix


class StripGroup:
    """A collection of buffered strips handled together."""

    def __init__(self, strips: Iterable[Strip] = ()) -> None:
        self.strips: list[Strip] = list(strips)

    def __iter__(self) -> Iterator[Strip]:
        return iter(self.strips)

    def __len__(self) -> int:
        return len(self.strips)

    def append(self, strip: Strip) -> None:
        self.strips.append(strip)

    def apply(self, func: Callable[[Strip], object]) -> None:
        """Call func on every strip in order."""
        for strip in self.strips:
            func(strip)

    def clear(self) -> None:
        self.apply(lambda strip: strip.clear_buffer())

    def set_brightness(self, value: int) -> None:
        if not 0 <= value <= 255:
            raise ValueError("Brightness out of range[0-255].")

        def _set(strip: Strip) -> None:
            strip.brightness = value

        self.apply(_set)