"""RGB and HSV colour values with conversions between them."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ColorRGB:
    """An 8-bit-per-channel RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} out of range[0-255].")

    @classmethod
    def from_bytes(cls, data: bytes) -> ColorRGB:
        """Build a colour from the first three bytes of data."""
        if len(data) < 3:
            raise ValueError("three bytes are needed for a colour")
        return cls(data[0], data[1], data[2])

    def to_bytes(self) -> bytes:
        return bytes((self.r, self.g, self.b))

    def to_int(self) -> int:
        """Pack as 0xRRGGBB."""
        return (self.r << 16) + (self.g << 8) + self.b

    def to_hsv(self) -> ColorHSV:
        lo = min(self.r, self.g, self.b)
        hi = max(self.r, self.g, self.b)
        v = hi / 255.0
        delta = float(hi - lo)

        if delta < 0.00001:
            h = 0.0
        elif self.r >= hi:
            h = (self.g - self.b) / delta
        elif self.g >= hi:
            h = (self.b - self.r) / delta + 2.0
        else:
            h = (self.r - self.g) / delta + 4.0
        h *= 60

        s = 0.0 if hi <= 0 else delta / hi
        if h < 0.0:
            h += 360.0
        return ColorHSV(h, s, v)

    def __str__(self) -> str:
        return f"ColorRGB({self.r};{self.g};{self.b})"


@dataclass(frozen=True)
class ColorHSV:
    """A colour as hue [0-360], saturation [0-1] and value [0-1]."""

    h: float
    s: float
    v: float

    def __post_init__(self) -> None:
        if not 0 <= self.h <= 360:
            raise ValueError("Hue out of range[0-360].")
        if not 0 <= self.s <= 1:
            raise ValueError("Saturation out of range[0-1].")
        if not 0 <= self.v <= 1:
            raise ValueError("Value out of range[0-1].")

    def with_value(self, v: float) -> ColorHSV:
        """A copy with a different value (brightness)."""
        return replace(self, v=v)

    def to_rgb(self) -> ColorRGB:
        h, s, v = self.h, self.s, self.v
        c = s * v
        x = c * (1 - abs(math.fmod(h / 60.0, 2) - 1))
        m = v - c
        if h < 60:
            r, g, b = c, x, 0.0
        elif h < 120:
            r, g, b = x, c, 0.0
        elif h < 180:
            r, g, b = 0.0, c, x
        elif h < 240:
            r, g, b = 0.0, x, c
        elif h < 300:
            r, g, b = x, 0.0, c
        else:
            r, g, b = c, 0.0, x
        return ColorRGB(*(min(255, int((channel + m) * 255)) for channel in (r, g, b)))

    def __str__(self) -> str:
        return f"ColorHSV({self.h:.2f};{self.s:.2f};{self.v:.2f})"