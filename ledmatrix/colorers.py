"""Things that paint an LED matrix: solid fills, animations and game boards."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ledmatrix.colors import ColorHSV, ColorRGB
from ledmatrix.game_life import GameLife
from ledmatrix.geometry import Vector2
from ledmatrix.led import LedMatrix

T = TypeVar("T")


class Colorer(ABC, Generic[T]):
    """Paints a target."""

    @abstractmethod
    def apply(self, target: T) -> None:
        """Paint the target."""


class Animation(Colorer[T]):
    """A colorer whose output depends on time."""

    @abstractmethod
    def move_time(self, delta: float) -> None:
        """Advance the animation by delta time units."""


class CycleAnimation(Animation[T]):
    """An animation whose time wraps around a fixed period."""

    def __init__(self, max_time: float, current_time: float = 0.0) -> None:
        if max_time <= 0:
            raise ValueError("Animation period must be positive.")
        self._max_time = float(max_time)
        self._current_time = 0.0
        self.current_time = current_time

    @property
    def max_time(self) -> float:
        return self._max_time

    @property
    def current_time(self) -> float:
        return self._current_time

    @current_time.setter
    def current_time(self, value: float) -> None:
        wrapped = math.fmod(value, self._max_time)
        if wrapped < 0:
            wrapped += self._max_time
        self._current_time = wrapped

    def move_time(self, delta: float) -> None:
        self.current_time = self._current_time + delta


class Rainbow45(CycleAnimation[LedMatrix]):
    """A rainbow running along the 45-degree diagonals of a matrix."""

    def __init__(self, length: int) -> None:
        super().__init__(float(length))

    def apply(self, target: LedMatrix) -> None:
        step = 360.0 / self._max_time
        hue = self._current_time * step
        width, height = int(target.size.x), int(target.size.y)
        for diagonal in range(width + height):
            color = ColorHSV(hue, 1.0, 1.0)
            for y in range(min(diagonal + 1, height)):
                x = diagonal - y
                if x < width:
                    target.pixel_at(Vector2(x, y)).set_color(color)
            hue = math.fmod(hue + step, 360.0)


class Solid(Colorer[LedMatrix]):
    """Fills a matrix with one colour."""

    def __init__(self, color: ColorRGB) -> None:
        self._color = color

    @property
    def color(self) -> ColorRGB:
        return self._color

    def apply(self, target: LedMatrix) -> None:
        for y in range(int(target.size.y)):
            for x in range(int(target.size.x)):
                target.pixel_at(Vector2(x, y)).set_color(self._color)


class GameLifeColorer(Colorer[LedMatrix]):
    """Draws a Game of Life board, one cell per pixel."""

    def __init__(
        self,
        game: GameLife,
        life_color: ColorRGB,
        death_color: ColorRGB = ColorRGB(0, 0, 0),
    ) -> None:
        self._game = game
        self._life_color = life_color
        self._death_color = death_color

    def apply(self, target: LedMatrix) -> None:
        width = min(int(target.size.x), int(self._game.size.x))
        height = min(int(target.size.y), int(self._game.size.y))
        for y in range(height):
            for x in range(width):
                position = Vector2(x, y)
                alive = self._game.has_life(position)
                color = self._life_color if alive else self._death_color
                target.pixel_at(position).set_color(color)