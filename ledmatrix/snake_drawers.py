"""Colorers that draw a snake game onto an LED matrix."""

from __future__ import annotations

from ledmatrix.colorers import Colorer
from ledmatrix.colors import ColorRGB
from ledmatrix.geometry import Vector2
from ledmatrix.led import LedMatrix
from ledmatrix.snake import Snake, SnakeMap, SnakeMapTile


class SnakeDrawer(Colorer[LedMatrix]):
    """Draws a living snake: its head in one colour, the rest in another."""

    def __init__(self, snake: Snake, head_color: ColorRGB, body_color: ColorRGB) -> None:
        self._snake = snake
        self._head_color = head_color
        self._body_color = body_color

    def apply(self, target: LedMatrix) -> None:
        if self._snake.is_dead:
            return
        head, *rest = self._snake.body
        target.pixel_at(head).set_color(self._head_color)
        for position in rest:
            target.pixel_at(position).set_color(self._body_color)


class SnakeMapDrawer(Colorer[LedMatrix]):
    """Draws walls, food and empty tiles; leaves snake tiles untouched."""

    def __init__(self, snake_map: SnakeMap, wall_color: ColorRGB, food_color: ColorRGB) -> None:
        self._map = snake_map
        self._colors = {
            SnakeMapTile.EMPTY: ColorRGB(0, 0, 0),
            SnakeMapTile.FOOD: food_color,
            SnakeMapTile.WALL: wall_color,
        }

    def apply(self, target: LedMatrix) -> None:
        for y in range(int(target.size.y)):
            for x in range(int(target.size.x)):
                position = Vector2(x, y)
                color = self._colors.get(self._map.tile(position))
                if color is not None:
                    target.pixel_at(position).set_color(color)