"""A snake game on a wrapping board, with walls, food and a simple autopilot."""

from __future__ import annotations

import enum
import itertools
import random
from collections import deque
from dataclasses import dataclass

from ledmatrix.geometry import Bounds, Vector2


class Direction(enum.IntEnum):
    """Heading on the board, in clockwise order."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


_VECTORS = {
    Direction.UP: Vector2(0, 1),
    Direction.RIGHT: Vector2(1, 0),
    Direction.DOWN: Vector2(0, -1),
    Direction.LEFT: Vector2(-1, 0),
}


def direction_to_vector(direction: Direction) -> Vector2:
    """The unit step taken when moving in the direction."""
    return _VECTORS[Direction(direction)]


def turn_right(direction: Direction) -> Direction:
    """The direction a quarter turn clockwise."""
    return Direction((int(direction) + 1) % len(Direction))


def turn_left(direction: Direction) -> Direction:
    """The direction a quarter turn anticlockwise."""
    return Direction((int(direction) - 1) % len(Direction))


class SnakeDied(Exception):
    """Raised when a dead snake is asked to move."""


class SnakeMapTile(enum.Enum):
    """What occupies a board position."""

    EMPTY = "empty"
    FOOD = "food"
    WALL = "wall"
    SNAKE = "snake"


_snake_ids = itertools.count()


class Snake:
    """A snake: a body of positions, head first, and a heading."""

    def __init__(self, position: Vector2, direction: Direction, initial_length: int) -> None:
        if initial_length < 1:
            raise ValueError("snake length must be at least 1")
        head = Vector2(int(position.x), int(position.y))
        back = -direction_to_vector(direction)
        self._body: deque[Vector2] = deque(head + back * i for i in range(initial_length))
        self._direction = Direction(direction)
        self._dead = False
        self.id = next(_snake_ids)

    @property
    def body(self) -> tuple[Vector2, ...]:
        return tuple(self._body)

    @property
    def head(self) -> Vector2:
        return self._body[0]

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def is_dead(self) -> bool:
        return self._dead

    def move(self, snake_map: SnakeMap, updater: SnakeMapUpdater) -> None:
        """Take one step forward, eating, growing or dying as the board decides."""
        if self._dead:
            raise SnakeDied("Died")

        next_position = snake_map.normalize(self._body[0] + direction_to_vector(self._direction))
        tile = snake_map.tile(next_position)
        if next_position == self._body[-1]:
            # The tail moves away in the same step.
            tile = SnakeMapTile.EMPTY

        if tile in (SnakeMapTile.WALL, SnakeMapTile.SNAKE):
            self._dead = True
            updater.on_snake_died(snake_map, self)
        elif tile is SnakeMapTile.EMPTY:
            self._body.pop()
        else:
            updater.on_food_eaten(snake_map, next_position)

        if not self._dead:
            self._body.appendleft(next_position)

    def turn_right(self) -> None:
        self._direction = turn_right(self._direction)

    def turn_left(self) -> None:
        self._direction = turn_left(self._direction)

    def is_body(self, position: Vector2) -> bool:
        return position in self._body

    def __repr__(self) -> str:
        return f"Snake(id={self.id}, direction={self._direction.name}, body={list(self._body)})"


class SnakeMap:
    """A board that wraps at its edges, holding walls, food and snakes."""

    def __init__(self, size: Vector2) -> None:
        if size.x <= 0 or size.y <= 0:
            raise ValueError("map size must be positive")
        self._size = Vector2(int(size.x), int(size.y))
        self._walls: set[Vector2] = set()
        self._foods: set[Vector2] = set()
        self._snakes: dict[Snake, None] = {}

    @property
    def size(self) -> Vector2:
        return self._size

    @property
    def walls(self) -> frozenset[Vector2]:
        return frozenset(self._walls)

    @property
    def foods(self) -> frozenset[Vector2]:
        return frozenset(self._foods)

    @property
    def snakes(self) -> tuple[Snake, ...]:
        return tuple(self._snakes)

    def normalize(self, position: Vector2) -> Vector2:
        """Wrap a position onto the board."""
        return Vector2(int(position.x) % self._size.x, int(position.y) % self._size.y)

    def _area(self, bounds: Bounds) -> list[Vector2]:
        return [
            self.normalize(Vector2(x, y))
            for y in range(int(bounds.down), int(bounds.up) + 1)
            for x in range(int(bounds.left), int(bounds.right) + 1)
        ]

    def add_wall(self, position: Vector2) -> None:
        self._walls.add(self.normalize(position))

    def remove_wall(self, position: Vector2) -> None:
        self._walls.discard(self.normalize(position))

    def add_wall_area(self, bounds: Bounds) -> None:
        """Wall in every position of an inclusive rectangle."""
        self._walls.update(self._area(bounds))

    def remove_wall_area(self, bounds: Bounds) -> None:
        """Clear the walls of an inclusive rectangle."""
        self._walls.difference_update(self._area(bounds))

    def add_snake(self, snake: Snake) -> None:
        self._snakes[snake] = None

    def remove_snake(self, snake: Snake) -> None:
        self._snakes.pop(snake, None)

    def add_food(self, position: Vector2) -> None:
        self._foods.add(self.normalize(position))

    def remove_food(self, position: Vector2) -> None:
        self._foods.discard(self.normalize(position))

    def is_wall(self, position: Vector2) -> bool:
        return self.normalize(position) in self._walls

    def is_snake(self, position: Vector2) -> bool:
        position = self.normalize(position)
        return any(snake.is_body(position) for snake in self._snakes)

    def is_food(self, position: Vector2) -> bool:
        return self.normalize(position) in self._foods

    def tile(self, position: Vector2) -> SnakeMapTile:
        """What is at the position; walls win over snakes, snakes over food."""
        if self.is_wall(position):
            return SnakeMapTile.WALL
        if self.is_snake(position):
            return SnakeMapTile.SNAKE
        if self.is_food(position):
            return SnakeMapTile.FOOD
        return SnakeMapTile.EMPTY


class SnakeMapUpdater:
    """Reacts to game events: dead snakes turn to walls, eaten food respawns."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def on_snake_died(self, snake_map: SnakeMap, snake: Snake) -> None:
        for position in snake.body:
            snake_map.add_wall(position)
        snake_map.remove_snake(snake)

    def on_food_eaten(self, snake_map: SnakeMap, position: Vector2) -> None:
        snake_map.remove_food(position)
        self.spawn_food(snake_map)

    def spawn_food(self, snake_map: SnakeMap) -> Vector2 | None:
        """Put food on a random empty tile; return where, or None if none is empty."""
        size = snake_map.size
        empty = [
            position
            for position in (Vector2(x, y) for y in range(size.y) for x in range(size.x))
            if snake_map.tile(position) is SnakeMapTile.EMPTY
        ]
        if not empty:
            return None
        position = empty[self._rng.randrange(len(empty))]
        snake_map.add_food(position)
        return position


class _Turn(enum.Enum):
    FORWARD = "forward"
    RIGHT = "right"
    LEFT = "left"


@dataclass(frozen=True)
class _Choice:
    turn: _Turn
    passable: bool
    distance: int | None


def _rank(choice: _Choice) -> tuple[int, int]:
    if choice.distance is None:
        return (1, 0 if choice.turn is _Turn.FORWARD else 1)
    return (0, choice.distance)


class AutoSnake:
    """Steers a snake toward the nearest food visible in a straight line."""

    def __init__(self, snake: Snake, snake_map: SnakeMap, rng: random.Random | None = None) -> None:
        self._snake = snake
        self._map = snake_map
        self._rng = rng if rng is not None else random.Random()

    @property
    def snake(self) -> Snake:
        return self._snake

    def _line_from_head(self, direction: Direction) -> list[SnakeMapTile]:
        """Tiles from the head in a direction, wrapping round, excluding the head."""
        size = self._map.size
        bounds = Bounds(0, 0, size.x - 1, size.y - 1)
        head = self._map.normalize(self._snake.head)
        step = direction_to_vector(direction)

        tiles = []
        position = head
        while bounds.contains(position):
            tiles.append(self._map.tile(position))
            position = position + step
        position = self._map.normalize(position)
        while position != head:
            tiles.append(self._map.tile(position))
            position = position + step
        return tiles[1:]

    def decide(self) -> None:
        """Turn the snake (or not) before its next move."""
        heading = self._snake.direction
        choices = []
        for turn, direction in (
            (_Turn.FORWARD, heading),
            (_Turn.RIGHT, turn_right(heading)),
            (_Turn.LEFT, turn_left(heading)),
        ):
            tiles = self._line_from_head(direction)
            passable = bool(tiles) and tiles[0] not in (SnakeMapTile.SNAKE, SnakeMapTile.WALL)
            distance = tiles.index(SnakeMapTile.FOOD) if SnakeMapTile.FOOD in tiles else None
            choices.append(_Choice(turn, passable, distance))

        choices.sort(key=_rank)
        choices = [choice for choice in choices if choice.passable]
        if not choices:
            return

        choice = choices[0]
        if choice.distance is None and choice.turn is not _Turn.FORWARD:
            choice = choices[self._rng.randrange(len(choices))]

        if choice.turn is _Turn.RIGHT:
            self._snake.turn_right()
        elif choice.turn is _Turn.LEFT:
            self._snake.turn_left()