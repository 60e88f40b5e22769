"""Conway's Game of Life on a bounded board."""

from __future__ import annotations

from ledmatrix.geometry import Grid, Vector2


class GameLife:
    """A Game of Life board whose edges count as dead cells."""

    def __init__(self, size: Vector2) -> None:
        self._size = Vector2(int(size.x), int(size.y))
        self._board: Grid[bool] = Grid(self._size, False)

    @property
    def size(self) -> Vector2:
        return self._size

    def set_life(self, position: Vector2) -> None:
        self._board.set(position, True)

    def set_death(self, position: Vector2) -> None:
        self._board.set(position, False)

    def has_life(self, position: Vector2) -> bool:
        return bool(self._board.get(position))

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._size.x and 0 <= y < self._size.y

    def neighbours(self, position: Vector2) -> tuple[bool, ...]:
        """The eight surrounding cells, row by row from the lower row."""
        return tuple(
            self._inside(x, y) and self.has_life(Vector2(x, y))
            for y in range(position.y - 1, position.y + 2)
            for x in range(position.x - 1, position.x + 2)
            if (x, y) != (position.x, position.y)
        )

    def next_generation(self) -> Grid[bool]:
        """The board after one step, leaving this board unchanged."""
        result: Grid[bool] = Grid(self._size, False)
        for y in range(self._size.y):
            for x in range(self._size.x):
                position = Vector2(x, y)
                count = sum(self.neighbours(position))
                if self.has_life(position):
                    alive = count in (2, 3)
                else:
                    alive = count == 3
                result.set(position, alive)
        return result

    def apply(self, grid: Grid[bool]) -> None:
        """Replace the board contents with the grid's."""
        if grid.size != self._size:
            raise ValueError("Wrong matrix size.")
        for y in range(self._size.y):
            for x in range(self._size.x):
                position = Vector2(x, y)
                if grid.get(position):
                    self.set_life(position)
                else:
                    self.set_death(position)

    def __str__(self) -> str:
        return str(self._board)