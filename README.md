# ledmatrix

Models of addressable LED panels for Python. The package covers pixels, strips
and matrices, with an in-memory byte buffer in place of real hardware. It also
has colour models, brightness masks, animations and two small games to draw on
the panels.

## Modules

- `ledmatrix.geometry` has `Vector2`, `Bounds` and `Grid`.
  - `Vector2` is a frozen, ordered 2D vector with `+`, `-`, unary `-`, scalar `*`, `sqr_distance` and `square`.
  - `Bounds` is an inclusive rectangle whose corners are normalised. You can build it with `Bounds.from_points` and test a point with `contains` or `in`.
  - `Grid` is a fixed-size 2D grid addressed by `Vector2`. It raises `IndexError` outside its size.
- `ledmatrix.colors` has `ColorRGB` and `ColorHSV`.
  - Both validate their channel ranges and raise `ValueError`.
  - `ColorRGB` provides `from_bytes`, `to_bytes`, `to_int` (0xRRGGBB) and `to_hsv`.
  - `ColorHSV` provides `to_rgb` and `with_value`.
- `ledmatrix.led` holds the abstract pixel, strip and matrix models.
  - `LedPixel` is the abstract pixel.
  - `LedStrip` provides `pixel`, `clear`, `to_bytes` and `from_bytes`, and supports iteration and `len`.
  - `LedMatrix` adds `pixel_at` and `render`, a text dump of each pixel's HSV colour.
  - `LedSnakeMatrix` is wired column by column in alternating directions.
  - `LedMatrixSet` joins matrices to the right or downward, chosen with `StackDirection`.
- `ledmatrix.buffer` holds the concrete, buffer-backed LEDs.
  - `BufferLedStrip` and `BufferLedSnakeMatrix` store their pixels in a `bytearray` laid out by a `ColorOrder`, such as GRB or RGBW. Each has a `brightness` (0–255) that scales the values written, and `clear_buffer`. The raw bytes are in `buffer`.
  - `BufferLedPixel` accepts RGB, HSV or a packed integer. It also has `set_rgbw` for orders with a white channel.
  - `StripGroup` applies `clear` and `set_brightness` to several strips at once. With `apply` it runs any function over each of them.
- `ledmatrix.masks` has brightness masks layered over a matrix.
  - `Circle`, `Square`, `BrightnessGradient`, `SimpleMask` and `SimpleBinaryMask` are the masks.
  - `pixel_at` on a mask returns a `BrightnessLedPixel`, which dims colours written through it. `pixel(index)` returns the underlying pixel unmasked.
  - Masks combine with `invert`, `maximum` and `minimum`.
- `ledmatrix.colorers` has `Colorer` and `Animation`.
  - `Solid` fills a matrix with one colour.
  - `CycleAnimation` is a time-wrapping animation with `move_time`, `current_time` and `max_time`.
  - `Rainbow45` runs a diagonal rainbow.
  - `GameLifeColorer` draws a Game of Life board.
- `ledmatrix.game_life` has `GameLife`, Conway's Game of Life on a bounded board. It provides `set_life`, `set_death`, `has_life`, `neighbours`, `next_generation` and `apply`.
- `ledmatrix.snake` has a Snake game on a board that wraps at its edges.
  - The board pieces are `Direction`, `Snake`, `SnakeMap`, `SnakeMapTile` and `SnakeMapUpdater`.
  - `AutoSnake` steers a snake toward food it can see in a straight line.
  - Moving a dead snake raises `SnakeDied`.
  - `SnakeMapUpdater` and `AutoSnake` accept an optional `random.Random` so results can be reproduced.
- `ledmatrix.snake_drawers` has `SnakeDrawer` and `SnakeMapDrawer`, which draw the game onto a matrix.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ledmatrix.geometry import Vector2
from ledmatrix.colors import ColorRGB
from ledmatrix.buffer import BufferLedSnakeMatrix
from ledmatrix.colorers import Rainbow45, Solid

panel = BufferLedSnakeMatrix(Vector2(7, 13))

Solid(ColorRGB(255, 0, 0)).apply(panel)
print(panel.to_bytes()[:3])   # b'\xff\x00\x00'

rainbow = Rainbow45(20)
rainbow.move_time(0.5)
rainbow.apply(panel)
```

Several panels can be treated as one:

```python
from ledmatrix.led import LedMatrixSet, StackDirection

left = BufferLedSnakeMatrix(Vector2(7, 13))
right = BufferLedSnakeMatrix(Vector2(4, 13))
wall = LedMatrixSet([left, right], StackDirection.RIGHT)   # size Vector2(11, 13)
```

### Game of Life

```python
from ledmatrix.geometry import Vector2
from ledmatrix.game_life import GameLife

game = GameLife(Vector2(5, 5))
for x in range(1, 4):
    game.set_life(Vector2(x, 2))
game.apply(game.next_generation())
```

### Snake

```python
from ledmatrix.geometry import Vector2
from ledmatrix.snake import AutoSnake, Direction, Snake, SnakeMap, SnakeMapUpdater

snake_map = SnakeMap(Vector2(10, 10))
updater = SnakeMapUpdater()
snake = Snake(Vector2(3, 3), Direction.RIGHT, 3)
snake_map.add_snake(snake)
updater.spawn_food(snake_map)

pilot = AutoSnake(snake, snake_map)
pilot.decide()
snake.move(snake_map, updater)
```

## What it does not do

The package does not talk to physical LEDs. Buffered strips only fill a byte
buffer, which you read with `buffer` or `to_bytes`. Sending those bytes to a
device is up to you: nothing here starts a strip or shows its contents.

There is no command-line program and no run loop. Timing, stepping the games
and redrawing the panels belong to the calling code.