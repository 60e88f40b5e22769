import random

import pytest

from ledmatrix.geometry import Bounds, Vector2
from ledmatrix.snake import (
    AutoSnake,
    Direction,
    Snake,
    SnakeDied,
    SnakeMap,
    SnakeMapTile,
    SnakeMapUpdater,
    direction_to_vector,
    turn_left,
    turn_right,
)


def test_direction_vectors():
    assert direction_to_vector(Direction.UP) == Vector2(0, 1)
    assert direction_to_vector(Direction.RIGHT) == Vector2(1, 0)
    assert direction_to_vector(Direction.DOWN) == Vector2(0, -1)
    assert direction_to_vector(Direction.LEFT) == Vector2(-1, 0)


def test_turns_wrap():
    assert turn_right(Direction.LEFT) == Direction.UP
    assert turn_left(Direction.UP) == Direction.LEFT
    for direction in Direction:
        assert turn_left(turn_right(direction)) == direction


def test_initial_bodies_from_game_setup():
    first = Snake(Vector2(3, 3), Direction.RIGHT, 3)
    second = Snake(Vector2(7, 3), Direction.LEFT, 3)
    assert first.body == (Vector2(3, 3), Vector2(2, 3), Vector2(1, 3))
    assert second.body == (Vector2(7, 3), Vector2(8, 3), Vector2(9, 3))
    assert first.id != second.id


def test_zero_length_rejected():
    with pytest.raises(ValueError):
        Snake(Vector2(0, 0), Direction.UP, 0)


def test_snake_turn_methods():
    snake = Snake(Vector2(2, 2), Direction.UP, 1)
    snake.turn_right()
    assert snake.direction == Direction.RIGHT
    snake.turn_left()
    snake.turn_left()
    assert snake.direction == Direction.LEFT


def test_move_into_empty_keeps_length():
    snake_map = SnakeMap(Vector2(10, 5))
    snake = Snake(Vector2(3, 3), Direction.RIGHT, 3)
    snake_map.add_snake(snake)
    snake.move(snake_map, SnakeMapUpdater(random.Random(1)))
    assert snake.body == (Vector2(4, 3), Vector2(3, 3), Vector2(2, 3))


def test_move_wraps_around_edge():
    snake_map = SnakeMap(Vector2(10, 5))
    snake = Snake(Vector2(9, 0), Direction.RIGHT, 1)
    snake_map.add_snake(snake)
    snake.move(snake_map, SnakeMapUpdater())
    assert snake.head == Vector2(0, 0)


def test_eating_food_grows_and_respawns():
    snake_map = SnakeMap(Vector2(10, 5))
    snake = Snake(Vector2(3, 3), Direction.RIGHT, 3)
    snake_map.add_snake(snake)
    snake_map.add_food(Vector2(4, 3))
    snake.move(snake_map, SnakeMapUpdater(random.Random(3)))
    assert len(snake.body) == 4
    assert snake.head == Vector2(4, 3)
    assert len(snake_map.foods) == 1


def test_hitting_wall_kills_and_turns_body_into_walls():
    snake_map = SnakeMap(Vector2(10, 5))
    snake = Snake(Vector2(3, 3), Direction.RIGHT, 2)
    snake_map.add_snake(snake)
    snake_map.add_wall(Vector2(4, 3))
    updater = SnakeMapUpdater()
    snake.move(snake_map, updater)
    assert snake.is_dead
    assert snake.body == (Vector2(3, 3), Vector2(2, 3))
    assert snake_map.walls == {Vector2(4, 3), Vector2(3, 3), Vector2(2, 3)}
    assert snake_map.snakes == ()
    with pytest.raises(SnakeDied):
        snake.move(snake_map, updater)


def test_hitting_other_snake_kills():
    snake_map = SnakeMap(Vector2(10, 5))
    mover = Snake(Vector2(3, 3), Direction.RIGHT, 2)
    blocker = Snake(Vector2(4, 4), Direction.UP, 3)
    snake_map.add_snake(mover)
    snake_map.add_snake(blocker)
    mover.move(snake_map, SnakeMapUpdater())
    assert mover.is_dead
    assert snake_map.snakes == (blocker,)


def test_moving_onto_own_tail_is_allowed():
    snake_map = SnakeMap(Vector2(4, 1))
    snake = Snake(Vector2(3, 0), Direction.RIGHT, 4)
    snake_map.add_snake(snake)
    snake.move(snake_map, SnakeMapUpdater())
    assert not snake.is_dead
    assert snake.body == (Vector2(0, 0), Vector2(3, 0), Vector2(2, 0), Vector2(1, 0))


def test_normalize_negative_positions():
    snake_map = SnakeMap(Vector2(10, 5))
    assert snake_map.normalize(Vector2(-1, -1)) == Vector2(9, 4)
    assert snake_map.normalize(Vector2(10, 5)) == Vector2(0, 0)


def test_invalid_map_size():
    with pytest.raises(ValueError):
        SnakeMap(Vector2(0, 3))


def test_walls_and_food_tiles():
    snake_map = SnakeMap(Vector2(6, 6))
    snake_map.add_wall(Vector2(-1, 0))
    assert snake_map.is_wall(Vector2(5, 0))
    snake_map.add_food(Vector2(5, 0))
    assert snake_map.tile(Vector2(5, 0)) is SnakeMapTile.WALL
    snake_map.remove_wall(Vector2(5, 0))
    assert snake_map.tile(Vector2(5, 0)) is SnakeMapTile.FOOD
    snake_map.remove_food(Vector2(-1, 6))
    assert snake_map.tile(Vector2(5, 0)) is SnakeMapTile.EMPTY


def test_wall_area_round_trip():
    snake_map = SnakeMap(Vector2(6, 6))
    area = Bounds(1, 1, 2, 3)
    snake_map.add_wall_area(area)
    assert len(snake_map.walls) == 6
    assert snake_map.is_wall(Vector2(2, 3))
    assert not snake_map.is_wall(Vector2(3, 3))
    snake_map.remove_wall_area(area)
    assert snake_map.walls == frozenset()


def test_snake_tile():
    snake_map = SnakeMap(Vector2(6, 6))
    snake = Snake(Vector2(2, 2), Direction.UP, 2)
    snake_map.add_snake(snake)
    assert snake_map.tile(Vector2(2, 1)) is SnakeMapTile.SNAKE
    snake_map.remove_snake(snake)
    assert snake_map.tile(Vector2(2, 1)) is SnakeMapTile.EMPTY


def test_spawn_food_on_empty_tile():
    snake_map = SnakeMap(Vector2(3, 1))
    snake_map.add_wall(Vector2(0, 0))
    snake_map.add_wall(Vector2(2, 0))
    position = SnakeMapUpdater(random.Random(0)).spawn_food(snake_map)
    assert position == Vector2(1, 0)
    assert snake_map.foods == {Vector2(1, 0)}


def test_spawn_food_on_full_map():
    snake_map = SnakeMap(Vector2(2, 1))
    snake_map.add_wall_area(Bounds(0, 0, 1, 0))
    assert SnakeMapUpdater().spawn_food(snake_map) is None
    assert snake_map.foods == frozenset()


def _auto(snake_map, snake, seed=0):
    snake_map.add_snake(snake)
    return AutoSnake(snake, snake_map, random.Random(seed))


def test_auto_snake_keeps_going_to_food_ahead():
    snake_map = SnakeMap(Vector2(5, 5))
    snake = Snake(Vector2(2, 2), Direction.RIGHT, 1)
    snake_map.add_food(Vector2(4, 2))
    _auto(snake_map, snake).decide()
    assert snake.direction == Direction.RIGHT


def test_auto_snake_turns_toward_nearer_food():
    snake_map = SnakeMap(Vector2(5, 5))
    snake = Snake(Vector2(2, 2), Direction.RIGHT, 1)
    snake_map.add_food(Vector2(2, 0))
    _auto(snake_map, snake).decide()
    assert snake.direction == Direction.DOWN

    snake_map.remove_food(Vector2(2, 0))
    other = Snake(Vector2(2, 2), Direction.RIGHT, 1)
    other_map = SnakeMap(Vector2(5, 5))
    other_map.add_food(Vector2(2, 4))
    _auto(other_map, other).decide()
    assert other.direction == Direction.UP


def test_auto_snake_goes_straight_without_food():
    snake_map = SnakeMap(Vector2(5, 5))
    snake = Snake(Vector2(2, 2), Direction.RIGHT, 1)
    _auto(snake_map, snake).decide()
    assert snake.direction == Direction.RIGHT


@pytest.mark.parametrize("seed", range(5))
def test_auto_snake_avoids_wall_ahead(seed):
    snake_map = SnakeMap(Vector2(5, 5))
    snake = Snake(Vector2(2, 2), Direction.RIGHT, 1)
    snake_map.add_wall(Vector2(3, 2))
    _auto(snake_map, snake, seed).decide()
    assert snake.direction in (Direction.UP, Direction.DOWN)


def test_auto_snake_boxed_in_does_not_turn():
    snake_map = SnakeMap(Vector2(5, 5))
    snake = Snake(Vector2(2, 2), Direction.RIGHT, 1)
    for position in (Vector2(3, 2), Vector2(2, 1), Vector2(2, 3)):
        snake_map.add_wall(position)
    auto = _auto(snake_map, snake)
    auto.decide()
    assert snake.direction == Direction.RIGHT
    assert auto.snake is snake


def test_two_auto_snakes_game_keeps_invariants():
    rng = random.Random(42)
    snake_map = SnakeMap(Vector2(25, 13))
    updater = SnakeMapUpdater(rng)
    snakes = [
        Snake(Vector2(3, 3), Direction.RIGHT, 3),
        Snake(Vector2(7, 3), Direction.LEFT, 3),
    ]
    autos = []
    for snake in snakes:
        snake_map.add_snake(snake)
        autos.append(AutoSnake(snake, snake_map, rng))
    updater.spawn_food(snake_map)
    assert len(snake_map.foods) == 1

    for _ in range(300):
        dead = 0
        for auto in autos:
            auto.decide()
            if auto.snake.is_dead:
                dead += 1
            else:
                auto.snake.move(snake_map, updater)
        for snake in snakes:
            if snake.is_dead:
                assert snake not in snake_map.snakes
                assert all(snake_map.is_wall(p) for p in snake.body)
            else:
                assert len(snake.body) >= 3
                assert len(set(snake.body)) == len(snake.body)
                assert snake_map.tile(snake.head) is SnakeMapTile.SNAKE
        assert len(snake_map.foods) <= 1
        if dead == len(snakes):
            break