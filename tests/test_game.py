from dataclasses import replace

import pytest

from config import UP, DOWN, LEFT, RIGHT, OPPOSITE, INITIAL_SPEED, MIN_SPEED
from game import GameState, board_size, new_game, place_food, change_direction, advance


def make_state(**kwargs):
    defaults = dict(width=10, height=10, snake=((5, 5), (4, 5), (3, 5)), food=(0, 0))
    defaults.update(kwargs)
    return GameState(**defaults)


def test_board_size_has_minimum():
    assert board_size(500, 500) == (25, 25)
    assert board_size(0, 0) == (10, 10)
    assert board_size(219, 500) == (10, 25)


def test_new_game_on_small_board(rng):
    state = new_game(200, 200, rng)

    assert (state.width, state.height) == (10, 10)
    assert state.snake == ((5, 5), (4, 5), (3, 5))
    assert state.direction == RIGHT
    assert state.score == 0
    assert state.speed == INITIAL_SPEED
    assert not state.game_over

    state = place_food(state, rng)
    fx, fy = state.food
    assert 0 <= fx < 10 and 0 <= fy < 10
    assert state.food not in state.snake


@pytest.mark.parametrize("current", [UP, DOWN, LEFT, RIGHT])
@pytest.mark.parametrize("wanted", [UP, DOWN, LEFT, RIGHT])
def test_change_direction_ignores_reversal(current, wanted):
    state = change_direction(make_state(direction=current), wanted)

    if wanted == OPPOSITE[current]:
        assert state.direction == current
    else:
        assert state.direction == wanted


def test_two_quick_turns_allow_u_turn():
    state = make_state(direction=RIGHT)
    state = change_direction(state, UP)
    state = change_direction(state, LEFT)
    assert state.direction == LEFT


@pytest.mark.parametrize("snake, direction, expected", [
    (((9, 5), (8, 5), (7, 5)), RIGHT, (0, 5)),
    (((0, 5), (1, 5), (2, 5)), LEFT, (9, 5)),
    (((5, 0), (5, 1), (5, 2)), UP, (5, 9)),
    (((5, 9), (5, 8), (5, 7)), DOWN, (5, 0)),
])
def test_wrap_around(rng, snake, direction, expected):
    state, running = advance(make_state(snake=snake, direction=direction), rng)

    assert running
    assert state.head == expected


def test_self_collision_ends_game(rng):
    snake = ((5, 5), (5, 6), (4, 6), (4, 5), (3, 5))
    state = make_state(snake=snake, direction=LEFT)

    state, running = advance(state, rng)

    assert not running
    assert state.game_over
    assert state.snake == snake


def test_advance_after_game_over_does_nothing(rng):
    state = make_state(game_over=True)
    assert advance(state, rng) == (state, False)


def test_eating_food_grows_snake(rng):
    state = make_state(food=(6, 5))

    state, running = advance(state, rng)

    assert running
    assert len(state.snake) == 4
    assert state.snake[0] == (6, 5)
    assert state.score == 1
    assert state.food is not None
    assert state.food not in state.snake


def test_moving_without_food(rng):
    state = make_state(food=(0, 0))

    state, running = advance(state, rng)

    assert running
    assert state.snake == ((6, 5), (5, 5), (4, 5))
    assert state.food == (0, 0)
    assert state.score == 0


def test_missing_food_is_skipped(rng):
    state, _ = advance(make_state(food=None), rng)

    assert len(state.snake) == 3
    assert state.score == 0
    assert state.food is None


def test_speed_up_every_ten_points(rng):
    state = make_state(food=(6, 5), score=9)
    state, _ = advance(state, rng)
    assert state.speed == INITIAL_SPEED - 2

    state = make_state(food=(6, 5), score=10, speed=140)
    state, _ = advance(state, rng)
    assert state.speed == 140


def test_speed_never_below_floor(rng):
    speed = INITIAL_SPEED
    speeds = []
    for tens in range(1, 80):
        state = make_state(food=(6, 5), score=tens * 10 - 1, speed=speed)
        state, _ = advance(state, rng)
        speed = state.speed
        speeds.append(speed)

    assert speeds[0] == 148
    assert min(speeds) == MIN_SPEED
    assert speeds == sorted(speeds, reverse=True)


def test_place_food_recomputes_degenerate_board(rng):
    state = make_state(width=0, height=-1)

    state = place_food(state, rng, (300, 240))

    assert (state.width, state.height) == (15, 12)
    fx, fy = state.food
    assert 0 <= fx < 15 and 0 <= fy < 12


def test_place_food_on_full_board(rng):
    snake = tuple((x, y) for y in range(10) for x in range(10))
    state = place_food(make_state(snake=snake), rng)
    assert state.food is None


def test_place_food_finds_last_free_cell(rng):
    snake = tuple((x, y) for y in range(10) for x in range(10) if (x, y) != (7, 3))
    state = place_food(make_state(snake=snake), rng)
    assert state.food == (7, 3)


def test_states_are_independent(rng):
    first = make_state(food=(6, 5), score=9)
    second = replace(first)

    first, _ = advance(first, rng)

    assert first.speed == INITIAL_SPEED - 2
    assert second.speed == INITIAL_SPEED
