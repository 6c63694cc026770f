"""
Логика змейки без UI.

Состояние игры неизменяемое: каждый шаг возвращает новый GameState.
Клетки поля - кортежи (x, y), голова змейки всегда snake[0].
Поле замкнуто (тор): выход за край возвращает змейку с другой стороны.
"""
from dataclasses import dataclass, replace

from config import (
    CELL_SIZE, MIN_BOARD_SIZE, RIGHT, OPPOSITE,
    INITIAL_SPEED, MIN_SPEED, SPEED_STEP, SPEED_UP_EVERY,
    INITIAL_SNAKE_LENGTH,
)


@dataclass(frozen=True)
class GameState:
    width: int
    height: int
    snake: tuple
    food: tuple = None
    direction: tuple = RIGHT
    score: int = 0
    speed: int = INITIAL_SPEED
    game_over: bool = False

    @property
    def head(self):
        return self.snake[0]


def board_size(pixel_width, pixel_height):
    """Размер поля в клетках по размеру холста в пикселях"""
    return (max(MIN_BOARD_SIZE, pixel_width // CELL_SIZE),
            max(MIN_BOARD_SIZE, pixel_height // CELL_SIZE))


def new_game(pixel_width, pixel_height, rng):
    """Новая сессия: змейка из 3 клеток в центре, смотрит вправо"""
    width, height = board_size(pixel_width, pixel_height)

    cx, cy = width // 2, height // 2
    snake = tuple((cx - i, cy) for i in range(INITIAL_SNAKE_LENGTH))

    state = GameState(width=width, height=height, snake=snake)
    return place_food(state, rng, (pixel_width, pixel_height))


def place_food(state, rng, canvas_size=None):
    """
    Случайная клетка для еды, не занятая змейкой.

    Если размер поля вырожденный, пересчитываем его по canvas_size.
    Если свободных клеток нет - еды нет (food = None).
    """
    width, height = state.width, state.height
    if (width <= 0 or height <= 0) and canvas_size is not None:
        width, height = board_size(*canvas_size)
        state = replace(state, width=width, height=height)

    occupied = set(state.snake)
    if len(occupied) >= width * height:
        return replace(state, food=None)

    while True:
        cell = (int(rng.integers(width)), int(rng.integers(height)))
        if cell not in occupied:
            return replace(state, food=cell)


def change_direction(state, direction):
    # Разворот на 180° запрещён (иначе мгновенная смерть)
    if direction == OPPOSITE[state.direction]:
        return state
    return replace(state, direction=direction)


def _wrap(value, size):
    if value < 0:
        return size - 1
    if value >= size:
        return 0
    return value


def next_head(state):
    """Куда попадёт голова на следующем шаге (с учётом перехода через край)"""
    head_x, head_y = state.head
    dx, dy = state.direction
    return (_wrap(head_x + dx, state.width), _wrap(head_y + dy, state.height))


def advance(state, rng):
    """
    Один шаг игры.

    Возвращает (новое состояние, игра продолжается).
    """
    if state.game_over:
        return state, False

    new_head = next_head(state)

    # Столкновение с собой проверяем до вставки головы (хвост ещё на месте)
    if new_head in state.snake:
        return replace(state, game_over=True), False

    snake = (new_head,) + state.snake

    if state.food is None or new_head != state.food:
        # Убираем хвост
        return replace(state, snake=snake[:-1]), True

    # Еда съедена: хвост остаётся, змейка растёт
    score = state.score + 1
    speed = state.speed
    if score % SPEED_UP_EVERY == 0:
        speed = max(MIN_SPEED, speed - SPEED_STEP)

    state = replace(state, snake=snake, score=score, speed=speed)
    return place_food(state, rng), True
