"""
Отрисовка состояния игры на поверхность pygame.
"""
import pygame

from config import (
    CELL_SIZE, BACKGROUND, SNAKE, FOOD, TEXT_COLOR,
    TITLE_FORMAT, GAME_OVER_LINES,
)


def window_title(state):
    return TITLE_FORMAT.format(speed=state.speed, score=state.score)


def draw_game_over(surface, font):
    """Сообщение по центру: ширина блока = самая длинная строка"""
    width, height = surface.get_size()
    lines = [font.render(line, True, TEXT_COLOR) for line in GAME_OVER_LINES]
    block_width = max(line.get_width() for line in lines)

    x = (width - block_width) // 2
    y = height // 2
    for line in lines:
        surface.blit(line, (x, y))
        y += font.get_linesize()


def render(surface, state, font):
    """Рисуем кадр и возвращаем заголовок окна"""
    surface.fill(BACKGROUND)

    # Змейка
    for x, y in state.snake:
        rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        pygame.draw.rect(surface, SNAKE, rect)

    # Еда
    if state.food is not None:
        fx, fy = state.food
        rect = pygame.Rect(fx * CELL_SIZE, fy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        pygame.draw.ellipse(surface, FOOD, rect)

    if state.game_over:
        draw_game_over(surface, font)

    return window_title(state)
