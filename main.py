"""
Змейка.

Использование:
    python main.py        # Случайная игра
    python main.py 42     # Фиксированный seed для еды

Управление: стрелки - поворот, ESC - заново, P - пауза, Q - выход.
"""
import sys
import numpy as np
import pygame

from board import GameBoard, KeyPress, PaintRequest
from config import (
    WIDTH, HEIGHT, FONT_SIZE, FPS,
    KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_ESCAPE,
)
from renderer import render
from scheduler import Timer


# pygame клавиши -> имена клавиш игры
KEY_NAMES = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


def to_message(event):
    """KEYDOWN событие pygame -> KeyPress"""
    return KeyPress(key=KEY_NAMES.get(event.key, ""), char=event.unicode)


class SnakeApp:
    def __init__(self, seed=None):
        pygame.init()

        # Окно фиксированного размера (без RESIZABLE)
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, FONT_SIZE)

        self.timer = Timer()
        self.board = GameBoard(
            self.timer,
            np.random.default_rng(seed),
            canvas_size=self.screen.get_size(),
            on_quit=self.close,
            on_redraw=self.request_redraw,
        )

        self.running = True
        self.dirty = True

    def close(self):
        self.running = False

    def request_redraw(self):
        self.dirty = True

    def draw(self):
        state = self.board.dispatch(PaintRequest())
        title = render(self.screen, state, self.font)
        pygame.display.set_caption(title)
        pygame.display.flip()
        self.dirty = False

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
            elif event.type == pygame.KEYDOWN:
                self.board.dispatch(to_message(event))
                self.dirty = True
            elif event.type == pygame.VIDEOEXPOSE:
                self.dirty = True

    def run(self):
        self.draw()
        self.board.start()

        while self.running:
            self.handle_events()
            if not self.running:
                break

            self.timer.poll()

            if self.dirty:
                self.draw()
            self.clock.tick(FPS)

        score = self.board.state.score if self.board.state else 0
        self.board.destroy()
        pygame.quit()
        print(f"Bye! Last score: {score}")


def parse_seed(args):
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        print(f"Bad seed: {args[0]!r} - using random")
        return None


def main():
    app = SnakeApp(parse_seed(sys.argv[1:]))
    app.run()


if __name__ == "__main__":
    main()
