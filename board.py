"""
Игровое поле: хранит сессию и реагирует на три вида сообщений.

    Tick          - тик таймера, шаг игры
    KeyPress      - нажатие клавиши
    PaintRequest  - окно хочет перерисоваться

Состояния: не инициализирована -> игра -> {игра, пауза, конец игры}.
Пауза = в таймере ничего не ждёт.

Tick через dispatch приходит только из тестов: в окне Timer вызывает
GameBoard.tick напрямую.
"""
from dataclasses import dataclass

from config import WIDTH, HEIGHT, KEY_DIRECTIONS, KEY_ESCAPE
from game import new_game, change_direction, advance


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class KeyPress:
    key: str = ""
    char: str = ""


@dataclass(frozen=True)
class PaintRequest:
    pass


class GameBoard:
    def __init__(self, timer, rng, canvas_size=(WIDTH, HEIGHT), on_quit=None, on_redraw=None):
        self.timer = timer
        self.rng = rng
        self.canvas_size = canvas_size
        self.on_quit = on_quit
        self.on_redraw = on_redraw

        self.state = None
        self.initialized = False
        self.alive = True

    def dispatch(self, message):
        """Единая точка входа для всех событий окна"""
        if isinstance(message, Tick):
            self.tick()
        elif isinstance(message, KeyPress):
            self.handle_key(message.key, message.char)
        elif isinstance(message, PaintRequest):
            # Размер холста известен только к первой отрисовке
            self.initialize()
        return self.state

    def initialize(self):
        if self.initialized:
            return
        self.state = new_game(*self.canvas_size, self.rng)
        self.initialized = True

    def start(self):
        """Запуск после того, как окно создано"""
        self.initialize()
        self.start_loop()

    def start_loop(self):
        if self.timer.pending:
            self.timer.cancel()
        self.timer.start(self.state.speed, self.tick)

    @property
    def paused(self):
        return self.initialized and not self.state.game_over and not self.timer.pending

    def handle_key(self, key, char=""):
        self.initialize()

        if key in KEY_DIRECTIONS:
            self.state = change_direction(self.state, KEY_DIRECTIONS[key])
        elif key == KEY_ESCAPE:
            was_game_over = self.state.game_over
            self.initialized = False
            self.initialize()
            print("Restart")
            if was_game_over:
                self.start_loop()
        elif char in ("q", "Q"):
            if self.on_quit is not None:
                self.on_quit()
        elif char in ("p", "P"):
            # После конца игры пауза не имеет смысла
            if self.state.game_over:
                return
            if self.paused:
                self.start_loop()
                print("Resume")
            else:
                self.timer.cancel()
                print("Pause")

    def tick(self):
        # Окно уже закрыто или игра окончена - тихо останавливаемся
        if not self.alive or self.state is None or self.state.game_over:
            return

        self.state, running = advance(self.state, self.rng)
        self.redraw()

        if not running:
            print(f"Game over! Score: {self.state.score}")
            return

        # Новая скорость действует только со следующего тика
        self.timer.start(self.state.speed, self.tick)

    def redraw(self):
        if self.on_redraw is not None:
            self.on_redraw()

    def destroy(self):
        self.alive = False
        self.timer.cancel()
