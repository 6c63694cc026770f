# Настройки игры
# Окно 500x500, клетка 20px -> поле 25x25
WIDTH = 500
HEIGHT = 500

# Сетка
CELL_SIZE = 20
MIN_BOARD_SIZE = 10  # Поле не меньше 10x10 клеток

# Цвета
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)

BACKGROUND = WHITE
SNAKE = GREEN
FOOD = RED
TEXT_COLOR = RED

FONT_SIZE = 24

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Клавиши (не зависят от pygame)
KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_ESCAPE = "escape"

KEY_DIRECTIONS = {
    KEY_UP: UP,
    KEY_DOWN: DOWN,
    KEY_LEFT: LEFT,
    KEY_RIGHT: RIGHT,
}

# Скорость (интервал тика в мс, меньше = быстрее)
INITIAL_SPEED = 150
MIN_SPEED = 50
SPEED_STEP = 2
SPEED_UP_EVERY = 10  # Ускоряемся каждые 10 очков

# Частота опроса событий главного цикла
FPS = 60

# Начальная длина змейки
INITIAL_SNAKE_LENGTH = 3

TITLE_FORMAT = "Snake Game - Speed: {speed}ms, Score: {score}"
GAME_OVER_LINES = (
    "Game Over!",
    "Press [ESC] to restart.",
    "Press [P] to pause.",
    "Press [Q] to quit.",
)
