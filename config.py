import os

FIELD_WIDTH = 600
FIELD_HEIGHT = 400

PADDLE_WIDTH = 20
PADDLE_HEIGHT = 100
BALL_SIZE = 20

PADDLE_SPEED = 8
INITIAL_BALL_SPEED = 3
BOUNCE_SPEEDUP = 1.1

TICK_RATE = 60
MAX_FRAME_SEC = 0.05

MARGIN = 40
HUD_H = 60
W = FIELD_WIDTH + 2 * MARGIN
H = FIELD_HEIGHT + 2 * HUD_H

BG = (31, 41, 55)
FIELD_BG = (0, 0, 0)
WHITE = (235, 235, 235)
BLUE = (59, 130, 246)
RED = (239, 68, 68)
GREEN = (34, 197, 94)
GRAY = (156, 163, 175)

BORDER_THICK = 4

KEYMAP = {
    "p1_up": "w",
    "p1_down": "s",
    "p2_up": "ArrowUp",
    "p2_down": "ArrowDown",
}

LOG_LEVEL = os.environ.get("PONG_LOG_LEVEL", "INFO").upper()
SEED = os.environ.get("PONG_SEED")
