import random
from dataclasses import dataclass, field, replace

from config import (
    FIELD_WIDTH, FIELD_HEIGHT, PADDLE_WIDTH, PADDLE_HEIGHT, BALL_SIZE,
    PADDLE_SPEED, INITIAL_BALL_SPEED, BOUNCE_SPEEDUP,
)

CENTER_X = FIELD_WIDTH / 2 - BALL_SIZE / 2
CENTER_Y = FIELD_HEIGHT / 2 - BALL_SIZE / 2
PADDLE_MAX_Y = FIELD_HEIGHT - PADDLE_HEIGHT
BALL_MAX_Y = FIELD_HEIGHT - BALL_SIZE


class Vec2:
    __slots__ = ("x", "y")
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)
    def __add__(self, o): return Vec2(self.x + o.x, self.y + o.y)
    def __eq__(self, o):
        if not isinstance(o, Vec2):
            return NotImplemented
        return self.x == o.x and self.y == o.y
    def __repr__(self): return f"Vec2({self.x!r}, {self.y!r})"


@dataclass
class Paddle:
    x: float
    y: float

    def span(self):
        return self.y, self.y + PADDLE_HEIGHT


@dataclass
class Ball:
    pos: Vec2
    vel: Vec2


@dataclass
class Score:
    player1: int = 0
    player2: int = 0


@dataclass
class GameState:
    ball: Ball
    paddle1: Paddle
    paddle2: Paddle
    score: Score = field(default_factory=Score)
    running: bool = False


def clamp(v, a, b):
    return max(a, min(b, v))


def _sign(rng: random.Random):
    return 1 if rng.random() > 0.5 else -1


def serve(rng: random.Random) -> Ball:
    """Ball at the exact field centre, moving diagonally in a random quadrant."""
    vx = INITIAL_BALL_SPEED * _sign(rng)
    vy = INITIAL_BALL_SPEED * _sign(rng)
    return Ball(Vec2(CENTER_X, CENTER_Y), Vec2(vx, vy))


def new_game() -> GameState:
    mid = FIELD_HEIGHT / 2 - PADDLE_HEIGHT / 2
    return GameState(
        ball=Ball(Vec2(CENTER_X, CENTER_Y), Vec2(INITIAL_BALL_SPEED, INITIAL_BALL_SPEED)),
        paddle1=Paddle(0, mid),
        paddle2=Paddle(FIELD_WIDTH - PADDLE_WIDTH, mid),
    )


def move_paddle(p: Paddle, up: bool, down: bool) -> Paddle:
    dy = (-PADDLE_SPEED if up else 0) + (PADDLE_SPEED if down else 0)
    return Paddle(p.x, clamp(p.y + dy, 0, PADDLE_MAX_Y))


def overlaps(ball_y: float, p: Paddle) -> bool:
    top, bottom = p.span()
    return ball_y + BALL_SIZE >= top and ball_y <= bottom


def hits_left_paddle(x: float, y: float, p: Paddle) -> bool:
    return x <= PADDLE_WIDTH and overlaps(y, p)


def hits_right_paddle(x: float, y: float, p: Paddle) -> bool:
    return x + BALL_SIZE >= FIELD_WIDTH - PADDLE_WIDTH and overlaps(y, p)


def step(state: GameState, keys, rng: random.Random) -> GameState:
    """Advance the simulation by one tick.

    ``keys`` is anything with an ``is_held(name)`` method. The input state is
    left untouched; collision tests run against the paddles as they stood
    before this tick's paddle motion.
    """
    if not state.running:
        return state

    old1, old2 = state.paddle1, state.paddle2
    paddle1 = move_paddle(old1, keys.is_held("p1_up"), keys.is_held("p1_down"))
    paddle2 = move_paddle(old2, keys.is_held("p2_up"), keys.is_held("p2_down"))

    ball = state.ball
    pos = ball.pos + ball.vel
    x, y = pos.x, pos.y
    vx, vy = ball.vel.x, ball.vel.y

    if y <= 0 or y >= BALL_MAX_Y:
        vy = -vy
        y = 0 if y <= 0 else BALL_MAX_Y

    if hits_left_paddle(x, y, old1) or hits_right_paddle(x, y, old2):
        vx = -vx * BOUNCE_SPEEDUP
        vy = vy + (rng.random() - 0.5) * 2
        x = PADDLE_WIDTH if x <= PADDLE_WIDTH else FIELD_WIDTH - PADDLE_WIDTH - BALL_SIZE

    score = state.score
    if x <= 0:
        score = replace(score, player2=score.player2 + 1)
        next_ball = serve(rng)
    elif x >= FIELD_WIDTH - BALL_SIZE:
        score = replace(score, player1=score.player1 + 1)
        next_ball = serve(rng)
    else:
        next_ball = Ball(Vec2(x, y), Vec2(vx, vy))

    return GameState(next_ball, paddle1, paddle2, score, state.running)
