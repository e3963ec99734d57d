import pytest

from controls import KeySnapshot
from core import Ball, Paddle, Vec2, new_game


class FixedRng:
    """Replays ``values`` from ``random()``, repeating the last one."""

    def __init__(self, *values):
        self.values = list(values) or [0.5]
        self.calls = 0

    def random(self):
        v = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return v


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def no_keys():
    return KeySnapshot()


@pytest.fixture
def make_state():
    def make(ball_pos, ball_vel, p1_y=150, p2_y=150, running=True):
        st = new_game()
        st.ball = Ball(Vec2(*ball_pos), Vec2(*ball_vel))
        st.paddle1 = Paddle(st.paddle1.x, p1_y)
        st.paddle2 = Paddle(st.paddle2.x, p2_y)
        st.running = running
        return st
    return make
