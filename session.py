import logging
import random

from config import TICK_RATE, MAX_FRAME_SEC
from core import new_game, serve, step

log = logging.getLogger(__name__)


class Session:
    def __init__(self, rng=None, seed=None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.state = new_game()
        self.ticks = 0

    @property
    def running(self):
        return self.state.running

    def start(self):
        self.state.running = True
        self.state.ball = serve(self.rng)
        log.info("game started, serving %+.0f/%+.0f",
                 self.state.ball.vel.x, self.state.ball.vel.y)

    def press_start(self):
        if self.running:
            return False
        self.start()
        return True

    def tick(self, keys):
        if not self.running:
            return
        prev = self.state.score
        self.state = step(self.state, keys, self.rng)
        self.ticks += 1
        cur = self.state.score
        if cur != prev:
            scorer = "player 1" if cur.player1 > prev.player1 else "player 2"
            log.info("%s scores, %d:%d", scorer, cur.player1, cur.player2)


class TickScheduler:
    """Turns variable frame times into fixed ticks.

    Wall time is accumulated and ``callback`` fires once per whole tick.
    A single frame contributes at most ``max_frame`` seconds, and a call made
    while a tick is still in flight is dropped rather than interleaved.
    """

    def __init__(self, tick_rate=TICK_RATE, max_frame=MAX_FRAME_SEC, should_run=None):
        self.dt = 1.0 / tick_rate
        self.max_frame = max_frame
        self.should_run = should_run
        self.acc = 0.0
        self.busy = False

    def reset(self):
        self.acc = 0.0

    def advance(self, elapsed, callback):
        if self.busy:
            log.debug("tick still in flight, skipping %.4fs", elapsed)
            return 0
        if self.should_run is not None and not self.should_run():
            self.acc = 0.0
            return 0

        self.acc += min(max(elapsed, 0.0), self.max_frame)
        n = 0
        self.busy = True
        try:
            while self.acc >= self.dt:
                self.acc -= self.dt
                callback()
                n += 1
        finally:
            self.busy = False
        return n
