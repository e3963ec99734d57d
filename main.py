import logging

import pygame

from config import W, H, LOG_LEVEL, SEED
from controls import KeyState, raw_key_name
from session import Session, TickScheduler
from ui import draw_game, start_button_rect

log = logging.getLogger("pong")


def main():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((W, H))
    pygame.display.set_caption("Pong")
    clock = pygame.time.Clock()

    font = pygame.font.SysFont("consolas", 26, bold=True)
    small = pygame.font.SysFont("consolas", 18)

    session = Session(seed=int(SEED) if SEED else None)
    keys = KeyState()
    scheduler = TickScheduler(should_run=lambda: session.running)
    show_debug = False

    def on_tick():
        session.tick(keys.snapshot())

    def try_start():
        if session.press_start():
            scheduler.reset()

    running = True
    while running:
        dt = clock.tick(120) / 1000.0
        hover_start = False
        if not session.running:
            hover_start = start_button_rect().collidepoint(pygame.mouse.get_pos())

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False

            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                elif e.key == pygame.K_F3:
                    show_debug = not show_debug
                elif e.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                    try_start()
                else:
                    keys.press(raw_key_name(e.key))

            elif e.type == pygame.KEYUP:
                keys.release(raw_key_name(e.key))

            elif e.type == pygame.WINDOWFOCUSLOST:
                keys.clear()

            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if not session.running and start_button_rect().collidepoint(e.pos):
                    try_start()

        scheduler.advance(dt, on_tick)

        draw_game(screen, (font, small), session.state, hover_start, show_debug, clock.get_fps())
        pygame.display.flip()

    log.info("quit after %d ticks, final score %d:%d", session.ticks,
             session.state.score.player1, session.state.score.player2)
    pygame.quit()


if __name__ == "__main__":
    main()
