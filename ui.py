import pygame

from config import (
    W, H, MARGIN, HUD_H, FIELD_WIDTH, FIELD_HEIGHT, PADDLE_WIDTH, PADDLE_HEIGHT,
    BALL_SIZE, BG, FIELD_BG, WHITE, BLUE, RED, GREEN, GRAY, BORDER_THICK,
)

FIELD_X = MARGIN
FIELD_Y = HUD_H


def field_rect():
    return pygame.Rect(FIELD_X, FIELD_Y, FIELD_WIDTH, FIELD_HEIGHT)


def start_button_rect():
    r = pygame.Rect(0, 0, 180, 48)
    r.center = field_rect().center
    return r


def to_screen(x, y):
    return int(FIELD_X + x), int(FIELD_Y + y)


def draw_field(screen):
    screen.fill(BG)
    f = field_rect()
    pygame.draw.rect(screen, FIELD_BG, f)
    pygame.draw.rect(screen, WHITE, f.inflate(2 * BORDER_THICK, 2 * BORDER_THICK), BORDER_THICK)


def draw_paddle(screen, paddle, color):
    x, y = to_screen(paddle.x, paddle.y)
    pygame.draw.rect(screen, color, (x, y, PADDLE_WIDTH, PADDLE_HEIGHT))


def draw_ball(screen, ball):
    x, y = to_screen(ball.pos.x, ball.pos.y)
    r = BALL_SIZE // 2
    pygame.draw.circle(screen, WHITE, (x + r, y + r), r)


def draw_score(screen, font, score):
    t = font.render(f"Player 1: {score.player1} | Player 2: {score.player2}", True, WHITE)
    screen.blit(t, t.get_rect(center=(W // 2, HUD_H // 2)))


def draw_controls_hint(screen, small):
    t = small.render("Controls: Player 1 (W/S) | Player 2 (Up/Down)", True, WHITE)
    screen.blit(t, t.get_rect(center=(W // 2, H - HUD_H // 2)))


def draw_button(screen, font, rect, text, active=False):
    pygame.draw.rect(screen, GREEN, rect, border_radius=6)
    if active:
        pygame.draw.rect(screen, WHITE, rect, 2, border_radius=6)
    surf = font.render(text, True, WHITE)
    screen.blit(surf, surf.get_rect(center=rect.center))


def draw_debug(screen, small, state, fps):
    lines = [
        f"FPS: {fps:5.1f}",
        f"BALL  x={state.ball.pos.x:6.1f} y={state.ball.pos.y:6.1f}",
        f"      vx={state.ball.vel.x:6.2f} vy={state.ball.vel.y:6.2f}",
    ]
    y = FIELD_Y + 8
    for text in lines:
        surf = small.render(text, True, GRAY)
        screen.blit(surf, (FIELD_X + 8, y))
        y += 18


def draw_game(screen, fonts, state, hover_start=False, show_debug=False, fps=0.0):
    font, small = fonts
    draw_field(screen)
    draw_paddle(screen, state.paddle1, BLUE)
    draw_paddle(screen, state.paddle2, RED)
    draw_ball(screen, state.ball)
    draw_score(screen, font, state.score)
    draw_controls_hint(screen, small)
    if show_debug:
        draw_debug(screen, small, state, fps)
    if not state.running:
        draw_button(screen, font, start_button_rect(), "Start Game", active=hover_start)
