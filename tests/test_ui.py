import pygame

from config import W, H
from core import new_game
from ui import draw_game


class RecordingFont:
    def __init__(self):
        self.texts = []

    def render(self, text, antialias, color):
        self.texts.append(text)
        return pygame.Surface((max(1, len(text) * 8), 16))


def test_debug_overlay_only_when_toggled():
    screen = pygame.Surface((W, H))
    font, small = RecordingFont(), RecordingFont()
    st = new_game()

    draw_game(screen, (font, small), st)
    assert not any(t.startswith("FPS") for t in small.texts)

    small.texts = []
    draw_game(screen, (font, small), st, show_debug=True, fps=59.9)
    debug = [t for t in small.texts if t.startswith(("FPS", "BALL", "      vx"))]
    assert debug[0] == "FPS:  59.9"
    assert "x= 290.0 y= 190.0" in debug[1]
    assert "vx=  3.00 vy=  3.00" in debug[2]


def test_start_button_hidden_while_running():
    screen = pygame.Surface((W, H))
    font, small = RecordingFont(), RecordingFont()
    st = new_game()
    draw_game(screen, (font, small), st)
    assert "Start Game" in font.texts

    font.texts = []
    st.running = True
    draw_game(screen, (font, small), st)
    assert "Start Game" not in font.texts
    assert "Player 1: 0 | Player 2: 0" in font.texts
