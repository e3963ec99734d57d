import logging

import pygame

from config import KEYMAP

log = logging.getLogger(__name__)

PYGAME_KEYS = {
    pygame.K_w: "w",
    pygame.K_s: "s",
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
}


def raw_key_name(key):
    return PYGAME_KEYS.get(key)


class KeySnapshot:
    __slots__ = ("held",)
    def __init__(self, held=()):
        self.held = frozenset(held)
    def is_held(self, name): return name in self.held
    def __repr__(self): return f"KeySnapshot({sorted(self.held)!r})"


class KeyState:
    def __init__(self, keymap=None):
        self.keymap = dict(KEYMAP if keymap is None else keymap)
        self.raw = {}

    def press(self, raw):
        if raw is None:
            return
        if raw not in self.keymap.values():
            log.debug("ignoring unbound key %r", raw)
            return
        self.raw[raw] = True

    def release(self, raw):
        if raw is None:
            return
        self.raw[raw] = False

    def clear(self):
        self.raw = {}

    def is_held(self, name):
        raw = self.keymap.get(name)
        if raw is None:
            return False
        return bool(self.raw.get(raw, False))

    def snapshot(self) -> KeySnapshot:
        return KeySnapshot(name for name in self.keymap if self.is_held(name))
