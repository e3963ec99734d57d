import pygame
import pytest

from controls import KeySnapshot, KeyState, raw_key_name


@pytest.mark.parametrize("key, name", [
    (pygame.K_w, "w"),
    (pygame.K_s, "s"),
    (pygame.K_UP, "ArrowUp"),
    (pygame.K_DOWN, "ArrowDown"),
    (pygame.K_q, None),
])
def test_raw_key_name(key, name):
    assert raw_key_name(key) == name


def test_press_and_release():
    keys = KeyState()
    assert not keys.is_held("p1_up")
    keys.press("w")
    keys.press("ArrowDown")
    assert keys.is_held("p1_up")
    assert keys.is_held("p2_down")
    assert not keys.is_held("p1_down")
    keys.release("w")
    assert not keys.is_held("p1_up")
    assert keys.is_held("p2_down")


def test_unknown_names_are_not_held():
    keys = KeyState()
    keys.press("x")
    keys.press(None)
    keys.release(None)
    assert not keys.is_held("p3_up")
    assert not keys.is_held("")
    assert keys.snapshot().held == frozenset()


def test_missing_mapping_reads_as_not_held():
    keys = KeyState(keymap={"p1_up": "w"})
    keys.press("s")
    assert not keys.is_held("p1_down")


def test_snapshot_is_frozen_in_time():
    keys = KeyState()
    keys.press("s")
    snap = keys.snapshot()
    keys.release("s")
    keys.press("ArrowUp")
    assert snap.is_held("p1_down")
    assert not snap.is_held("p2_up")
    assert keys.snapshot().held == frozenset({"p2_up"})


def test_clear_releases_everything():
    keys = KeyState()
    for raw in ("w", "s", "ArrowUp", "ArrowDown"):
        keys.press(raw)
    assert keys.snapshot().held == frozenset({"p1_up", "p1_down", "p2_up", "p2_down"})
    keys.clear()
    assert keys.snapshot().held == frozenset()


def test_empty_snapshot():
    assert not KeySnapshot().is_held("p1_up")


def test_unbound_key_is_not_stored():
    keys = KeyState()
    keys.press("x")
    keys.press("w")
    assert keys.raw == {"w": True}
