"""Keyboard, mouse button, pointer and scroll-wheel state for one frame loop."""

from __future__ import annotations

from orangekit.vectors import Vec2

__all__ = ["Input", "KEY_COUNT", "BUTTON_COUNT"]

KEY_COUNT = 256
BUTTON_COUNT = 16


def _check(index: int, limit: int, what: str) -> int:
    if not 0 <= index < limit:
        raise IndexError(f"{what} {index} is outside 0..{limit - 1}")
    return index


class Input:
    """Holds input state; call ``update`` once per frame after handling events."""

    def __init__(self, left_button: int = 0) -> None:
        self._left_button = _check(left_button, BUTTON_COUNT, "mouse button")
        self._keys: set[int] = set()
        self._buttons: set[int] = set()
        self._buttons_previous: set[int] = set()
        self._scroll = 0.0
        self._scroll_processed = False
        self._prev = Vec2(0.0)
        self._delta = Vec2(0.0)
        self._position = Vec2(0.0)
        self._ignore_first_move = True
        self._mouse_moved = False
        self._mouse_clicked = False

    def key_down(self, key: int) -> None:
        self._keys.add(_check(key, KEY_COUNT, "key"))

    def key_up(self, key: int) -> None:
        self._keys.discard(_check(key, KEY_COUNT, "key"))

    def is_key_down(self, key: int) -> bool:
        return _check(key, KEY_COUNT, "key") in self._keys

    def mouse_down(self, button: int) -> None:
        self._buttons.add(_check(button, BUTTON_COUNT, "mouse button"))

    def mouse_up(self, button: int) -> None:
        self._buttons.discard(_check(button, BUTTON_COUNT, "mouse button"))

    def is_mouse_down(self, button: int) -> bool:
        return _check(button, BUTTON_COUNT, "mouse button") in self._buttons

    def is_mouse_clicked(self, button: int) -> bool:
        """Whether the left button went down this frame; ``button`` is not consulted."""
        return self._mouse_clicked

    def mouse_moved(self, x: float, y: float) -> None:
        """Record a pointer position; the very first one produces no delta."""
        if self._ignore_first_move:
            self._ignore_first_move = False
        else:
            self._delta = Vec2(x - self._prev.x, y - self._prev.y)
        self._prev = Vec2(x, y)
        self._position = Vec2(x, y)
        self._mouse_moved = True

    def mouse_delta(self) -> Vec2:
        return Vec2(self._delta.x, self._delta.y)

    def mouse_delta_bottom_left(self) -> Vec2:
        """The delta with y pointing up."""
        return Vec2(self._delta.x, -self._delta.y)

    def mouse_position(self) -> Vec2:
        return Vec2(self._position.x, self._position.y)

    def mouse_position_bottom_left(self, window_height: float) -> Vec2:
        """The position measured from the bottom-left corner of the window."""
        return Vec2(self._position.x, window_height - self._position.y)

    def set_scroll(self, dist: float) -> None:
        self._scroll = dist
        self._scroll_processed = False

    def consume_scroll(self) -> float:
        """Read the scroll distance; it is reset at the next ``update``."""
        self._scroll_processed = True
        return self._scroll

    def update(self) -> None:
        """Advance one frame: detect clicks and reset consumed or stale values."""
        left = self._left_button
        self._mouse_clicked = left not in self._buttons_previous and left in self._buttons
        if self._scroll_processed:
            self._scroll = 0.0
        if not self._mouse_moved:
            self._delta = Vec2(0.0)
        self._mouse_moved = False
        self._buttons_previous = set(self._buttons)