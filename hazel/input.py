"""Polled keyboard and mouse state."""

from __future__ import annotations


class Input:
    """Current key, mouse button and cursor state, fed by the windowing layer."""

    def __init__(self) -> None:
        self._keys: set[int] = set()
        self._buttons: set[int] = set()
        self._mouse = (0.0, 0.0)

    def is_key_pressed(self, keycode: int) -> bool:
        return int(keycode) in self._keys

    def is_mouse_button_pressed(self, button: int) -> bool:
        return int(button) in self._buttons

    @property
    def mouse_x(self) -> float:
        return self._mouse[0]

    @property
    def mouse_y(self) -> float:
        return self._mouse[1]

    @property
    def mouse_position(self) -> tuple[float, float]:
        return self._mouse

    def press_key(self, keycode: int) -> None:
        self._keys.add(int(keycode))

    def release_key(self, keycode: int) -> None:
        self._keys.discard(int(keycode))

    def press_mouse_button(self, button: int) -> None:
        self._buttons.add(int(button))

    def release_mouse_button(self, button: int) -> None:
        self._buttons.discard(int(button))

    def move_mouse(self, x: float, y: float) -> None:
        self._mouse = (float(x), float(y))