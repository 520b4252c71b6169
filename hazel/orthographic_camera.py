"""A 2D orthographic camera and a keyboard and scroll-wheel controller for it."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .events import Event, EventDispatcher, MouseScrolledEvent, WindowResizeEvent
from .input import Input
from .keycodes import Key
from .timestep import Timestep


def _ortho(left: float, right: float, bottom: float, top: float,
           near: float = -1.0, far: float = 1.0) -> np.ndarray:
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def _translate(offset: np.ndarray) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = offset
    return m


def _rotate_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = np.identity(4)
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


class OrthographicCamera:
    """Orthographic projection with a position and a rotation in degrees about z."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = _ortho(left, right, bottom, top)
        self._view = np.identity(4)
        self._view_projection = self._projection @ self._view
        self._position = np.zeros(3)
        self._rotation = 0.0

    def set_projection(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = _ortho(left, right, bottom, top)
        self._view_projection = self._projection @ self._view

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = np.array(value, dtype=float)
        self._recalculate_view()

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self._recalculate_view()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection.copy()

    def _recalculate_view(self) -> None:
        transform = _translate(self._position) @ _rotate_z(math.radians(self._rotation))
        self._view = np.linalg.inv(transform)
        self._view_projection = self._projection @ self._view


class OrthographicCameraController:
    """Moves the camera with WASD, rotates it with Q/E, zooms with the scroll wheel."""

    TRANSLATION_SPEED = 5.0
    ROTATION_SPEED = 180.0
    MIN_ZOOM = 0.25

    def __init__(self, aspect_ratio: float, rotation: bool = False,
                 input: Input | None = None) -> None:
        self._aspect_ratio = float(aspect_ratio)
        self._zoom_level = 1.0
        self._camera = OrthographicCamera(*self._bounds())
        self._rotation_enabled = rotation
        self._input = input if input is not None else Input()
        self._camera_position = np.zeros(3)
        self._camera_rotation = 0.0

    def _bounds(self) -> tuple[float, float, float, float]:
        extent = self._aspect_ratio * self._zoom_level
        return -extent, extent, -self._zoom_level, self._zoom_level

    @property
    def camera(self) -> OrthographicCamera:
        return self._camera

    @property
    def zoom_level(self) -> float:
        return self._zoom_level

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    def on_update(self, ts: Timestep | float) -> None:
        """Apply held keys for a frame lasting ``ts`` seconds."""
        ts = float(ts)
        step = self.TRANSLATION_SPEED * ts
        keys = self._input
        if keys.is_key_pressed(Key.A):
            self._camera_position[0] -= step
        elif keys.is_key_pressed(Key.D):
            self._camera_position[0] += step

        if keys.is_key_pressed(Key.W):
            self._camera_position[1] += step
        elif keys.is_key_pressed(Key.S):
            self._camera_position[1] -= step

        if self._rotation_enabled:
            turn = self.ROTATION_SPEED * ts
            if keys.is_key_pressed(Key.Q):
                self._camera_rotation += turn
            if keys.is_key_pressed(Key.E):
                self._camera_rotation -= turn
            self._camera.rotation = self._camera_rotation

        self._camera.position = self._camera_position

    def on_event(self, event: Event) -> None:
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(MouseScrolledEvent, self._on_mouse_scrolled)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resized)

    def _on_mouse_scrolled(self, event: MouseScrolledEvent) -> bool:
        self._zoom_level -= event.y_offset * 0.25
        self._zoom_level = max(self._zoom_level, self.MIN_ZOOM)
        self._camera.set_projection(*self._bounds())
        return False

    def _on_window_resized(self, event: WindowResizeEvent) -> bool:
        self._aspect_ratio = float(event.width) / float(event.height)
        self._camera.set_projection(*self._bounds())
        return False