"""A perspective camera and a mouse-driven fly-through controller."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .events import (
    Event,
    EventDispatcher,
    MouseButtonPressedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
)
from .input import Input
from .keycodes import Key, MouseButton
from .renderer import Renderer, RenderingData, RenderNode
from .timestep import Timestep


def _perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    tan_half = math.tan(fov / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3], m[0, 3] = s, -np.dot(s, eye)
    m[1, :3], m[1, 3] = u, -np.dot(u, eye)
    m[2, :3], m[2, 3] = -f, np.dot(f, eye)
    return m


def _vec3(value: Sequence[float]) -> np.ndarray:
    return np.array(value, dtype=float)


class Camera:
    """Perspective camera looking from its position along its front vector."""

    def __init__(self, fov: float, width: float, height: float,
                 near_plane: float, far_plane: float,
                 renderer: Renderer | None = None) -> None:
        self._projection = _perspective(fov, width / height, near_plane, far_plane)
        self._view = np.identity(4)
        self._view_projection = self._projection @ self._view
        self._position = np.ones(3)
        self._fov = fov
        self._width = width
        self._height = height
        self._near = near_plane
        self._far = far_plane
        self._rotation = 0.0
        self._front = _vec3((0.0, 0.0, 1.0))
        self._up = _vec3((0.0, 1.0, 0.0))
        self.renderer = renderer if renderer is not None else Renderer()

    def set_projection(self, fov: float, width: float, height: float,
                       near_plane: float, far_plane: float) -> None:
        self._projection = _perspective(fov, width / height, near_plane, far_plane)
        self._view_projection = self._projection @ self._view

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = _vec3(value)
        self._recalculate_view()

    @property
    def front(self) -> np.ndarray:
        return self._front.copy()

    @front.setter
    def front(self, value: Sequence[float]) -> None:
        self._front = _vec3(value)
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

    def render(self, node: RenderNode, data: RenderingData) -> None:
        """Draw ``node`` through this camera's renderer."""
        self.renderer.render(node, data)

    def reset_camera(self) -> None:
        """Put the camera above the origin looking down -z."""
        self._position = _vec3((0.0, 10.0, 0.0))
        self._front = _vec3((0.0, 0.0, -1.0))
        self._up = _vec3((0.0, 1.0, 0.0))
        self._recalculate_view()

    def reset_aspect_ratio(self, width: float, height: float) -> None:
        self._projection = _perspective(self._fov, width / height, self._near, self._far)
        self._view_projection = self._projection @ self._view

    def _recalculate_view(self) -> None:
        self._view = _look_at(self._position, self._position + self._front, self._up)
        self._view_projection = self._projection @ self._view


class PerspectiveCameraController:
    """Right mouse button looks around and enables WASD; middle button pans; wheel dollies."""

    TRANSLATION_SPEED = 2.5
    SENSITIVITY = 0.05
    PITCH_LIMIT = 89.0

    def __init__(self, fov: float, width: float, height: float,
                 near_plane: float, far_plane: float,
                 input: Input | None = None) -> None:
        self._camera = Camera(fov, width, height, near_plane, far_plane)
        self._input = input if input is not None else Input()
        self._width = width
        self._height = height
        self._last_rotation = (width / 2, height / 2)
        self._last_move = (width / 2, height / 2)
        self._camera_position = _vec3((0.0, 3.0, -10.0))
        self._front = _vec3((0.0, 0.0, 1.0))
        self._up = _vec3((0.0, 1.0, 0.0))
        self._first_move = True
        self._first_rotation = True
        self._yaw = 0.0
        self._pitch = 0.0

    @property
    def camera(self) -> Camera:
        return self._camera

    def _basis(self) -> tuple[np.ndarray, np.ndarray]:
        up = np.dot(self._up, self._front) * self._front - self._up
        right = _normalize(np.cross(self._front, up))
        return up, right

    def on_event(self, event: Event) -> None:
        """Dolly on scroll; clicks and moves are seen but never consumed."""
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(MouseScrolledEvent, self._on_mouse_scrolled)
        dispatcher.dispatch(MouseButtonPressedEvent, lambda _event: False)
        dispatcher.dispatch(MouseMovedEvent, lambda _event: False)

    def on_update(self, ts: Timestep | float) -> None:
        """Apply mouse and key state for a frame lasting ``ts`` seconds."""
        ts = float(ts)
        inp = self._input
        looking = inp.is_mouse_button_pressed(MouseButton.BUTTON_2)

        if looking:
            xpos, ypos = inp.mouse_position
            xoffset = xpos - self._last_rotation[0]
            yoffset = self._last_rotation[1] - ypos
            if self._first_rotation:
                self._first_rotation = False
                xoffset = yoffset = 0.0
            self._last_rotation = (xpos, ypos)

            self._yaw -= xoffset * self.SENSITIVITY
            self._pitch -= yoffset * self.SENSITIVITY
            self._pitch = min(max(self._pitch, -self.PITCH_LIMIT), self.PITCH_LIMIT)

            yaw, pitch = math.radians(self._yaw), math.radians(self._pitch)
            self._front = _normalize(_vec3((
                math.sin(yaw) * math.cos(pitch),
                -math.sin(pitch),
                math.cos(yaw) * math.cos(pitch),
            )))
            self._camera.front = self._front
        else:
            self._first_rotation = True

        up, right = self._basis()
        step = self.TRANSLATION_SPEED * ts

        if inp.is_mouse_button_pressed(MouseButton.MIDDLE):
            xpos, ypos = inp.mouse_position
            xoffset = xpos - self._last_move[0]
            yoffset = self._last_move[1] - ypos
            if self._first_move:
                self._first_move = False
                xoffset = yoffset = 0.0
            self._last_move = (xpos, ypos)
            xoffset *= self.SENSITIVITY
            yoffset *= self.SENSITIVITY
            self._camera_position = (self._camera_position
                                     + step * right * xoffset + step * up * yoffset)
        else:
            self._first_move = True

        if looking:
            if inp.is_key_pressed(Key.A):
                self._camera_position = self._camera_position + step * right
            elif inp.is_key_pressed(Key.D):
                self._camera_position = self._camera_position - step * right

            if inp.is_key_pressed(Key.W):
                self._camera_position = self._camera_position + step * self._front
            elif inp.is_key_pressed(Key.S):
                self._camera_position = self._camera_position - step * self._front

        self._camera.position = self._camera_position

    def reset_camera(self) -> None:
        self._camera.reset_camera()
        self._first_rotation = True
        self._first_move = True
        self._front = _vec3((0.0, 0.0, -1.0))
        self._camera_position = _vec3((0.0, 0.0, -10.0))
        self._yaw = 0.0
        self._pitch = 0.0

    def reset_aspect_ratio(self, width: float, height: float) -> None:
        self._camera.reset_aspect_ratio(width, height)

    def _on_mouse_scrolled(self, event: MouseScrolledEvent) -> bool:
        self._camera_position = self._camera_position + event.y_offset * self._front * 0.2
        self._camera.position = self._camera_position
        return False