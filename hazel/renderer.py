"""Render passes and the renderer that runs them in order."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable


@dataclass
class RenderNode:
    """A drawable item: the material to draw with and the model to draw."""

    material: Any = None
    model: Any = None


@dataclass
class RenderingData:
    """Per-frame information shared by all passes."""

    light_count: int = 0


class RenderPass(ABC):
    """One stage of rendering a camera's view."""

    @abstractmethod
    def on_camera_setup(self) -> None:
        """Prepare the pass for the camera about to render."""

    @abstractmethod
    def render(self, node: RenderNode, data: RenderingData) -> None:
        """Draw ``node`` using the frame's ``data``."""


class OpaquePass(RenderPass):
    """The pass for opaque geometry; it collects the nodes drawn since camera setup."""

    def __init__(self) -> None:
        self._drawn: list[tuple[RenderNode, RenderingData]] = []

    @property
    def drawn(self) -> tuple[tuple[RenderNode, RenderingData], ...]:
        """The (node, data) pairs rendered since the last camera setup."""
        return tuple(self._drawn)

    def on_camera_setup(self) -> None:
        """Start a fresh list of drawn nodes for the new camera."""
        self._drawn.clear()

    def render(self, node: RenderNode, data: RenderingData) -> None:
        """Record ``node`` as drawn with ``data``."""
        self._drawn.append((node, data))


class Renderer:
    """Runs its render passes in the order they were added."""

    def __init__(self, passes: Iterable[RenderPass] = ()) -> None:
        self._passes: list[RenderPass] = list(passes)

    @property
    def passes(self) -> tuple[RenderPass, ...]:
        return tuple(self._passes)

    def add_pass(self, render_pass: RenderPass) -> None:
        """Append ``render_pass`` after the existing passes."""
        self._passes.append(render_pass)

    def on_camera_setup(self) -> None:
        for render_pass in self._passes:
            render_pass.on_camera_setup()

    def render(self, node: RenderNode, data: RenderingData) -> None:
        for render_pass in self._passes:
            render_pass.render(node, data)