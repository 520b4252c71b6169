"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator

from .events import Event
from .timestep import Timestep


class Layer:
    """A unit of per-frame behaviour; subclasses override the hooks they need.

    The base hooks keep simple bookkeeping: whether the layer is attached,
    the total time it has been updated for, how many UI frames it has drawn
    and the last event it received.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.elapsed = 0.0
        self.ui_frames = 0
        self.last_event: Event | None = None

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed."""
        self.attached = False

    def on_update(self, ts: Timestep) -> None:
        """Called once per frame with the elapsed time."""
        self.elapsed += float(ts)

    def on_imgui_render(self) -> None:
        """Called once per frame to draw UI."""
        self.ui_frames += 1

    def on_event(self, event: Event) -> None:
        """Receives events travelling down the stack."""
        self.last_event = event

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Layers in update order: ordinary layers first, overlays always after them."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def _index_of(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def push_layer(self, layer: Layer) -> None:
        """Insert ``layer`` after the other layers but before any overlay."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        """Append ``overlay`` on top of everything."""
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Remove ``layer`` if it is in the stack."""
        index = self._index_of(layer)
        if index is not None:
            del self._layers[index]
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove ``overlay`` if it is in the stack."""
        index = self._index_of(overlay)
        if index is not None:
            del self._layers[index]

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)