"""Scenes holding entities made of components."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence

import numpy as np

from .camera import Camera
from .textures import WHITE

NULL_ENTITY = 0xFFFFFFFF


def _vec3(value: Sequence[float]) -> np.ndarray:
    return np.array(value, dtype=float)


def _translate(offset: np.ndarray) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = offset
    return m


def _scale(factors: np.ndarray) -> np.ndarray:
    m = np.identity(4)
    m[0, 0], m[1, 1], m[2, 2] = factors
    return m


def _rotate(angle: float, axis: int) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = np.identity(4)
    i, j = [k for k in range(3) if k != axis]
    if axis == 1:
        # Rotation about y keeps the right-handed sign convention.
        m[i, i], m[i, j] = c, s
        m[j, i], m[j, j] = -s, c
    else:
        m[i, i], m[i, j] = c, -s
        m[j, i], m[j, j] = s, c
    return m


@dataclass
class TransformComponent:
    """Translation, rotation in degrees about x, y, z, and scale."""

    translation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.translation = _vec3(self.translation)
        self.rotation = _vec3(self.rotation)
        self.scale = _vec3(self.scale)

    def transform(self) -> np.ndarray:
        """The 4x4 model matrix: translate, then rotate x·y·z, then scale."""
        rx, ry, rz = (math.radians(a) for a in self.rotation)
        rotation = _rotate(rx, 0) @ _rotate(ry, 1) @ _rotate(rz, 2)
        return _translate(self.translation) @ rotation @ _scale(self.scale)


@dataclass
class SpriteRendererComponent:
    """A flat colour to draw an entity with."""

    color: tuple[float, float, float, float] = WHITE

    def __post_init__(self) -> None:
        self.color = tuple(float(c) for c in self.color)


@dataclass
class TagComponent:
    """A human-readable name."""

    tag: str = ""


@dataclass
class CameraComponent:
    """A camera attached to an entity."""

    camera: Camera


class Scene:
    """A registry of entities and the components attached to them."""

    def __init__(self) -> None:
        self._registry: dict[int, dict[type, Any]] = {}
        self._ids = itertools.count()
        self.elapsed = 0.0

    def _create_handle(self) -> int:
        handle = next(self._ids)
        self._registry[handle] = {}
        return handle

    def create_entity(self, name: str = "") -> Entity:
        """Create an entity with a transform and a tag named ``name`` (or ``Entity``)."""
        entity = Entity(self._create_handle(), self)
        entity.add_component(TransformComponent())
        entity.add_component(TagComponent(name or "Entity"))
        return entity

    def on_update(self, ts: float) -> None:
        """Advance the scene clock by ``ts`` seconds."""
        self.elapsed += float(ts)

    def view(self, *args: type) -> Iterator[Entity]:
        """Entities that hold every one of the given component types, in creation order."""
        for handle, components in self._registry.items():
            if all(t in components for t in args):
                yield Entity(handle, self)

    def __len__(self) -> int:
        return len(self._registry)


class Entity:
    """A handle to one entity of a scene; a default entity is null."""

    def __init__(self, handle: int | None = None, scene: Scene | None = None) -> None:
        self._handle = handle
        self._scene = scene

    @property
    def scene(self) -> Scene | None:
        return self._scene

    def _components(self) -> dict[type, Any]:
        if self._handle is None or self._scene is None:
            raise ValueError("null entity has no components")
        try:
            return self._scene._registry[self._handle]
        except KeyError:
            raise ValueError(f"entity {self._handle} is not in its scene") from None

    def has_component(self, component_type: type) -> bool:
        return component_type in self._components()

    def add_component(self, component: Any) -> Any:
        """Attach ``component``; raises if one of its type is already attached."""
        components = self._components()
        kind = type(component)
        if kind in components:
            raise ValueError(f"entity already has component {kind.__name__}")
        components[kind] = component
        return component

    def get_component(self, component_type: type) -> Any:
        components = self._components()
        try:
            return components[component_type]
        except KeyError:
            raise KeyError(
                f"entity does not have component {component_type.__name__}"
            ) from None

    def remove_component(self, component_type: type) -> Any:
        """Detach and return the component of ``component_type``."""
        components = self._components()
        try:
            return components.pop(component_type)
        except KeyError:
            raise KeyError(
                f"entity does not have component {component_type.__name__}"
            ) from None

    def __bool__(self) -> bool:
        return self._handle is not None

    def __int__(self) -> int:
        return NULL_ENTITY if self._handle is None else self._handle

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._handle == other._handle and self._scene is other._scene

    def __hash__(self) -> int:
        return hash((self._handle, id(self._scene)))

    def __repr__(self) -> str:
        return f"Entity({self._handle!r})"