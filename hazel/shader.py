"""Shader interface and a name-keyed shader library."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class Shader(ABC):
    """A compiled GPU program with settable uniforms."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The shader's name."""

    @abstractmethod
    def bind(self) -> None:
        """Make the shader current."""

    @abstractmethod
    def unbind(self) -> None:
        """Stop using the shader."""

    @abstractmethod
    def set_int(self, name: str, value: int) -> None:
        """Set an integer uniform."""

    @abstractmethod
    def set_float(self, name: str, value: float) -> None:
        """Set a float uniform."""

    @abstractmethod
    def set_float3(self, name: str, value: Sequence[float]) -> None:
        """Set a three-component vector uniform."""

    @abstractmethod
    def set_float4(self, name: str, value: Sequence[float]) -> None:
        """Set a four-component vector uniform."""

    @abstractmethod
    def set_mat4(self, name: str, value: Sequence[Sequence[float]]) -> None:
        """Set a 4x4 matrix uniform."""

    @abstractmethod
    def set_mat3(self, name: str, value: Sequence[Sequence[float]]) -> None:
        """Set a 3x3 matrix uniform."""


class ShaderLibrary:
    """Shaders stored under unique names."""

    def __init__(self) -> None:
        self._shaders: dict[str, Shader] = {}

    def add(self, shader: Shader, name: str | None = None) -> None:
        """Store ``shader`` under ``name``, or under its own name when none is given."""
        key = shader.name if name is None else name
        if key in self._shaders:
            raise ValueError(f"shader already exists: {key!r}")
        self._shaders[key] = shader

    def get(self, name: str) -> Shader:
        """Return the shader stored under ``name``."""
        try:
            return self._shaders[name]
        except KeyError:
            raise KeyError(f"shader does not exist: {name!r}") from None

    def exists(self, name: str) -> bool:
        return name in self._shaders

    def __contains__(self, name: object) -> bool:
        return name in self._shaders