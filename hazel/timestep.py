"""Frame time step."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Timestep:
    """A span of time measured in seconds."""

    time: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "time", float(self.time))

    @property
    def seconds(self) -> float:
        return self.time

    @property
    def milliseconds(self) -> float:
        return self.time * 1000

    def __float__(self) -> float:
        return self.time

    def __mul__(self, other: float) -> float:
        return self.time * float(other)

    def __rmul__(self, other: float) -> float:
        return float(other) * self.time