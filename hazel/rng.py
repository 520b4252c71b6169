"""Uniform random floats from a 32-bit Mersenne Twister."""

from __future__ import annotations

import random
import secrets

_MASK = 0xFFFFFFFF
_STATE_SIZE = 624
_DEFAULT_SEED = 5489

_generator = random.Random()


def _mt_state(value: int) -> tuple:
    state = [value & _MASK]
    for i in range(1, _STATE_SIZE):
        prev = state[-1]
        state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK)
    return tuple(state) + (_STATE_SIZE,)


def seed(value: int | None = None) -> None:
    """Reseed the engine; with no value, seed from the system's entropy source."""
    if value is None:
        value = secrets.randbits(32)
    _generator.setstate((3, _mt_state(int(value)), None))


def random_float() -> float:
    """Return a float uniformly distributed in [0, 1]."""
    return _generator.getrandbits(32) / _MASK


seed(_DEFAULT_SEED)