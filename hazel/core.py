"""Small helpers shared across the engine."""


def bit(x: int) -> int:
    """Return an integer with only bit ``x`` set."""
    return 1 << x