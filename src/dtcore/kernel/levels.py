"""Universe levels."""

from __future__ import annotations

type Level = int

# Largest visible universe; ``Let`` checks its bound type against ``U(MAX_LEVEL)``.
MAX_LEVEL: Level = 2**64 - 1


def check_level(level: Level) -> Level:
    """Return ``level`` unchanged, raising if it lies outside ``0..MAX_LEVEL``."""

    if isinstance(level, bool) or not isinstance(level, int):
        raise ValueError(f"Universe level must be an integer, got {level!r}")
    if level < 0:
        raise ValueError("Universe level must be non-negative")
    if level > MAX_LEVEL:
        raise ValueError(f"Universe level exceeds the top level {MAX_LEVEL}")
    return level


def level_lt(left: Level, right: Level) -> bool:
    """``U(left) : U(right)`` holds exactly when ``left < right``."""

    return check_level(left) < check_level(right)


__all__ = ["Level", "MAX_LEVEL", "check_level", "level_lt"]
