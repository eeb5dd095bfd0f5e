"""Window opacity adjustments."""

from __future__ import annotations

__all__ = ["clamp", "adjust_alpha", "adjust_unfocused_alpha"]


def clamp(value: float, lower: float, upper: float) -> float:
    """``value`` limited to the range ``lower``..``upper``."""
    return lower if value < lower else (upper if value > upper else value)


def adjust_alpha(current: float, delta: float, default: float) -> float:
    """New opacity: ``current + delta``, or ``default`` when ``delta`` is zero."""
    return clamp(current + delta if delta else default, 0.0, 1.0)


def adjust_unfocused_alpha(current: float, delta: float, default: float) -> float:
    """Like :func:`adjust_alpha`; a ``current`` of -1 means disabled and stays so."""
    if current == -1:
        return current
    return adjust_alpha(current, delta, default)