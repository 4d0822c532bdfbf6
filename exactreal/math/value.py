"""
Shared vocabulary for Real values.

This module provides:
- The width ordering used for type promotion (Integer < Rational < Irrational)
- Tolerance modes for approximate comparison
- fuzzy_compare(), the single float-tolerance comparison used everywhere
"""

from __future__ import annotations

from enum import IntEnum

from exactreal.core.config import get_settings


class TypePrecedence(IntEnum):
    """
    Type promotion precedence hierarchy.

    Lower values promote to higher values: combining two Reals yields a
    result whose precedence is the larger of the two.
    """

    INTEGER = 0  # Exact machine integer
    RATIONAL = 1  # Exact signed fraction
    IRRATIONAL = 2  # Float approximation (widest, least exact)


class ToleranceMode:
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| / |b| < tol
    ABSOLUTE = "absolute"  # |a - b| < tol


def fuzzy_compare(
    value: float,
    other_value: float,
    tolerance: float | None = None,
    mode: str | None = None,
) -> bool:
    """
    Compare two floats within a tolerance.

    Args:
        value: The value being checked
        other_value: The value it should match
        tolerance: Tolerance (None = FLOAT_TOLERANCE from settings)
        mode: "absolute" or "relative" (None = TOLERANCE_MODE from settings)

    Returns:
        True if the two values are equal within tolerance
    """
    settings = get_settings()
    if tolerance is None:
        tolerance = settings.FLOAT_TOLERANCE
    if mode is None:
        mode = settings.TOLERANCE_MODE

    if value == other_value:
        return True

    if mode == ToleranceMode.ABSOLUTE:
        return abs(value - other_value) < tolerance

    if mode == ToleranceMode.RELATIVE:
        # Relative error is meaningless around zero, so fall back to absolute
        if abs(other_value) < settings.ZERO_LEVEL:
            return abs(value) < tolerance
        return abs(value - other_value) / abs(other_value) < tolerance

    raise ValueError(f"Unknown tolerance mode: {mode}")
