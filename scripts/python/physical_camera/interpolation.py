"""
Physical Camera v1.0 — Interpolation Primitives

Scalar curves used to turn normalized control knobs into physical values.
Pure functions, no state.
"""

from __future__ import annotations

import math


def clamp01(value: float) -> float:
    """Clamp to [0, 1]. NaN collapses to 0."""
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


def lerp(a: float, b: float, t: float) -> float:
    """
    Linear interpolation between a and b.

    Written as (1 - t) * a + t * b so both endpoints are exact.
    Works for inverted ranges (a > b).
    """
    t = clamp01(t)
    return (1.0 - t) * a + t * b


def remap(
    value: float,
    from_min: float,
    from_max: float,
    to_min: float,
    to_max: float,
) -> float:
    """
    Map value from [from_min, from_max] onto [to_min, to_max].
    Unclamped; an inverted source range flips the direction.
    """
    if from_max == from_min:
        return to_min
    t = (value - from_min) / (from_max - from_min)
    return to_min + t * (to_max - to_min)


def bias_curve(t: float, bias: float) -> float:
    """
    Schlick bias curve on [0, 1].

    bias = 0.5 is the identity. Lower values hold the curve near 0
    longer, higher values rush toward 1.
    """
    if not (0.0 < bias < 1.0):
        raise ValueError(f"Bias must be in (0, 1), got {bias}")
    t = clamp01(t)
    return t / ((1.0 / bias - 2.0) * (1.0 - t) + 1.0)


def spherical_interpolate(a: float, b: float, t: float, bias: float = 0.5) -> float:
    """
    Biased log-domain ease between two positive scalars.

    Not a geometric slerp on vectors. The knob is first shaped by
    bias_curve(), then blended geometrically:

        u = bias_curve(t, bias)
        value = a ** (1 - u) * b ** u

    Equal steps of t cover equal exposure stops, which is what a shutter
    dial feels like. t=0 returns a and t=1 returns b exactly.
    """
    if a <= 0 or b <= 0:
        raise ValueError(
            f"spherical_interpolate needs positive endpoints, got ({a}, {b})"
        )
    u = bias_curve(t, bias)
    return (a ** (1.0 - u)) * (b ** u)
