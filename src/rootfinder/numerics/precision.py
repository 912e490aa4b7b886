"""
Floating-point near-equality.

ULP-based comparison of doubles, used by the root finder to decide whether a
function value is numerically zero. Two doubles are "nearly equal" with
``max_ulps=1`` when no other double lies strictly between them; in particular
``+0.0`` and ``-0.0`` compare equal and NaN never does.

The comparison works on the raw IEEE-754 bit patterns. Negative patterns are
mapped onto a single monotone integer line so that a distance across zero does
not need special overflow handling.
"""

from __future__ import annotations

import math

import numpy as np

from rootfinder.typing import BitsDType, FloatDType

# Largest e such that 1 + e == 1 under round-to-nearest (2**-53).
EPSILON: float = float(np.finfo(FloatDType).epsneg)
# Smallest normal double (2**-1022); 1 / SAFE_MIN does not overflow.
SAFE_MIN: float = float(np.finfo(FloatDType).smallest_normal)

_SIGN_OFFSET = 1 << 63


def _ordered_bits(x: float) -> int:
    """Map a double onto an integer line that is monotone in ``x``.

    ``+0.0`` and ``-0.0`` both map to ``0``; adjacent doubles map to adjacent
    integers.
    """
    bits = int(np.asarray(x, dtype=FloatDType).view(BitsDType))
    if bits < 0:
        return -(bits + _SIGN_OFFSET)
    return bits


def ulp_distance(x: float, y: float) -> int:
    """Number of representable steps between ``x`` and ``y``.

    Undefined for NaN inputs; callers check for NaN first.
    """
    return abs(_ordered_bits(x) - _ordered_bits(y))


def nearly_equal(x: float, y: float, max_ulps: int = 1) -> bool:
    """Return True if ``x`` and ``y`` are within ``max_ulps`` units in the last place.

    ``(max_ulps - 1)`` is the number of doubles allowed strictly between ``x``
    and ``y``; the default treats adjacent doubles as equal.

    Parameters
    ----------
    x, y : float
        Values to compare.
    max_ulps : int, default 1
        Maximum allowed distance in ULPs. ``0`` requires bit equality (up to
        the sign of zero).

    Returns
    -------
    bool
        False whenever either argument is NaN.

    Raises
    ------
    ValueError
        If ``max_ulps < 0``.
    """
    if max_ulps < 0:
        raise ValueError("max_ulps must be >= 0")
    if math.isnan(x) or math.isnan(y):
        return False
    return ulp_distance(x, y) <= max_ulps


def nearly_equal_including_nan(x: float, y: float, max_ulps: int = 1) -> bool:
    """As :func:`nearly_equal`, but two NaNs compare equal."""
    x_nan = math.isnan(x)
    y_nan = math.isnan(y)
    if x_nan or y_nan:
        return x_nan and y_nan
    return nearly_equal(x, y, max_ulps)


def nearly_equal_abs(x: float, y: float, eps: float) -> bool:
    """Adjacent doubles, or absolute difference at most ``eps``. NaN is never equal."""
    return nearly_equal(x, y) or abs(y - x) <= eps


def nearly_equal_rel(x: float, y: float, eps: float) -> bool:
    """Adjacent doubles, or relative difference at most ``eps``.

    The relative difference is ``|x - y| / max(|x|, |y|)``.
    """
    if nearly_equal(x, y):
        return True
    absolute_max = max(abs(x), abs(y))
    return abs((x - y) / absolute_max) <= eps
