"""Combinators: operators merging distance values into one distance.

Conservativeness contract
-------------------------
Let *a* and *b* be conservative fields (never larger than the true distance,
Lipschitz constant at most 1).

* :func:`opUnion` (``min``), :func:`opIntersection` (``max``),
  :func:`opSubtraction` (``max(a, -b)``) and :func:`opXor` return a
  conservative field.  Union of exact fields is exact outside the shapes;
  intersection and subtraction are lower bounds outside.
* :func:`opSmoothUnion` never exceeds ``min(a, b)`` and differs from it by at
  most ``k / 4``; :func:`opExpSmoothUnion` differs by at most ``k * ln 2``.
  Their gradients are convex combinations of the inputs' gradients, so the
  Lipschitz constant is preserved, but the zero level set moves by up to
  that amount: the blended surface is an approximation of the union.
  Smooth intersection/subtraction mirror this with the opposite sign and may
  exceed ``max`` by the same bound.
* :func:`opRound`, :func:`opOnion`, :func:`opScale` and :func:`opMix` (with a
  spatially constant weight) preserve the Lipschitz constant.

A non-positive blend radius, negative thickness or non-positive scale is a
caller error and raises :class:`~sdfcat.errors.InvalidParameterError`;
values are never clamped to a "safe" default.
"""

from __future__ import annotations

import math
from functools import reduce
from typing import Callable

import numpy as np

from ._math import mix
from ._types import _F
from .errors import InvalidParameterError

__all__ = [
    "opUnion", "opIntersection", "opSubtraction", "opXor",
    "opSmoothUnion", "opSmoothIntersection", "opSmoothSubtraction",
    "opExpSmoothUnion",
    "opRound", "opOnion", "opScale", "opMix",
]


def _check_positive(value: float, what: str) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{what} must be a real number, got {value!r}") from None
    if not math.isfinite(v) or v <= 0.0:
        raise InvalidParameterError(f"{what} must be finite and > 0, got {value!r}")
    return v


def _check_non_negative(value: float, what: str) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{what} must be a real number, got {value!r}") from None
    if not math.isfinite(v) or v < 0.0:
        raise InvalidParameterError(f"{what} must be finite and >= 0, got {value!r}")
    return v


# ===========================================================================
# Hard booleans
# ===========================================================================

def opUnion(a: _F, b: _F, *more: _F) -> _F:
    """Union: element-wise minimum of all arguments."""
    return reduce(np.minimum, more, np.minimum(a, b))


def opIntersection(a: _F, b: _F, *more: _F) -> _F:
    """Intersection: element-wise maximum of all arguments."""
    return reduce(np.maximum, more, np.maximum(a, b))


def opSubtraction(a: _F, b: _F) -> _F:
    """Remove shape *b* from shape *a*: ``max(a, -b)``."""
    return np.maximum(a, -b)


def opXor(a: _F, b: _F) -> _F:
    """Symmetric difference of two shapes."""
    return np.maximum(np.minimum(a, b), -np.maximum(a, b))


# ===========================================================================
# Smooth booleans
# ===========================================================================

def opSmoothUnion(a: _F, b: _F, k: float) -> _F:
    """Polynomial (quadratic) smooth minimum with blend radius *k*.

    Identical to ``min(a, b)`` wherever ``|a - b| >= k``; inside the blend
    band the result is lower by at most ``k / 4``.
    """
    k = _check_positive(k, "blend radius k")
    h = np.maximum(k - np.abs(a - b), 0.0) / k
    return np.minimum(a, b) - h * h * k * 0.25


def opSmoothIntersection(a: _F, b: _F, k: float) -> _F:
    """Smooth maximum, the mirror of :func:`opSmoothUnion`."""
    return -opSmoothUnion(-a, -b, k)


def opSmoothSubtraction(a: _F, b: _F, k: float) -> _F:
    """Smoothly remove *b* from *a* (smooth ``max(a, -b)``)."""
    return -opSmoothUnion(-a, b, k)


def opExpSmoothUnion(a: _F, b: _F, k: float) -> _F:
    """Exponential smooth minimum ``-k * log(exp(-a/k) + exp(-b/k))``.

    Evaluated as ``min(a, b) - k * log1p(exp(-|a - b| / k))`` so that large
    distances do not overflow.  Never equal to the hard minimum; the gap is
    at most ``k * ln 2``, reached where ``a == b``.
    """
    k = _check_positive(k, "blend radius k")
    return np.minimum(a, b) - k * np.log1p(np.exp(-np.abs(a - b) / k))


# ===========================================================================
# Modifiers
# ===========================================================================

def opRound(d: _F, r: float) -> _F:
    """Inflate a shape by *r*."""
    return d - _check_non_negative(r, "rounding radius")


def opOnion(d: _F, thickness: float) -> _F:
    """Hollow a shape into a shell of half-thickness *thickness*."""
    return np.abs(d) - _check_non_negative(thickness, "shell thickness")


def opScale(p: _F, s: float, inner: Callable[[_F], _F]) -> _F:
    """Uniformly scale the shape *inner* by *s*: ``inner(p / s) * s``."""
    s = _check_positive(s, "scale")
    return inner(p / s) * s


def opMix(a: _F, b: _F, t: float) -> _F:
    """Linear morph from *a* (``t = 0``) to *b* (``t = 1``)."""
    t = float(t)
    if not 0.0 <= t <= 1.0:
        raise InvalidParameterError(f"morph weight must lie in [0, 1], got {t!r}")
    return mix(a, b, t)
