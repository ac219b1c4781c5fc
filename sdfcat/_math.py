"""GLSL-style scalar and vector helpers shared by every sdfcat module.

This module provides:

* **Vector constructors**: :func:`vec2`, :func:`vec3`
* **Vector helpers**: :func:`length`, :func:`dot`, :func:`dot2`,
  :func:`normalize`, :func:`max_comp`
* **Scalar helpers**: :func:`clamp`, :func:`mix`,
  :func:`fract`, :func:`mod`, :func:`smoothstep`

Everything operates on ``numpy`` arrays and broadcasts over leading batch
dimensions: a vector is an array of shape ``(..., 2)`` or ``(..., 3)`` and
reductions run along the last axis.  All functions are pure.
"""

from __future__ import annotations

import numpy as np

from ._types import _F

__all__ = [
    "vec2", "vec3",
    "length", "dot", "dot2", "normalize", "max_comp",
    "clamp", "mix", "fract", "mod", "smoothstep",
]


# ===========================================================================
# Vector constructors
# ===========================================================================

def vec2(x: _F, y: _F) -> _F:
    """Stack *x* and *y* into a ``(..., 2)`` array."""
    x, y = np.broadcast_arrays(x, y)
    return np.stack([x, y], axis=-1)


def vec3(x: _F, y: _F, z: _F) -> _F:
    """Stack *x*, *y*, *z* into a ``(..., 3)`` array."""
    x, y, z = np.broadcast_arrays(x, y, z)
    return np.stack([x, y, z], axis=-1)


# ===========================================================================
# Vector helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


def dot2(a: _F) -> _F:
    """Squared length: ``dot(a, a)``."""
    return dot(a, a)


def normalize(v: _F) -> _F:
    """Scale *v* to unit length along the last axis.

    Zero vectors are returned unchanged instead of producing NaN.
    """
    n = length(v)[..., None]
    return v / np.where(n == 0.0, 1.0, n)


def max_comp(v: _F) -> _F:
    """Largest component along the last axis."""
    return np.max(v, axis=-1)


# ===========================================================================
# Scalar helpers
# ===========================================================================

def clamp(x: _F, lo: float | _F, hi: float | _F) -> _F:
    """Clamp *x* element-wise to ``[lo, hi]``."""
    return np.minimum(np.maximum(x, lo), hi)


def mix(x: _F, y: _F, a: float | _F) -> _F:
    """Linear interpolation ``x * (1 - a) + y * a``."""
    return x * (1.0 - a) + y * a


def fract(x: _F) -> _F:
    """Fractional part ``x - floor(x)``; lies in ``[0, 1)`` for finite *x*."""
    return x - np.floor(x)


def mod(x: _F, y: float | _F) -> _F:
    """Floored modulo: the result carries the sign of *y*.

    This is GLSL's ``mod`` (``x - y * floor(x / y)``), not C's truncated
    remainder, so ``mod(-0.25, 1.0) == 0.75``.
    """
    return x - y * np.floor(x / y)


def smoothstep(e0: float, e1: float, x: _F) -> _F:
    """Hermite step from 0 at *e0* to 1 at *e1*.

    The caller must ensure ``e0 < e1``; the result is unspecified otherwise.
    """
    t = clamp((x - e0) / (e1 - e0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)
