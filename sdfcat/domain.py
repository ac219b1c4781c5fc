"""Domain operators: transforms applied to query points before evaluation.

Each operator takes a point array *p* of shape ``(..., 3)`` and returns a new
point array (the input is never modified).  The inner distance function is
then evaluated at the returned points.

Lipschitz behaviour
-------------------
=====================  ==============================================
Operator               Effect on a conservative inner field
=====================  ==============================================
``opTranslate``        exact (isometry)
``opRotate*``          exact (orthogonal, norm preserving)
``opMirror``           exact (reflection)
``opRepeat*``          exact when the inner shape fits in one cell and
                       is symmetric about the cell centre
``opPolarRepeat``      exact under the same condition per sector
``opElongate``         exact, combine with :func:`elongate_distance`
``opTwist``            relaxed: factor ``1 + |k| * r_xz``
``opBend``             relaxed: factor ``1 + |k| * r_xy``
=====================  ==============================================

Shapes built on a relaxed operator divide their distance by the factor from
:func:`twist_lipschitz` / :func:`bend_lipschitz` evaluated for the region
they occupy, and document the bound in their registry entry.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from ._math import clamp, length, max_comp, mod, vec3
from ._types import _F
from .errors import InvalidParameterError

__all__ = [
    "opTranslate",
    "opRotateX", "opRotateY", "opRotateZ", "opRotateAxis", "rotation_matrix",
    "opMirror",
    "opRepeat", "opRepeatLimited", "opPolarRepeat",
    "opElongate", "elongate_distance",
    "opTwist", "opBend", "twist_lipschitz", "bend_lipschitz",
]

_AXES = {"x": 0, "y": 1, "z": 2}


def _as_vec3(v: float | Sequence[float], what: str) -> _F:
    a = np.broadcast_to(np.asarray(v, dtype=float), (3,))
    if not np.all(np.isfinite(a)):
        raise InvalidParameterError(f"{what} must be finite, got {v!r}")
    return a


# ===========================================================================
# Rigid transforms
# ===========================================================================

def opTranslate(p: _F, offset: Sequence[float]) -> _F:
    """Move the shape by *offset* (the point moves the other way)."""
    return p - _as_vec3(offset, "offset")


def _rotate_plane(p: _F, i: int, j: int, angle: float | _F) -> _F:
    c = np.cos(angle)
    s = np.sin(angle)
    q = np.array(p, dtype=float, copy=True)
    q[..., i] = c * p[..., i] - s * p[..., j]
    q[..., j] = s * p[..., i] + c * p[..., j]
    return q


def opRotateX(p: _F, angle: float) -> _F:
    """Rotate points about the X axis by *angle* radians (YZ plane)."""
    return _rotate_plane(p, 1, 2, angle)


def opRotateY(p: _F, angle: float) -> _F:
    """Rotate points about the Y axis by *angle* radians (ZX plane)."""
    return _rotate_plane(p, 2, 0, angle)


def opRotateZ(p: _F, angle: float) -> _F:
    """Rotate points about the Z axis by *angle* radians (XY plane)."""
    return _rotate_plane(p, 0, 1, angle)


def rotation_matrix(axis: Sequence[float], angle: float) -> _F:
    """Rodrigues rotation matrix for a right-handed rotation about *axis*.

    Raises
    ------
    InvalidParameterError
        If *axis* is the zero vector or not finite.
    """
    a = _as_vec3(axis, "axis")
    n = float(np.linalg.norm(a))
    if n == 0.0:
        raise InvalidParameterError("rotation axis must be non-zero")
    x, y, z = a / n
    c = np.cos(angle)
    s = np.sin(angle)
    t = 1.0 - c
    return np.array([
        [t * x * x + c,     t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c,     t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ])


def opRotateAxis(p: _F, axis: Sequence[float], angle: float) -> _F:
    """Rotate points about an arbitrary *axis* through the origin."""
    R = rotation_matrix(axis, angle)
    # per-point sums: a result never depends on the batch size
    return np.sum(p[..., None, :] * R, axis=-1)


def opMirror(p: _F, axes: str = "x") -> _F:
    """Fold space with ``abs`` on each axis named in *axes* (e.g. ``"xz"``)."""
    q = np.array(p, dtype=float, copy=True)
    for name in axes:
        if name not in _AXES:
            raise InvalidParameterError(f"unknown axis {name!r} in {axes!r}")
        q[..., _AXES[name]] = np.abs(q[..., _AXES[name]])
    return q


# ===========================================================================
# Repetition
# ===========================================================================

def _period(period: float | Sequence[float]) -> _F:
    s = _as_vec3(period, "period")
    if np.any(s <= 0.0):
        raise InvalidParameterError(f"period must be positive, got {period!r}")
    return s


def opRepeat(p: _F, period: float | Sequence[float]) -> _F:
    """Infinite repetition with cell size *period* (scalar or per axis).

    Every point is mapped to its representative inside the cell centred on
    the origin, ``[-period/2, period/2)`` per axis, using floored modulo.
    """
    s = _period(period)
    return mod(p + 0.5 * s, s) - 0.5 * s


def opRepeatLimited(
    p: _F,
    period: float | Sequence[float],
    limit: float | Sequence[float],
) -> _F:
    """Finite repetition: cell indices clamped to ``[-limit, limit]`` per axis."""
    s = _period(period)
    l = _as_vec3(limit, "limit")
    if np.any(l < 0.0):
        raise InvalidParameterError(f"limit must be non-negative, got {limit!r}")
    return p - s * clamp(np.round(p / s), -l, l)


def opPolarRepeat(p: _F, count: int) -> _F:
    """Angular repetition about the Y axis into *count* equal sectors.

    The returned points lie in the sector centred on the +X axis.
    """
    if count < 1:
        raise InvalidParameterError(f"count must be >= 1, got {count!r}")
    sector = 2.0 * np.pi / count
    angle = np.arctan2(p[..., 2], p[..., 0])
    local = mod(angle + 0.5 * sector, sector) - 0.5 * sector
    r = length(p[..., [0, 2]])
    return vec3(r * np.cos(local), p[..., 1], r * np.sin(local))


# ===========================================================================
# Elongation
# ===========================================================================

def opElongate(p: _F, h: float | Sequence[float]) -> Tuple[_F, _F]:
    """Stretch a shape by inserting a slab of half-width *h* per axis.

    Returns ``(q, correction)``; the elongated distance is
    ``inner(q) + correction`` (see :func:`elongate_distance`).
    """
    hv = _as_vec3(h, "elongation")
    if np.any(hv < 0.0):
        raise InvalidParameterError(f"elongation must be non-negative, got {h!r}")
    w = np.abs(p) - hv
    return np.maximum(w, 0.0), np.minimum(max_comp(w), 0.0)


def elongate_distance(p: _F, h: float | Sequence[float], inner) -> _F:
    """Evaluate *inner* on the elongated domain and apply the correction."""
    q, correction = opElongate(p, h)
    return inner(q) + correction


# ===========================================================================
# Deformations (not distance preserving)
# ===========================================================================

def opTwist(p: _F, k: float) -> _F:
    """Twist about Y: the XZ plane is rotated by ``k * y``."""
    return _rotate_plane(p, 0, 2, k * p[..., 1])


def opBend(p: _F, k: float) -> _F:
    """Bend about Z: the XY plane is rotated by ``k * x``."""
    return _rotate_plane(p, 0, 1, k * p[..., 0])


def twist_lipschitz(k: float, radius: float) -> float:
    """Upper bound of the twist Jacobian norm for ``r_xz <= radius``."""
    return 1.0 + abs(k) * radius


def bend_lipschitz(k: float, radius: float) -> float:
    """Upper bound of the bend Jacobian norm for ``r_xy <= radius``."""
    return 1.0 + abs(k) * radius
