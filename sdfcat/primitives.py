"""Closed-form distance functions for the base shapes of the catalog.

All functions accept a point array *p* of shape ``(..., 3)`` and return
distances of shape ``(...)``.  Shapes are centred on the origin; place them
with the operators in :mod:`sdfcat.domain`.

Unless a docstring says otherwise the formula is an exact signed distance,
hence conservative with Lipschitz constant 1.  Formulas follow Inigo
Quilez's reference: https://iquilezles.org/articles/distfunctions/
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ._math import clamp, dot, dot2, length, max_comp, vec2, vec3
from ._types import _F

__all__ = [
    "sdSphere", "sdBox", "sdRoundBox", "sdBoxFrame",
    "sdTorus", "sdCappedTorus", "sdLink",
    "sdCappedCylinder", "sdCapsule", "sdVerticalCapsule",
    "sdCappedCone", "sdRoundCone",
    "sdOctahedron", "sdHexPrism", "sdTriPrism", "sdPyramid",
    "sdEllipsoid", "sdPlane", "sdCutSphere", "sdDeathStar",
]


def _box_tail(q: _F) -> _F:
    # shared tail of every box-like formula
    return length(np.maximum(q, 0.0)) + np.minimum(max_comp(q), 0.0)


def _rect_tail(d: _F) -> _F:
    # 2-D version, *d* has shape (..., 2)
    return np.minimum(np.maximum(d[..., 0], d[..., 1]), 0.0) + length(np.maximum(d, 0.0))


def _radial(p: _F) -> _F:
    """Return ``(length(p.xz), p.y)``: the half-plane profile of a Y-revolved shape."""
    return vec2(length(p[..., [0, 2]]), p[..., 1])


# ===========================================================================
# Spheres and boxes
# ===========================================================================

def sdSphere(p: _F, r: float) -> _F:
    """Sphere of radius *r*."""
    return length(p) - r


def sdBox(p: _F, b: Sequence[float]) -> _F:
    """Axis-aligned box with half-extents *b*."""
    return _box_tail(np.abs(p) - np.asarray(b, dtype=float))


def sdRoundBox(p: _F, b: Sequence[float], r: float) -> _F:
    """Box with half-extents *b* whose edges are rounded by *r*.

    The outer faces stay at *b*; only edges and corners are rounded.
    """
    return _box_tail(np.abs(p) - np.asarray(b, dtype=float) + r) - r


def sdBoxFrame(p: _F, b: Sequence[float], e: float) -> _F:
    """Edges of a box with half-extents *b*, bar half-thickness *e*."""
    p = np.abs(p) - np.asarray(b, dtype=float)
    q = np.abs(p + e) - e
    px, py, pz = p[..., 0], p[..., 1], p[..., 2]
    qx, qy, qz = q[..., 0], q[..., 1], q[..., 2]
    return np.minimum(
        np.minimum(_box_tail(vec3(px, qy, qz)), _box_tail(vec3(qx, py, qz))),
        _box_tail(vec3(qx, qy, pz)),
    )


# ===========================================================================
# Tori
# ===========================================================================

def sdTorus(p: _F, major: float, minor: float) -> _F:
    """Torus lying in the XZ plane."""
    q = vec2(length(p[..., [0, 2]]) - major, p[..., 1])
    return length(q) - minor


def sdCappedTorus(p: _F, half_angle: float, major: float, minor: float) -> _F:
    """Torus arc of opening ``2 * half_angle`` centred on +Y, in the XY plane."""
    sc = np.array([np.sin(half_angle), np.cos(half_angle)])
    px = np.abs(p[..., 0])
    py = p[..., 1]
    k = np.where(sc[1] * px > sc[0] * py, px * sc[0] + py * sc[1], length(vec2(px, py)))
    return np.sqrt(np.maximum(dot2(p) + major * major - 2.0 * major * k, 0.0)) - minor


def sdLink(p: _F, half_len: float, major: float, minor: float) -> _F:
    """Chain link: a torus stretched by *half_len* along Y."""
    q = vec3(p[..., 0], np.maximum(np.abs(p[..., 1]) - half_len, 0.0), p[..., 2])
    return length(vec2(length(q[..., [0, 1]]) - major, q[..., 2])) - minor


# ===========================================================================
# Cylinders, capsules, cones
# ===========================================================================

def sdCappedCylinder(p: _F, r: float, h: float) -> _F:
    """Cylinder along Y with radius *r* and half-height *h*."""
    return _rect_tail(np.abs(_radial(p)) - np.array([r, h]))


def sdCapsule(p: _F, a: Sequence[float], b: Sequence[float], r: float) -> _F:
    """Segment *a*-*b* inflated by *r*."""
    a = np.asarray(a, dtype=float)
    ba = np.asarray(b, dtype=float) - a
    pa = p - a
    h = clamp(dot(pa, ba) / dot2(ba), 0.0, 1.0)
    return length(pa - ba * h[..., None]) - r


def sdVerticalCapsule(p: _F, h: float, r: float) -> _F:
    """Capsule from the origin to ``(0, h, 0)`` with radius *r*."""
    q = np.array(p, dtype=float, copy=True)
    q[..., 1] -= clamp(q[..., 1], 0.0, h)
    return length(q) - r


def sdCappedCone(p: _F, h: float, r1: float, r2: float) -> _F:
    """Truncated cone along Y, half-height *h*, radius *r1* at the bottom, *r2* at the top."""
    q = _radial(p)
    qx, qy = q[..., 0], q[..., 1]
    k1 = np.array([r2, h])
    k2 = np.array([r2 - r1, 2.0 * h])
    ca = vec2(qx - np.minimum(qx, np.where(qy < 0.0, r1, r2)), np.abs(qy) - h)
    t = clamp(dot(k1 - q, k2) / dot2(k2), 0.0, 1.0)
    cb = q - k1 + k2 * t[..., None]
    inside = (cb[..., 0] < 0.0) & (ca[..., 1] < 0.0)
    return np.where(inside, -1.0, 1.0) * np.sqrt(np.minimum(dot2(ca), dot2(cb)))


def sdRoundCone(p: _F, r1: float, r2: float, h: float) -> _F:
    """Sphere *r1* at the origin smoothly joined to sphere *r2* at ``(0, h, 0)``."""
    b = (r1 - r2) / h
    a = np.sqrt(1.0 - b * b)
    q = _radial(p)
    k = dot(q, np.array([-b, a]))
    return np.select(
        [k < 0.0, k > a * h],
        [length(q) - r1, length(q - np.array([0.0, h])) - r2],
        default=dot(q, np.array([a, b])) - r1,
    )


# ===========================================================================
# Polyhedra and prisms
# ===========================================================================

def sdOctahedron(p: _F, s: float) -> _F:
    """Regular octahedron with vertices at distance *s* on each axis."""
    p = np.abs(p)
    m = p[..., 0] + p[..., 1] + p[..., 2] - s
    c1 = 3.0 * p[..., 0] < m
    c2 = ~c1 & (3.0 * p[..., 1] < m)
    c3 = ~c1 & ~c2 & (3.0 * p[..., 2] < m)
    q = np.where(c1[..., None], p, p[..., [2, 0, 1]])
    q = np.where(c2[..., None], p[..., [1, 2, 0]], q)
    k = clamp(0.5 * (q[..., 2] - q[..., 1] + s), 0.0, s)
    edge = length(vec3(q[..., 0], q[..., 1] - s + k, q[..., 2] - k))
    return np.where(c1 | c2 | c3, edge, m / np.sqrt(3.0))


def sdHexPrism(p: _F, radius: float, half_len: float) -> _F:
    """Hexagonal prism along Z; *radius* is the apothem of the hexagon."""
    k = np.array([-0.5 * np.sqrt(3.0), 0.5, 1.0 / np.sqrt(3.0)])
    a = np.abs(p)
    xy = a[..., :2]
    xy = xy - 2.0 * np.minimum(dot(xy, k[:2]), 0.0)[..., None] * k[:2]
    edge = xy - vec2(clamp(xy[..., 0], -k[2] * radius, k[2] * radius), radius)
    d = vec2(length(edge) * np.sign(xy[..., 1] - radius), a[..., 2] - half_len)
    return _rect_tail(d)


def sdTriPrism(p: _F, size: float, half_len: float) -> _F:
    """Triangular prism along Z.

    Maximum of face-plane distances: exact inside, a lower bound outside,
    so still conservative.
    """
    q = np.abs(p)
    side = np.maximum(q[..., 0] * 0.866025 + p[..., 1] * 0.5, -p[..., 1]) - size * 0.5
    return np.maximum(q[..., 2] - half_len, side)


def sdPyramid(p: _F, h: float) -> _F:
    """Square pyramid with base ``[-0.5, 0.5]^2`` on y = 0 and apex at height *h*.

    Below the base plane the nearest point always lies on the base square,
    so the distance there is taken to that square directly.  Inside, the
    distance is the smaller of the depths below the nearest slanted face
    and above the base.
    """
    m2 = h * h + 0.25
    xz = np.abs(p[..., [0, 2]])
    base = length(vec3(np.maximum(xz[..., 0] - 0.5, 0.0), p[..., 1],
                       np.maximum(xz[..., 1] - 0.5, 0.0)))
    swap = xz[..., 1] > xz[..., 0]
    x = np.where(swap, xz[..., 1], xz[..., 0]) - 0.5
    z = np.where(swap, xz[..., 0], xz[..., 1]) - 0.5
    y = p[..., 1]
    q0 = z
    q1 = h * y - 0.5 * x
    q2 = h * x + 0.5 * y
    s = np.maximum(-q0, 0.0)
    t = clamp((q1 - 0.5 * z) / (m2 + 0.25), 0.0, 1.0)
    a = m2 * (q0 + s) ** 2 + q1 * q1
    b = m2 * (q0 + 0.5 * t) ** 2 + (q1 - m2 * t) ** 2
    d2 = np.where(np.minimum(q1, -q0 * m2 - q1 * 0.5) > 0.0, 0.0, np.minimum(a, b))
    side = np.sqrt((d2 + q2 * q2) / m2) * np.sign(np.maximum(q2, -y))
    inside = np.maximum(q2 / np.sqrt(m2), -y)
    return np.where(y < 0.0, base, np.where(side < 0.0, inside, side))


# ===========================================================================
# Miscellaneous
# ===========================================================================

def sdEllipsoid(p: _F, r: Sequence[float]) -> _F:
    """Ellipsoid with semi-axes *r*.

    Approximate: the estimate is good near the surface but its Lipschitz
    constant is not bounded by 1 for strongly anisotropic radii.
    """
    r = np.asarray(r, dtype=float)
    k0 = length(p / r)
    k1 = length(p / (r * r))
    return k0 * (k0 - 1.0) / np.where(k1 == 0.0, 1e-12, k1)


def sdPlane(p: _F, n: Sequence[float], h: float) -> _F:
    """Half-space below the plane ``dot(p, n) + h = 0`` (*n* need not be unit)."""
    n = np.asarray(n, dtype=float)
    return dot(p, n / np.linalg.norm(n)) + h


def sdCutSphere(p: _F, r: float, h: float) -> _F:
    """Sphere of radius *r* with everything below ``y = h`` removed (|h| < r)."""
    w = np.sqrt(r * r - h * h)
    q = _radial(p)
    qx, qy = q[..., 0], q[..., 1]
    s = np.maximum((h - r) * qx * qx + w * w * (h + r - 2.0 * qy), h * qx - w * qy)
    return np.select(
        [s < 0.0, qx < w],
        [length(q) - r, h - qy],
        default=length(q - np.array([w, h])),
    )


def sdDeathStar(p: _F, ra: float, rb: float, d: float) -> _F:
    """Sphere *ra* with a spherical bite of radius *rb* centred at ``(d, 0, 0)``."""
    a = (ra * ra - rb * rb + d * d) / (2.0 * d)
    b = np.sqrt(max(ra * ra - a * a, 0.0))
    q = vec2(p[..., 0], length(p[..., [1, 2]]))
    rim = q[..., 0] * b - q[..., 1] * a > d * np.maximum(b - q[..., 1], 0.0)
    return np.where(
        rim,
        length(q - np.array([a, b])),
        np.maximum(length(q) - ra, rb - length(q - np.array([d, 0.0]))),
    )
