"""Fractal and implicit-surface shapes.

Escape-time fractals only have distance *estimators*; the Mandelbulb entry
is therefore registered without a Lipschitz bound.  The IFS shapes below
are built from reflections and uniform scalings and keep a bound of 1.
"""

from __future__ import annotations

import numpy as np

from .. import primitives as sd
from .._math import clamp, length, mod, vec3
from .._types import _F
from ..combinators import opIntersection, opScale

MANDELBULB_POWER = 8.0
MANDELBULB_ITERATIONS = 8
MANDELBULB_BAILOUT = 2.0


def _mandelbulb_de(p: _F) -> _F:
    """Power-8 Mandelbulb distance estimate ``0.5 * log(r) * r / dr``.

    Points that escape the bailout radius are frozen; points that never
    escape end up with a negative estimate.
    """
    n = MANDELBULB_POWER
    z = np.array(p, dtype=float, copy=True)
    dr = np.ones(p.shape[:-1])
    r = length(z)
    for _ in range(MANDELBULB_ITERATIONS):
        alive = r <= MANDELBULB_BAILOUT
        if not np.any(alive):
            break
        safe_r = np.where(alive & (r > 0.0), r, 1.0)
        theta = np.arccos(clamp(z[..., 2] / safe_r, -1.0, 1.0)) * n
        phi = np.arctan2(z[..., 1], z[..., 0]) * n
        live_r = np.where(alive, r, 0.0)
        zr = live_r ** n
        z_next = zr[..., None] * vec3(
            np.sin(theta) * np.cos(phi),
            np.sin(theta) * np.sin(phi),
            np.cos(theta),
        ) + p
        dr_next = n * live_r ** (n - 1.0) * dr + 1.0
        z = np.where(alive[..., None], z_next, z)
        dr = np.where(alive, dr_next, dr)
        r = length(z)
    return 0.5 * np.log(np.maximum(r, 1e-12)) * r / dr


def mandelbulb(p: _F, time: float, seed: int) -> _F:
    return opScale(p, 0.85, _mandelbulb_de)


def _menger(p: _F) -> _F:
    d = sd.sdBox(p, (1.0, 1.0, 1.0))
    s = 1.0
    for _ in range(4):
        a = mod(p * s, 2.0) - 1.0
        s *= 3.0
        r = np.abs(1.0 - 3.0 * np.abs(a))
        da = np.maximum(r[..., 0], r[..., 1])
        db = np.maximum(r[..., 1], r[..., 2])
        dc = np.maximum(r[..., 2], r[..., 0])
        d = np.maximum(d, (np.minimum(np.minimum(da, db), dc) - 1.0) / s)
    return d


def menger_sponge(p: _F, time: float, seed: int) -> _F:
    """Level-4 Menger sponge."""
    return opScale(p, 0.8, _menger)


def _sierpinski(p: _F, iterations: int = 6) -> _F:
    x = np.array(p[..., 0], dtype=float, copy=True)
    y = np.array(p[..., 1], dtype=float, copy=True)
    z = np.array(p[..., 2], dtype=float, copy=True)
    for _ in range(iterations):
        # fold across the three symmetry planes of the tetrahedron
        m = x + y < 0.0
        x, y = np.where(m, -y, x), np.where(m, -x, y)
        m = x + z < 0.0
        x, z = np.where(m, -z, x), np.where(m, -x, z)
        m = y + z < 0.0
        y, z = np.where(m, -z, y), np.where(m, -y, z)
        x, y, z = 2.0 * x - 1.0, 2.0 * y - 1.0, 2.0 * z - 1.0
    # radius 2 covers the whole unit attractor, so every level-n copy is solid
    return (length(vec3(x, y, z)) - 2.0) * 2.0 ** -iterations


def sierpinski_tetrahedron(p: _F, time: float, seed: int) -> _F:
    return opScale(p, 0.6, _sierpinski)


GYROID_FREQUENCY = 3.0 * np.pi


def gyroid_ball(p: _F, time: float, seed: int) -> _F:
    """Gyroid sheet clipped to a sphere.

    The gyroid function's gradient is at most ``2 * sqrt(3) * frequency``;
    dividing by that turns it into a conservative field.
    """
    q = p * GYROID_FREQUENCY
    x, y, z = q[..., 0], q[..., 1], q[..., 2]
    g = np.sin(x) * np.cos(y) + np.sin(y) * np.cos(z) + np.sin(z) * np.cos(x)
    sheet = np.abs(g) / (2.0 * np.sqrt(3.0) * GYROID_FREQUENCY) - 0.02
    return opIntersection(sheet, sd.sdSphere(p, 0.8))
