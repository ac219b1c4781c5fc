"""Seed-driven procedural shapes.

Every call builds its own ``numpy.random.Generator`` from the *seed*
argument, so the same seed always produces the same shape and calls from
different threads never share generator state.
"""

from __future__ import annotations

import numpy as np

from .. import primitives as sd
from .._math import dot, normalize
from .._types import _F
from ..combinators import opSmoothUnion, opUnion
from ..domain import opRotateAxis, opTranslate

#: Upper bound on the gradient of the asteroid's surface noise.
ASTEROID_NOISE_SLOPE = 0.5


def random_spheres(p: _F, time: float, seed: int) -> _F:
    """Union of twelve spheres with random centres and radii."""
    rng = np.random.default_rng(seed)
    centres = rng.uniform(-0.6, 0.6, size=(12, 3))
    radii = rng.uniform(0.1, 0.25, size=12)
    return opUnion(*(sd.sdSphere(opTranslate(p, c), r) for c, r in zip(centres, radii)))


def asteroid(p: _F, time: float, seed: int) -> _F:
    """Sphere roughened by a seeded sum of plane waves.

    The waves are scaled so their combined slope is
    :data:`ASTEROID_NOISE_SLOPE`; dividing by ``1 + slope`` keeps the field
    conservative.
    """
    rng = np.random.default_rng(seed)
    n = 6
    dirs = normalize(rng.normal(size=(n, 3)))
    freqs = rng.uniform(4.0, 10.0, size=n)
    phases = rng.uniform(0.0, 2.0 * np.pi, size=n)
    amps = rng.uniform(0.2, 1.0, size=n)
    amps *= ASTEROID_NOISE_SLOPE / np.sum(amps * freqs)

    noise = np.zeros(p.shape[:-1])
    for d, f, ph, a in zip(dirs, freqs, phases, amps):
        noise = noise + a * np.sin(f * dot(p, d) + ph)
    return (sd.sdSphere(p, 0.6) + noise) / (1.0 + ASTEROID_NOISE_SLOPE)


def drifting_blobs(p: _F, time: float, seed: int) -> _F:
    """Eight blended spheres bobbing around seeded rest positions."""
    rng = np.random.default_rng(seed)
    rest = rng.uniform(-0.45, 0.45, size=(8, 3))
    drift = normalize(rng.normal(size=(8, 3)))
    phases = rng.uniform(0.0, 2.0 * np.pi, size=8)
    radii = rng.uniform(0.12, 0.22, size=8)

    d = None
    for c, v, ph, r in zip(rest, drift, phases, radii):
        centre = c + 0.12 * np.sin(time + ph) * v
        s = sd.sdSphere(opTranslate(p, centre), r)
        d = s if d is None else opSmoothUnion(d, s, 0.15)
    return d


def crystal_cluster(p: _F, time: float, seed: int) -> _F:
    """Randomly oriented octahedral crystals."""
    rng = np.random.default_rng(seed)
    parts = []
    for _ in range(6):
        centre = rng.uniform(-0.5, 0.5, size=3)
        axis = rng.normal(size=3)
        angle = rng.uniform(0.0, np.pi)
        size = rng.uniform(0.18, 0.3)
        q = opRotateAxis(opTranslate(p, centre), axis, angle)
        parts.append(sd.sdOctahedron(q, size))
    return opUnion(*parts)
