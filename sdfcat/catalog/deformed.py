"""Shapes built on domain operators: repetition, mirroring, elongation, twist, bend.

Twist and bend stretch space, so the raw field can change faster than
distance does.  Those shapes divide by the Jacobian bound over the viewing
cube (radius ``sqrt(2)`` around the deformation axis), which keeps them
conservative inside ``[-1, 1]^3``; outside it the bound is not guaranteed.
"""

from __future__ import annotations

import math

from .. import primitives as sd
from .._types import _F
from ..domain import (
    bend_lipschitz,
    elongate_distance,
    opBend,
    opMirror,
    opRepeat,
    opRepeatLimited,
    opTranslate,
    opTwist,
    twist_lipschitz,
)

VIEW_RADIUS = math.sqrt(2.0)

TWIST_RATE = 2.0
BEND_RATE = 1.0
_TWIST_L = twist_lipschitz(TWIST_RATE, VIEW_RADIUS)
_BEND_L = bend_lipschitz(BEND_RATE, VIEW_RADIUS)


def twisted_box(p: _F, time: float, seed: int) -> _F:
    return sd.sdBox(opTwist(p, TWIST_RATE), (0.3, 0.7, 0.3)) / _TWIST_L


def bent_box(p: _F, time: float, seed: int) -> _F:
    return sd.sdBox(opBend(p, BEND_RATE), (0.7, 0.15, 0.3)) / _BEND_L


def elongated_sphere(p: _F, time: float, seed: int) -> _F:
    return elongate_distance(p, (0.3, 0.0, 0.15), lambda q: sd.sdSphere(q, 0.35))


def elongated_torus(p: _F, time: float, seed: int) -> _F:
    return elongate_distance(p, (0.0, 0.25, 0.0), lambda q: sd.sdTorus(q, 0.45, 0.12))


def sphere_lattice(p: _F, time: float, seed: int) -> _F:
    """Infinite lattice of spheres, one per cell of size 0.5."""
    return sd.sdSphere(opRepeat(p, 0.5), 0.18)


def cube_grid(p: _F, time: float, seed: int) -> _F:
    """3 x 3 x 3 block of small cubes."""
    return sd.sdBox(opRepeatLimited(p, 0.55, 1), (0.15, 0.15, 0.15))


def mirrored_capsules(p: _F, time: float, seed: int) -> _F:
    q = opTranslate(opMirror(p, "xz"), (0.4, 0.0, 0.4))
    return sd.sdCapsule(q, (0.0, -0.5, 0.0), (0.0, 0.5, 0.0), 0.15)
