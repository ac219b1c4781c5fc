"""Static catalog entries built from a single primitive.

Sizes are chosen so every shape fits the viewing cube ``[-1, 1]^3``.
"""

from __future__ import annotations

import numpy as np

from .. import primitives as sd
from .._types import _F
from ..domain import opTranslate

SPHERE_RADIUS = 0.5
CUBE_HALF_SIZE = 0.5
TORUS_RADII = (0.5, 0.2)


def sphere(p: _F, time: float, seed: int) -> _F:
    return sd.sdSphere(p, SPHERE_RADIUS)


def cube(p: _F, time: float, seed: int) -> _F:
    return sd.sdBox(p, (CUBE_HALF_SIZE,) * 3)


def rounded_cube(p: _F, time: float, seed: int) -> _F:
    return sd.sdRoundBox(p, (0.5, 0.5, 0.5), 0.1)


def box_frame(p: _F, time: float, seed: int) -> _F:
    return sd.sdBoxFrame(p, (0.5, 0.5, 0.5), 0.05)


def torus(p: _F, time: float, seed: int) -> _F:
    return sd.sdTorus(p, *TORUS_RADII)


def capped_torus(p: _F, time: float, seed: int) -> _F:
    return sd.sdCappedTorus(p, 2.2, 0.5, 0.12)


def link(p: _F, time: float, seed: int) -> _F:
    return sd.sdLink(p, 0.25, 0.3, 0.1)


def cylinder(p: _F, time: float, seed: int) -> _F:
    return sd.sdCappedCylinder(p, 0.4, 0.6)


def capsule(p: _F, time: float, seed: int) -> _F:
    return sd.sdCapsule(p, (-0.5, 0.0, 0.0), (0.5, 0.0, 0.0), 0.25)


def cone(p: _F, time: float, seed: int) -> _F:
    return sd.sdCappedCone(p, 0.5, 0.5, 0.1)


def round_cone(p: _F, time: float, seed: int) -> _F:
    return sd.sdRoundCone(opTranslate(p, (0.0, -0.4, 0.0)), 0.35, 0.15, 0.7)


def octahedron(p: _F, time: float, seed: int) -> _F:
    return sd.sdOctahedron(p, 0.7)


def hex_prism(p: _F, time: float, seed: int) -> _F:
    return sd.sdHexPrism(p, 0.45, 0.5)


def tri_prism(p: _F, time: float, seed: int) -> _F:
    return sd.sdTriPrism(p, 0.8, 0.4)


def pyramid(p: _F, time: float, seed: int) -> _F:
    """Unit-height pyramid standing on ``y = -0.5``."""
    return sd.sdPyramid(opTranslate(p, (0.0, -0.5, 0.0)), 1.0)


def ellipsoid(p: _F, time: float, seed: int) -> _F:
    return sd.sdEllipsoid(p, (0.7, 0.4, 0.3))


def cut_sphere(p: _F, time: float, seed: int) -> _F:
    return sd.sdCutSphere(p, 0.6, -0.2)


def death_star(p: _F, time: float, seed: int) -> _F:
    return sd.sdDeathStar(p, 0.6, 0.45, 0.55)


def ground_plane(p: _F, time: float, seed: int) -> _F:
    """Half-space ``y <= -0.5``."""
    return sd.sdPlane(p, np.array([0.0, 1.0, 0.0]), 0.5)
