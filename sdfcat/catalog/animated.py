"""Time-dependent shapes.

Each function reads *time* (seconds) from its arguments; nothing is stored
between calls, so evaluating the same time twice gives the same field.
"""

from __future__ import annotations

import numpy as np

from .. import primitives as sd
from .._types import _F
from ..combinators import opMix, opSmoothUnion, opSubtraction, opUnion
from ..domain import opMirror, opRotateX, opRotateY, opTranslate


def pulsing_sphere(p: _F, time: float, seed: int) -> _F:
    """Sphere whose radius oscillates between 0.25 and 0.55 at 0.5 Hz."""
    return sd.sdSphere(p, 0.4 + 0.15 * np.sin(np.pi * time))


def orbiting_spheres(p: _F, time: float, seed: int) -> _F:
    d = sd.sdSphere(p, 0.3)
    for i in range(3):
        a = time + 2.0 * np.pi * i / 3.0
        centre = (0.6 * np.cos(a), 0.15 * np.sin(2.0 * a), 0.6 * np.sin(a))
        d = opSmoothUnion(d, sd.sdSphere(opTranslate(p, centre), 0.15), 0.15)
    return d


def morph(p: _F, time: float, seed: int) -> _F:
    """Sphere turning into a cube and back, one cycle every ``2 * pi`` seconds."""
    t = 0.5 - 0.5 * np.cos(time)
    return opMix(sd.sdSphere(p, 0.55), sd.sdBox(p, (0.45, 0.45, 0.45)), t)


def spinning_torus(p: _F, time: float, seed: int) -> _F:
    return sd.sdTorus(opRotateY(opRotateX(p, 0.7 * time), 0.3 * time), 0.5, 0.15)


def fish(p: _F, time: float, seed: int) -> _F:
    """Fish facing -X, wagging its tail over time.

    The body is an ellipsoid estimate, so the field is only approximately
    conservative.
    """
    body = sd.sdEllipsoid(p, (0.5, 0.22, 0.12))

    wag = 0.45 * np.sin(4.0 * time)
    tail_local = opRotateY(opTranslate(p, (0.42, 0.0, 0.0)), wag)
    tail = sd.sdBox(opTranslate(tail_local, (0.16, 0.0, 0.0)), (0.16, 0.17, 0.015))

    fin = sd.sdBox(opTranslate(p, (0.0, 0.25, 0.0)), (0.16, 0.06, 0.01))

    d = opSmoothUnion(opUnion(body, fin), tail, 0.06)
    eyes = sd.sdSphere(opTranslate(opMirror(p, "z"), (-0.3, 0.05, 0.1)), 0.035)
    return opSubtraction(d, eyes)
