"""Static shapes assembled from several primitives with the combinator algebra."""

from __future__ import annotations

import numpy as np

from .. import primitives as sd
from .._math import length
from .._types import _F
from ..combinators import (
    opIntersection,
    opOnion,
    opSmoothUnion,
    opSubtraction,
    opUnion,
    opXor,
)
from ..domain import opPolarRepeat, opRotateX, opRotateZ, opTranslate


def csg_block(p: _F, time: float, seed: int) -> _F:
    """Box-sphere intersection drilled through by three orthogonal bores."""
    body = opIntersection(sd.sdBox(p, (0.45, 0.45, 0.45)), sd.sdSphere(p, 0.6))
    r = 0.25
    bores = opUnion(
        length(p[..., [1, 2]]) - r,
        length(p[..., [0, 2]]) - r,
        length(p[..., [0, 1]]) - r,
    )
    return opSubtraction(body, bores)


def snowman(p: _F, time: float, seed: int) -> _F:
    base = sd.sdSphere(opTranslate(p, (0.0, -0.45, 0.0)), 0.38)
    torso = sd.sdSphere(opTranslate(p, (0.0, 0.12, 0.0)), 0.27)
    head = sd.sdSphere(opTranslate(p, (0.0, 0.52, 0.0)), 0.18)
    body = opSmoothUnion(opSmoothUnion(base, torso, 0.1), head, 0.08)
    nose = sd.sdCapsule(p, (0.0, 0.52, 0.15), (0.0, 0.5, 0.35), 0.03)
    return opUnion(body, nose)


def dumbbell(p: _F, time: float, seed: int) -> _F:
    bar = sd.sdCapsule(p, (-0.55, 0.0, 0.0), (0.55, 0.0, 0.0), 0.08)
    left = sd.sdSphere(opTranslate(p, (-0.6, 0.0, 0.0)), 0.28)
    right = sd.sdSphere(opTranslate(p, (0.6, 0.0, 0.0)), 0.28)
    return opSmoothUnion(bar, opUnion(left, right), 0.1)


def hollow_sphere(p: _F, time: float, seed: int) -> _F:
    """Thin spherical shell with its top sliced off to expose the cavity."""
    shell = opOnion(sd.sdSphere(p, 0.55), 0.03)
    return opIntersection(shell, p[..., 1] - 0.25)


def gear(p: _F, time: float, seed: int) -> _F:
    """Twelve-tooth spur gear lying in the XZ plane."""
    disk = sd.sdCappedCylinder(p, 0.55, 0.12)
    tooth = sd.sdBox(opTranslate(opPolarRepeat(p, 12), (0.62, 0.0, 0.0)), (0.1, 0.12, 0.06))
    axle = length(p[..., [0, 2]]) - 0.15
    return opSubtraction(opUnion(disk, tooth), axle)


def chain(p: _F, time: float, seed: int) -> _F:
    """Three interlocked chain links along X."""
    links = []
    for i, x in enumerate((-0.48, 0.0, 0.48)):
        q = opRotateZ(opTranslate(p, (x, 0.0, 0.0)), 0.5 * np.pi)
        if i % 2:
            q = opRotateX(q, 0.5 * np.pi)
        links.append(sd.sdLink(q, 0.12, 0.18, 0.05))
    return opUnion(*links)


def cube_sphere_xor(p: _F, time: float, seed: int) -> _F:
    return opXor(sd.sdBox(p, (0.45, 0.45, 0.45)), sd.sdSphere(p, 0.55))
