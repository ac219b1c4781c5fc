"""
sdfcat: a catalog of conservative 3D signed distance fields
=============================================================

Every catalog shape is a pure function ``(p, time, seed) -> distance`` whose
result never exceeds the true distance to the surface (or whose bound is
documented in its registry entry).  Shapes are looked up by name and
evaluated in batches with numpy.

Implemented features
--------------------
- Math helpers: ``mix``, ``clamp``, ``fract``, floored ``mod``, ``smoothstep``
  (:mod:`sdfcat._math`)
- Domain operators: translation, rotation, mirroring, repetition, polar
  repetition, elongation, twist, bend (:mod:`sdfcat.domain`)
- Primitives: sphere, box, torus, capsule, cone, ... (:mod:`sdfcat.primitives`)
- Combinators: union, intersection, subtraction, xor, smooth and exponential
  blends (:mod:`sdfcat.combinators`)
- Registry: :func:`list_available`, :func:`resolve`
- Batch evaluation: :func:`evaluate` (optionally multi-threaded)
- Grid sampling: :func:`sample_grid`, :func:`save_npy`
- Command line: ``sdfcat --list`` / ``sdfcat <name>``

Quick start
-----------
::

    import numpy as np
    import sdfcat

    sdfcat.list_available()[:3]          # ('Sphere', 'Cube', 'RoundedCube')
    sdfcat.evaluate("Sphere", (1.0, 0.0, 0.0))          # 0.5
    pts = np.random.default_rng(0).uniform(-1, 1, (1000, 3))
    d = sdfcat.evaluate("Fish", pts, time=1.5)          # shape (1000,)
    phi = sdfcat.sample_grid("Mandelbulb", resolution=64)  # (64, 64, 64)
"""

from ._types import EvalContext, ShapeEntry, ShapeFunc
from .errors import (
    SDFError,
    UnknownShapeError,
    InvalidParameterError,
    ShapeContractError,
)
from .registry import REGISTRY, Registry, build_registry, list_available, resolve
from .batch import evaluate, evaluate_entry
from .grid import grid_points, sample_grid, save_npy

__version__ = "0.3.0"

__all__ = [
    # Types
    "EvalContext",
    "ShapeEntry",
    "ShapeFunc",

    # Errors
    "SDFError",
    "UnknownShapeError",
    "InvalidParameterError",
    "ShapeContractError",

    # Registry
    "REGISTRY",
    "Registry",
    "build_registry",
    "list_available",
    "resolve",

    # Evaluation
    "evaluate",
    "evaluate_entry",

    # Grid utilities
    "grid_points",
    "sample_grid",
    "save_npy",
]
