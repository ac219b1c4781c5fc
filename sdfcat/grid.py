"""Regular-grid sampling of catalog shapes, for volume viewers and offline use."""

from __future__ import annotations

import os
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt

from . import config
from ._types import EvalContext
from .batch import evaluate_entry
from .errors import InvalidParameterError
from .registry import resolve

__all__ = ["grid_points", "sample_grid", "save_npy"]

_Array = npt.NDArray[np.floating]
_Bounds = Tuple[float, float]


def _check_grid(resolution: int, bounds: _Bounds) -> Tuple[int, float, float]:
    if isinstance(resolution, bool) or not isinstance(resolution, (int, np.integer)) or resolution < 2:
        raise InvalidParameterError(f"resolution must be an integer >= 2, got {resolution!r}")
    lo, hi = (float(b) for b in bounds)
    if not (np.isfinite(lo) and np.isfinite(hi)) or lo >= hi:
        raise InvalidParameterError(f"bounds must be finite with min < max, got {bounds!r}")
    return int(resolution), lo, hi


def grid_points(
    resolution: int = config.DEFAULT_RESOLUTION,
    bounds: _Bounds = config.DEFAULT_BOUNDS,
) -> _Array:
    """Node positions of a ``resolution^3`` grid spanning ``bounds`` on every axis.

    Returns
    -------
    numpy.ndarray
        Shape ``(resolution**3, 3)``.  X varies fastest, then Y, then Z, so
        ``points[x + n * (y + n * z)]`` is node ``(x, y, z)``.  The first and
        last nodes sit exactly on the bounds.
    """
    n, lo, hi = _check_grid(resolution, bounds)
    step = (hi - lo) / (n - 1)
    axis = lo + np.arange(n) * step
    Z, Y, X = np.meshgrid(axis, axis, axis, indexing="ij")
    return np.stack([X, Y, Z], axis=-1).reshape(-1, 3)


def sample_grid(
    name: str,
    resolution: int = config.DEFAULT_RESOLUTION,
    bounds: _Bounds = config.DEFAULT_BOUNDS,
    time: float = config.DEFAULT_TIME,
    seed: int = config.DEFAULT_SEED,
    *,
    workers: Optional[int] = None,
) -> _Array:
    """Sample the shape *name* on the node grid of :func:`grid_points`.

    The name is resolved before the grid is built.

    Returns
    -------
    numpy.ndarray
        Shape ``(nz, ny, nx)`` array of distances, z-first indexing.
    """
    context = EvalContext.checked(time, seed)
    entry = resolve(name)
    n, _, _ = _check_grid(resolution, bounds)
    phi = evaluate_entry(entry, grid_points(resolution, bounds), context, workers=workers)
    return phi.reshape(n, n, n)


def save_npy(path: str, phi: _Array) -> None:
    """Save *phi* array to *path* (creates parent directories if needed)."""
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    np.save(path, phi)
