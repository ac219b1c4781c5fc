"""Batch evaluation of a named shape over many points.

The name is resolved before any point is touched, the points are split into
contiguous chunks, and each chunk writes only to its own slice of a
preallocated output array.  Chunks may run on a thread pool; because every
slice is fixed in advance, completion order never changes the result.

Numeric policy: all work is done in ``float64`` and NaN/Inf values are
propagated into the output unchanged.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple, Union

import numpy as np
import numpy.typing as npt

from . import config
from ._types import _F, EvalContext, ShapeEntry
from .errors import InvalidParameterError, ShapeContractError
from .registry import resolve

logger = logging.getLogger(__name__)

__all__ = ["evaluate", "evaluate_entry"]


def _as_points(points: npt.ArrayLike) -> _F:
    try:
        p = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"points must be numeric: {exc}") from None
    if p.ndim == 1 and p.size == 0:
        return p.reshape(0, 3)
    if p.ndim == 0 or p.shape[-1] != 3:
        raise InvalidParameterError(
            f"points must have shape (3,) or (..., 3), got {p.shape}"
        )
    return p


def _positive_int(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise InvalidParameterError(f"{what} must be a positive integer, got {value!r}")
    return int(value)


def _chunks(n: int, size: int) -> List[Tuple[int, int]]:
    return [(start, min(start + size, n)) for start in range(0, n, size)]


def _fill(
    entry: ShapeEntry,
    points: _F,
    out: _F,
    start: int,
    stop: int,
    context: EvalContext,
) -> None:
    d = np.asarray(entry.func(points[start:stop], context.time, context.seed), dtype=np.float64)
    if d.shape != (stop - start,):
        raise ShapeContractError(
            f"shape {entry.name!r} returned an array of shape {d.shape} "
            f"for {stop - start} points"
        )
    out[start:stop] = d


def evaluate_entry(
    entry: ShapeEntry,
    points: npt.ArrayLike,
    context: EvalContext = EvalContext(),
    *,
    workers: Optional[int] = None,
    chunk_size: Optional[int] = None,
) -> Union[_F, float]:
    """Evaluate an already resolved *entry*; see :func:`evaluate`."""
    workers = config.default_workers() if workers is None else _positive_int(workers, "workers")
    chunk_size = (
        config.DEFAULT_CHUNK_SIZE if chunk_size is None
        else _positive_int(chunk_size, "chunk_size")
    )

    p = _as_points(points)
    single = p.ndim == 1
    flat = p.reshape(-1, 3).view()
    # shapes borrow the caller's points; make sure they cannot write to them
    flat.flags.writeable = False

    n = flat.shape[0]
    out = np.empty(n, dtype=np.float64)
    spans = _chunks(n, chunk_size)
    logger.debug(
        "evaluating %s on %d points (%d chunks, %d workers)",
        entry.name, n, len(spans), workers,
    )

    if workers > 1 and len(spans) > 1:
        with ThreadPoolExecutor(max_workers=min(workers, len(spans))) as pool:
            futures = [
                pool.submit(_fill, entry, flat, out, start, stop, context)
                for start, stop in spans
            ]
            try:
                for future in futures:
                    future.result()
            except BaseException:
                for future in futures:
                    future.cancel()
                raise
    else:
        for start, stop in spans:
            _fill(entry, flat, out, start, stop, context)

    if single:
        return float(out[0])
    return out.reshape(p.shape[:-1])


def evaluate(
    name: str,
    points: npt.ArrayLike,
    time: float = config.DEFAULT_TIME,
    seed: int = config.DEFAULT_SEED,
    *,
    workers: Optional[int] = None,
    chunk_size: Optional[int] = None,
) -> Union[_F, float]:
    """Evaluate the shape called *name* at *points*.

    Parameters
    ----------
    name:
        Registered shape name (see :func:`sdfcat.list_available`).
    points:
        A single point ``(3,)`` or any array of points ``(..., 3)``.  An
        empty sequence is allowed.
    time:
        Animation time handed to the shape; must be finite.
    seed:
        Seed for procedural shapes, an unsigned 32-bit integer.
    workers:
        Threads to use; defaults to :func:`sdfcat.config.default_workers`.
    chunk_size:
        Points per work item; defaults to ``config.DEFAULT_CHUNK_SIZE``.

    Returns
    -------
    float or numpy.ndarray
        A ``float`` for a single ``(3,)`` point, otherwise a new ``float64``
        array shaped like the leading axes of *points*, index-aligned with
        the input.

    Raises
    ------
    UnknownShapeError
        If *name* is not registered.  Raised before any evaluation.
    InvalidParameterError
        For malformed points, a bad *time*/*seed* or bad tuning arguments.
    ShapeContractError
        If the shape returns a result of the wrong shape.
    """
    entry = resolve(name)
    context = EvalContext.checked(time, seed)
    return evaluate_entry(entry, points, context, workers=workers, chunk_size=chunk_size)
