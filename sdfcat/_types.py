"""Shared type aliases and small value types."""

from __future__ import annotations

import math
import numbers
from typing import Callable, NamedTuple, Optional

import numpy as np
import numpy.typing as npt

from .errors import InvalidParameterError

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

#: ``func(p, time, seed) -> distances`` with *p* of shape ``(..., 3)``.
ShapeFunc = Callable[[_F, float, int], _F]

SEED_LIMIT = 2 ** 32

__all__ = ["_F", "ShapeFunc", "EvalContext", "ShapeEntry", "SEED_LIMIT"]


class EvalContext(NamedTuple):
    """Read-only ``(time, seed)`` pair handed to every shape function."""

    time: float = 0.0
    seed: int = 12345

    @classmethod
    def checked(cls, time: float, seed: int) -> "EvalContext":
        """Build a context, rejecting non-finite times and non-``uint32`` seeds."""
        if isinstance(time, bool) or not isinstance(time, numbers.Real):
            raise InvalidParameterError(f"time must be a real number, got {time!r}")
        if not math.isfinite(time):
            raise InvalidParameterError(f"time must be finite, got {time!r}")
        if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
            raise InvalidParameterError(f"seed must be an integer, got {seed!r}")
        if not 0 <= seed < SEED_LIMIT:
            raise InvalidParameterError(
                f"seed must be in [0, {SEED_LIMIT}), got {seed}"
            )
        return cls(float(time), int(seed))


class ShapeEntry(NamedTuple):
    """One registry row.

    Attributes
    ----------
    name:
        Unique catalog name, e.g. ``"Sphere"``.
    func:
        The :data:`ShapeFunc` evaluating the field.
    lipschitz:
        Bound on the field's Lipschitz constant inside the viewing cube
        ``[-1, 1]^3``.  ``1.0`` means conservative; ``None`` means the bound
        is not established and the field is an approximate estimate.
    description:
        One-line human description.
    """

    name: str
    func: ShapeFunc
    lipschitz: Optional[float] = 1.0
    description: str = ""

    def __call__(self, p: _F, time: float = 0.0, seed: int = 12345) -> _F:
        return self.func(p, time, seed)
