"""Exception hierarchy for sdfcat.

Every failure raised by the library derives from :class:`SDFError`, and each
concrete error also derives from the closest builtin so callers that only
know about ``KeyError`` / ``ValueError`` keep working.
"""

from __future__ import annotations

__all__ = [
    "SDFError",
    "UnknownShapeError",
    "InvalidParameterError",
    "ShapeContractError",
]


class SDFError(Exception):
    """Base class for all sdfcat errors."""


class UnknownShapeError(SDFError, KeyError):
    """A shape name is not present in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown shape name: {name}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class InvalidParameterError(SDFError, ValueError):
    """An operator or evaluation call received an out-of-contract parameter."""


class ShapeContractError(SDFError, RuntimeError):
    """A catalog function broke the shape-function contract."""
