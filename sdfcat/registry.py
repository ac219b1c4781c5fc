"""Name → shape lookup table.

The table is built exactly once, when this module is first imported, from
the closed tuple :data:`sdfcat.catalog.CATALOG`.  It is read-only afterwards:
there is no API to add or remove entries, so concurrent readers need no
locking.

Names are reported in registration order, i.e. the order of ``CATALOG``.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Tuple

from ._types import ShapeEntry
from .catalog import CATALOG
from .errors import UnknownShapeError

logger = logging.getLogger(__name__)

__all__ = ["Registry", "build_registry", "REGISTRY", "list_available", "resolve"]


class Registry:
    """Immutable mapping from shape name to :class:`ShapeEntry`.

    Use :func:`build_registry` to create one; it validates the entries.
    """

    __slots__ = ("_entries", "_names")

    def __init__(self, entries: Mapping[str, ShapeEntry]) -> None:
        self._entries = MappingProxyType(dict(entries))
        self._names: Tuple[str, ...] = tuple(self._entries)

    def names(self) -> Tuple[str, ...]:
        """All registered names, in registration order."""
        return self._names

    def resolve(self, name: str) -> ShapeEntry:
        """Return the entry called *name*.

        Raises
        ------
        UnknownShapeError
            If no entry has that name.  This is the only error raised.
        """
        try:
            return self._entries[name]
        except (KeyError, TypeError):
            raise UnknownShapeError(name) from None

    @property
    def entries(self) -> Mapping[str, ShapeEntry]:
        """Read-only view of the underlying table."""
        return self._entries

    def __contains__(self, name: object) -> bool:
        try:
            return name in self._entries
        except TypeError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"Registry({len(self)} shapes)"


def build_registry(entries: Iterable[ShapeEntry]) -> Registry:
    """Validate *entries* and freeze them into a :class:`Registry`.

    Raises
    ------
    ValueError
        On an empty or non-string name, a duplicate name, a non-callable
        function or a non-positive Lipschitz bound.
    """
    table = {}
    for entry in entries:
        if not isinstance(entry.name, str) or not entry.name:
            raise ValueError(f"shape name must be a non-empty string, got {entry.name!r}")
        if entry.name in table:
            raise ValueError(f"duplicate shape name: {entry.name}")
        if not callable(entry.func):
            raise ValueError(f"shape {entry.name!r}: function is not callable")
        if entry.lipschitz is not None and not entry.lipschitz > 0.0:
            raise ValueError(f"shape {entry.name!r}: Lipschitz bound must be > 0")
        table[entry.name] = entry
    registry = Registry(table)
    logger.debug("built shape registry with %d entries", len(registry))
    return registry


#: Process-wide registry, initialised on import.
REGISTRY = build_registry(CATALOG)


def list_available() -> Tuple[str, ...]:
    """Names of every registered shape, in registration order."""
    return REGISTRY.names()


def resolve(name: str) -> ShapeEntry:
    """Look *name* up in the process-wide registry."""
    return REGISTRY.resolve(name)
