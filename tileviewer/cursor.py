"""Caller-owned cursor cycling through a catalog."""
from __future__ import annotations

import operator

from .catalog import Catalog
from .errors import IndexOutOfRange
from .prototype import Prototype


class CatalogCursor:
    """Cycle through the prototypes of a catalog, wrapping after the last one.

    Each display driver keeps its own cursor; the catalog itself holds no
    selection state, so several cursors can walk the same catalog
    independently.
    """

    def __init__(self, catalog: Catalog, *, start: int = 0) -> None:
        if len(catalog) == 0:
            raise ValueError("catalog must not be empty")
        try:
            position = None if isinstance(start, bool) else operator.index(start)
        except TypeError:
            position = None
        if position is None or not 0 <= position < len(catalog):
            raise IndexOutOfRange(f"Cursor start {start!r} is outside [0, {len(catalog)})")
        self._catalog = catalog
        self._index = position

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def index(self) -> int:
        """Position of the prototype currently selected."""

        return self._index

    def current(self) -> Prototype:
        return self._catalog.get(self._index)

    def advance(self) -> int:
        """Move to the next prototype and return the new position."""

        self._index = (self._index + 1) % len(self._catalog)
        return self._index


__all__ = ["CatalogCursor"]
