"""Validate caller-owned cursor cycling."""
from __future__ import annotations

import numpy as np
import pytest

from tileviewer.catalog import build_catalog
from tileviewer.cursor import CatalogCursor
from tileviewer.errors import IndexOutOfRange


def _catalog(count: int):
    return build_catalog([{"mesh": f"tile{i}.glb"} for i in range(count)])


# //1.- Advancing count times wraps back to the starting position.
@pytest.mark.parametrize("start", [0, 2, 4])
def test_advance_wraps_around(start):
    catalog = _catalog(5)
    cursor = CatalogCursor(catalog, start=start)
    visited = [cursor.advance() for _ in range(len(catalog))]
    assert visited[-1] == start
    assert sorted(visited) == list(range(5))
    assert cursor.index == start


# //2.- The current prototype tracks the cursor position.
def test_current_follows_index():
    cursor = CatalogCursor(_catalog(2))
    assert cursor.current().mesh_id == "tile0"
    assert cursor.advance() == 1
    assert cursor.current().mesh_id == "tile1"
    assert cursor.advance() == 0


# //3.- Independent cursors over one catalog never disturb each other.
def test_cursors_are_independent():
    catalog = _catalog(3)
    first = CatalogCursor(catalog)
    second = CatalogCursor(catalog)
    first.advance()
    first.advance()
    assert first.index == 2
    assert second.index == 0
    assert first.catalog is second.catalog


def test_single_prototype_cursor_stays_put():
    cursor = CatalogCursor(_catalog(1))
    assert cursor.advance() == 0


def test_cursor_rejects_empty_catalog_and_bad_start():
    with pytest.raises(ValueError):
        CatalogCursor(_catalog(0))
    with pytest.raises(IndexOutOfRange):
        CatalogCursor(_catalog(2), start=2)
    with pytest.raises(IndexOutOfRange):
        CatalogCursor(_catalog(2), start=-1)


def test_cursor_accepts_numpy_start():
    cursor = CatalogCursor(_catalog(3), start=np.int64(2))
    assert cursor.index == 2
    assert type(cursor.index) is int
    assert cursor.advance() == 0
