"""Direction index helpers mapping compact codes to axis-aligned grid offsets.

The code assignment doubles as the wire format of prototype documents, so it
must never change once documents have been authored against it::

    0 = +x   1 = -x   2 = +y   3 = -y   4 = +z   5 = -z
"""
from __future__ import annotations

import numbers
import operator
import re
from enum import IntEnum
from typing import Any, Iterable, Tuple

from .errors import InvalidDirection

GridVector = Tuple[int, int, int]


class Direction(IntEnum):
    POS_X = 0
    NEG_X = 1
    POS_Y = 2
    NEG_Y = 3
    POS_Z = 4
    NEG_Z = 5


_VECTORS: Tuple[GridVector, ...] = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)

_INDEX_BY_VECTOR = {vector: Direction(code) for code, vector in enumerate(_VECTORS)}

_KEY_PATTERN = re.compile(r"[0-5]")


def _as_direction(value: Any) -> Direction:
    # bool is an int subclass; True must not silently mean NEG_X
    if isinstance(value, bool):
        raise InvalidDirection(f"Direction index must be an integer in [0, 5], got {value!r}")
    try:
        code = operator.index(value)
    except TypeError:
        raise InvalidDirection(f"Direction index must be an integer in [0, 5], got {value!r}") from None
    if not 0 <= code <= 5:
        raise InvalidDirection(f"Direction index {code} is outside [0, 5]")
    return Direction(code)


def index_to_vector(index: Any) -> GridVector:
    """Return the unit grid offset for a direction code."""

    return _VECTORS[_as_direction(index)]


def vector_to_index(vector: Iterable[Any]) -> Direction:
    """Return the direction code for an axis-aligned unit vector."""

    try:
        components = tuple(vector)
    except TypeError:
        raise InvalidDirection(f"Direction vector must be iterable, got {vector!r}") from None
    if len(components) != 3:
        raise InvalidDirection(f"Direction vector needs exactly three components, got {components!r}")
    key = []
    for component in components:
        if isinstance(component, bool) or not isinstance(component, numbers.Real):
            raise InvalidDirection(f"Direction vector has a non-numeric component: {component!r}")
        if component not in (-1, 0, 1):
            raise InvalidDirection(f"{components!r} is not an axis-aligned unit vector")
        key.append(int(component))
    try:
        return _INDEX_BY_VECTOR[tuple(key)]
    except KeyError:
        raise InvalidDirection(f"{components!r} is not an axis-aligned unit vector") from None


def parse_direction_key(key: Any) -> Direction:
    """Interpret a document neighbor key; JSON object keys arrive as strings."""

    if isinstance(key, str):
        if not _KEY_PATTERN.fullmatch(key):
            raise InvalidDirection(f"Direction key {key!r} is not an integer code in 0-5")
        return Direction(int(key))
    return _as_direction(key)


def opposite(direction: Any) -> Direction:
    """Return the paired direction on the same axis."""

    return Direction(_as_direction(direction) ^ 1)


__all__ = [
    "Direction",
    "GridVector",
    "index_to_vector",
    "vector_to_index",
    "parse_direction_key",
    "opposite",
]
