"""Prototype catalog built from a decoded prototype document.

The catalog is the only stateful-looking piece of the viewer, yet it never
changes after construction: a document is validated in full, converted into
frozen :class:`~tileviewer.prototype.Prototype` values and wrapped in an
immutable tuple.  Any structural problem aborts the whole build so callers
never observe a partially populated catalog.
"""
from __future__ import annotations

import logging
import math
import numbers
import operator
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from .direction import Direction, parse_direction_key
from .errors import IndexOutOfRange, InvalidDirection, MalformedDocument
from .prototype import NeighborCandidate, NeighborTable, Prototype, Rotation

LOGGER = logging.getLogger(__name__)


def _coerce_mesh(entry: Mapping[str, Any], position: int, label: str) -> str:
    if "mesh" not in entry:
        raise MalformedDocument(f"{label} is missing the 'mesh' field", position)
    mesh = entry["mesh"]
    if not isinstance(mesh, str) or not mesh.strip():
        raise MalformedDocument(f"{label} has an invalid mesh reference: {mesh!r}", position)
    return mesh


def _coerce_rotation(raw: Any, position: int, label: str) -> Rotation:
    if raw is None:
        return Rotation()
    if not isinstance(raw, Mapping):
        raise MalformedDocument(
            f"{label} rotation must be a mapping with x/y/z keys, got {type(raw).__name__}",
            position,
        )

    def _ensure_finite(axis: str) -> float:
        value = raw.get(axis, 0)
        if value is None:
            return 0.0
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise MalformedDocument(
                f"{label} has a non-numeric rotation {axis}: {value!r}", position
            )
        number = float(value)
        if not math.isfinite(number):
            raise MalformedDocument(
                f"{label} has a non-finite rotation {axis}: {value!r}", position
            )
        return number

    return Rotation(x=_ensure_finite("x"), y=_ensure_finite("y"), z=_ensure_finite("z"))


def _coerce_candidate(raw: Any, position: int, label: str) -> NeighborCandidate:
    if not isinstance(raw, Mapping):
        raise MalformedDocument(f"{label} must be a mapping, got {type(raw).__name__}", position)
    mesh = _coerce_mesh(raw, position, label)
    rotation = _coerce_rotation(raw.get("rotation"), position, label)
    return NeighborCandidate(mesh_id=mesh, rotation=rotation)


def _coerce_neighbors(raw: Any, position: int) -> NeighborTable:
    slots: List[Tuple[NeighborCandidate, ...]] = [() for _ in Direction]
    if raw is None:
        return tuple(slots)
    if not isinstance(raw, Mapping):
        raise MalformedDocument(
            f"neighbors must be a mapping of direction to candidates, got {type(raw).__name__}",
            position,
        )

    seen: dict[Direction, Any] = {}
    for key, candidates in raw.items():
        try:
            direction = parse_direction_key(key)
        except InvalidDirection as exc:
            raise MalformedDocument(f"invalid neighbor direction {key!r}: {exc}", position) from exc
        # "0" and 0 can both appear in a hand-written YAML mapping
        if direction in seen:
            raise MalformedDocument(
                f"neighbor direction {int(direction)} is declared twice ({seen[direction]!r} and {key!r})",
                position,
            )
        seen[direction] = key

        if candidates is None:
            continue
        if isinstance(candidates, (str, bytes)) or not isinstance(candidates, Sequence):
            raise MalformedDocument(
                f"neighbors for direction {int(direction)} must be a list, got {type(candidates).__name__}",
                position,
            )
        slots[direction] = tuple(
            _coerce_candidate(candidate, position, f"neighbor {slot} in direction {int(direction)}")
            for slot, candidate in enumerate(candidates)
        )
    return tuple(slots)


def _coerce_prototype(entry: Any, position: int) -> Prototype:
    if not isinstance(entry, Mapping):
        raise MalformedDocument(
            f"prototype must be a mapping, got {type(entry).__name__}", position
        )
    mesh = _coerce_mesh(entry, position, "prototype")
    rotation = _coerce_rotation(entry.get("rotation"), position, "prototype")
    neighbors = _coerce_neighbors(entry.get("neighbors"), position)
    return Prototype(mesh_id=mesh, rotation=rotation, neighbors=neighbors)


@dataclass(frozen=True)
class Catalog:
    """Ordered, immutable collection of prototypes.

    Attributes
    ----------
    prototypes:
        Prototypes in document declaration order.  The position inside this
        tuple is the identity used by cursors and drivers.
    """

    prototypes: Tuple[Prototype, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "prototypes", tuple(self.prototypes))

    @classmethod
    def build_from(cls, document: Any) -> "Catalog":
        """Validate ``document`` and return a catalog, or raise without side effects."""

        return build_catalog(document)

    @property
    def count(self) -> int:
        return len(self.prototypes)

    def __len__(self) -> int:
        return len(self.prototypes)

    def get(self, index: int) -> Prototype:
        """Return the prototype at ``index``; negative indexes are rejected, not wrapped."""

        if isinstance(index, bool):
            raise IndexOutOfRange(f"Catalog index must be an integer, got {index!r}")
        try:
            index = operator.index(index)
        except TypeError:
            raise IndexOutOfRange(f"Catalog index must be an integer, got {index!r}") from None
        if not 0 <= index < len(self.prototypes):
            raise IndexOutOfRange(
                f"Catalog index {index} is outside [0, {len(self.prototypes)})"
            )
        return self.prototypes[index]

    def neighbors_for(self, prototype: Prototype, direction: Any) -> Tuple[NeighborCandidate, ...]:
        """Return the candidates declared for ``direction``, or an empty tuple."""

        return prototype.candidates(parse_direction_key(direction))

    def first_neighbor(self, prototype: Prototype, direction: Any) -> Optional[NeighborCandidate]:
        """Return the candidate a renderer should place, or ``None`` when undeclared."""

        return prototype.first_candidate(parse_direction_key(direction))


def build_catalog(document: Any) -> Catalog:
    """Build a :class:`Catalog` from a decoded document.

    The document must be a list of prototype mappings.  The first malformed
    entry raises :class:`MalformedDocument` with its position attached and
    nothing is returned.
    """

    if document is None:
        raise MalformedDocument("prototype document is empty")
    if not isinstance(document, (list, tuple)):
        raise MalformedDocument(
            f"prototype document must be a list of prototypes, got {type(document).__name__}"
        )

    prototypes = tuple(_coerce_prototype(entry, position) for position, entry in enumerate(document))
    LOGGER.debug("Built prototype catalog with %d prototypes", len(prototypes))
    return Catalog(prototypes=prototypes)


__all__ = ["Catalog", "build_catalog"]
