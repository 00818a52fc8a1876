"""Immutable value types describing tile prototypes and their neighbors."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .direction import Direction


# //1.- Orientation in degrees applied to a mesh before it is placed.
@dataclass(frozen=True)
class Rotation:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


# //2.- Reference to a tile allowed next to a prototype; neighbors stop one level deep.
@dataclass(frozen=True)
class NeighborCandidate:
    mesh_id: str
    rotation: Rotation = field(default_factory=Rotation)


NeighborTable = Tuple[Tuple[NeighborCandidate, ...], ...]

EMPTY_NEIGHBORS: NeighborTable = tuple(() for _ in Direction)


# //3.- Full tile definition with one candidate slot per grid direction.
@dataclass(frozen=True)
class Prototype:
    mesh_id: str
    rotation: Rotation = field(default_factory=Rotation)
    neighbors: NeighborTable = EMPTY_NEIGHBORS

    def __post_init__(self) -> None:
        # copy caller sequences so the table cannot change after construction
        object.__setattr__(self, "neighbors", tuple(tuple(slot) for slot in self.neighbors))
        if len(self.neighbors) != len(Direction):
            raise ValueError(
                f"Prototype neighbor table needs {len(Direction)} slots, got {len(self.neighbors)}"
            )

    # //4.- Candidates declared for a direction in document order.
    def candidates(self, direction: Direction) -> Tuple[NeighborCandidate, ...]:
        return self.neighbors[direction]

    # //5.- First candidate wins; no weighting or randomness is applied.
    def first_candidate(self, direction: Direction) -> Optional[NeighborCandidate]:
        slot = self.neighbors[direction]
        return slot[0] if slot else None

    def declared_directions(self) -> Tuple[Direction, ...]:
        return tuple(direction for direction in Direction if self.neighbors[direction])


__all__ = ["Rotation", "NeighborCandidate", "NeighborTable", "EMPTY_NEIGHBORS", "Prototype"]
