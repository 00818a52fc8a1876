"""Turn prototypes into mesh placements a renderer can consume.

The renderer itself lives outside this package.  What it needs per frame is a
flat list of meshes to instantiate, each with an orientation and an offset
from the tile being displayed; this module derives that list from a
prototype using the first declared candidate per direction.
"""
from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .direction import Direction, index_to_vector
from .prototype import Prototype, Rotation

Vector3 = Tuple[float, float, float]


@dataclass(frozen=True)
class MeshPlacement:
    """A mesh instance to create.

    ``rotation_radians`` is applied about X, then Y, then Z.  ``direction`` is
    ``None`` for the displayed prototype itself.
    """

    mesh_path: str
    rotation_radians: Vector3
    offset: Vector3
    direction: Optional[Direction] = None


def rotation_to_radians(rotation: Rotation) -> Vector3:
    radians = np.radians(np.asarray(rotation.as_tuple(), dtype=float))
    return tuple(float(component) for component in radians)  # type: ignore[return-value]


def direction_offset(direction: Direction, spacing: float) -> Vector3:
    """Scale the unit grid vector of ``direction`` by the tile spacing."""

    offset = np.asarray(index_to_vector(direction), dtype=float) * float(spacing)
    return tuple(float(component) for component in offset)  # type: ignore[return-value]


def plan_placements(
    prototype: Prototype,
    *,
    model_directory: str = "models",
    spacing: float = 3.0,
) -> Tuple[MeshPlacement, ...]:
    """Return the prototype placement followed by one neighbor per declared direction."""

    if not math.isfinite(spacing) or spacing <= 0:
        raise ValueError("spacing must be a positive finite number")
    placements: List[MeshPlacement] = [
        MeshPlacement(
            mesh_path=os.path.join(model_directory, prototype.mesh_id),
            rotation_radians=rotation_to_radians(prototype.rotation),
            offset=(0.0, 0.0, 0.0),
        )
    ]
    for direction in Direction:
        candidate = prototype.first_candidate(direction)
        if candidate is None:
            continue
        placements.append(
            MeshPlacement(
                mesh_path=os.path.join(model_directory, candidate.mesh_id),
                rotation_radians=rotation_to_radians(candidate.rotation),
                offset=direction_offset(direction, spacing),
                direction=direction,
            )
        )
    return tuple(placements)


__all__ = ["MeshPlacement", "rotation_to_radians", "direction_offset", "plan_placements"]
