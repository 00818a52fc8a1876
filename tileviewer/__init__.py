"""Tile prototype viewer package.

The heart of the package is the prototype catalog: tile definitions parsed
from a JSON or YAML document, each naming a mesh, its orientation and the
tiles allowed next to it along the six grid directions.  The remaining
modules plan mesh placements from the catalog and drive a headless display
loop; rendering is left to whatever consumes the placements.
"""

from .errors import CatalogError, IndexOutOfRange, InvalidDirection, MalformedDocument
from .direction import Direction, index_to_vector, opposite, parse_direction_key, vector_to_index
from .prototype import NeighborCandidate, Prototype, Rotation
from .catalog import Catalog, build_catalog
from .cursor import CatalogCursor
from .document import load_catalog, load_document
from .settings import ViewerSettings, load_viewer_settings
from .placement import MeshPlacement, plan_placements
from .driver import CatalogViewer

__all__ = [
    "CatalogError",
    "IndexOutOfRange",
    "InvalidDirection",
    "MalformedDocument",
    "Direction",
    "index_to_vector",
    "opposite",
    "parse_direction_key",
    "vector_to_index",
    "NeighborCandidate",
    "Prototype",
    "Rotation",
    "Catalog",
    "build_catalog",
    "CatalogCursor",
    "load_catalog",
    "load_document",
    "ViewerSettings",
    "load_viewer_settings",
    "MeshPlacement",
    "plan_placements",
    "CatalogViewer",
]
