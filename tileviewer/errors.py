"""Error kinds raised by the prototype catalog and its helpers."""
from __future__ import annotations

from typing import Optional


class CatalogError(ValueError):
    """Base class for every catalog validation failure."""


# //1.- Raised when a direction code or vector falls outside the six axis directions.
class InvalidDirection(CatalogError):
    pass


# //2.- Raised while parsing a document; ``position`` points at the offending entry.
class MalformedDocument(CatalogError):
    def __init__(self, message: str, position: Optional[int] = None) -> None:
        if position is not None:
            message = f"Entry {position}: {message}"
        super().__init__(message)
        self.position = position


# //3.- Raised for catalog or cursor lookups past the catalog bounds.
class IndexOutOfRange(CatalogError, IndexError):
    pass
