"""Headless display loop cycling the catalog on a fixed cadence."""
from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Tuple

from .catalog import Catalog
from .cursor import CatalogCursor
from .placement import MeshPlacement, plan_placements
from .settings import ViewerSettings

LOGGER = logging.getLogger(__name__)

PlacementSink = Callable[[int, Tuple[MeshPlacement, ...]], None]


def log_placements(index: int, placements: Tuple[MeshPlacement, ...]) -> None:
    """Default sink writing the placement plan to the module logger."""

    LOGGER.info("Prototype %d: %d placement(s)", index, len(placements))
    for placement in placements:
        side = "center" if placement.direction is None else placement.direction.name
        LOGGER.info(
            "  %-6s %s offset=%s rotation=%s",
            side,
            placement.mesh_path,
            placement.offset,
            placement.rotation_radians,
        )


class CatalogViewer:
    """Drive a cursor over a catalog and hand each plan to a renderer sink."""

    def __init__(
        self,
        catalog: Catalog,
        settings: ViewerSettings,
        *,
        sink: Optional[PlacementSink] = None,
        start: int = 0,
    ) -> None:
        # //1.- Every viewer owns its cursor so several viewers can share one catalog.
        self._cursor = CatalogCursor(catalog, start=start)
        self._settings = settings
        self._sink = sink or log_placements
        # //2.- Coordinate shutdown between ``stop`` and the waiting loop.
        self._stop_event = threading.Event()

    @property
    def cursor(self) -> CatalogCursor:
        return self._cursor

    def step(self) -> Tuple[MeshPlacement, ...]:
        """Emit the plan for the current prototype, then move to the next one."""

        index = self._cursor.index
        placements = plan_placements(
            self._cursor.current(),
            model_directory=self._settings.model_directory,
            spacing=self._settings.neighbor_spacing,
        )
        self._sink(index, placements)
        self._cursor.advance()
        return placements

    def run(self, ticks: Optional[int] = None, *, wait: Optional[Callable[[float], bool]] = None) -> int:
        """Step every ``cycle_interval_s`` until ``ticks`` are done or ``stop`` is called.

        Returns the number of steps performed.
        """

        if ticks is not None and ticks < 0:
            raise ValueError("ticks must not be negative")
        wait_fn = wait or self._stop_event.wait
        performed = 0
        while not self._stop_event.is_set():
            if ticks is not None and performed >= ticks:
                break
            self.step()
            performed += 1
            if ticks is not None and performed >= ticks:
                break
            # //3.- ``Event.wait`` returns True once ``stop`` fires, ending the loop early.
            if wait_fn(self._settings.cycle_interval_s):
                break
        LOGGER.debug("Viewer loop finished after %d step(s)", performed)
        return performed

    def stop(self) -> None:
        self._stop_event.set()


__all__ = ["CatalogViewer", "PlacementSink", "log_placements"]
