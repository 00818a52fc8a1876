"""Command line entry point running the headless prototype viewer."""
from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import signal
from typing import Optional, Sequence

from .document import load_catalog
from .driver import CatalogViewer
from .settings import ensure_positive, load_viewer_settings

LOGGER = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cycle through tile prototypes and log their placements")
    parser.add_argument("--config", help="Directory containing viewer.json (default: bundled config)")
    parser.add_argument("--document", help="Prototype document overriding the configured one (.json/.yaml)")
    parser.add_argument("--models", help="Directory prefix for mesh paths")
    parser.add_argument("--interval", type=float, help="Seconds between prototypes")
    parser.add_argument("--spacing", type=float, help="Distance between a prototype and its neighbors")
    parser.add_argument("--ticks", type=int, help="Stop after this many prototypes (default: run forever)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console script entry point invoked via ``tileviewer`` or ``python -m tileviewer``."""

    parser = create_parser()
    args = parser.parse_args(argv)
    if args.ticks is not None and args.ticks < 0:
        parser.error("--ticks must not be negative")
    # //1.- Mirror container-friendly log formatting used by the other runtimes.
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(message)s",
    )

    try:
        settings = load_viewer_settings(args.config)
        overrides = {}
        if args.document:
            overrides["document_path"] = os.path.abspath(args.document)
        if args.models:
            overrides["model_directory"] = os.path.abspath(args.models)
        if args.interval is not None:
            overrides["cycle_interval_s"] = ensure_positive(args.interval, "Interval")
        if args.spacing is not None:
            overrides["neighbor_spacing"] = ensure_positive(args.spacing, "Spacing")
        settings = dataclasses.replace(settings, **overrides)
        catalog = load_catalog(settings.document_path)
        viewer = CatalogViewer(catalog, settings)
    except (OSError, ValueError) as exc:
        # //2.- A failed load leaves no usable catalog, so report and exit.
        LOGGER.error("Unable to start viewer: %s", exc)
        return 1

    LOGGER.info("Loaded %d prototype(s) from %s", len(catalog), settings.document_path)

    def _handler(signum: int, _frame) -> None:  # type: ignore[override]
        LOGGER.info("Received signal %s, stopping viewer", signum)
        viewer.stop()

    previous = {sig: signal.signal(sig, _handler) for sig in (signal.SIGINT, signal.SIGTERM)}
    try:
        viewer.run(args.ticks)
    finally:
        # //3.- Restore the previously installed handlers.
        for sig, handler in previous.items():
            signal.signal(sig, handler)
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via ``python -m`` execution
    raise SystemExit(main())
