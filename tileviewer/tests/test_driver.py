"""Validate the headless viewer loop and its command line entry point."""
from __future__ import annotations

import json
import logging
import os

import pytest

from tileviewer import cli
from tileviewer.catalog import build_catalog
from tileviewer.driver import CatalogViewer
from tileviewer.settings import ViewerSettings


def _settings(interval: float = 5.0) -> ViewerSettings:
    return ViewerSettings(
        document_path="unused.yaml",
        model_directory="models",
        cycle_interval_s=interval,
        neighbor_spacing=3.0,
    )


def _catalog():
    return build_catalog(
        [
            {"mesh": "a.glb", "neighbors": {0: [{"mesh": "b.glb"}]}},
            {"mesh": "b.glb"},
            {"mesh": "c.glb"},
        ]
    )


# //1.- Each step emits the current plan and advances, wrapping after the last prototype.
def test_step_emits_plan_and_advances():
    emitted = []
    viewer = CatalogViewer(_catalog(), _settings(), sink=lambda index, plan: emitted.append((index, plan)))
    for _ in range(4):
        viewer.step()
    assert [index for index, _ in emitted] == [0, 1, 2, 0]
    assert len(emitted[0][1]) == 2
    assert len(emitted[1][1]) == 1
    assert viewer.cursor.index == 1


# //2.- The loop waits the configured interval between ticks and stops after the limit.
def test_run_waits_between_ticks():
    waits = []
    emitted = []

    def fake_wait(seconds: float) -> bool:
        waits.append(seconds)
        return False

    viewer = CatalogViewer(_catalog(), _settings(2.5), sink=lambda index, plan: emitted.append(index))
    assert viewer.run(5, wait=fake_wait) == 5
    assert emitted == [0, 1, 2, 0, 1]
    assert waits == [2.5] * 4


# //3.- Stopping the viewer ends the loop at the next wait.
def test_stop_ends_loop():
    viewer = CatalogViewer(_catalog(), _settings(), sink=lambda index, plan: None)

    def stopping_wait(seconds: float) -> bool:
        viewer.stop()
        return True

    assert viewer.run(wait=stopping_wait) == 1
    assert viewer.run(3) == 0


def test_run_rejects_negative_ticks():
    viewer = CatalogViewer(_catalog(), _settings(), sink=lambda index, plan: None)
    with pytest.raises(ValueError):
        viewer.run(-1)


# //4.- Independent viewers keep independent cursors over the same catalog.
def test_viewers_do_not_share_cursor():
    catalog = _catalog()
    first = CatalogViewer(catalog, _settings(), sink=lambda index, plan: None)
    second = CatalogViewer(catalog, _settings(), sink=lambda index, plan: None, start=2)
    first.step()
    assert first.cursor.index == 1
    assert second.cursor.index == 2


# //5.- The CLI builds the catalog from a document and logs placements for each tick.
def test_cli_runs_requested_ticks(tmp_path, caplog):
    document = tmp_path / "tiles.json"
    document.write_text(json.dumps([{"mesh": "a.glb", "neighbors": {"4": [{"mesh": "b.glb"}]}}]))
    caplog.set_level(logging.INFO)
    code = cli.main(["--document", str(document), "--ticks", "2", "--interval", "0.01"])
    assert code == 0
    messages = [record.getMessage() for record in caplog.records]
    assert sum(message.startswith("Prototype 0:") for message in messages) == 2
    assert any("b.glb" in message and "POS_Z" in message for message in messages)


# //6.- A malformed document is reported and yields a failing exit code.
def test_cli_reports_malformed_document(tmp_path, caplog):
    document = tmp_path / "tiles.yaml"
    document.write_text("- neighbors: {0: []}\n")
    caplog.set_level(logging.INFO)
    assert cli.main(["--document", str(document), "--ticks", "1"]) == 1
    assert any("Unable to start viewer" in record.getMessage() for record in caplog.records)


def test_cli_rejects_non_positive_interval(tmp_path):
    document = tmp_path / "tiles.json"
    document.write_text(json.dumps([{"mesh": "a.glb"}]))
    assert cli.main(["--document", str(document), "--interval", "0", "--ticks", "1"]) == 1


# //7.- Non-finite CLI overrides are refused before any tick runs.
@pytest.mark.parametrize("flag", ["--interval", "--spacing"])
@pytest.mark.parametrize("value", ["nan", "inf"])
def test_cli_rejects_non_finite_overrides(tmp_path, caplog, flag, value):
    document = tmp_path / "tiles.json"
    document.write_text(json.dumps([{"mesh": "a.glb"}]))
    caplog.set_level(logging.INFO)
    assert cli.main(["--document", str(document), flag, value, "--ticks", "1"]) == 1
    messages = [record.getMessage() for record in caplog.records]
    assert not any(message.startswith("Prototype 0:") for message in messages)


# //8.- Both path overrides are resolved against the working directory.
def test_cli_resolves_models_override(tmp_path, caplog, monkeypatch):
    document = tmp_path / "tiles.json"
    document.write_text(json.dumps([{"mesh": "a.glb"}]))
    monkeypatch.chdir(tmp_path)
    caplog.set_level(logging.INFO)
    assert cli.main(["--document", "tiles.json", "--models", "meshes", "--ticks", "1"]) == 0
    expected = os.path.join(os.getcwd(), "meshes", "a.glb")
    assert any(expected in record.getMessage() for record in caplog.records)
