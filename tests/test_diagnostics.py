from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from rotlog import Level, Logger, create
from rotlog.utils.diagnostics import disable_diagnostics, enable_diagnostics, logger, setup_diagnostics


@pytest.fixture
def captured():
    messages: list[str] = []
    handler_id = setup_diagnostics(level="DEBUG", sink=messages.append)
    yield messages
    logger.remove(handler_id)
    logger.add(sys.stderr)
    disable_diagnostics()


def test_rotation_is_reported(captured, tmp_path):
    log = Logger(Level.INFO)
    log.attach_file(tmp_path / "app.log", 0o644, 10)
    log.info("first")
    log.info("second")
    assert any("Rotated log file" in message for message in captured)


def test_write_failure_is_reported_not_raised(captured, tmp_path, monkeypatch):
    log = Logger(Level.INFO)
    log.attach_file(tmp_path / "app.log", 0o644, 1_000)

    def broken_write(line):
        raise OSError("disk full")

    monkeypatch.setattr(log._sink, "write", broken_write)
    log.error("boom")
    assert any("disk full" in message and "ERROR" in message for message in captured)


def test_diagnostics_can_be_silenced(captured, tmp_path):
    disable_diagnostics()
    try:
        log = Logger(Level.INFO)
        log.attach_file(tmp_path / "app.log", 0o644, 10)
        log.info("first")
        log.info("second")
    finally:
        enable_diagnostics()
    assert captured == []


def test_diagnostics_are_off_until_configured(tmp_path):
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="TRACE")
    try:
        log = create(Level.INFO)
        log.attach_file(tmp_path / "app.log", 0o644, 10)
        log.info("first")
        log.info("second")
        log.close_file()
    finally:
        logger.remove(handler_id)
    assert len(list(tmp_path.iterdir())) == 2
    assert messages == []
