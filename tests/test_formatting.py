from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from rotlog.core.callsite import CallSite
from rotlog.core.formatting import backup_name, backup_path, format_line
from rotlog.core.levels import Level

WHEN = datetime(2026, 1, 2, 3, 4, 5)


def test_format_line_layout():
    line = format_line(WHEN, Level.WARNING, CallSite("main.py", 17), "disk almost full")
    assert line == "[2026-01-02 03:04:05 WARNING] main.py:17: disk almost full\n"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("app.log", "app_20260102030405.log"),
        ("app", "app_20260102030405"),
        ("archive.tar.gz", "archive.tar_20260102030405.gz"),
        (".hidden", "_20260102030405.hidden"),
    ],
)
def test_backup_name_inserts_timestamp_before_extension(name, expected):
    assert backup_name(name, WHEN) == expected


def test_backup_path_stays_in_same_directory(tmp_path):
    target = backup_path(tmp_path / "service.log", WHEN)
    assert target.parent == tmp_path
    assert target.name == "service_20260102030405.log"
