from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from rotlog.core.errors import ConfigurationError
from rotlog.core.levels import Level, level_name, parse_level


def test_levels_are_strictly_ordered():
    ordered = [Level.TRACE, Level.DEBUG, Level.INFO, Level.WARNING, Level.ERROR, Level.FATAL]
    assert ordered == sorted(ordered)
    assert len(set(ordered)) == 6
    assert [level_name(level) for level in ordered] == ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "FATAL"]


@pytest.mark.parametrize("value,expected", [(Level.ERROR, Level.ERROR), (0, Level.TRACE), (5, Level.FATAL), ("warning", Level.WARNING), (" Info ", Level.INFO)])
def test_parse_level_accepts_levels_ints_and_names(value, expected):
    assert parse_level(value) is expected


@pytest.mark.parametrize("value", [-1, 6, "VERBOSE", "", True, 2.0, None])
def test_parse_level_rejects_unknown(value):
    with pytest.raises(ConfigurationError):
        parse_level(value)
