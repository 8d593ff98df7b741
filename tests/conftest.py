"""Shared test fixtures and data loading for epoch-calendar.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Scenario timestamps are seconds since 1970-01-01T00:00:00Z.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")


# ---------------------------------------------------------------------------
# Reference constants derived from reference.json
# ---------------------------------------------------------------------------
EPOCH_YEAR = _reference["epoch_year"]
SECONDS_PER_DAY = _reference["seconds_per_day"]
SECONDS_PER_YEAR = _reference["seconds_per_year"]
SECONDS_PER_LEAP_YEAR = _reference["seconds_per_leap_year"]
SECONDS_PER_CYCLE = _reference["seconds_per_gregorian_cycle"]

# Year lookup:  YEAR_STARTS[2000] → 946684800
YEAR_STARTS: dict[int, int] = {
    y["year"]: y["timestamp"] for y in _reference["year_starts"]
}

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def year_start(year: int) -> int:
    """Epoch second of January 1, year, 00:00:00 from reference.json.

    >>> year_start(2000)
    946684800
    """
    return YEAR_STARTS[year]


def civil(fields: list[int]):
    """Build a CivilDateTime from [year, month, day, hour, minute, second]."""
    from epoch_calendar.types import CivilDateTime

    return CivilDateTime(*fields)


# ---------------------------------------------------------------------------
# Scenario loader
# ---------------------------------------------------------------------------
def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def epoch_civil():
    from epoch_calendar.types import CivilDateTime

    return CivilDateTime(EPOCH_YEAR, 1, 1)


@pytest.fixture
def decompose_scenarios():
    return load_scenarios("decompose")
