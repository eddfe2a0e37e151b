"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime
from pathlib import Path

# astrochron Imports
from astrochron.physics.time.calendar import datetimeToJulianDay
from astrochron.physics.time.stardate import JulianDay

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
DAT_PATH = Path("dat")
CONFIG_PATH = Path("configs")


# Common julian days
TEST_START_DATETIME = datetime(2018, 12, 1, 12)
TEST_START_JD: JulianDay = datetimeToJulianDay(TEST_START_DATETIME)

MEEUS_EXAMPLE_JD: JulianDay = JulianDay(2446895.5)
"""JulianDay: 1987 April 10, 0h UT, used by several worked examples of Meeus' *Astronomical Algorithms*."""
