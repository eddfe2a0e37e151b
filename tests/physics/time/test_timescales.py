from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# astrochron Imports
from astrochron.physics import constants as const
from astrochron.physics.time.timescales import LeapSecondEntry, TimeScaleProvider, getTimeScaleProvider
from astrochron.physics.time.timescales.deltat import (
    DELTAT_MODELS,
    EspenakMeeusDeltaT,
    MorrisonStephensonDeltaT,
    decimalYear,
)
from astrochron.physics.time.timescales.loaders import (
    LocalDotDatLeapSecondLoader,
    ModuleDotDatLeapSecondLoader,
)

# Local Imports
from ... import DAT_PATH, FIXTURE_DATA_DIR

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from pathlib import Path


def julianDayOfYear(year: float) -> float:
    """Return the Julian Day of a decimal year counted in Julian years from J2000.0."""
    return const.J2000_0 + (year - 2000.0) * const.JULIAN_YEAR


def testDecimalYear():
    """Test the decimal year used to evaluate ΔT models."""
    assert decimalYear(2451545.0) == 2000.0
    assert decimalYear(2086295.0) == 1000.0
    assert decimalYear(2415020.0) == 1900.0


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        (-1000.0, 25427.68),
        (0.0, 10583.6),
        (1000.0, 1574.2),
        (1600.0, 120.0),
        (1700.0, 8.83),
        (1800.0, 13.72),
        (1860.0, 7.62),
        (1900.0, -2.79),
        (1920.0, 21.20),
        (1950.0, 29.07),
        (1975.0, 45.45),
        (2000.0, 63.86),
        (2100.0, 202.74),
        (2200.0, 442.08),
    ],
)
def testEspenakMeeusEras(year: float, expected: float):
    """Test the ΔT model at the reference year of each era."""
    model = EspenakMeeusDeltaT()
    assert model.deltaTForYear(year) == pytest.approx(expected, abs=1e-6)
    assert model.deltaT(julianDayOfYear(year)) == pytest.approx(expected, abs=1e-6)


def testEspenakMeeusContinuity():
    """The modern fit and the blend into the long-term parabola meet at 2050."""
    model = EspenakMeeusDeltaT()
    before = model.deltaTForYear(2050.0 - 1e-9)
    after = model.deltaTForYear(2050.0)
    assert before == pytest.approx(after, abs=1e-2)
    # Long-term parabola & blend meet at 2150
    assert model.deltaTForYear(2150.0 - 1e-9) == pytest.approx(model.deltaTForYear(2150.0), abs=1e-6)


def testMorrisonStephenson():
    """Test the single long-term parabola."""
    model = MorrisonStephensonDeltaT()
    assert model.deltaTForYear(1820.0) == -20.0
    assert model.deltaT(const.J2000_0) == pytest.approx(83.68)
    assert set(DELTAT_MODELS) == {"EspenakMeeus", "MorrisonStephenson"}


def testModuleLeapSeconds():
    """Test TAI - UTC lookups in the packaged table."""
    loader = ModuleDotDatLeapSecondLoader("leap_seconds.dat")
    # Before the first entry
    assert loader.taiMinusUTC(2433282.5) == 0.0
    # First entry, 1961 January 1st
    assert loader.taiMinusUTC(2437300.5) == pytest.approx(1.4228180)
    # Drifting UTC, MJD 40000
    assert loader.taiMinusUTC(2440000.5) == pytest.approx(4.2131700 + 874.0 * 0.002592)
    # Whole leap seconds from 1972
    assert loader.taiMinusUTC(2441317.5) == 10.0
    assert loader.taiMinusUTC(2451544.5) == 32.0
    assert loader.taiMinusUTC(2457754.4) == 36.0
    assert loader.taiMinusUTC(2457754.5) == 37.0
    # Last entry holds indefinitely
    assert loader.taiMinusUTC(2458849.5) == 37.0
    assert loader.taiMinusUTC(2500000.5) == 37.0

    assert loader.earliestEntry().julian_day == 2437300.5
    assert loader.latestEntry() == LeapSecondEntry(2457754.5, 37.0, 41317.0, 0.0)
    assert len(loader.getEntries()) == 41


def testLeapSecondsMonotonic():
    """TAI - UTC never decreases from 1972 on."""
    entries = ModuleDotDatLeapSecondLoader("leap_seconds.dat").getEntries()
    whole = [entry.tai_minus_utc for entry in entries if entry.julian_day >= 2441317.5]
    assert whole == sorted(whole)
    assert whole[0] == 10.0
    assert whole[-1] == 37.0


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testLocalLeapSeconds(datafiles: Path):
    """Test loading a TAI - UTC table from a local file."""
    loader = LocalDotDatLeapSecondLoader(str(datafiles / DAT_PATH / "leap_seconds_short.dat"))
    assert loader.taiMinusUTC(2441000.5) == 0.0
    assert loader.taiMinusUTC(2441400.5) == 10.0
    assert loader.taiMinusUTC(2450000.5) == 11.0
    assert loader.taiMinusUTC(2458000.5) == 37.0

    # Rows are ordered on load
    unsorted = LocalDotDatLeapSecondLoader(str(datafiles / DAT_PATH / "unsorted.dat"))
    assert unsorted.getEntries() == loader.getEntries()

    missing = LocalDotDatLeapSecondLoader(str(datafiles / DAT_PATH / "missing.dat"))
    with pytest.raises(FileNotFoundError):
        missing.taiMinusUTC(2451545.0)


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testGetTimeScaleProvider(datafiles: Path):
    """Test building providers from arguments & the config."""
    default = getTimeScaleProvider()
    assert isinstance(default, TimeScaleProvider)
    assert isinstance(default.deltat_model, EspenakMeeusDeltaT)
    assert isinstance(default.leap_second_loader, ModuleDotDatLeapSecondLoader)
    # Providers are reused
    assert getTimeScaleProvider() is default

    local = getTimeScaleProvider(
        loader_name="LocalDotDatLeapSecondLoader",
        loader_location=str(datafiles / DAT_PATH / "leap_seconds_short.dat"),
        deltat_model="MorrisonStephenson",
    )
    assert local is not default
    assert isinstance(local.deltat_model, MorrisonStephensonDeltaT)
    assert local.cumulativeLeapSeconds(2450000.5) == pytest.approx(11.0 * const.SEC2DAYS)

    with pytest.raises(ValueError, match="loader"):
        getTimeScaleProvider(loader_name="RemoteLeapSecondLoader")
    with pytest.raises(ValueError, match="model"):
        getTimeScaleProvider(deltat_model="Polynomial")


def testProviderDays(provider: TimeScaleProvider):
    """Test that the provider reports both offsets as day fractions."""
    assert provider.deltaT(const.J2000_0) == pytest.approx(63.86 / 86400.0)
    assert provider.cumulativeLeapSeconds(2458849.5) == pytest.approx(37.0 / 86400.0)
