"""Models of ΔT = TT - UT1, the drift of Earth rotation time behind uniform time.

Every model returns seconds and is evaluated at a decimal year,
``2000 + (JD - 2451545) / 365.25``.

References:
    #. Espenak & Meeus, "Five Millennium Canon of Solar Eclipses", NASA/TP-2006-214141
    #. Morrison & Stephenson, "Historical values of the Earth's clock error", 2004
"""

from __future__ import annotations

# Standard Library Imports
from abc import ABC, abstractmethod

# Third Party Imports
from numpy import polyval

# Local Imports
from ....common.utilities import checkFinite
from ... import constants as const


def decimalYear(julian_day) -> float:
    """Return the decimal year of `julian_day`, counting Julian years from J2000.0."""
    return 2000.0 + (checkFinite(julian_day, "julian_day") - const.J2000_0) / const.JULIAN_YEAR


def _longTermParabola(year: float) -> float:
    u_val = (year - 1820.0) / 100.0
    return -20.0 + 32.0 * u_val**2


class DeltaTModel(ABC):
    """Abstract class defining how ΔT is evaluated for a Julian Day."""

    NAME: str = ""
    """``str``: name used to select this model in the behavioral config."""

    def deltaT(self, julian_day) -> float:
        """Return ΔT at `julian_day`, in seconds."""
        return self.deltaTForYear(decimalYear(julian_day))

    @abstractmethod
    def deltaTForYear(self, year: float) -> float:
        """Return ΔT at decimal `year`, in seconds."""
        raise NotImplementedError


class MorrisonStephensonDeltaT(DeltaTModel):
    """Single long-term parabola, ΔT = -20 + 32u², u = (year - 1820) / 100."""

    NAME: str = "MorrisonStephenson"

    def deltaTForYear(self, year: float) -> float:
        """Return ΔT at decimal `year`, in seconds."""
        return _longTermParabola(year)


class EspenakMeeusDeltaT(DeltaTModel):
    """Piecewise polynomial fit of ΔT by historical era (NASA, 2006).

    Each era is a tuple of (first year, last year, reference year, scale, coefficients), where
    the polynomial is evaluated at ``(year - reference year) / scale`` with coefficients ordered
    from the highest power down. Years before -500 and after 2150 use the long-term parabola;
    2050-2150 blends the parabola back into the modern fit.
    """

    NAME: str = "EspenakMeeus"

    ERAS: tuple[tuple[float, float, float, float, tuple[float, ...]], ...] = (
        (
            -500.0,
            500.0,
            0.0,
            100.0,
            (0.0090316521, 0.022174192, -0.1798452, -5.952053, 33.78311, -1014.41, 10583.6),
        ),
        (
            500.0,
            1600.0,
            1000.0,
            100.0,
            (0.0083572073, -0.005050998, -0.8503463, 0.319781, 71.23472, -556.01, 1574.2),
        ),
        (1600.0, 1700.0, 1600.0, 1.0, (1.0 / 7129.0, -0.01532, -0.9808, 120.0)),
        (1700.0, 1800.0, 1700.0, 1.0, (-1.0 / 1174000.0, 0.00013336, -0.0059285, 0.1603, 8.83)),
        (
            1800.0,
            1860.0,
            1800.0,
            1.0,
            (
                0.000000000875,
                -0.0000001699,
                0.0000121272,
                -0.00037436,
                0.0041116,
                0.0068612,
                -0.332447,
                13.72,
            ),
        ),
        (
            1860.0,
            1900.0,
            1860.0,
            1.0,
            (1.0 / 233174.0, -0.0004473624, 0.01680668, -0.251754, 0.5737, 7.62),
        ),
        (1900.0, 1920.0, 1900.0, 1.0, (-0.000197, 0.0061966, -0.0598939, 1.494119, -2.79)),
        (1920.0, 1941.0, 1920.0, 1.0, (0.0020936, -0.076100, 0.84493, 21.20)),
        (1941.0, 1961.0, 1950.0, 1.0, (1.0 / 2547.0, -1.0 / 233.0, 0.407, 29.07)),
        (1961.0, 1986.0, 1975.0, 1.0, (-1.0 / 718.0, -1.0 / 260.0, 1.067, 45.45)),
        (
            1986.0,
            2005.0,
            2000.0,
            1.0,
            (0.00002373599, 0.000651814, 0.0017275, -0.060374, 0.3345, 63.86),
        ),
        (2005.0, 2050.0, 2000.0, 1.0, (0.005589, 0.32217, 62.92)),
    )

    def deltaTForYear(self, year: float) -> float:
        """Return ΔT at decimal `year`, in seconds."""
        for first, last, reference, scale, coefficients in self.ERAS:
            if first <= year < last:
                return float(polyval(coefficients, (year - reference) / scale))

        if 2050.0 <= year < 2150.0:
            return _longTermParabola(year) - 0.5628 * (2150.0 - year)

        # Before -500 or from 2150 onward
        return _longTermParabola(year)


DELTAT_MODELS: dict[str, type[DeltaTModel]] = {
    EspenakMeeusDeltaT.NAME: EspenakMeeusDeltaT,
    MorrisonStephensonDeltaT.NAME: MorrisonStephensonDeltaT,
}
"""dict[str, type[DeltaTModel]]: Maps config names to ΔT model classes."""
