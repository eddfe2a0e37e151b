"""Conversion between the dynamical & civil time scales TT, TAI, UT1 and UTC.

All offsets are additive corrections applied to a Julian Day:

* TT = TAI + 32.184 s
* TT = UT1 + ΔT
* TAI = UTC + (TAI - UTC), the cumulative leap seconds

ΔT and TAI - UTC come from a :class:`.TimeScaleProvider`. Each function accepts an explicit
`provider`; when omitted, the provider configured in the :class:`.BehavioralConfig` is used.
Every result is a Julian Day or a duration, both in days.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ...common.utilities import checkFinite
from .. import constants as const
from .timescales import getTimeScaleProvider

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable

    # Local Imports
    from .timescales import TimeScaleProvider


_MAX_ITER: int = 10
"""``int``: maximum number of iterations when inverting a time-dependent offset."""

TT_MINUS_TAI_DAYS: float = const.TT_MINUS_TAI * const.SEC2DAYS
"""``float``: TT - TAI in days."""


def _provider(provider: TimeScaleProvider | None) -> TimeScaleProvider:
    return getTimeScaleProvider() if provider is None else provider


def _solveFixedPoint(target: float, offset: Callable[[float], float]) -> float:
    """Return x such that ``x + offset(x) == target``, starting from ``target - offset(target)``.

    `offset` varies slowly enough that a handful of substitutions converge to the last bit.
    """
    estimate = target - offset(target)
    for _ in range(_MAX_ITER):
        updated = target - offset(estimate)
        if updated == estimate:
            break
        estimate = updated
    return estimate


def deltaT(julian_day, provider: TimeScaleProvider | None = None) -> float:
    """Return ΔT = TT - UT1 at `julian_day`, in days.

    The provider's ΔT model is piecewise by historical era; the era containing `julian_day`
    is evaluated.
    """
    return _provider(provider).deltaT(checkFinite(julian_day, "julian_day"))


def cumulativeLeapSeconds(julian_day, provider: TimeScaleProvider | None = None) -> float:
    """Return TAI - UTC at `julian_day`, in days."""
    return _provider(provider).cumulativeLeapSeconds(checkFinite(julian_day, "julian_day"))


def TTtoTAI(julian_day) -> float:
    """Convert a TT Julian Day to TAI."""
    return checkFinite(julian_day, "julian_day") - TT_MINUS_TAI_DAYS


def TAItoTT(julian_day) -> float:
    """Convert a TAI Julian Day to TT."""
    return checkFinite(julian_day, "julian_day") + TT_MINUS_TAI_DAYS


def TTtoUT1(julian_day, provider: TimeScaleProvider | None = None) -> float:
    """Convert a TT Julian Day to UT1 by removing ΔT evaluated at the TT instant."""
    julian_day = checkFinite(julian_day, "julian_day")
    return julian_day - _provider(provider).deltaT(julian_day)


def UT1toTT(julian_day, provider: TimeScaleProvider | None = None) -> float:
    """Convert a UT1 Julian Day to TT.

    ΔT is evaluated at the TT instant so that this is the inverse of :func:`.TTtoUT1`.
    """
    julian_day = checkFinite(julian_day, "julian_day")
    source = _provider(provider)
    return _solveFixedPoint(julian_day, lambda tt: -source.deltaT(tt))


def UTCtoTT(julian_day, provider: TimeScaleProvider | None = None) -> float:
    """Convert a UTC Julian Day to TT through TAI."""
    julian_day = checkFinite(julian_day, "julian_day")
    tai = julian_day + _provider(provider).cumulativeLeapSeconds(julian_day)
    return TAItoTT(tai)


def TTtoUTC(julian_day, provider: TimeScaleProvider | None = None) -> float:
    """Convert a TT Julian Day to UTC through TAI.

    The leap-second count is looked up at the UTC instant, so this is the inverse of
    :func:`.UTCtoTT`. TT instants falling inside an inserted leap second have no UTC
    counterpart and map into the UTC second preceding the leap.
    """
    tai = TTtoTAI(julian_day)
    source = _provider(provider)
    return _solveFixedPoint(tai, source.cumulativeLeapSeconds)


def UT1minusUTC(julian_day, provider: TimeScaleProvider | None = None) -> float:
    """Return UT1 - UTC at the TT instant `julian_day`, in days.

    Derived as (TAI - UTC) + (TT - TAI) - ΔT, with TAI - UTC taken at the matching UTC instant
    as in :func:`.TTtoUTC`.
    """
    julian_day = checkFinite(julian_day, "julian_day")
    source = _provider(provider)
    utc = TTtoUTC(julian_day, source)
    return source.cumulativeLeapSeconds(utc) + TT_MINUS_TAI_DAYS - source.deltaT(julian_day)
