"""Conversion between the proleptic Gregorian calendar and the Julian Day count.

Every date in this module is a UTC civil date on the proleptic Gregorian calendar: the
Gregorian leap-year rule is applied to every year, including years before 1582 and
years <= 0 (astronomical year numbering, so year 0 is 1 BCE).

References:
    :cite:t:`meeus_1998_algorithms`, Chapter 7
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import floor

# Local Imports
from ...common.exceptions import InvalidDate
from ...common.utilities import checkFinite
from .. import constants as const

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .stardate import JulianDay


DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
"""``tuple``: number of days in each month of a common year."""

NANOSECONDS_PER_DAY: int = 86_400 * 10**9
"""``int``: number of nanoseconds in one civil day."""

_NANOSECONDS_PER_HOUR: int = 3_600 * 10**9
_NANOSECONDS_PER_MINUTE: int = 60 * 10**9
_NANOSECONDS_PER_SECOND: int = 10**9


def isLeapYear(year: int) -> bool:
    """Return whether `year` is a leap year under the Gregorian rule.

    A year is a leap year when it is divisible by 4, except centuries that are not divisible
    by 400.
    """
    if year % 100 == 0:
        return year % 400 == 0
    return year % 4 == 0


def daysInMonth(year: int, month: int) -> int:
    """Return the number of days in `month` of `year`, accounting for leap years."""
    if month < 1 or month > 12:
        raise InvalidDate(f"Month must be an integer (1-12), got {month!r}")
    if month == 2 and isLeapYear(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def _checkIntegral(value, name: str) -> int:
    if isinstance(value, bool) or int(checkFinite(value, name.lower())) != value:
        raise InvalidDate(f"{name} must be an integer, got {value!r}")
    return int(value)


def validateCalendarFields(year, month, day, hour=0, minute=0, second=0.0):
    """Check that the calendar fields name an existing UTC instant.

    Args:
        year (``int``): proleptic Gregorian year, may be zero or negative
        month (``int``): month of the year (1-12)
        day (``float``): day of the month, may carry a fractional part
        hour (``int``): hour of the day (0-23)
        minute (``int``): minute of the hour (0-59)
        second (``float``): second of the minute, [0, 61) to allow for a leap second

    Raises:
        :class:`.InvalidDate`: a field is out of range or not integral where it must be
        :class:`.DomainError`: a field is NaN or infinite
    """
    year = _checkIntegral(year, "Year")
    month = _checkIntegral(month, "Month")
    hour = _checkIntegral(hour, "Hour")
    minute = _checkIntegral(minute, "Minute")
    day = checkFinite(day, "day")
    second = checkFinite(second, "second")

    month_length = daysInMonth(year, month)
    if day < 1.0 or day >= month_length + 1:
        raise InvalidDate(f"Day must be within 1-{month_length} for {year:d}-{month:02d}, got {day!r}")
    if hour < 0 or hour > 23:
        raise InvalidDate(f"Hour must be an integer (0-23), got {hour!r}")
    if minute < 0 or minute > 59:
        raise InvalidDate(f"Minute must be an integer (0-59), got {minute!r}")
    if second < 0.0 or second >= 61.0:
        raise InvalidDate(f"Second must be a float [0-61), got {second!r}")


def calendarToJulianDay(year, month, day, hour=0, minute=0, second=0.0) -> float:
    """From a proleptic Gregorian date & time in UTC [ymdhms], return the Julian Day.

    References:
        :cite:t:`meeus_1998_algorithms`, Eqn 7.1

    Args:
        year (``int``): Calendar year
        month (``int``): Month of the year
        day (``float``): Day of the month, optionally with a day fraction
        hour (``int``): Hours in the day (UTC)
        minute (``int``): Minutes in the hour (UTC)
        second (``float``): Seconds in the minute (UTC)

    Raises:
        :class:`.InvalidDate`: fields don't name an existing date & time

    Returns:
        ``float``: corresponding Julian Day
    """
    validateCalendarFields(year, month, day, hour, minute, second)
    year, month = int(year), int(month)

    fractional_day = day + hour / 24.0 + minute / 1440.0 + second * const.SEC2DAYS

    # January & February count as months 13 & 14 of the previous year
    if month <= 2:
        year -= 1
        month += 12

    century = floor(year / 100)
    gregorian_correction = 2 - century + floor(century / 4)

    return float(
        floor(365.25 * (year + 4716))
        + floor(30.6001 * (month + 1))
        + fractional_day
        + gregorian_correction
        - 1524.5,
    )


def _dateFromDayNumber(day_number: int) -> tuple[int, int, int]:
    """Return the (year, month, day) of the civil day beginning at Julian Day `day_number - 0.5`.

    Integer form of the Meeus inverse, exact for any `day_number`.
    """
    shifted = day_number + 32044
    centuries = (4 * shifted + 3) // 146097
    day_of_century = shifted - (146097 * centuries) // 4
    years = (4 * day_of_century + 3) // 1461
    day_of_year = day_of_century - (1461 * years) // 4
    # Months counted from March
    month_index = (5 * day_of_year + 2) // 153

    day = day_of_year - (153 * month_index + 2) // 5 + 1
    month = month_index + 3 - 12 * (month_index // 10)
    year = 100 * centuries + years - 4800 + month_index // 10

    return year, month, day


def julianDayToCalendar(julian_day) -> CalendarDateTime:
    """From a Julian Day return the proleptic Gregorian calendar date & time in UTC.

    The time of day is resolved to whole nanoseconds, truncated toward zero, so the second
    field never reads 60 because of floating point error. This conversion is total over
    finite inputs.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 7, p. 63

    Args:
        julian_day (``float``): Julian Day to convert

    Raises:
        :class:`.DomainError`: `julian_day` is NaN or infinite

    Returns:
        :class:`.CalendarDateTime`: corresponding calendar date & time
    """
    shifted = checkFinite(julian_day, "julian_day") + 0.5
    day_number = int(floor(shifted))
    nanoseconds = int((shifted - day_number) * NANOSECONDS_PER_DAY)
    if nanoseconds >= NANOSECONDS_PER_DAY:
        day_number += 1
        nanoseconds -= NANOSECONDS_PER_DAY

    year, month, day = _dateFromDayNumber(day_number)
    hour, nanoseconds = divmod(nanoseconds, _NANOSECONDS_PER_HOUR)
    minute, nanoseconds = divmod(nanoseconds, _NANOSECONDS_PER_MINUTE)
    second, nanoseconds = divmod(nanoseconds, _NANOSECONDS_PER_SECOND)

    return CalendarDateTime(
        year,
        month,
        day,
        hour,
        minute,
        second + nanoseconds / _NANOSECONDS_PER_SECOND,
    )


@dataclass(frozen=True)
class CalendarDateTime:
    """UTC civil date & time on the proleptic Gregorian calendar.

    Fields are checked when a Julian Day is requested, not on construction, so an instance
    can carry a fractional `day` meant only for feeding :func:`.calendarToJulianDay`.
    """

    year: int
    """``int``: proleptic Gregorian year, astronomical numbering (0 is 1 BCE)."""

    month: int
    """``int``: month of the year, 1-12."""

    day: float
    """``float``: day of the month, 1-31, may carry a fractional part."""

    hour: int = 0
    """``int``: hour of the day, 0-23."""

    minute: int = 0
    """``int``: minute of the hour, 0-59."""

    second: float = 0.0
    """``float``: second of the minute, [0, 61)."""

    def toJulianDay(self) -> JulianDay:
        """Return the :class:`.JulianDay` of this date & time.

        Raises:
            :class:`.InvalidDate`: fields don't name an existing date & time
        """
        # Local Imports
        from .stardate import JulianDay

        return JulianDay(
            calendarToJulianDay(self.year, self.month, self.day, self.hour, self.minute, self.second),
        )

    @property
    def nanosecond(self) -> int:
        """``int``: sub-second part of :attr:`.second`, in whole nanoseconds."""
        return int((self.second - int(self.second)) * _NANOSECONDS_PER_SECOND)

    @property
    def isLeap(self) -> bool:
        """``bool``: whether :attr:`.year` is a Gregorian leap year."""
        return isLeapYear(self.year)

    def januaryFirst(self) -> CalendarDateTime:
        """Return midnight at the start of January 1st of :attr:`.year`."""
        return CalendarDateTime(self.year, 1, 1)

    @property
    def fractionalYear(self) -> float:
        """``float``: year plus the elapsed fraction of it, e.g. 2000.5 near July 2nd, 2000."""
        days_in_year = 366.0 if self.isLeap else 365.0
        elapsed = float(self.toJulianDay()) - float(self.januaryFirst().toJulianDay())
        return self.year + elapsed / days_in_year

    @classmethod
    def fromDatetime(cls, date_time: datetime) -> CalendarDateTime:
        """Convert a ``datetime`` object to a :class:`.CalendarDateTime`.

        Note:
            Timezone-aware values are converted to UTC; naive values are assumed to be UTC.
        """
        if date_time.tzinfo is not None:
            date_time = date_time.astimezone(timezone.utc)
        return cls(
            date_time.year,
            date_time.month,
            date_time.day,
            date_time.hour,
            date_time.minute,
            date_time.second + date_time.microsecond / 1e6,
        )

    def toDatetime(self) -> datetime:
        """Convert to a naive UTC ``datetime``, rounded to the nearest microsecond.

        Raises:
            ``ValueError``: :attr:`.year` is outside of the 1-9999 range ``datetime`` supports
        """
        whole_day = int(floor(self.day))
        base = datetime(self.year, self.month, whole_day, int(self.hour), int(self.minute))
        return base + timedelta(days=self.day - whole_day, seconds=self.second)


def datetimeToJulianDay(date_time: datetime) -> JulianDay:
    """Convert a ``datetime`` object to a :class:`.JulianDay`.

    Args:
        date_time (datetime): ``datetime`` object to be converted.

    Returns:
        JulianDay: Converted :class:`.JulianDay` object.
    """
    return CalendarDateTime.fromDatetime(date_time).toJulianDay()


def julianDayToDatetime(julian_day) -> datetime:
    """Convert a Julian Day to a naive UTC ``datetime`` object.

    Args:
        julian_day (JulianDay): Julian Day to be converted.

    Returns:
        datetime: Converted ``datetime`` object.
    """
    return julianDayToCalendar(julian_day).toDatetime()
