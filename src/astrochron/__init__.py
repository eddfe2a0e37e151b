"""Main Module Documentation.

The top-level module is documented below, which mainly serves as a command line entry point for
converting a single instant between the supported time representations.
"""

from __future__ import annotations

__version__ = "1.0.0"


def convertDate(
    date: str | None = None,
    julian_day: float | None = None,
    longitude: float = 0.0,
):
    """Report every representation of a single instant through the package logger.

    Exactly one of `date` or `julian_day` is expected. When neither is given, the current UTC
    time is used.

    Args:
        date (``str``, optional): UTC calendar date & time in ISO 8601 form. Defaults to ``None``.
        julian_day (``float``, optional): Julian Day to convert. Defaults to ``None``.
        longitude (``float``, optional): geographic longitude for local sidereal time, degrees
            positive WEST. Defaults to 0.0.

    Raises:
        ValueError: both `date` and `julian_day` were given, or `date` is not ISO 8601

    Returns:
        :class:`.JulianDay`: the converted instant
    """
    # Standard Library Imports
    from datetime import datetime, timezone

    # Local Imports
    from .common.logger import Logger
    from .physics.time.calendar import CalendarDateTime
    from .physics.time.stardate import JulianDay

    if date is not None and julian_day is not None:
        raise ValueError("Give either a calendar date or a Julian Day, not both")

    if julian_day is not None:
        jd = JulianDay(julian_day)
    elif date is not None:
        jd = CalendarDateTime.fromDatetime(datetime.fromisoformat(date)).toJulianDay()
    else:
        jd = CalendarDateTime.fromDatetime(datetime.now(timezone.utc)).toJulianDay()

    logger = Logger()
    logger.info(f"Julian Day: {jd.value:.6f} ({jd})")
    logger.info(f"Modified Julian Day: {jd.modified.value:.6f}")
    logger.info(f"Calendar (UTC): {jd.toCalendarDateTime()}")

    gmst = jd.meanGreenwichSiderealTime()
    gast = jd.apparentGreenwichSiderealTime()
    lmst = jd.meanLocalSiderealTime(longitude)
    logger.info("GMST: {:02d}h{:02d}m{:07.4f}s".format(*gmst.toHMS()))
    logger.info("GAST: {:02d}h{:02d}m{:07.4f}s".format(*gast.toHMS()))
    logger.info("LMST ({0:+.4f} deg W): {1:02d}h{2:02d}m{3:07.4f}s".format(longitude, *lmst.toHMS()))

    # Time scales, reading the input as UTC
    terrestrial = jd.UTCtoTT()
    logger.info(f"TT: {terrestrial.value:.8f}")
    logger.info(f"TAI: {terrestrial.TTtoTAI().value:.8f}")
    logger.info(f"UT1: {terrestrial.TTtoUT1().value:.8f}")
    logger.info(f"Delta T: {terrestrial.deltaT().value * 86400.0:.3f} s")
    logger.info(f"TAI - UTC: {jd.cumulativeLeapSeconds().value * 86400.0:.3f} s")
    logger.info(f"UT1 - UTC: {terrestrial.UT1minusUTC().value * 86400.0:.3f} s")

    return jd


def main() -> None:
    """Command line entry point.

    This is the function that the :command:`astrochron` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.cli import getCommandLineParser

    # Parse command line arguments and pass them to convertDate
    parser = getCommandLineParser()
    cli_args = parser.parse_args()

    if cli_args.config_path:
        # Replaces the shared config for the rest of the run
        BehavioralConfig(config_file_path=cli_args.config_path)

    convertDate(
        date=cli_args.date,
        julian_day=cli_args.julian_day,
        longitude=cli_args.longitude,
    )
