"""Contains all the custom-defined exceptions used in astrochron."""

from __future__ import annotations


class InvalidDate(ValueError):  # noqa: N818
    """Exception indicating calendar fields that do not name an existing date & time.

    Examples are a month outside 1-12, a non-positive day, or the 29th of February in a
    common year.
    """


class DomainError(ValueError):  # noqa: N818
    """Exception indicating a non-finite value (NaN, infinity) was given where a time is required."""
