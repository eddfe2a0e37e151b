"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Standard Library Imports
from math import isfinite

# Local Imports
from .exceptions import DomainError
from .logger import astrochronLogError


def loadDatFile(file_name, delim=None, comment="#"):
    """Load the corresponding dat file.

    Note:
        Assumes all data is representable by ``float``. Blank lines and lines starting with
        `comment` are skipped.

    Args:
        file_name (``str``): name of dat file to load
        delim (``str``, optional): delimiter character to separate data on same line. Defaults to
            ``None``, which removes all whitespace between values.
        comment (``str``, optional): prefix marking a line as a comment. Defaults to ``"#"``.

    Raises:
        ``FileNotFoundError``: helps with debugging bad filenames
        ``ValueError``: error parsing dat file, likely because values aren't convertible to ``float``
        ``IOError``: valid dat file is empty

    Returns:
        ``list``: nested list of float values of each row
    """
    try:
        with open(file_name, encoding="utf-8") as data_file:
            data = [
                [float(x) for x in line.split(sep=delim)]
                for line in data_file
                if line.strip() and not line.lstrip().startswith(comment)
            ]
    except FileNotFoundError as err:
        msg = f"Could not find DAT file: {file_name}"
        astrochronLogError(msg)
        raise err
    except ValueError as err:
        msg = f"Parsing error reading DAT file: {file_name}"
        astrochronLogError(msg)
        raise ValueError(msg) from err

    if not data:
        msg = f"Empty DAT file: {file_name}"
        astrochronLogError(msg)
        raise OSError(msg)

    return data


def checkFinite(value, name="value") -> float:
    """Return `value` as a ``float``, raising :class:`.DomainError` if it is NaN or infinite.

    Args:
        value (``float``): number to check
        name (``str``, optional): label used in the error message

    Returns:
        ``float``: `value` converted to a plain ``float``
    """
    value = float(value)
    if not isfinite(value):
        raise DomainError(f"{name} must be finite, got {value!r}")
    return value
