"""Define the command line interface for the astrochron time conversion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
import os.path

# Local Imports
from .logger import astrochronLogError


def fileChecker(filepath):
    """Checks for valid filepaths passed to the CLI parser.

    Args:
        filepath (``str``): filepath given to CLI parser.

    Raises:
        ValueError: if the file does not exist

    Returns:
        ``str``: fully validated, absolute path to the file
    """
    filepath = os.path.abspath(os.path.realpath(os.path.normpath(filepath)))
    if not os.path.isfile(filepath):
        astrochronLogError("Bad filepath given to CLI")
        raise ValueError(filepath)
    return filepath


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="astrochron Command Line Interface")
    input_group = parser.add_mutually_exclusive_group()

    input_group.add_argument(
        "date",
        metavar="DATE",
        nargs="?",
        default=None,
        type=str,
        help="UTC calendar date & time in ISO 8601 form, e.g. 2000-01-01T12:00:00",
    )

    input_group.add_argument(
        "-j",
        "--julian-day",
        dest="julian_day",
        metavar="JD",
        default=None,
        type=float,
        help="Julian Day to convert instead of a calendar date",
    )

    parser.add_argument(
        "-l",
        "--longitude",
        dest="longitude",
        metavar="DEGREES",
        default=0.0,
        type=float,
        help="Geographic longitude for local sidereal time, positive WEST. DEFAULT: 0.0",
    )

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a behavioral config file",
    )

    return parser
