"""Module defining the infrastructure used to retrieve leap-second (TAI - UTC) tables."""

from __future__ import annotations

# Standard Library Imports
from abc import ABC, abstractmethod
from bisect import bisect_right
from importlib import resources
from pathlib import Path

# Local Imports
from ....common.logger import astrochronLogDebug
from ....common.utilities import checkFinite, loadDatFile
from ... import constants as const
from . import LeapSecondEntry


class LeapSecondLoader(ABC):
    """Abstract class defining how a TAI - UTC table should be loaded and queried."""

    def __init__(self, location: str):
        """Initializes the loader.

        Args:
            location (str): Specifies where the leap-second content to load is located.
        """
        self._location: str = location
        self._entries: list[LeapSecondEntry] = []
        self._starts: list[float] = []
        self._is_loaded: bool = False

    @abstractmethod
    def load(self):
        """Load the leap-second content into local memory.

        A concrete implementation of this method should set the :attr:`._is_loaded` to ``True``.
        """
        raise NotImplementedError

    def getEntries(self) -> list[LeapSecondEntry]:
        """Return every :class:`.LeapSecondEntry`, ordered by the Julian Day it takes effect."""
        if not self._is_loaded:
            self.load()
        return list(self._entries)

    def earliestEntry(self) -> LeapSecondEntry:
        """Returns the first entry of the table."""
        return self.getEntries()[0]

    def latestEntry(self) -> LeapSecondEntry:
        """Returns the last entry of the table."""
        return self.getEntries()[-1]

    def taiMinusUTC(self, julian_day) -> float:
        """Return TAI - UTC in seconds at the UTC instant `julian_day`.

        Instants before the first table entry have no offset. The last entry holds indefinitely.

        Args:
            julian_day (``float``): UTC Julian Day

        Returns:
            ``float``: cumulative leap seconds, seconds
        """
        julian_day = checkFinite(julian_day, "julian_day")
        if not self._is_loaded:
            self.load()

        index = bisect_right(self._starts, julian_day) - 1
        if index < 0:
            return 0.0

        entry = self._entries[index]
        modified = julian_day - const.MODIFIED_JULIAN_DAY_ZERO
        return entry.tai_minus_utc + (modified - entry.mjd_reference) * entry.drift_rate

    def _parseDatData(self, raw_data: list[list[float]]):
        """Loads the specified `raw_data` into local memory.

        Args:
            raw_data (list[list[float]]): leap-second file contents parsed using
                :meth:`.loadDatFile()`.
        """
        entries = [
            LeapSecondEntry(
                julian_day=row[0],
                tai_minus_utc=row[1],
                mjd_reference=row[2],
                drift_rate=row[3],
            )
            for row in raw_data
        ]
        self._entries = sorted(entries, key=lambda entry: entry.julian_day)
        self._starts = [entry.julian_day for entry in self._entries]
        self._is_loaded = True
        astrochronLogDebug(f"Loaded {len(self._entries)} leap-second entries from {self._location!r}")


class ModuleDotDatLeapSecondLoader(LeapSecondLoader):
    """Concrete class defining how the table should be loaded as a Python module resource."""

    LEAP_SECOND_MODULE: str = "astrochron.physics.data.timescales"
    """``str``: defines leap-second data module location."""

    def load(self) -> None:
        """Loads the leap-second resources."""
        res = resources.files(self.LEAP_SECOND_MODULE).joinpath(self._location)
        with resources.as_file(res) as file_resource:
            raw_data = loadDatFile(file_resource)
        self._parseDatData(raw_data)


class LocalDotDatLeapSecondLoader(LeapSecondLoader):
    """Concrete class defining how the table should be loaded from a local '.dat' file."""

    def __init__(self, location: str) -> None:
        """Initializes the loader.

        Args:
            location (str): path to the '.dat' file to load.
        """
        super().__init__(location)
        self._path = Path(self._location)

    def load(self) -> None:
        """Load the leap-second content into local memory."""
        raw_data = loadDatFile(self._path)
        self._parseDatData(raw_data)
