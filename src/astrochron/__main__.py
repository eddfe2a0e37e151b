"""Allow running the command line interface as ``python -m astrochron``."""

from __future__ import annotations

# Local Imports
from . import main

if __name__ == "__main__":
    main()
