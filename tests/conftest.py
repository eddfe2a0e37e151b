from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# astrochron Imports
from astrochron.common.behavioral_config import BehavioralConfig
from astrochron.physics.time.timescales import TimeScaleProvider, getTimeScaleProvider


@pytest.fixture(autouse=True)
def _resetConfig() -> None:
    """Make sure each test function starts and ends with the default configuration.

    Note:
        Instantiating :class:`.BehavioralConfig` directly replaces the shared instance, so tests
        that load a custom config file don't leak it into later tests.
    """
    BehavioralConfig()
    yield
    BehavioralConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="provider")
def getDefaultProvider() -> TimeScaleProvider:
    """Return the :class:`.TimeScaleProvider` built from the default configuration."""
    return getTimeScaleProvider()
