"""Module defining how to build the configured :class:`.TimeScaleProvider`."""

from __future__ import annotations

# Standard Library Imports
from collections import namedtuple

# Local Imports
from ....common.behavioral_config import BehavioralConfig
from . import TimeScaleProvider
from .deltat import DELTAT_MODELS
from .loaders import LeapSecondLoader, LocalDotDatLeapSecondLoader, ModuleDotDatLeapSecondLoader

ProviderTag = namedtuple("ProviderTag", ("loader_name", "loader_location", "deltat_model"))
"""NamedTuple: Tag used to identify different :class:`.TimeScaleProvider`'s."""

_LOADER_MAP: dict[str, type[LeapSecondLoader]] = {
    "ModuleDotDatLeapSecondLoader": ModuleDotDatLeapSecondLoader,
    "LocalDotDatLeapSecondLoader": LocalDotDatLeapSecondLoader,
}
"""dict[str, LeapSecondLoader]: Maps loader class names to loader class references."""

_PROVIDERS: dict[ProviderTag, TimeScaleProvider] = {}
"""dict[ProviderTag, TimeScaleProvider]: Stores configured providers based on tag."""


def getTimeScaleProvider(
    loader_name: str | None = None,
    loader_location: str | None = None,
    deltat_model: str | None = None,
) -> TimeScaleProvider:
    """Return the :class:`.TimeScaleProvider` specified by the arguments or the config.

    Providers are built once per tag and reused afterwards.

    Args:
        loader_name (str, optional): Name of the concrete :class:`.LeapSecondLoader` to use.
        loader_location (str, optional): Location that the specified :class:`.LeapSecondLoader`
            will load the TAI - UTC table from.
        deltat_model (str, optional): Name of the :class:`.DeltaTModel` to use.

    Returns:
        TimeScaleProvider: provider specified by the arguments, defaulting to the
            ``[timescales]`` section of the :class:`.BehavioralConfig`.

    Raises:
        ValueError: If the loader or ΔT model name is undefined.
    """
    behave_config = BehavioralConfig.getConfig()
    if loader_name is None:
        loader_name = behave_config.timescales.LoaderName

    if loader_location is None:
        loader_location = behave_config.timescales.LoaderLocation

    if deltat_model is None:
        deltat_model = behave_config.timescales.DeltaTModel

    tag = ProviderTag(loader_name, loader_location, deltat_model)
    provider = _PROVIDERS.get(tag)
    if not provider:
        try:
            loader = _LOADER_MAP[loader_name](loader_location)
        except KeyError:
            err = f"Specified loader '{loader_name}' is undefined"
            raise ValueError(err)  # noqa: B904
        try:
            model = DELTAT_MODELS[deltat_model]()
        except KeyError:
            err = f"Specified ΔT model '{deltat_model}' is undefined"
            raise ValueError(err)  # noqa: B904
        provider = TimeScaleProvider(model, loader)
        _PROVIDERS[tag] = provider
    return provider
