"""Factories that drive a VehicleBuilder with a fixed preset."""

import logging
from typing import Dict, List

from .builder import VehicleBuilder
from .errors import PresetError
from .preset import Preset
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


class VehicleFactory:
    """Produce fresh vehicles of one product line."""

    def __init__(self, preset: Preset):
        self.preset = preset

    @property
    def name(self) -> str:
        return self.preset.name

    def create(self) -> Vehicle:
        """Build a new vehicle from the preset. Only the id differs per call."""
        preset = self.preset
        builder = (
            VehicleBuilder()
            .set_kind(preset.kind)
            .set_color(preset.color)
            .set_brand(preset.brand)
            .set_model(preset.model)
            .set_year(preset.year)
        )
        # Optional settings fall back to Vehicle defaults when absent
        if preset.tires is not None:
            builder.set_tires(preset.tires)
        if preset.fuel_capacity is not None:
            builder.set_fuel_capacity(preset.fuel_capacity)
        vehicle = builder.build()
        logger.debug(
            "Created %s (%s) from preset '%s'", preset.display_name, vehicle.id, preset.name
        )
        return vehicle

    def __repr__(self) -> str:
        return f"VehicleFactory({self.preset.name!r}, {self.preset.display_name!r})"


FORD_EXPLORER = Preset(
    name="ford-explorer",
    brand="Ford",
    model="Explorer",
    color="blue",
    year=2023,
)

FordExplorerFactory = VehicleFactory(FORD_EXPLORER)

_registry: Dict[str, VehicleFactory] = {}


def register_factory(preset: Preset) -> VehicleFactory:
    """Add a factory for the preset. Names must be unique."""
    if preset.name in _registry:
        raise PresetError(f"Factory '{preset.name}' is already registered")
    factory = VehicleFactory(preset)
    _registry[preset.name] = factory
    return factory


def unregister_factory(name: str) -> None:
    if _registry.pop(name, None) is None:
        raise PresetError(f"Unknown factory '{name}'")


def get_factory(name: str) -> VehicleFactory:
    """Look up a registered factory by preset name."""
    try:
        return _registry[name]
    except KeyError:
        known = ", ".join(available_factories()) or "none"
        raise PresetError(f"Unknown factory '{name}' (available: {known})") from None


def available_factories() -> List[str]:
    return sorted(_registry)


def create(name: str) -> Vehicle:
    """Shorthand for get_factory(name).create()."""
    return get_factory(name).create()


_registry[FORD_EXPLORER.name] = FordExplorerFactory
