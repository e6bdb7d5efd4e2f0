"""
Vehicle construction models.

This package builds vehicles with the builder and factory patterns:
- VehicleKind: Vehicle categories and their default tire counts
- Vehicle: Fuel tank and engine state with enforced invariants
- VehicleBuilder: Fluent, single-shot assembly of a Vehicle
- Preset: Fixed configuration of one product line
- VehicleFactory: Drives a builder with a preset (e.g. FordExplorerFactory)
- load_presets / register_presets: Product lines declared in YAML
"""

from .errors import (
    VehicleError,
    FuelFullError,
    EngineStateError,
    EngineAlreadyOnError,
    EngineAlreadyOffError,
    InsufficientFuelError,
    BuilderError,
    PresetError,
)
from .kind import VehicleKind
from .vehicle import Vehicle, FUEL_INCREMENT, DEFAULT_FUEL_CAPACITY
from .builder import VehicleBuilder
from .preset import Preset
from .factory import (
    VehicleFactory,
    FORD_EXPLORER,
    FordExplorerFactory,
    register_factory,
    unregister_factory,
    get_factory,
    available_factories,
    create,
)
from .loader import load_schema, validate_presets_file, load_presets, register_presets

__all__ = [
    "VehicleError",
    "FuelFullError",
    "EngineStateError",
    "EngineAlreadyOnError",
    "EngineAlreadyOffError",
    "InsufficientFuelError",
    "BuilderError",
    "PresetError",
    "VehicleKind",
    "Vehicle",
    "FUEL_INCREMENT",
    "DEFAULT_FUEL_CAPACITY",
    "VehicleBuilder",
    "Preset",
    "VehicleFactory",
    "FORD_EXPLORER",
    "FordExplorerFactory",
    "register_factory",
    "unregister_factory",
    "get_factory",
    "available_factories",
    "create",
    "load_schema",
    "validate_presets_file",
    "load_presets",
    "register_presets",
]
