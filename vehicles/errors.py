"""Exception hierarchy for vehicle operations."""

from typing import List, Optional


class VehicleError(Exception):
    """Base class for every error raised by this package."""


class FuelFullError(VehicleError):
    """Fuel was added to a tank that is already at capacity."""

    def __init__(self, fuel_level: float, fuel_capacity: float):
        self.fuel_level = fuel_level
        self.fuel_capacity = fuel_capacity
        super().__init__(f"Gas full ({fuel_level:g} of {fuel_capacity:g})")


class EngineStateError(VehicleError):
    """The engine was asked to move into a state it cannot reach."""


class EngineAlreadyOnError(EngineStateError):
    def __init__(self):
        super().__init__("Engine is already on")


class EngineAlreadyOffError(EngineStateError):
    def __init__(self):
        super().__init__("Engine is already stopped")


class InsufficientFuelError(EngineStateError):
    def __init__(self):
        super().__init__("Not enough gas. You need to go to a gas station")


class BuilderError(VehicleError):
    """A builder was used after it already produced its vehicle."""


class PresetError(VehicleError):
    """A preset could not be found, registered, or loaded."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = errors or []
        super().__init__(message)
