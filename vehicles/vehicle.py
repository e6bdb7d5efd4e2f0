"""Vehicle class - identity, descriptive attributes and fuel/engine state."""

import logging
from typing import Optional
from uuid import UUID, uuid4

from .errors import (
    EngineAlreadyOffError,
    EngineAlreadyOnError,
    FuelFullError,
    InsufficientFuelError,
)
from .kind import VehicleKind

logger = logging.getLogger(__name__)

FUEL_INCREMENT = 0.1
DEFAULT_FUEL_CAPACITY = 10.0


class Vehicle:
    """
    A vehicle with a fuel tank and an engine that can be started and stopped.

    Identity, color, brand, model and year are fixed at construction. Fuel
    and engine state only change through add_fuel(), start_engine() and
    stop_engine(), each of which raises when its precondition is violated.
    """

    def __init__(
        self,
        color: Optional[str] = None,
        brand: Optional[str] = None,
        model: Optional[str] = None,
        fuel_capacity: float = DEFAULT_FUEL_CAPACITY,
        year: Optional[int] = None,
        kind: VehicleKind = VehicleKind.CAR,
        tires: Optional[int] = None,
    ):
        self._id = uuid4()
        self._color = color
        self._brand = brand
        self._model = model
        self._year = year
        self.kind = kind
        self.tires = tires if tires is not None else kind.default_tires
        self._fuel_capacity = fuel_capacity
        self._fuel_level = 0.0
        self._engine_on = False

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def color(self) -> Optional[str]:
        return self._color

    @property
    def brand(self) -> Optional[str]:
        return self._brand

    @property
    def model(self) -> Optional[str]:
        return self._model

    @property
    def year(self) -> Optional[int]:
        return self._year

    @property
    def fuel_level(self) -> float:
        return self._fuel_level

    @property
    def fuel_capacity(self) -> float:
        return self._fuel_capacity

    @property
    def name(self) -> str:
        """Human-readable vehicle name, skipping unknown parts."""
        parts = [self._year, self._brand, self._model]
        return " ".join(str(p) for p in parts if p)

    def add_fuel(self) -> None:
        """
        Add one FUEL_INCREMENT of fuel.

        The level is clamped to fuel_capacity, so the tank never overfills.
        Raises FuelFullError once the tank is at (or above) capacity.
        """
        if self._fuel_level >= self._fuel_capacity:
            raise FuelFullError(self._fuel_level, self._fuel_capacity)
        # Round so repeated 0.1 steps land on exact tenths
        level = round(self._fuel_level + FUEL_INCREMENT, 10)
        self._fuel_level = min(level, self._fuel_capacity)

    def needs_fuel(self) -> bool:
        return self._fuel_level <= 0

    def is_engine_on(self) -> bool:
        return self._engine_on

    def start_engine(self) -> None:
        """Turn the engine on. Requires the engine off and some fuel."""
        if self._engine_on:
            raise EngineAlreadyOnError()
        if self.needs_fuel():
            raise InsufficientFuelError()
        self._engine_on = True
        logger.debug("Engine started on %s (%s)", self.name or "vehicle", self._id)

    def stop_engine(self) -> None:
        if not self._engine_on:
            raise EngineAlreadyOffError()
        self._engine_on = False
        logger.debug("Engine stopped on %s (%s)", self.name or "vehicle", self._id)

    def __repr__(self) -> str:
        state = "on" if self._engine_on else "off"
        return (
            f"Vehicle(id={self._id}, name={self.name!r}, color={self._color!r}, "
            f"fuel={self._fuel_level:g}/{self._fuel_capacity:g}, engine={state})"
        )
