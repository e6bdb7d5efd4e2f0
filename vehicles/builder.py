"""VehicleBuilder - fluent, single-shot assembly of a Vehicle."""

from typing import Any, Dict, Optional

from .errors import BuilderError
from .kind import VehicleKind
from .vehicle import Vehicle


class VehicleBuilder:
    """
    Accumulate vehicle settings through chained setters, then build().

    Setters accept any value. Fields never set fall back to the Vehicle
    constructor defaults. A builder produces exactly one vehicle; call
    reset() to start over.
    """

    def __init__(self):
        self._fields: Dict[str, Any] = {}
        self._built = False

    def set_color(self, color: Optional[str]) -> "VehicleBuilder":
        self._fields["color"] = color
        return self

    def set_brand(self, brand: Optional[str]) -> "VehicleBuilder":
        self._fields["brand"] = brand
        return self

    def set_model(self, model: Optional[str]) -> "VehicleBuilder":
        self._fields["model"] = model
        return self

    def set_year(self, year: Optional[int]) -> "VehicleBuilder":
        self._fields["year"] = year
        return self

    def set_kind(self, kind: VehicleKind) -> "VehicleBuilder":
        self._fields["kind"] = kind
        return self

    def set_tires(self, tires: int) -> "VehicleBuilder":
        self._fields["tires"] = tires
        return self

    def set_fuel_capacity(self, fuel_capacity: float) -> "VehicleBuilder":
        self._fields["fuel_capacity"] = fuel_capacity
        return self

    def reset(self) -> "VehicleBuilder":
        """Forget all pending settings and allow another build()."""
        self._fields = {}
        self._built = False
        return self

    def build(self) -> Vehicle:
        if self._built:
            raise BuilderError("Builder already produced a vehicle; call reset() first")
        self._built = True
        return Vehicle(**self._fields)
