"""Preset dataclass for a product line's fixed configuration."""

from dataclasses import dataclass
from typing import Optional

from .kind import VehicleKind


@dataclass(frozen=True)
class Preset:
    """The settings a factory applies to its builder."""

    name: str
    brand: Optional[str] = None
    model: Optional[str] = None
    color: Optional[str] = None
    year: Optional[int] = None
    kind: VehicleKind = VehicleKind.CAR
    tires: Optional[int] = None
    fuel_capacity: Optional[float] = None

    @property
    def display_name(self) -> str:
        """Human-readable product line name."""
        parts = [self.year, self.brand, self.model]
        return " ".join(str(p) for p in parts if p) or self.name
