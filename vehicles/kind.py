"""VehicleKind enum for vehicle categories."""

from enum import Enum


class VehicleKind(Enum):
    """Vehicle categories. Value = default tire count."""

    CAR = 4
    MOTORCYCLE = 2
    TRUCK = 6

    @property
    def default_tires(self) -> int:
        return self.value
