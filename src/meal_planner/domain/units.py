"""Unit of measure domain models."""

from dataclasses import dataclass
from enum import Enum


class Dimension(Enum):
    """Physical quantity measured by a unit."""

    WEIGHT = "weight"
    VOLUME = "volume"
    COUNT = "count"


class MeasurementSystem(Enum):
    """Measurement convention of a unit."""

    METRIC = "metric"
    CUSTOMARY = "customary"
    NONE = "none"


@dataclass(frozen=True)
class UnitOfMeasure:
    """Catalog entry for a recognized unit."""

    id: str
    name: str
    dimension: Dimension
    system: MeasurementSystem
    external_id: int | None = None

    def __post_init__(self) -> None:
        if self.dimension is Dimension.COUNT:
            if self.system is not MeasurementSystem.NONE:
                raise ValueError(f"Count unit {self.id} must not carry a system")
        elif self.system is MeasurementSystem.NONE:
            raise ValueError(f"{self.dimension.value} unit {self.id} needs a system")
