"""
Unit Conversion Module.
Normalizes raw door measurements into feet, the canonical unit for area and price.
"""
import math
from dataclasses import dataclass
from typing import Any, Union

from door_decal.enums import LengthUnit

@dataclass(frozen=True)
class Length:
    """A non-negative magnitude tagged with its unit."""
    magnitude: float
    unit: LengthUnit = LengthUnit.FOOT

    def to_feet(self) -> float:
        return to_feet(self.magnitude, self.unit)


def parse_magnitude(value: Any) -> float:
    """
    Reads a form value as a length magnitude.
    Empty, unparsable, non-finite or negative input reads as 0 since the
    field may be transiently blank while the buyer is typing.
    """
    if value is None or value == "":
        return 0.0
    try:
        magnitude = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(magnitude) or magnitude < 0:
        return 0.0
    return magnitude


def to_feet(magnitude: Any, unit: Union[LengthUnit, str]) -> float:
    """
    Converts a magnitude in the given unit to feet.
    Unknown unit tags are treated as feet.
    """
    value = parse_magnitude(magnitude)
    resolved = LengthUnit.parse(unit) or LengthUnit.FOOT
    if resolved == LengthUnit.FOOT:
        return value
    return value / resolved.per_foot


def normalize_length(magnitude: Any, unit: Union[LengthUnit, str]) -> Length:
    """Returns the measurement as a Length in feet."""
    return Length(to_feet(magnitude, unit), LengthUnit.FOOT)
