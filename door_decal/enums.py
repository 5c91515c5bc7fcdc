"""
Enum Definitions Module.

This module contains Enumeration classes for the closed sets of values the
configurator works with: the length units a buyer can measure in and the kind
of artwork currently applied to the door.
"""
from enum import Enum
from typing import Optional

from door_decal.config import INCHES_PER_FOOT, CM_PER_FOOT

class LengthUnit(Enum):
    """Enumeration for the measurement units accepted by the dimensions form."""
    INCH = "in"
    CENTIMETER = "cm"
    FOOT = "ft"

    @classmethod
    def values(cls) -> list[str]:
        """Returns the string values of all enum members."""
        return [item.value for item in cls]

    @classmethod
    def parse(cls, tag) -> Optional["LengthUnit"]:
        """
        Resolves a unit tag ('in', 'inch', 'Centimeters', ...) to a member.
        Returns None for tags outside the enumeration.
        """
        if isinstance(tag, LengthUnit):
            return tag
        if not isinstance(tag, str):
            return None
        return _UNIT_ALIASES.get(tag.strip().lower())

    @property
    def label(self) -> str:
        """Returns the label shown in the unit selector."""
        if self == LengthUnit.INCH: return "Pulgadas (in)"
        if self == LengthUnit.CENTIMETER: return "Centímetros (cm)"
        return "Pies (ft)"

    @property
    def per_foot(self) -> float:
        """Returns how many of this unit make up one foot."""
        if self == LengthUnit.INCH: return INCHES_PER_FOOT
        if self == LengthUnit.CENTIMETER: return CM_PER_FOOT
        return 1.0

_UNIT_ALIASES = {
    "in": LengthUnit.INCH, "inch": LengthUnit.INCH, "inches": LengthUnit.INCH,
    "cm": LengthUnit.CENTIMETER, "centimeter": LengthUnit.CENTIMETER,
    "centimeters": LengthUnit.CENTIMETER, "centimetre": LengthUnit.CENTIMETER,
    "ft": LengthUnit.FOOT, "foot": LengthUnit.FOOT, "feet": LengthUnit.FOOT,
}

class ArtworkSource(Enum):
    """Enumeration for where the active artwork comes from."""
    CATALOG = "catalog"
    UPLOAD = "upload"
