"""
Unit constants and conversions for the irrigation runtime calculator.

Crop science works in millimetres, the irrigation hardware in US gallons,
square feet and inches. ``Millimeters`` and ``Inches`` keep the two apart so
each depth is converted exactly once, at the boundary where it changes unit.

No database tables required -- pure calculation logic.
"""

import math
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Area
SQFT_PER_ACRE = 43_560

# Depth
INCHES_PER_MM = 0.0393701

# Volume: 1 inch of water over 1 sqft (7.48 gal/cuft / 12 in/ft)
GALLONS_PER_SQFT_INCH = 0.623

# Time
MINUTES_PER_HOUR = 60
DAYS_PER_WEEK = 7

AREA_UNITS = ('acres', 'sqft')


# ---------------------------------------------------------------------------
# Error Helpers
# ---------------------------------------------------------------------------

class ConversionError(ValueError):
    """Raised when a unit conversion cannot be performed."""
    pass


def is_finite_number(value) -> bool:
    """True for int/float values that are neither NaN nor infinite (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


# ---------------------------------------------------------------------------
# Depth value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Millimeters:
    """A water depth (or depth rate) in millimetres."""

    value: float

    def to_inches(self) -> 'Inches':
        return Inches(self.value * INCHES_PER_MM)

    def scaled(self, factor: float) -> 'Millimeters':
        return Millimeters(self.value * factor)

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class Inches:
    """A water depth (or depth rate) in inches."""

    value: float

    def to_millimeters(self) -> Millimeters:
        return Millimeters(self.value / INCHES_PER_MM)

    def __float__(self) -> float:
        return float(self.value)


# ---------------------------------------------------------------------------
# Area / volume
# ---------------------------------------------------------------------------

def area_to_sqft(area: float, unit: str) -> float:
    """Normalize an irrigated area to square feet.

    ``acres`` multiplies by 43,560; ``sqft`` passes through unchanged.
    """
    if unit == 'acres':
        return area * SQFT_PER_ACRE
    if unit == 'sqft':
        return area
    raise ConversionError(f"Unknown area unit '{unit}'. Supported: {', '.join(AREA_UNITS)}")


def depth_to_gallons(depth: Inches, area_sqft: float) -> float:
    """Gallons of water needed to cover *area_sqft* to *depth*."""
    return area_sqft * depth.value * GALLONS_PER_SQFT_INCH
