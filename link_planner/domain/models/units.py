# link_planner/domain/models/units.py
"""
Type-safe unit definitions for link planning.

This module uses NewType to create distinct types for different units,
helping catch unit conversion errors at type-checking time.

Usage:
    from link_planner.domain.models.units import Meters, Pixels

    def meters_to_pixels(value: Meters, scale: float) -> Pixels:
        return Pixels(value * scale)
"""

from typing import NewType

# Base physical units
Meters = NewType("Meters", float)  # Distance in meters
Degrees = NewType("Degrees", float)  # Angle in degrees
Hertz = NewType("Hertz", float)  # Frequency in Hz
GigaHertz = NewType("GigaHertz", float)  # Frequency in GHz

# Screen units
Pixels = NewType("Pixels", float)  # Length in viewport pixels

# Semantic types (domain-specific meanings)
Bearing = NewType("Bearing", Degrees)  # Clockwise from true north, [0, 360)
Wavelength = NewType("Wavelength", Meters)
