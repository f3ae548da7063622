"""Input validation utilities for link planning."""

import math

from link_planner.domain.exceptions import ValidationError
from link_planner.domain.models.geo import Coordinates
from link_planner.domain.models.units import GigaHertz


def validate_coordinates(coord: Coordinates) -> None:
    """Validate geographic coordinates.

    Args:
        coord: Coordinates to validate

    Raises:
        ValidationError: If coordinates are out of valid range
    """
    if not isinstance(coord, Coordinates):
        raise ValidationError(f"Expected Coordinates, got {type(coord)}")

    if not -90 <= coord.lat <= 90:
        raise ValidationError(
            f"Invalid latitude {coord.lat}°. Must be in range [-90, 90]"
        )

    if not -180 <= coord.lon <= 180:
        raise ValidationError(
            f"Invalid longitude {coord.lon}°. Must be in range [-180, 180]"
        )


def parse_frequency(value: object) -> GigaHertz:
    """Validate a frequency entered by the user.

    Accepts numbers and numeric strings, the way a frequency edit box
    delivers them.

    Args:
        value: Frequency in GHz

    Returns:
        The frequency as a float

    Raises:
        ValidationError: If the value is non-numeric, non-finite or not positive
    """
    if isinstance(value, bool):
        raise ValidationError(f"Frequency must be numeric, got {type(value)}")

    try:
        frequency = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError(f"Frequency must be numeric, got {value!r}")

    if not math.isfinite(frequency):
        raise ValidationError(f"Frequency must be finite, got {frequency}")

    if frequency <= 0:
        raise ValidationError(f"Frequency must be positive, got {frequency} GHz")

    return GigaHertz(frequency)
