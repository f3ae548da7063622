# link_planner/domain/fresnel.py
import math

from link_planner.domain.constants import GHZ, SPEED_OF_LIGHT
from link_planner.domain.exceptions import ValidationError
from link_planner.domain.models.units import GigaHertz, Hertz, Meters, Wavelength


def ghz_to_hz(frequency_ghz: GigaHertz) -> Hertz:
    return Hertz(frequency_ghz * GHZ)


def wavelength(frequency_hz: Hertz) -> Wavelength:
    """
    Free-space wavelength for a frequency.

    Args:
        frequency_hz: Signal frequency in Hertz.

    Returns:
        Wavelength in meters (c / f).

    Raises:
        ValidationError: If the frequency is not positive.
    """
    if frequency_hz <= 0:
        raise ValidationError(f"Frequency must be positive, got {frequency_hz} Hz")
    return Wavelength(Meters(SPEED_OF_LIGHT / frequency_hz))


def fresnel_radius_at(frequency_hz: Hertz, d1_m: Meters, d2_m: Meters) -> Meters:
    """
    First Fresnel zone radius at a point on the path.

    r = sqrt(λ * d1 * d2 / (d1 + d2))

    Args:
        frequency_hz: Signal frequency in Hertz.
        d1_m: Distance from the first antenna to the point in meters.
        d2_m: Distance from the point to the second antenna in meters.

    Returns:
        Radius in meters, 0 for non-positive inputs.
    """
    if frequency_hz <= 0 or d1_m <= 0 or d2_m <= 0:
        return Meters(0.0)
    return Meters(
        math.sqrt(wavelength(frequency_hz) * d1_m * d2_m / (d1_m + d2_m))
    )


def max_fresnel_radius(frequency_hz: Hertz, distance_m: Meters) -> Meters:
    """
    Maximum radius of the first Fresnel zone, reached at the link midpoint.

    r_max = sqrt(λ * (D/2) * (D/2) / D) = sqrt(λ * D / 4)

    The clearance ellipse uses this single value as its minor semi-axis,
    which simplifies the lens-shaped zone into an ellipse.

    Args:
        frequency_hz: Signal frequency in Hertz.
        distance_m: Total link distance in meters (D).

    Returns:
        Radius in meters, 0 if either input is not positive.
    """
    if frequency_hz <= 0 or distance_m <= 0:
        return Meters(0.0)
    return Meters(math.sqrt(wavelength(frequency_hz) * distance_m / 4))
