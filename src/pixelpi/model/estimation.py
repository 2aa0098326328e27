"""
Pi Estimation
=============
Compares the theoretical perimeter and area of a circle with the values
obtained by counting rasterized pixels.

Classes:
    InvalidRadiusError: Raised for radii the estimator cannot work with.
    PiEstimate: The theoretical and empirical values for one radius.

Functions:
    validate_radius: Turn user input into a whole pixel radius.
    estimate_circle_area: Full-circle area from a quarter-disc surface.
    estimate_pi: Run the whole computation for one radius.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, asdict
from numbers import Real
from typing import Optional

from pixelpi.config import MIN_RADIUS, MAX_RADIUS
from pixelpi.model.rasterization import count_perimeter_pixels
from pixelpi.model.surface import Surface, ArraySurface

logger = logging.getLogger(__name__)


class InvalidRadiusError(ValueError):
    """The radius is not a finite number within the accepted range."""


def validate_radius(value: object) -> int:
    """
    Validate a radius and truncate it to whole pixels.

    Args:
        value: Radius as entered by the user (int, float or numeric string).

    Returns:
        The radius as an int in [MIN_RADIUS, MAX_RADIUS].

    Raises:
        InvalidRadiusError: For non-numeric, NaN, infinite, non-positive or
            too large values.
    """
    if isinstance(value, bool):
        raise InvalidRadiusError(f"Radius must be a number, got {value!r}.")

    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise InvalidRadiusError(f"Radius must be a number, got {value!r}.") from None

    if not isinstance(value, Real):
        raise InvalidRadiusError(f"Radius must be a number, got {value!r}.")

    value = float(value)
    if not math.isfinite(value):
        raise InvalidRadiusError(f"Radius must be finite, got {value}.")

    radius = int(value)
    if radius != value:
        logger.debug(f"Radius {value} truncated to {radius} px.")

    if radius < MIN_RADIUS:
        raise InvalidRadiusError(f"Radius must be at least {MIN_RADIUS} px, got {value:g}.")
    if radius > MAX_RADIUS:
        raise InvalidRadiusError(f"Radius must be at most {MAX_RADIUS} px, got {value:g}.")

    return radius


def estimate_circle_area(surface: Surface) -> int:
    """Area of the full circle: four times the opaque pixels of the quarter disc."""
    return 4 * surface.opaque_pixel_count()


@dataclass(frozen=True)
class PiEstimate:
    """Theoretical and pixel-counted values for one radius."""
    radius: int

    theoretical_perimeter: float
    theoretical_pi: float
    theoretical_area: float

    perimeter_pixels: int
    pi_from_perimeter: float
    area_pixels: int
    pi_from_area: float

    def as_rows(self) -> list[tuple[str, float | int]]:
        """(label, value) pairs in display order."""
        return [
            ("Theoretical perimeter", self.theoretical_perimeter),
            ("Theoretical pi", self.theoretical_pi),
            ("Theoretical area", self.theoretical_area),
            ("Perimeter pixels", self.perimeter_pixels),
            ("Pi from perimeter", self.pi_from_perimeter),
            ("Practical area", self.area_pixels),
            ("Pi from area", self.pi_from_area),
        ]

    def to_dict(self) -> dict[str, float | int]:
        return asdict(self)


def estimate_pi(radius: object, surface: Optional[Surface] = None) -> PiEstimate:
    """
    Estimate pi from the perimeter and the area of a rasterized circle.

    Args:
        radius: Circle radius; validated with `validate_radius`.
        surface: Drawing surface to rasterize the quarter disc on. A fresh
            `ArraySurface` is used when omitted.

    Returns:
        The filled-in `PiEstimate`.
    """
    r = validate_radius(radius)

    theoretical_perimeter = 2.0 * math.pi * r
    theoretical_area = math.pi * r * r

    perimeter_pixels = count_perimeter_pixels(r)

    if surface is None:
        surface = ArraySurface()
    surface.clear(r)
    surface.fill_quarter_arc()
    area_pixels = estimate_circle_area(surface)

    estimate = PiEstimate(
        radius=r,
        theoretical_perimeter=theoretical_perimeter,
        theoretical_pi=theoretical_perimeter / (2.0 * r),
        theoretical_area=theoretical_area,
        perimeter_pixels=perimeter_pixels,
        pi_from_perimeter=perimeter_pixels / (2.0 * r),
        area_pixels=area_pixels,
        pi_from_area=area_pixels / float(r * r),
    )
    logger.debug(f"Estimate for r={r}: {estimate}")
    return estimate
