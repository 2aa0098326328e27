"""Approximate pi by counting the pixels of a rasterized circle."""
from pixelpi.model import (
    InvalidRadiusError,
    PiEstimate,
    estimate_pi,
    count_perimeter_pixels,
    count_opaque_pixels,
)

__version__ = "0.1.0"
