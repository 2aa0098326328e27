from pixelpi.model.rasterization import count_perimeter_pixels, midpoint_circle_points, midpoint_circle_points_array
from pixelpi.model.surface import Surface, ArraySurface, count_opaque_pixels
from pixelpi.model.estimation import (
    InvalidRadiusError, PiEstimate, validate_radius, estimate_circle_area, estimate_pi
)
